from wirebox.container import Container
from wirebox.definitions import Definition, DefinitionKind
from wirebox.exceptions import (
    CircularDependencyError,
    ExpectInvokableError,
    FailedToResolveDependencyError,
    FailedToResolveDueToUndefinedParamError,
    KeyFrozenError,
    KeyIsNotDefinedError,
    NoDependenciesRegisteredError,
    WireboxError,
)
from wirebox.messages import Language
from wirebox.policies import CycleDetection
from wirebox.providers import ServiceProvider
from wirebox.settings import WireboxSettings

__all__ = [
    "CircularDependencyError",
    "Container",
    "CycleDetection",
    "Definition",
    "DefinitionKind",
    "ExpectInvokableError",
    "FailedToResolveDependencyError",
    "FailedToResolveDueToUndefinedParamError",
    "KeyFrozenError",
    "KeyIsNotDefinedError",
    "Language",
    "NoDependenciesRegisteredError",
    "ServiceProvider",
    "WireboxError",
    "WireboxSettings",
]
