from __future__ import annotations

from typing import Any, ClassVar

from wirebox.messages import DEFAULT_LANGUAGE, Language, MessageKey, render_message


def _describe(value: Any) -> str:
    return getattr(value, "__name__", None) or repr(value)


class WireboxError(Exception):
    """Represent a base class for all wirebox-specific failures.

    Catch this type when you want to handle any container error path without
    matching each concrete exception class individually. Every subclass keeps
    the values used to build its message as attributes, and renders the
    message in the language of the container that raised it.
    """

    message_key: ClassVar[MessageKey]

    def __init__(self, language: Language = DEFAULT_LANGUAGE, /, **params: Any) -> None:
        self.language = language
        super().__init__(render_message(self.message_key, language, **params))


class ExpectInvokableError(WireboxError):
    """Signal that a callable was required but something else was given.

    Raised by ``Container.factory``, ``Container.protect``,
    ``Container.set(..., as_factory=True)`` and ``Container.bind`` when the
    target or one of its dependencies is not callable.
    """

    message_key = MessageKey.EXPECT_INVOKABLE

    def __init__(self, value: Any, language: Language = DEFAULT_LANGUAGE) -> None:
        self.value = value
        super().__init__(language)


class KeyFrozenError(WireboxError):
    """Signal a write to a key that was already resolved as a singleton.

    Typical fix is calling ``Container.unset`` before redefining the key.
    """

    message_key = MessageKey.KEY_FROZEN

    def __init__(self, key: str, language: Language = DEFAULT_LANGUAGE) -> None:
        self.key = key
        super().__init__(language, key=key)


class KeyIsNotDefinedError(WireboxError):
    """Signal a lookup of a key that has no definition.

    Raised by ``Container.get`` and ``Container.raw``.
    """

    message_key = MessageKey.KEY_IS_NOT_DEFINED

    def __init__(self, key: str, language: Language = DEFAULT_LANGUAGE) -> None:
        self.key = key
        super().__init__(language, key=key)


class CircularDependencyError(WireboxError):
    """Signal a dependency cycle.

    Raised by ``Container.bind`` when the new binding would close a cycle in
    the dependency map, and by ``Container.get`` when a definition re-enters
    its own resolution.
    """

    message_key = MessageKey.CIRCULAR_DEPENDENCY

    def __init__(
        self,
        path: str,
        constructor_name: str,
        language: Language = DEFAULT_LANGUAGE,
    ) -> None:
        self.path = path
        self.constructor_name = constructor_name
        super().__init__(language, path=path, constructor_name=constructor_name)


class NoDependenciesRegisteredError(WireboxError):
    """Signal auto-wiring of a class that was never bound."""

    message_key = MessageKey.NO_DEPENDENCIES_REGISTERED

    def __init__(self, class_name: str, language: Language = DEFAULT_LANGUAGE) -> None:
        self.class_name = class_name
        super().__init__(language, class_name=class_name)


class FailedToResolveDueToUndefinedParamError(WireboxError):
    """Signal a ``None`` entry in a recorded dependency list."""

    message_key = MessageKey.FAILED_TO_RESOLVE_DUE_TO_UNDEFINED_PARAM

    def __init__(self, constructor_name: str, language: Language = DEFAULT_LANGUAGE) -> None:
        self.constructor_name = constructor_name
        super().__init__(language, constructor_name=constructor_name)


class FailedToResolveDependencyError(WireboxError):
    """Signal that a dependency of an auto-wired class failed to resolve.

    The original failure is available as ``__cause__``.
    """

    message_key = MessageKey.FAILED_TO_RESOLVE_DEPENDENCY

    def __init__(
        self,
        dependency: Any,
        constructor_name: str,
        error: BaseException,
        language: Language = DEFAULT_LANGUAGE,
    ) -> None:
        self.dependency = dependency
        self.dependency_name = _describe(dependency)
        self.constructor_name = constructor_name
        super().__init__(
            language,
            dependency_name=self.dependency_name,
            constructor_name=constructor_name,
            error=error,
        )


__all__ = [
    "CircularDependencyError",
    "ExpectInvokableError",
    "FailedToResolveDependencyError",
    "FailedToResolveDueToUndefinedParamError",
    "KeyFrozenError",
    "KeyIsNotDefinedError",
    "NoDependenciesRegisteredError",
    "WireboxError",
]
