from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from types import TracebackType
from typing import Any, TypeVar, overload

from typing_extensions import Self

from wirebox.definitions import CallableFlags, Definition, DefinitionKind, classify
from wirebox.dependency_graph import DependencyGraph, dependency_name
from wirebox.exceptions import (
    CircularDependencyError,
    ExpectInvokableError,
    FailedToResolveDependencyError,
    FailedToResolveDueToUndefinedParamError,
    KeyFrozenError,
    KeyIsNotDefinedError,
    NoDependenciesRegisteredError,
)
from wirebox.messages import Language, MessageKey, parse_language, render_message
from wirebox.policies import CycleDetection
from wirebox.providers import ServiceProvider
from wirebox.settings import WireboxSettings

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)

_CALLABLE_KINDS = (DefinitionKind.IMPLICIT, DefinitionKind.FACTORY, DefinitionKind.PROTECTED)


class Container:
    """Store definitions by key and resolve them on demand.

    Keys are strings, or classes, which are stored under their ``__name__``.
    What ``get`` returns depends on how a key was registered:

    * plain values are returned as-is;
    * callables flagged with ``factory`` (or set with ``as_factory=True``) are
      called with the container on every ``get``;
    * callables flagged with ``protect`` are returned without being called;
    * any other callable is an implicit factory: it is called once, its result
      replaces it, and the key is frozen;
    * classes registered with ``bind`` are auto-wired from their declared
      dependencies once and cached like implicit factories.

    Each container owns its state; nothing is shared between instances.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        *,
        language: Language | str | None = None,
        cycle_detection: CycleDetection | str | None = None,
        settings: WireboxSettings | None = None,
    ) -> None:
        """Initialize a container and register initial ``values``.

        Args:
            values: Initial definitions, registered through ``set``.
            language: Message catalog for error text. Defaults to
                ``settings.language``.
            cycle_detection: Bind-time cycle detection policy. Defaults to
                ``settings.cycle_detection``.
            settings: Source of defaults. Loaded from the environment when
                omitted.

        Examples:
            .. code-block:: python

                container = Container({"app_name": "My App"})
                strict = Container(cycle_detection=CycleDetection.GRAPH)

        """
        if settings is None:
            settings = WireboxSettings()

        self._language = settings.language
        self._cycle_detection = (
            CycleDetection(cycle_detection) if cycle_detection else settings.cycle_detection
        )

        self._definitions: dict[str, Definition] = {}
        self._factories = CallableFlags()
        self._protected = CallableFlags()
        self._frozen: set[str] = set()
        self._raw: dict[str, Any] = {}
        self._graph = DependencyGraph()
        self._instances: dict[type[Any], Any] = {}
        self._ledger: dict[str, None] = {}
        self._resolution_stack: list[str] = []

        if language is not None:
            self.set_language(language)

        for key, value in (values or {}).items():
            self.set(key, value)

    # region Configuration
    def set_language(self, language: Language | str) -> None:
        """Switch the message catalog used for error text.

        Unsupported languages are logged and ignored; the current language is
        kept.

        Args:
            language: Language member or code such as ``"pt-br"``.

        """
        parsed = parse_language(language)
        if parsed is None:
            logger.warning(
                render_message(
                    MessageKey.LANGUAGE_NOT_SUPPORTED,
                    self._language,
                    language=language,
                    current=self._language.value,
                ),
            )
            return
        self._language = parsed

    def get_language(self) -> Language:
        return self._language

    @property
    def cycle_detection(self) -> CycleDetection:
        return self._cycle_detection

    # endregion Configuration

    # region Registration Methods
    def set(self, key: str | type[Any], value: Any, as_factory: bool = False) -> None:  # noqa: FBT001, FBT002
        """Store ``value`` under ``key``.

        Args:
            key: String key, or a class stored under its name.
            value: Value, callable, or factory to store.
            as_factory: Flag ``value`` as a factory so every ``get`` calls it.

        Raises:
            ExpectInvokableError: ``as_factory`` is set and ``value`` is not callable.
            KeyFrozenError: The key was already resolved as a singleton.

        """
        name = self._key_of(key)
        if name in self._frozen:
            raise KeyFrozenError(name, self._language)
        if as_factory and not callable(value):
            raise ExpectInvokableError(value, self._language)

        if as_factory:
            self._factories.add(value)
        definition = Definition(
            classify(value, factories=self._factories, protected=self._protected),
            value,
        )
        self._definitions[name] = definition
        self._graph.remove(name)
        self._ledger.setdefault(name, None)
        logger.debug("Registered '%s' as %s", name, definition.kind.name)

    def bind(self, target: type[Any] | str, dependencies: Sequence[Any]) -> None:
        """Declare the constructor dependencies of ``target`` for auto-wiring.

        The target is registered under its name and built on first ``get`` by
        resolving each dependency in order. The instance is then cached and
        the key frozen.

        Args:
            target: Class to bind, or the name of a class that will be passed
                to ``get`` later.
            dependencies: Ordered constructor dependencies. Each must be
                callable and is resolved through ``get``.

        Raises:
            ExpectInvokableError: ``target`` or a dependency is not callable.
            KeyFrozenError: The target's name was already resolved.
            CircularDependencyError: The binding would close a dependency cycle.

        Examples:
            .. code-block:: python

                container.bind(Database, [])
                container.bind(UserRepository, [Database])
                repository = container.get(UserRepository)

        """
        if isinstance(target, str):
            name, constructor = target, None
        elif callable(target):
            name, constructor = self._key_of(target), target
        else:
            raise ExpectInvokableError(target, self._language)

        dependencies = list(dependencies)
        for dependency in dependencies:
            if not callable(dependency):
                raise ExpectInvokableError(dependency, self._language)

        if name in self._frozen:
            raise KeyFrozenError(name, self._language)

        cycle = self._graph.find_cycle(name, dependencies, self._cycle_detection)
        if cycle is not None:
            raise CircularDependencyError(" -> ".join(cycle), name, self._language)

        self._graph.add(name, constructor, dependencies)
        self._definitions[name] = Definition(DefinitionKind.BOUND, constructor)
        self._ledger.setdefault(name, None)
        logger.debug(
            "Bound '%s' to dependencies [%s]",
            name,
            ", ".join(dependency_name(dependency) for dependency in dependencies),
        )

    def factory(self, fn: F) -> F:
        """Flag ``fn`` as a factory called on every resolution and return it unchanged.

        Can be used as a decorator.

        Raises:
            ExpectInvokableError: ``fn`` is not callable.

        """
        if not callable(fn):
            raise ExpectInvokableError(fn, self._language)
        self._factories.add(fn)
        self._retag(fn)
        return fn

    def protect(self, fn: F) -> F:
        """Flag ``fn`` as protected so ``get`` returns it uncalled, and return it unchanged.

        Can be used as a decorator.

        Raises:
            ExpectInvokableError: ``fn`` is not callable.

        """
        if not callable(fn):
            raise ExpectInvokableError(fn, self._language)
        self._protected.add(fn)
        self._retag(fn)
        return fn

    def register(self, provider: ServiceProvider, values: Mapping[str, Any] | None = None) -> Self:
        """Let ``provider`` register its definitions, then ``set`` each of ``values``.

        Args:
            provider: Object exposing ``register(container)``.
            values: Extra definitions applied after the provider.

        Returns:
            This container, for chaining.

        """
        provider.register(self)
        for key, value in (values or {}).items():
            self.set(key, value)
        logger.debug("Registered provider %s", type(provider).__name__)
        return self

    def unset(self, key: str | type[Any]) -> None:
        """Remove ``key`` and everything recorded about it. Unknown keys are ignored."""
        name = self._key_of(key)
        if name not in self._ledger and name not in self._definitions:
            return

        definition = self._definitions.pop(name, None)
        raw = self._raw.pop(name, None)
        for candidate in (definition.value if definition else None, raw):
            if callable(candidate) and not self._is_referenced(candidate):
                self._factories.discard(candidate)
                self._protected.discard(candidate)

        self._frozen.discard(name)
        self._graph.remove(name)
        self._ledger.pop(name, None)
        for cls in [cls for cls in self._instances if cls.__name__ == name]:
            del self._instances[cls]
        logger.debug("Removed '%s'", name)

    def clear(self) -> None:
        """Remove every definition, flag, cached instance and binding."""
        self._definitions.clear()
        self._factories.clear()
        self._protected.clear()
        self._frozen.clear()
        self._raw.clear()
        self._graph.clear()
        self._instances.clear()
        self._ledger.clear()
        logger.debug("Cleared container")

    def dispose(self) -> None:
        self.clear()

    # endregion Registration Methods

    # region Resolution
    @overload
    def get(self, key: type[T]) -> T: ...

    @overload
    def get(self, key: str) -> Any: ...

    def get(self, key: Any) -> Any:
        """Resolve ``key`` to a value.

        Args:
            key: String key, or a class resolved through its name.

        Raises:
            KeyIsNotDefinedError: Nothing is registered under the key.
            CircularDependencyError: The key is already being resolved.

        """
        if isinstance(key, type) and key in self._instances:
            return self._instances[key]

        name = self._key_of(key)
        definition = self._definitions.get(name)
        if definition is None:
            raise KeyIsNotDefinedError(name, self._language)

        kind = definition.kind
        if kind in (DefinitionKind.VALUE, DefinitionKind.PROTECTED):
            return definition.value

        with self._resolving(name):
            if kind is DefinitionKind.FACTORY:
                return definition.value(self)
            if kind is DefinitionKind.IMPLICIT:
                result = definition.value(self)
            else:
                constructor = definition.value
                if constructor is None and isinstance(key, type):
                    constructor = key
                result = self._autowire(name, constructor)

        # Commit only after a successful call.
        self._definitions[name] = Definition(DefinitionKind.VALUE, result)
        self._raw.setdefault(name, definition.value if definition.value is not None else key)
        self._frozen.add(name)
        if isinstance(key, type):
            self._instances[key] = result
        logger.debug("Resolved and froze '%s'", name)
        return result

    def build(self, target: type[T] | str) -> T:
        """Auto-wire a new instance of a bound class without caching it.

        Args:
            target: Bound class, or the name it was bound under.

        Raises:
            NoDependenciesRegisteredError: ``target`` was never bound.
            FailedToResolveDependencyError: A dependency failed to resolve.

        """
        name = self._key_of(target)
        constructor = target if not isinstance(target, str) else self._graph.target_of(name)
        with self._resolving(name):
            return self._autowire(name, constructor)

    def _autowire(self, name: str, constructor: Callable[..., Any] | None) -> Any:
        dependencies = self._graph.dependencies_of(name)
        if dependencies is None:
            raise NoDependenciesRegisteredError(name, self._language)
        if constructor is None:
            raise ExpectInvokableError(name, self._language)

        if not dependencies:
            return constructor()

        arguments = []
        for dependency in dependencies:
            if dependency is None:
                raise FailedToResolveDueToUndefinedParamError(name, self._language)
            try:
                arguments.append(self.get(dependency))
            except Exception as e:
                raise FailedToResolveDependencyError(dependency, name, e, self._language) from e
        return constructor(*arguments)

    @contextmanager
    def _resolving(self, name: str) -> Iterator[None]:
        stack = self._resolution_stack
        if name in stack:
            path = " -> ".join(stack[stack.index(name) :])
            raise CircularDependencyError(path, name, self._language)
        stack.append(name)
        try:
            yield
        finally:
            stack.pop()

    # endregion Resolution

    # region Introspection
    def has(self, key: str | type[Any]) -> bool:
        if isinstance(key, type) and key in self._instances:
            return True
        name = self._key_of(key)
        return name in self._ledger or name in self._definitions

    def keys(self) -> list[str]:
        """Return every registered key in registration order."""
        return list(dict.fromkeys([*self._ledger, *self._definitions]))

    def raw(self, key: str | type[Any]) -> Any:
        """Return the definition of ``key`` as it was before resolution.

        For resolved implicit factories this is the original callable; for
        bound classes it is the class. Other keys return their stored value.

        Raises:
            KeyIsNotDefinedError: Nothing is registered under the key.

        """
        name = self._key_of(key)
        if name in self._raw:
            return self._raw[name]
        if name in self._definitions:
            return self._definitions[name].value
        raise KeyIsNotDefinedError(name, self._language)

    def is_frozen(self, key: str | type[Any]) -> bool:
        return self._key_of(key) in self._frozen

    # endregion Introspection

    # region Helpers
    def _key_of(self, key: Any) -> str:
        if isinstance(key, str):
            return key
        name = getattr(key, "__name__", None)
        if callable(key) and isinstance(name, str):
            return name
        msg = f"Container keys must be strings or named callables, got {key!r}."
        raise TypeError(msg)

    def _retag(self, fn: Callable[..., Any]) -> None:
        for name, definition in self._definitions.items():
            if definition.kind in _CALLABLE_KINDS and definition.value is fn:
                kind = classify(fn, factories=self._factories, protected=self._protected)
                self._definitions[name] = Definition(kind, fn)

    def _is_referenced(self, fn: Callable[..., Any]) -> bool:
        return any(definition.value is fn for definition in self._definitions.values()) or any(
            raw is fn for raw in self._raw.values()
        )

    # endregion Helpers

    # region Protocols
    def __getitem__(self, key: str | type[Any]) -> Any:
        return self.get(key)

    def __setitem__(self, key: str | type[Any], value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str | type[Any]) -> None:
        self.unset(key)

    def __contains__(self, key: object) -> bool:
        try:
            return self.has(key)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.dispose()

    # endregion Protocols


__all__ = ["Container"]
