from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class DefinitionKind(Enum):
    """Define how a stored definition is turned into a resolved value."""

    VALUE = auto()
    """Return the stored value as-is."""

    FACTORY = auto()
    """Call the stored callable with the container on every resolution."""

    PROTECTED = auto()
    """Return the stored callable without ever calling it."""

    IMPLICIT = auto()
    """Call the stored callable once, then replace it with the result and freeze the key."""

    BOUND = auto()
    """Auto-wire the bound class once, then cache the instance and freeze the key."""


@dataclass(frozen=True, slots=True)
class Definition:
    """Describe a single registry entry.

    The kind is decided when the entry is registered, so resolution never has
    to guess what a stored object is meant to be.
    """

    kind: DefinitionKind
    """How the definition resolves."""

    value: Any = None
    """The stored value, callable, or bound class (``None`` for name-only bindings)."""


class CallableFlags:
    """Track callables by identity.

    Callables are not required to be hashable, so membership is keyed on
    ``id()``. The callable itself is kept alive so the id stays unique while
    it is flagged.
    """

    def __init__(self) -> None:
        self._by_id: dict[int, Callable[..., Any]] = {}

    def add(self, fn: Callable[..., Any]) -> None:
        self._by_id[id(fn)] = fn

    def discard(self, fn: Any) -> None:
        self._by_id.pop(id(fn), None)

    def clear(self) -> None:
        self._by_id.clear()

    def __contains__(self, fn: object) -> bool:
        return self._by_id.get(id(fn)) is fn


def classify(
    value: Any,
    *,
    factories: CallableFlags,
    protected: CallableFlags,
) -> DefinitionKind:
    """Pick the definition kind for ``value`` from the current callable flags.

    Args:
        value: Object being registered.
        factories: Callables flagged as factories.
        protected: Callables flagged as protected.

    """
    if not callable(value):
        return DefinitionKind.VALUE
    if value in protected:
        return DefinitionKind.PROTECTED
    if value in factories:
        return DefinitionKind.FACTORY
    return DefinitionKind.IMPLICIT


__all__ = ["CallableFlags", "Definition", "DefinitionKind", "classify"]
