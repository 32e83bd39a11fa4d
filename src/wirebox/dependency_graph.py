from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from wirebox.policies import CycleDetection


def dependency_name(dependency: Any) -> str:
    """Return the registry key a dependency resolves through."""
    return getattr(dependency, "__name__", type(dependency).__name__)


class DependencyGraph:
    """Store declared constructor dependencies indexed by constructor name.

    A binding made by name only has no known constructor until a class with
    that name is resolved, so targets are tracked separately from the
    dependency lists.
    """

    def __init__(self) -> None:
        self._dependencies: dict[str, tuple[Any, ...]] = {}
        self._targets: dict[str, type[Any] | None] = {}

    def add(self, name: str, target: type[Any] | None, dependencies: Sequence[Any]) -> None:
        """Record ``dependencies`` for the constructor registered under ``name``.

        Args:
            name: Registry key of the constructor.
            target: The constructor itself, or ``None`` for name-only bindings.
            dependencies: Ordered constructor dependencies.

        """
        self._dependencies[name] = tuple(dependencies)
        self._targets[name] = target

    def remove(self, name: str) -> None:
        self._dependencies.pop(name, None)
        self._targets.pop(name, None)

    def clear(self) -> None:
        self._dependencies.clear()
        self._targets.clear()

    def dependencies_of(self, name: str) -> tuple[Any, ...] | None:
        return self._dependencies.get(name)

    def target_of(self, name: str) -> type[Any] | None:
        return self._targets.get(name)

    def find_cycle(
        self,
        name: str,
        dependencies: Sequence[Any],
        policy: CycleDetection = CycleDetection.GRAPH,
    ) -> list[str] | None:
        """Return the cycle that binding ``name`` to ``dependencies`` would create.

        The returned path starts at ``name`` and lists every constructor up to
        the one that depends back on ``name``. ``None`` means no cycle.

        Args:
            name: Registry key of the constructor being bound.
            dependencies: Dependencies the constructor is about to be bound to.
            policy: How far to look for cycles.

        """
        dependency_names = [dependency_name(dependency) for dependency in dependencies]
        if name in dependency_names:
            return [name]

        if policy is CycleDetection.IMMEDIATE:
            for candidate in dependency_names:
                declared = self._dependencies.get(candidate, ())
                if name in (dependency_name(dependency) for dependency in declared):
                    return [name, candidate]
            return None

        visited: set[str] = set()
        for start in dependency_names:
            path = self._path_to(start, name, visited)
            if path is not None:
                return [name, *path]
        return None

    def _path_to(self, start: str, goal: str, visited: set[str]) -> list[str] | None:
        # Iterative DFS; each stack frame holds the path walked so far.
        stack: list[list[str]] = [[start]]
        while stack:
            path = stack.pop()
            current = path[-1]
            if current in visited:
                continue
            visited.add(current)
            for dependency in self._dependencies.get(current, ()):
                next_name = dependency_name(dependency)
                if next_name == goal:
                    return path
                if next_name not in visited:
                    stack.append([*path, next_name])
        return None


__all__ = ["DependencyGraph", "dependency_name"]
