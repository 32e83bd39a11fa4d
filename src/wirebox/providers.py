from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wirebox.container import Container


@runtime_checkable
class ServiceProvider(Protocol):
    """Protocol for objects that register a group of related definitions.

    Pass instances to ``Container.register``. Any object with a matching
    ``register`` method qualifies; subclassing is not required.

    Examples:
        .. code-block:: python

            class DatabaseProvider:
                def register(self, container: Container) -> None:
                    container.set("dsn", "sqlite://")
                    container.set("db", lambda c: connect(c.get("dsn")))

    """

    def register(self, container: Container) -> Any:
        """Register definitions into ``container``.

        Args:
            container: Container receiving the definitions.

        """


__all__ = ["ServiceProvider"]
