from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

import pytest

from wirebox.container import Container
from wirebox.providers import ServiceProvider


@pytest.fixture()
def wirebox_providers() -> Sequence[ServiceProvider]:
    """Providers registered into ``wirebox_container``.

    Override this fixture in a test module or ``conftest.py`` to feed
    providers into the plugin-managed container.

    """
    return ()


@pytest.fixture()
def wirebox_values() -> Mapping[str, Any]:
    """Initial values registered into ``wirebox_container`` before providers run."""
    return {}


@pytest.fixture()
def wirebox_container(
    wirebox_providers: Sequence[ServiceProvider],
    wirebox_values: Mapping[str, Any],
) -> Iterator[Container]:
    """Yield a fresh container per test and dispose it afterwards.

    Load the plugin with ``pytest_plugins = ["wirebox.integrations.pytest_plugin"]``.

    Yields:
        A container holding ``wirebox_values`` and every definition
        registered by ``wirebox_providers``.

    """
    with Container(wirebox_values) as container:
        for provider in wirebox_providers:
            container.register(provider)
        yield container


__all__ = ["wirebox_container", "wirebox_providers", "wirebox_values"]
