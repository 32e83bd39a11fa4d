"""Tests for the pytest plugin fixtures."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from wirebox import Container

pytest_plugins = ["wirebox.integrations.pytest_plugin"]


class _GreetingProvider:
    def register(self, container: Container) -> None:
        container.set("greeting", lambda c: f"hello {c.get('name')}")


@pytest.fixture()
def wirebox_values() -> Mapping[str, Any]:
    return {"name": "tests"}


@pytest.fixture()
def wirebox_providers() -> list[_GreetingProvider]:
    return [_GreetingProvider()]


def test_container_holds_values_and_providers(wirebox_container: Container) -> None:
    assert wirebox_container.get("greeting") == "hello tests"


def test_container_is_fresh_per_test(wirebox_container: Container) -> None:
    assert not wirebox_container.is_frozen("greeting")
    wirebox_container.set("greeting", "overridden")

    assert wirebox_container.get("greeting") == "overridden"
