"""Shared pytest fixtures for wirebox tests."""

import pytest

from wirebox.container import Container
from wirebox.messages import Language
from wirebox.policies import CycleDetection
from wirebox.settings import WireboxSettings


@pytest.fixture(autouse=True)
def _clean_wirebox_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of container defaults."""
    monkeypatch.delenv("WIREBOX_LANGUAGE", raising=False)
    monkeypatch.delenv("WIREBOX_CYCLE_DETECTION", raising=False)


@pytest.fixture()
def container() -> Container:
    """Default container with full graph cycle detection."""
    return Container()


@pytest.fixture()
def container_immediate() -> Container:
    """Container that only detects self and two-node cycles at bind time."""
    return Container(cycle_detection=CycleDetection.IMMEDIATE)


@pytest.fixture()
def container_pt_br() -> Container:
    """Container rendering errors in Brazilian Portuguese."""
    return Container(settings=WireboxSettings(language=Language.PT_BR))
