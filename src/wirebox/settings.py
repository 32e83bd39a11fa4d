from __future__ import annotations

from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wirebox.messages import DEFAULT_LANGUAGE, Language, parse_language
from wirebox.policies import CycleDetection


class WireboxSettings(BaseSettings):
    """Container defaults loaded from ``WIREBOX_*`` environment variables.

    Explicit ``Container`` arguments always take precedence over these values.

    Examples:
        .. code-block:: bash

            export WIREBOX_LANGUAGE=pt-br
            export WIREBOX_CYCLE_DETECTION=immediate

    """

    model_config = SettingsConfigDict(env_prefix="WIREBOX_", extra="ignore")

    language: Language = DEFAULT_LANGUAGE
    """Message catalog used for error text."""

    cycle_detection: CycleDetection = CycleDetection.GRAPH
    """Bind-time cycle detection policy."""

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, value: Any) -> Any:
        return parse_language(value) or value


__all__ = ["WireboxSettings"]
