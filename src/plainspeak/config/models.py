"""Pydantic configuration models with code-baked defaults.

Defaults live here; plainspeak.toml only carries overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from plainspeak.domain.durations import Precision


class DurationConfig(BaseModel):
    """[duration] section."""

    model_config = {"frozen": True}

    precision: str = "second"

    @field_validator("precision")
    @classmethod
    def _known_precision(cls, value: str) -> str:
        return Precision.parse(value).noun

    @property
    def default_precision(self) -> Precision:
        return Precision.parse(self.precision)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=20)
