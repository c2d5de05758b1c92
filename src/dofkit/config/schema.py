"""Pydantic models for dofkit configuration."""
from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..definitions import DEFAULT_SHIFT_TABLE


class LoggingConfig(BaseModel):
    level: Literal["none", "info", "debug"] = "none"

    model_config = ConfigDict(extra="forbid")


class ShiftConfig(BaseModel):
    """Symbol substitutions applied on top of the US QWERTY shift table."""

    overrides: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @field_validator("overrides")
    @classmethod
    def _single_chars(cls, v: Dict[str, str]) -> Dict[str, str]:
        for src, dst in v.items():
            if len(src) != 1 or len(dst) != 1:
                raise ValueError(
                    f"shift override {src!r} -> {dst!r} must map one character to one character"
                )
        return v


class DofkitConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    shift: ShiftConfig = Field(default_factory=ShiftConfig)

    model_config = ConfigDict(extra="forbid")

    def shift_table(self) -> Dict[str, str]:
        return {**DEFAULT_SHIFT_TABLE, **self.shift.overrides}


__all__ = ["LoggingConfig", "ShiftConfig", "DofkitConfig"]
