"""Layout document contract using Pydantic models.

``DofIntermediate`` is a layout document as written (JSON or YAML), with each
field already parsed into dofkit's value types but not yet cross-checked.
Cross-field validation (layer references, shapes, fingering and board fit)
happens in :func:`dofkit.pipeline.resolve_layout`.  Unknown fields are
rejected.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)

from ..combos import ParseCombos
from ..definitions import NamedFingering
from ..fingering import Fingering
from ..grid import Anchor
from ..keyboard import ParseKeyboard, parse_board
from ..layer import Layer


def _check_rows(value: Any, what: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(r, str) for r in value):
        raise ValueError(f"{what} must be a list of row strings")
    return value


# ---------------------------------------------------------------------------
# Language model
# ---------------------------------------------------------------------------

class Language(BaseModel):
    """A language a layout targets; weights express a split between several."""

    language: str = "English"
    weight: int = Field(default=100, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def only(cls, language: str) -> "Language":
        return cls(language=language, weight=100)


DEFAULT_LANGUAGES: tuple[Language, ...] = (Language(),)


# ---------------------------------------------------------------------------
# Document model
# ---------------------------------------------------------------------------

class DofIntermediate(BaseModel):
    name: str
    authors: list[str] | None = None
    board: ParseKeyboard
    year: int | None = Field(default=None, ge=0)
    description: str | None = None
    languages: list[Language] | None = None
    link: str | None = None
    layers: dict[str, Layer]
    anchor: Anchor | None = None
    fingering: Fingering | NamedFingering
    combos: ParseCombos | None = None

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    # --- validators -----------------------------------------------------
    @field_validator("board", mode="before")
    @classmethod
    def _parse_board(cls, v: Any) -> ParseKeyboard:
        return parse_board(v)

    @field_validator("layers", mode="before")
    @classmethod
    def _parse_layers(cls, v: Any) -> dict[str, Layer]:
        if not isinstance(v, Mapping):
            raise ValueError("layers must map layer names to lists of rows")
        out: dict[str, Layer] = {}
        for name, rows in v.items():
            if isinstance(rows, Layer):
                out[str(name)] = rows
            else:
                out[str(name)] = Layer.from_rows(_check_rows(rows, f"layer '{name}'"))
        return out

    @field_validator("anchor")
    @classmethod
    def _check_anchor(cls, v: Anchor | None) -> Anchor | None:
        if v is None:
            return v
        return Anchor.of(v.x, v.y)

    @field_validator("fingering", mode="before")
    @classmethod
    def _parse_fingering(cls, v: Any) -> Fingering | NamedFingering:
        if isinstance(v, (Fingering, NamedFingering)):
            return v
        if isinstance(v, str):
            return NamedFingering.parse(v)
        return Fingering.from_rows(_check_rows(v, "fingering"))

    @field_validator("combos", mode="before")
    @classmethod
    def _parse_combos(cls, v: Any) -> ParseCombos | None:
        if v is None or isinstance(v, ParseCombos):
            return v
        if not isinstance(v, Mapping) or not all(
            isinstance(c, Mapping)
            and all(isinstance(k, str) and isinstance(o, str) for k, o in c.items())
            for c in v.values()
        ):
            raise ValueError("combos must map layer names to {combo: output} strings")
        return ParseCombos.from_value(v)

    # --- serializers ----------------------------------------------------
    @field_serializer("board")
    def _dump_board(self, board: ParseKeyboard) -> Any:
        return board.to_value()

    @field_serializer("layers")
    def _dump_layers(self, layers: dict[str, Layer]) -> dict[str, list[str]]:
        return {name: layer.to_rows() for name, layer in layers.items()}

    @field_serializer("fingering")
    def _dump_fingering(self, fingering: Fingering | NamedFingering) -> str | list[str]:
        if isinstance(fingering, NamedFingering):
            return fingering.name
        return fingering.to_rows()

    @field_serializer("combos")
    def _dump_combos(self, combos: ParseCombos | None) -> dict[str, dict[str, str]] | None:
        return None if combos is None else combos.to_value()

    # --- helpers --------------------------------------------------------
    def to_document(self) -> dict[str, Any]:
        """Plain JSON-compatible document, leaving out unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["Language", "DEFAULT_LANGUAGES", "DofIntermediate"]
