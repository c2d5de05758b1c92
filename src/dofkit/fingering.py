"""Fingering grids and the canonical fingerings of the named keyboards."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .definitions import Finger, KeyboardType, NamedFingering
from .errors import IncompatibleFingeringShape, UnsupportedKeyboardFingeringCombo
from .grid import Anchor, Grid, Shape
from .utils.logging import logger

if TYPE_CHECKING:
    from .keyboard import ParseKeyboard


class Fingering(Grid[Finger]):
    @classmethod
    def parse_cell(cls, token: str) -> Finger:
        return Finger.parse(token)


_ROW_STAGGER_TOP = [
    "LP LP LR LM LI LI RI RI RM RR RP RP RP RP",
    "LP LP LR LM LI LI RI RI RM RR RP RP RP RP",
    "LP LP LR LM LI LI RI RI RM RR RP RP RP",
]
_ROW_STAGGER_THUMBS = "LP LP LT LT LT RT RT RP"
_SPLIT_ROWS = [
    "LP LR LM LI LI RI RI RM RR RP",
    "LP LR LM LI LI RI RI RM RR RP",
    "LP LR LM LI LI RI RI RM RR RP",
    "LT LT LT RT RT RT",
]

_TABLE: dict[tuple[KeyboardType, NamedFingering], list[str]] = {
    (KeyboardType.ANSI, NamedFingering.TRADITIONAL): [
        *_ROW_STAGGER_TOP,
        "LP LP LR LM LI LI RI RI RM RR RP RP",
        _ROW_STAGGER_THUMBS,
    ],
    (KeyboardType.ANSI, NamedFingering.ANGLE): [
        *_ROW_STAGGER_TOP,
        "LP LR LM LI LI LI RI RI RM RR RP RP",
        _ROW_STAGGER_THUMBS,
    ],
    (KeyboardType.ISO, NamedFingering.TRADITIONAL): [
        *_ROW_STAGGER_TOP,
        "LP LP LP LR LM LI LI RI RI RM RR RP RP",
        _ROW_STAGGER_THUMBS,
    ],
    (KeyboardType.ISO, NamedFingering.ANGLE): [
        *_ROW_STAGGER_TOP,
        "LP LP LR LM LI LI LI RI RI RM RR RP RP",
        _ROW_STAGGER_THUMBS,
    ],
    (KeyboardType.ORTHO, NamedFingering.TRADITIONAL): _SPLIT_ROWS,
    (KeyboardType.COLSTAG, NamedFingering.TRADITIONAL): _SPLIT_ROWS,
}


def fingering_for(board: KeyboardType, named: NamedFingering) -> Fingering:
    """Full-board fingering of a named keyboard, before any resize."""
    rows = _TABLE.get((board, named))
    if rows is None:
        raise UnsupportedKeyboardFingeringCombo(board, named)
    return Fingering.from_rows(rows)


def supported_fingerings(board: KeyboardType) -> list[NamedFingering]:
    return [named for (b, named) in _TABLE if b == board]


def resolve_fingering(
    spec: Fingering | NamedFingering,
    board: "ParseKeyboard",
    anchor: Anchor,
    shape: Sequence[int],
) -> tuple[Fingering, NamedFingering | None]:
    """Turn a fingering as written in a document into one matching ``shape``.

    Explicit grids are used as they are and must already have ``shape``.
    Named fingerings come from ``board`` and are cut down at ``anchor``.
    Returns the grid and the name it was resolved from, if any.
    """
    shape = Shape(shape)
    if isinstance(spec, Fingering):
        if spec.shape() != shape:
            raise IncompatibleFingeringShape(shape, spec.shape())
        return spec.copy(), None

    full = board.fingering(spec)
    logger.debug("resizing %s fingering %s at anchor %s", spec, list(full.shape()), tuple(anchor))
    return full.resized(anchor, shape), spec


__all__ = ["Fingering", "fingering_for", "supported_fingerings", "resolve_fingering"]
