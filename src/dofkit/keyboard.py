"""Physical keyboard geometry.

A layout document can describe its keyboard three ways:

* by name (``"ansi"``), resolved through a hand-written geometry table;
* as relative rows (``"k 3.2k 2 8k"``): key widths and spacers laid out left
  to right, one row per line;
* as full rows of physical keys (``"x y [width [height]]"``).

All three resolve to a :class:`PhysicalKeyboard`.  Relative and full boards
are interchangeable where the geometry allows it: :meth:`PhysicalKeyboard.to_board`
picks the shorthand only when it reproduces the keys exactly.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np

from .definitions import KeyboardType, NamedFingering
from .errors import (
    EmptyPhysKey,
    FingeringForCustomKeyboard,
    FloatParseError,
    ParseError,
    UnknownBoardFormat,
    UnknownKeyboardType,
    ValueAmountError,
)
from .fingering import Fingering, fingering_for
from .grid import Anchor, Grid
from .utils.logging import logger
from .utils.numerics import format_float, is_unit


def _parse_float(token: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise FloatParseError(token) from None
    if not math.isfinite(value):
        raise FloatParseError(token)
    return value


@dataclass(frozen=True)
class PhysicalKey:
    """Key rectangle; ``(x, y)`` is the top left corner, in key units."""

    x: float
    y: float
    width: float = 1.0
    height: float = 1.0

    @classmethod
    def parse(cls, text: str) -> "PhysicalKey":
        trimmed = text.strip()
        if not trimmed:
            raise EmptyPhysKey()
        values = [_parse_float(tok) for tok in trimmed.split()]
        if len(values) not in (2, 3, 4):
            raise ValueAmountError(len(values), trimmed)
        return cls(*values)

    def __str__(self) -> str:
        parts = [self.x, self.y]
        if not is_unit(self.height):
            parts += [self.width, self.height]
        elif not is_unit(self.width):
            parts.append(self.width)
        return " ".join(format_float(v) for v in parts)


@dataclass(frozen=True)
class RelativeKey:
    """A key (or, when ``has_key`` is false, empty space) of a given width."""

    width: float = 1.0
    has_key: bool = True

    @classmethod
    def parse(cls, text: str) -> "RelativeKey":
        token = text.strip()
        if token.endswith("k"):
            number = token[:-1]
            return cls(_parse_float(number) if number else 1.0, True)
        return cls(_parse_float(token), False)

    def __str__(self) -> str:
        if not self.has_key:
            return format_float(self.width)
        if self.width == 1.0:
            return "k"
        return format_float(self.width) + "k"


class RelativeKeyboard(Grid[RelativeKey]):
    @classmethod
    def parse_cell(cls, token: str) -> RelativeKey:
        return RelativeKey.parse(token)


class PhysicalKeyboard(Grid[PhysicalKey]):
    """Rows of physical keys.

    Rows are written as lists of ``"x y [width [height]]"`` strings since each
    key contains spaces itself.
    """

    @classmethod
    def parse_cell(cls, token: str) -> PhysicalKey:
        return PhysicalKey.parse(token)

    @classmethod
    def from_value(cls, rows: Iterable[Iterable[str]]) -> "PhysicalKeyboard":
        return cls([PhysicalKey.parse(k) for k in row] for row in rows)

    def to_value(self) -> list[list[str]]:
        return [[str(k) for k in row] for row in self.rows()]

    def as_array(self) -> np.ndarray:
        """All keys, row-major, as an ``(N, 4)`` array of ``x, y, width, height``."""
        data = [(k.x, k.y, k.width, k.height) for k in self.cells()]
        return np.asarray(data, dtype=float).reshape(len(data), 4)

    @classmethod
    def from_relative(cls, relative: RelativeKeyboard) -> "PhysicalKeyboard":
        rows = []
        for y, row in enumerate(relative.rows()):
            widths = np.asarray([rk.width for rk in row], dtype=float)
            starts = np.concatenate(([0.0], np.cumsum(widths)[:-1])) if len(row) else widths
            rows.append([
                PhysicalKey(float(x), float(y), rk.width, 1.0)
                for x, rk in zip(starts, row)
                if rk.has_key
            ])
        return cls(rows)

    def to_relative(self) -> RelativeKeyboard | None:
        """Relative shorthand reproducing this board exactly, if there is one."""
        rows: list[list[RelativeKey]] = []
        for row_i, row in enumerate(self.rows()):
            cursor = 0.0
            out: list[RelativeKey] = []
            for key in row:
                if key.y != float(row_i) or key.height != 1.0 or key.x < cursor:
                    return None
                if key.x > cursor:
                    out.append(RelativeKey(key.x - cursor, False))
                out.append(RelativeKey(key.width, True))
                cursor = key.x + key.width
            rows.append(out)

        relative = RelativeKeyboard(rows)
        if PhysicalKeyboard.from_relative(relative) != self:
            return None
        return relative

    def to_board(self) -> "ParseKeyboard":
        """Most compact board descriptor for this geometry."""
        if self.row_count() == 0:
            return FullBoard(PhysicalKeyboard())
        relative = self.to_relative()
        if relative is None:
            return FullBoard(self.copy())
        return RelativeBoard(relative)


def phys_row(widths: Sequence[tuple[float, int]], x_offset: float, y: float) -> list[PhysicalKey]:
    """One row of adjacent keys; ``widths`` holds ``(width, count)`` runs."""
    flat = np.repeat([w for w, _ in widths], [n for _, n in widths]).astype(float)
    starts = x_offset + np.concatenate(([0.0], np.cumsum(flat)[:-1]))
    return [PhysicalKey(float(x), float(y), float(w)) for x, w in zip(starts, flat)]


def _colstag_row(y: float) -> list[PhysicalKey]:
    stagger = [0.45, 0.15, 0.0, 0.15, 0.30]
    left = [PhysicalKey(float(x), y + dy) for x, dy in zip(range(0, 5), stagger)]
    right = [PhysicalKey(float(x), y + dy) for x, dy in zip(range(7, 12), reversed(stagger))]
    return left + right


def named_physical(board: KeyboardType) -> PhysicalKeyboard:
    """Full geometry of a named keyboard, before any resize."""
    if board == KeyboardType.ANSI:
        rows = [
            phys_row([(1.0, 1), (1.0, 12), (2.0, 1)], 0.0, 0.0),
            phys_row([(1.5, 1), (1.0, 12), (1.5, 1)], 0.0, 1.0),
            phys_row([(1.75, 1), (1.0, 11), (2.25, 1)], 0.0, 2.0),
            phys_row([(2.25, 1), (1.0, 10), (2.75, 1)], 0.0, 3.0),
            phys_row([(1.25, 3), (6.25, 1), (1.25, 4)], 0.0, 4.0),
        ]
    elif board == KeyboardType.ISO:
        rows = [
            phys_row([(1.0, 1), (1.0, 12), (2.0, 1)], 0.0, 0.0),
            phys_row([(1.5, 1), (1.0, 12)], 0.0, 1.0),
            phys_row([(1.75, 1), (1.0, 12)], 0.0, 2.0),
            phys_row([(1.25, 1), (1.0, 11), (2.75, 1)], 0.0, 3.0),
            phys_row([(1.25, 3), (6.25, 1), (1.25, 4)], 0.0, 4.0),
        ]
        # ISO enter is not a rectangle; use its lower part spanning both rows.
        rows[1].append(PhysicalKey(13.75, 1.0, 1.25, 2.0))
    elif board == KeyboardType.ORTHO:
        rows = [
            phys_row([(1.0, 10)], 0.0, 0.0),
            phys_row([(1.0, 10)], 0.0, 1.0),
            phys_row([(1.0, 10)], 0.0, 2.0),
            phys_row([(1.0, 6)], 3.0, 3.0),
        ]
    elif board == KeyboardType.COLSTAG:
        rows = [_colstag_row(0.0), _colstag_row(1.0), _colstag_row(2.0)]
        rows.append([
            PhysicalKey(2.4, 3.3),
            PhysicalKey(3.5, 3.5),
            PhysicalKey(4.7, 3.8),
            PhysicalKey(6.3, 3.8),
            PhysicalKey(7.5, 3.5),
            PhysicalKey(8.6, 3.3),
        ])
    else:
        raise UnknownKeyboardType(board)
    return PhysicalKeyboard(rows)


# ---------------------------------------------------------------------------
# Board descriptors, as written in a layout document
# ---------------------------------------------------------------------------

class ParseKeyboard(ABC):
    """How a layout document describes its keyboard."""

    def anchor(self) -> Anchor:
        return Anchor(0, 0)

    def fingering(self, named: NamedFingering) -> Fingering:
        raise FingeringForCustomKeyboard()

    @abstractmethod
    def physical(self) -> PhysicalKeyboard:
        """Full physical geometry, before any resize."""

    @abstractmethod
    def to_value(self) -> Any:
        """Document form of the descriptor."""


@dataclass(frozen=True)
class NamedBoard(ParseKeyboard):
    board_type: KeyboardType

    def anchor(self) -> Anchor:
        return self.board_type.anchor()

    def fingering(self, named: NamedFingering) -> Fingering:
        return fingering_for(self.board_type, named)

    def physical(self) -> PhysicalKeyboard:
        return named_physical(self.board_type)

    def to_value(self) -> str:
        return self.board_type.name


@dataclass(frozen=True)
class RelativeBoard(ParseKeyboard):
    keyboard: RelativeKeyboard

    def physical(self) -> PhysicalKeyboard:
        return PhysicalKeyboard.from_relative(self.keyboard)

    def to_value(self) -> list[str]:
        return self.keyboard.to_rows()


@dataclass(frozen=True)
class FullBoard(ParseKeyboard):
    keyboard: PhysicalKeyboard

    def physical(self) -> PhysicalKeyboard:
        return self.keyboard.copy()

    def to_value(self) -> list[list[str]]:
        return self.keyboard.to_value()


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def parse_board(value: Any) -> ParseKeyboard:
    """Read a board descriptor, trying named, relative and full forms in turn."""
    if isinstance(value, ParseKeyboard):
        return value
    if isinstance(value, str):
        return NamedBoard(KeyboardType.parse(value))

    reasons = ["not a keyboard name"]
    if _is_str_list(value):
        try:
            return RelativeBoard(RelativeKeyboard.from_rows(value))
        except ParseError as exc:
            reasons.append(f"not relative rows: {exc}")
    else:
        reasons.append("not relative rows: expected a list of strings")

    if isinstance(value, list) and all(_is_str_list(row) for row in value):
        try:
            board = FullBoard(PhysicalKeyboard.from_value(value))
        except ParseError as exc:
            reasons.append(f"not physical key rows: {exc}")
        else:
            logger.debug("board parsed as %d rows of physical keys", board.keyboard.row_count())
            return board
    else:
        reasons.append("not physical key rows: expected a list of lists of strings")

    raise UnknownBoardFormat(value, reasons)


__all__ = [
    "PhysicalKey",
    "RelativeKey",
    "PhysicalKeyboard",
    "RelativeKeyboard",
    "phys_row",
    "named_physical",
    "ParseKeyboard",
    "NamedBoard",
    "RelativeBoard",
    "FullBoard",
    "parse_board",
]
