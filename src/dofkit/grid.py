"""Row-based grids, shapes and the anchored resize used by every layout grid.

Layers, fingerings and physical boards are all ragged grids: a list of rows
where each row may have its own length.  Their geometry is summarised by a
:class:`Shape` (one length per row) and cut down to the part a layout uses with
:func:`resize`, which skips ``anchor.y`` rows and ``anchor.x`` columns before
taking exactly the requested shape.
"""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, NamedTuple, Sequence, TypeVar

from .errors import AnchorBiggerThanLayout, LayoutDoesntFit

T = TypeVar("T")
G = TypeVar("G", bound="Grid")


class Pos(NamedTuple):
    row: int
    col: int


class Anchor(NamedTuple):
    """Top-left offset (in columns and rows) of the used part of a larger grid."""

    x: int
    y: int

    @classmethod
    def of(cls, x: int, y: int) -> "Anchor":
        if x < 0 or y < 0:
            raise ValueError(f"anchor must be non-negative, got ({x}, {y})")
        return cls(int(x), int(y))

    def to_value(self) -> list[int]:
        return [self.x, self.y]


class Shape(tuple):
    """Row lengths of a grid, top row first."""

    __slots__ = ()

    def __new__(cls, rows: Iterable[int] = ()) -> "Shape":
        values = tuple(int(r) for r in rows)
        for i, r in enumerate(values):
            if r < 0:
                raise ValueError(f"shape row {i} has negative length {r}")
        return super().__new__(cls, values)

    def row_count(self) -> int:
        return len(self)

    def fits_in(self, other: Sequence[int]) -> bool:
        """Whether a grid of this shape can be cut out of one of shape ``other``.

        Rows are compared from the top; ``other`` may have extra rows.
        """
        if len(self) > len(other):
            return False
        return all(mine <= theirs for mine, theirs in zip(self, other))

    def __repr__(self) -> str:
        return f"Shape({list(self)})"


def resize(
    rows: Sequence[Sequence[T]],
    anchor: Anchor,
    shape: Sequence[int],
) -> list[list[T]]:
    """Cut ``shape`` out of ``rows`` starting at ``anchor``.

    The result has exactly ``shape``: rows and cells beyond it are dropped,
    nothing is ever padded.  Raises :class:`AnchorBiggerThanLayout` when the
    anchor itself lies outside the needed rows and :class:`LayoutDoesntFit`
    when too few rows or cells remain after it.
    """
    shape = Shape(shape)
    x, y = anchor
    if y > len(rows):
        raise AnchorBiggerThanLayout(anchor, shape)

    remaining = rows[y:]
    needed = remaining[: shape.row_count()]
    for row in needed:
        if x > len(row):
            raise AnchorBiggerThanLayout(anchor, shape)

    if len(remaining) < shape.row_count():
        raise LayoutDoesntFit(anchor, shape)

    out: list[list[T]] = []
    for i, (row, length) in enumerate(zip(needed, shape)):
        cells = row[x:]
        if len(cells) < length:
            raise LayoutDoesntFit(anchor, shape, row=y + i)
        out.append(list(cells[:length]))
    return out


class Grid(Generic[T]):
    """Ragged rows of cells with a whitespace-separated text form per row.

    Subclasses pick the cell type by overriding :meth:`parse_cell` and
    :meth:`format_cell`.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[T]] = ()) -> None:
        self._rows: list[list[T]] = [list(r) for r in rows]

    # --- text form ------------------------------------------------------
    @classmethod
    def parse_cell(cls, token: str) -> T:
        raise NotImplementedError(f"{cls.__name__} has no text form")

    @classmethod
    def format_cell(cls, cell: T) -> str:
        return str(cell)

    @classmethod
    def from_rows(cls: type[G], lines: Iterable[str]) -> G:
        return cls([cls.parse_cell(tok) for tok in line.split()] for line in lines)

    def to_rows(self) -> list[str]:
        return [" ".join(self.format_cell(c) for c in row) for row in self._rows]

    # --- geometry -------------------------------------------------------
    def shape(self) -> Shape:
        return Shape(len(r) for r in self._rows)

    def row_count(self) -> int:
        return len(self._rows)

    def resized(self: G, anchor: Anchor, shape: Sequence[int]) -> G:
        return type(self)(resize(self._rows, anchor, shape))

    # --- access ---------------------------------------------------------
    def rows(self) -> Iterator[list[T]]:
        return iter(self._rows)

    def cells(self) -> Iterator[T]:
        for row in self._rows:
            yield from row

    def enumerate_cells(self) -> Iterator[tuple[Pos, T]]:
        for r, row in enumerate(self._rows):
            for c, cell in enumerate(row):
                yield Pos(r, c), cell

    def contains(self, pos: Pos) -> bool:
        row, col = pos
        return 0 <= row < len(self._rows) and 0 <= col < len(self._rows[row])

    def cell(self, pos: Pos) -> T:
        if not self.contains(pos):
            raise IndexError(f"no cell at {tuple(pos)} in grid of shape {list(self.shape())}")
        return self._rows[pos[0]][pos[1]]

    def set_cell(self, pos: Pos, value: T) -> None:
        if not self.contains(pos):
            raise IndexError(f"no cell at {tuple(pos)} in grid of shape {list(self.shape())}")
        self._rows[pos[0]][pos[1]] = value

    def copy(self: G) -> G:
        return type(self)(self._rows)

    def __getitem__(self, row: int) -> list[T]:
        return self._rows[row]

    def __iter__(self) -> Iterator[list[T]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows!r})"


__all__ = ["Pos", "Anchor", "Shape", "Grid", "resize"]
