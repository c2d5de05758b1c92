"""The resolved layout and its query surface."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping

from .combos import Combos
from .contracts.intermediate import DEFAULT_LANGUAGES, DofIntermediate, Language
from .definitions import Finger, Key, NamedFingering, parse_key
from .errors import InvalidPosition, LayerDoesntExist
from .fingering import Fingering
from .grid import Anchor, Pos, Shape
from .interaction import DescriptiveKey, KeyPos
from .keyboard import FullBoard, ParseKeyboard, PhysicalKey, PhysicalKeyboard
from .layer import Layer


@dataclass
class Dof:
    """A fully validated keyboard layout.

    Build one with :func:`dofkit.pipeline.resolve_layout` (or
    :func:`dofkit.api.parse_dof`); every layer, the fingering and the physical
    board then share the main layer's shape.  ``board`` is either a named
    board or a full board; relative boards are stored in their full form.
    """

    name: str
    board: ParseKeyboard
    physical: PhysicalKeyboard
    layers: dict[str, Layer]
    anchor: Anchor
    fingering: Fingering
    fingering_name: NamedFingering | None = None
    has_generated_shift: bool = False
    combos: Combos = field(default_factory=Combos)
    authors: list[str] | None = None
    year: int | None = None
    description: str | None = None
    languages: list[Language] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    link: str | None = None
    shift_table: Mapping[str, str] | None = field(default=None, compare=False, repr=False)

    # --- layers ---------------------------------------------------------
    @property
    def main_layer(self) -> Layer:
        return self.layers["main"]

    @property
    def shift_layer(self) -> Layer:
        return self.layers["shift"]

    def layer(self, name: str) -> Layer | None:
        return self.layers.get(name)

    def shape(self) -> Shape:
        return self.main_layer.shape()

    # --- queries --------------------------------------------------------
    def keys(self) -> list[DescriptiveKey]:
        """Every cell of every layer with its finger and physical key."""
        return list(self._iter_keys())

    def _iter_keys(self) -> Iterator[DescriptiveKey]:
        for name, layer in self.layers.items():
            for pos, key in layer.enumerate_cells():
                yield DescriptiveKey(
                    output=key,
                    layer=name,
                    pos=pos,
                    finger=self.fingering.cell(pos),
                    physical=self.physical.cell(pos),
                )

    def get(self, key: Key | str) -> list[KeyPos]:
        """All positions, on any layer, whose output is ``key``."""
        if isinstance(key, str):
            key = parse_key(key)
        return [
            KeyPos(name, pos)
            for name, layer in self.layers.items()
            for pos, k in layer.enumerate_cells()
            if k == key
        ]

    def tower(self, pos: Pos | tuple[int, int]) -> list[Key]:
        """Outputs at ``pos`` on every layer, in layer order."""
        pos = Pos(*pos)
        return [layer.cell(pos) for layer in self.layers.values() if layer.contains(pos)]

    def finger(self, pos: Pos | tuple[int, int]) -> Finger | None:
        pos = Pos(*pos)
        return self.fingering.cell(pos) if self.fingering.contains(pos) else None

    def physical_key(self, pos: Pos | tuple[int, int]) -> PhysicalKey | None:
        pos = Pos(*pos)
        return self.physical.cell(pos) if self.physical.contains(pos) else None

    # --- edits ----------------------------------------------------------
    def _layer_or_raise(self, name: str) -> Layer:
        layer = self.layers.get(name)
        if layer is None:
            raise LayerDoesntExist(name)
        return layer

    def swap(self, a: KeyPos | tuple[str, tuple[int, int]], b: KeyPos | tuple[str, tuple[int, int]]) -> None:
        """Exchange the outputs at two layer positions.

        Swapping a cell with itself does nothing.  A generated shift layer
        follows swaps on the main layer; swapping on it directly makes it an
        explicit layer.
        """
        a = KeyPos(a[0], Pos(*a[1]))
        b = KeyPos(b[0], Pos(*b[1]))
        if a == b:
            return

        layer_a = self._layer_or_raise(a.layer)
        layer_b = self._layer_or_raise(b.layer)
        for kp, layer in ((a, layer_a), (b, layer_b)):
            if not layer.contains(kp.pos):
                raise InvalidPosition(kp.pos.row, kp.pos.col)

        key_a = layer_a.cell(a.pos)
        key_b = layer_b.cell(b.pos)
        layer_a.set_cell(a.pos, key_b)
        layer_b.set_cell(b.pos, key_a)

        if not self.has_generated_shift:
            return
        if "shift" in (a.layer, b.layer):
            self.has_generated_shift = False
            return
        shift = self.shift_layer
        for kp in (a, b):
            if kp.layer == "main":
                shift.set_cell(kp.pos, self.main_layer.cell(kp.pos).shifted(self.shift_table))

    # --- serialisation --------------------------------------------------
    def to_intermediate(self) -> DofIntermediate:
        """Document form of this layout, leaving out everything derivable."""
        layers = {
            name: layer.copy()
            for name, layer in self.layers.items()
            if not (self.has_generated_shift and name == "shift")
        }
        if self.fingering_name is not None:
            fingering: Fingering | NamedFingering = self.fingering_name
        else:
            fingering = self.fingering.copy()
        board = self.board
        if isinstance(board, FullBoard):
            board = board.keyboard.to_board()

        return DofIntermediate(
            name=self.name,
            authors=self.authors,
            board=board,
            year=self.year,
            description=self.description,
            languages=None if self.languages == list(DEFAULT_LANGUAGES) else list(self.languages),
            link=self.link,
            layers=layers,
            anchor=None if self.anchor == self.board.anchor() else self.anchor,
            fingering=fingering,
            combos=self.combos.to_parse_combos(self.layers),
        )


__all__ = ["Dof"]
