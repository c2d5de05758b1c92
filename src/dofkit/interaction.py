"""Position types and per-key descriptions used when querying a resolved layout."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple

from .definitions import Char, Empty, Finger, Key, LayerKey, Special, Transparent, Word
from .grid import Pos
from .keyboard import PhysicalKey


class KeyPos(NamedTuple):
    """A cell of a named layer."""

    layer: str
    pos: Pos

    @classmethod
    def of(cls, layer: str, row: int, col: int) -> "KeyPos":
        return cls(layer, Pos(row, col))


@dataclass(frozen=True)
class DescriptiveKey:
    """One layer cell with everything known about where it sits."""

    output: Key
    layer: str
    pos: Pos
    finger: Finger
    physical: PhysicalKey

    @property
    def keypos(self) -> KeyPos:
        return KeyPos(self.layer, self.pos)

    @property
    def row(self) -> int:
        return self.pos.row

    @property
    def col(self) -> int:
        return self.pos.col

    def is_on_finger(self, finger: Finger) -> bool:
        return self.finger == finger

    def is_on_fingers(self, fingers: Iterable[Finger]) -> bool:
        return self.finger in set(fingers)

    def is_on_left_hand(self) -> bool:
        return self.finger.is_left_hand()

    def is_on_right_hand(self) -> bool:
        return self.finger.is_right_hand()

    def is_on_layer(self, layer: str) -> bool:
        return self.layer == layer

    def is_char_key(self) -> bool:
        return isinstance(self.output, Char)

    def is_word_key(self) -> bool:
        return isinstance(self.output, Word)

    def is_empty_key(self) -> bool:
        return isinstance(self.output, Empty)

    def is_transparent_key(self) -> bool:
        return isinstance(self.output, Transparent)

    def is_layer_key(self) -> bool:
        return isinstance(self.output, LayerKey)

    def is_special_key(self) -> bool:
        return isinstance(self.output, Special)

    def char_output(self) -> str | None:
        return self.output.char if isinstance(self.output, Char) else None

    def word_output(self) -> str | None:
        return self.output.word if isinstance(self.output, Word) else None

    def layer_output(self) -> str | None:
        return self.output.name if isinstance(self.output, LayerKey) else None


__all__ = ["Pos", "KeyPos", "DescriptiveKey"]
