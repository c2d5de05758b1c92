"""Key combos: several keys pressed together producing one output.

In a document a combo is written per layer as ``"<keys>": "<output>"`` where
``<keys>`` is a space separated list of key tokens.  A token may end in
``-<n>`` to pick the n-th occurrence (1-based) of that key on the layer, in
row-major order.  Resolving a combo turns each token into the position of
that occurrence.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from .definitions import Key, parse_key
from .errors import EmptyComboKey, InvalidKeyIndex, UnknownComboLayer
from .grid import Pos
from .layer import Layer
from .utils.logging import logger


@dataclass(frozen=True)
class ComboKey:
    """A key token in a combo and which of its occurrences it means (0-based)."""

    key: Key
    nth: int = 0

    @classmethod
    def parse(cls, text: str) -> "ComboKey":
        if not text:
            raise EmptyComboKey()
        if len(text) <= 2:
            return cls(parse_key(text))

        name, sep, suffix = text.rpartition("-")
        # A suffix that is not a positive number stays part of the key name,
        # so "a-b" is the word "a-b" and "---" the word "---".
        if sep and suffix.isascii() and suffix.isdigit() and int(suffix) > 0:
            return cls(parse_key(name), int(suffix) - 1)
        return cls(parse_key(text))

    def __str__(self) -> str:
        text = str(self.key)
        if self.nth == 0 and ComboKey.parse(text) == self:
            return text
        return f"{text}-{self.nth + 1}"


def parse_combo(text: str) -> tuple[ComboKey, ...]:
    tokens = text.split()
    if not tokens:
        raise EmptyComboKey()
    return tuple(ComboKey.parse(tok) for tok in tokens)


def combo_to_str(combo: Iterable[ComboKey]) -> str:
    return " ".join(str(ck) for ck in combo)


@dataclass
class ParseCombos:
    """Combos as written: per layer, key tokens mapped to an output key."""

    by_layer: dict[str, dict[tuple[ComboKey, ...], Key]] = field(default_factory=dict)

    @classmethod
    def from_value(cls, value: Mapping[str, Mapping[str, str]]) -> "ParseCombos":
        return cls({
            layer: {parse_combo(combo): parse_key(output) for combo, output in combos.items()}
            for layer, combos in value.items()
        })

    def to_value(self) -> dict[str, dict[str, str]]:
        return {
            layer: {combo_to_str(combo): str(output) for combo, output in combos.items()}
            for layer, combos in self.by_layer.items()
        }

    def resolve(self, layers: Mapping[str, Layer]) -> "Combos":
        return resolve_combos(self, layers)


@dataclass
class Combos:
    """Resolved combos: per layer, a list of ``(positions, output)`` pairs."""

    by_layer: dict[str, list[tuple[tuple[Pos, ...], Key]]] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.by_layer)

    def layer(self, name: str) -> list[tuple[tuple[Pos, ...], Key]]:
        return self.by_layer.get(name, [])

    def to_parse_combos(self, layers: Mapping[str, Layer]) -> ParseCombos | None:
        """Symbolic form of these combos, or ``None`` when there are none."""
        if not self.by_layer:
            return None
        out: dict[str, dict[tuple[ComboKey, ...], Key]] = {}
        for name, combos in self.by_layer.items():
            layer = layers[name]
            out[name] = {
                tuple(_occurrence(layer, pos) for pos in positions): output
                for positions, output in combos
            }
        return ParseCombos(out)


def _occurrence(layer: Layer, pos: Pos) -> ComboKey:
    key = layer.cell(pos)
    count = sum(1 for p, k in layer.enumerate_cells() if k == key and p <= pos)
    return ComboKey(key, count - 1)


def _locate(
    cells: Sequence[tuple[Pos, Key]],
    combo: tuple[ComboKey, ...],
    ck: ComboKey,
) -> Pos:
    matches = (pos for pos, key in cells if key == ck.key)
    for i, pos in enumerate(matches):
        if i == ck.nth:
            return pos
    raise InvalidKeyIndex(combo_to_str(combo), str(ck.key), ck.nth)


def resolve_combos(parse_combos: ParseCombos, layers: Mapping[str, Layer]) -> Combos:
    """Resolve every combo to layer positions; any failure rejects them all."""
    resolved: dict[str, list[tuple[tuple[Pos, ...], Key]]] = {}
    for name, combos in parse_combos.by_layer.items():
        layer = layers.get(name)
        if layer is None:
            first = next(iter(combos), ())
            raise UnknownComboLayer(name, combo_to_str(first))
        cells = list(layer.enumerate_cells())
        resolved[name] = [
            (tuple(_locate(cells, combo, ck) for ck in combo), output)
            for combo, output in combos.items()
        ]
        logger.debug("resolved %d combos on layer %s", len(resolved[name]), name)
    return Combos(resolved)


__all__ = [
    "ComboKey",
    "ParseCombos",
    "Combos",
    "parse_combo",
    "combo_to_str",
    "resolve_combos",
]
