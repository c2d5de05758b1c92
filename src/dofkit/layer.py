"""Layers: grids of key outputs."""
from __future__ import annotations

from typing import Iterator, Mapping

from .definitions import Key, LayerKey, parse_key
from .grid import Grid


class Layer(Grid[Key]):
    @classmethod
    def parse_cell(cls, token: str) -> Key:
        return parse_key(token)

    def layer_references(self) -> Iterator[str]:
        """Names of the layers this layer switches to, in row-major order."""
        for key in self.cells():
            if isinstance(key, LayerKey):
                yield key.name


def generate_shift_layer(main: Layer, table: Mapping[str, str] | None = None) -> Layer:
    """Shifted counterpart of ``main``, cell by cell."""
    return Layer([key.shifted(table) for key in row] for row in main.rows())


__all__ = ["Layer", "generate_shift_layer"]
