"""Typed failures raised while parsing and resolving layout definitions.

Every error derives from :class:`DofError`, itself a ``ValueError`` so that
pydantic field validators can raise them directly and wrap them in a
``ValidationError``.  Each subclass keeps the context it was raised with as
attributes, which the CLI and the tests inspect instead of parsing messages.
"""
from __future__ import annotations

from typing import Any, Sequence


class DofError(ValueError):
    """Base class of every dofkit failure."""


# ---------------------------------------------------------------------------
# Structural: the layer map itself is inconsistent
# ---------------------------------------------------------------------------

class StructuralError(DofError):
    pass


class NoMainLayer(StructuralError):
    def __init__(self) -> None:
        super().__init__("layers must contain a layer called 'main'")


class LayersNotFound(StructuralError):
    def __init__(self, names: Sequence[str]) -> None:
        self.names = list(names)
        joined = ", ".join(repr(n) for n in self.names)
        super().__init__(f"main layer references layers that do not exist: {joined}")


class IncompatibleLayerShapes(StructuralError):
    def __init__(self, names: Sequence[str]) -> None:
        self.names = list(names)
        joined = ", ".join(repr(n) for n in self.names)
        super().__init__(f"layers do not have the same shape as 'main': {joined}")


# ---------------------------------------------------------------------------
# Geometric: shapes, anchors and boards do not line up
# ---------------------------------------------------------------------------

class GeometryError(DofError):
    pass


class IncompatibleFingeringShape(GeometryError):
    def __init__(self, expected: Any, found: Any) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"explicit fingering has shape {list(found)} but the main layer has shape {list(expected)}"
        )


class AnchorBiggerThanLayout(GeometryError):
    def __init__(self, anchor: Any, shape: Any) -> None:
        self.anchor = anchor
        self.shape = shape
        super().__init__(
            f"anchor (x={anchor[0]}, y={anchor[1]}) lies outside a layout of shape {list(shape)}"
        )


class LayoutDoesntFit(GeometryError):
    def __init__(self, anchor: Any, shape: Any, row: int | None = None) -> None:
        self.anchor = anchor
        self.shape = shape
        self.row = row
        where = "" if row is None else f" (row {row} is too short)"
        super().__init__(
            f"a layout of shape {list(shape)} does not fit at anchor "
            f"(x={anchor[0]}, y={anchor[1]}){where}"
        )


class UnknownKeyboardType(GeometryError):
    def __init__(self, board: Any) -> None:
        self.board = board
        super().__init__(f"no physical geometry is known for keyboard type '{board}'")


class FingeringForCustomKeyboard(GeometryError):
    def __init__(self) -> None:
        super().__init__(
            "a named fingering needs a named keyboard; provide the fingering explicitly"
        )


class UnsupportedKeyboardFingeringCombo(GeometryError):
    def __init__(self, board: Any, fingering: Any) -> None:
        self.board = board
        self.fingering = fingering
        super().__init__(
            f"keyboard '{board}' has no '{fingering}' fingering; provide the fingering explicitly"
        )


# ---------------------------------------------------------------------------
# Parsing: a single token could not be read
# ---------------------------------------------------------------------------

class ParseError(DofError):
    pass


class EmptyPhysKey(ParseError):
    def __init__(self) -> None:
        super().__init__("physical key is empty; expected 'x y [width [height]]'")


class ValueAmountError(ParseError):
    def __init__(self, amount: int, text: str) -> None:
        self.amount = amount
        self.text = text
        super().__init__(
            f"physical key '{text}' has {amount} values; expected 2, 3 or 4"
        )


class FloatParseError(ParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"'{text}' is not a number")


class FingerParseError(ParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"'{text}' is not a finger; use LP LR LM LI LT RT RI RM RR RP or 0-9"
        )


class EmptyComboKey(ParseError):
    def __init__(self) -> None:
        super().__init__("combo contains an empty key")


class UnknownBoardFormat(ParseError):
    def __init__(self, value: Any, reasons: Sequence[str]) -> None:
        self.value = value
        self.reasons = list(reasons)
        details = "; ".join(self.reasons)
        super().__init__(
            "board must be a keyboard name, a list of relative rows or a list of "
            f"physical key rows ({details})"
        )


# ---------------------------------------------------------------------------
# Combos
# ---------------------------------------------------------------------------

class ComboError(DofError):
    pass


class UnknownComboLayer(ComboError):
    def __init__(self, layer: str, combo: str) -> None:
        self.layer = layer
        self.combo = combo
        super().__init__(f"combo '{combo}' is defined on layer '{layer}' which does not exist")


class InvalidKeyIndex(ComboError):
    def __init__(self, combo: str, key: str, nth: int) -> None:
        self.combo = combo
        self.key = key
        self.nth = nth
        super().__init__(
            f"combo '{combo}' uses occurrence {nth + 1} of key '{key}' which the layer does not have"
        )


# ---------------------------------------------------------------------------
# Interaction with a resolved layout
# ---------------------------------------------------------------------------

class InteractionError(DofError):
    pass


class LayerDoesntExist(InteractionError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"layer '{name}' does not exist")


class InvalidPosition(InteractionError):
    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"position (row={row}, col={col}) is outside the layout")


__all__ = [
    "DofError",
    "StructuralError",
    "NoMainLayer",
    "LayersNotFound",
    "IncompatibleLayerShapes",
    "GeometryError",
    "IncompatibleFingeringShape",
    "AnchorBiggerThanLayout",
    "LayoutDoesntFit",
    "UnknownKeyboardType",
    "FingeringForCustomKeyboard",
    "UnsupportedKeyboardFingeringCombo",
    "ParseError",
    "EmptyPhysKey",
    "ValueAmountError",
    "FloatParseError",
    "FingerParseError",
    "EmptyComboKey",
    "UnknownBoardFormat",
    "ComboError",
    "UnknownComboLayer",
    "InvalidKeyIndex",
    "InteractionError",
    "LayerDoesntExist",
    "InvalidPosition",
]
