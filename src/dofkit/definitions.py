"""Value types shared by layers, fingerings and boards.

Keys, fingers, keyboard types and fingering names all have a short text form
used in layout documents.  Parsing is lenient where a document may name
something dofkit does not know (custom keyboards and fingerings) and strict
where a typo would silently change meaning (fingers).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Mapping

from .errors import FingerParseError
from .grid import Anchor


class Finger(Enum):
    """The ten fingers, left pinky to right pinky."""

    LP = 0
    LR = 1
    LM = 2
    LI = 3
    LT = 4
    RT = 5
    RI = 6
    RM = 7
    RR = 8
    RP = 9

    @classmethod
    def parse(cls, text: str) -> "Finger":
        token = text.strip()
        if token in cls.__members__:
            return cls[token]
        if len(token) == 1 and token in "0123456789":
            return cls(int(token))
        raise FingerParseError(text)

    def is_left_hand(self) -> bool:
        return self.value < 5

    def is_right_hand(self) -> bool:
        return not self.is_left_hand()

    def is_thumb(self) -> bool:
        return self in (Finger.LT, Finger.RT)

    def __str__(self) -> str:
        return self.name


class _Named:
    """Case-insensitive name with a fixed set of known values.

    Unknown names are kept as custom values rather than rejected.
    """

    __slots__ = ("name",)

    KNOWN: ClassVar[frozenset[str]] = frozenset()
    ALIASES: ClassVar[Mapping[str, str]] = {}

    def __init__(self, name: str) -> None:
        self.name = name

    @classmethod
    def parse(cls, text: str):
        lower = text.strip().lower()
        return cls(cls.ALIASES.get(lower, lower))

    @property
    def is_custom(self) -> bool:
        return self.name not in self.KNOWN

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class NamedFingering(_Named):
    """A fingering referred to by name: ``traditional``, ``angle`` or custom."""

    __slots__ = ()

    KNOWN = frozenset({"traditional", "angle"})
    ALIASES = {"standard": "traditional"}

    TRADITIONAL: ClassVar["NamedFingering"]
    ANGLE: ClassVar["NamedFingering"]


NamedFingering.TRADITIONAL = NamedFingering("traditional")
NamedFingering.ANGLE = NamedFingering("angle")


class KeyboardType(_Named):
    """A keyboard archetype: ``ansi``, ``iso``, ``ortho``, ``colstag`` or custom."""

    __slots__ = ()

    KNOWN = frozenset({"ansi", "iso", "ortho", "colstag"})

    ANSI: ClassVar["KeyboardType"]
    ISO: ClassVar["KeyboardType"]
    ORTHO: ClassVar["KeyboardType"]
    COLSTAG: ClassVar["KeyboardType"]

    def anchor(self) -> Anchor:
        """Default anchor: row-staggered boards skip the number row and the leftmost column."""
        if self.name in ("ansi", "iso"):
            return Anchor(1, 1)
        return Anchor(0, 0)


KeyboardType.ANSI = KeyboardType("ansi")
KeyboardType.ISO = KeyboardType("iso")
KeyboardType.ORTHO = KeyboardType("ortho")
KeyboardType.COLSTAG = KeyboardType("colstag")


class SpecialKey(Enum):
    """Non-printing keys; the value is the canonical short token."""

    ESC = "esc"
    REPEAT = "rpt"
    SPACE = "spc"
    TAB = "tab"
    ENTER = "ret"
    SHIFT = "sft"
    CAPS = "cps"
    CTRL = "ctl"
    ALT = "alt"
    META = "mt"
    MENU = "mn"
    FN = "fn"
    BACKSPACE = "bsp"
    DEL = "del"


_SPECIAL_ALIASES: dict[str, SpecialKey] = {
    alias: kind
    for kind, aliases in {
        SpecialKey.ESC: ("esc",),
        SpecialKey.REPEAT: ("repeat", "rpt"),
        SpecialKey.SPACE: ("space", "spc"),
        SpecialKey.TAB: ("tab", "tb"),
        SpecialKey.ENTER: ("enter", "return", "ret", "ent", "rt"),
        SpecialKey.SHIFT: ("shift", "shft", "sft", "st"),
        SpecialKey.CAPS: ("caps", "cps", "cp"),
        SpecialKey.CTRL: ("ctrl", "ctl", "ct"),
        SpecialKey.ALT: ("alt", "lalt", "ralt", "lt"),
        SpecialKey.META: ("meta", "mta", "met", "mt", "super", "sup", "sp"),
        SpecialKey.MENU: ("menu", "mnu", "mn"),
        SpecialKey.FN: ("fn",),
        SpecialKey.BACKSPACE: ("backspace", "bksp", "bcsp", "bsp"),
        SpecialKey.DEL: ("del",),
    }.items()
    for alias in aliases
}

# US QWERTY number and symbol row.
DEFAULT_SHIFT_TABLE: Mapping[str, str] = {
    "`": "~",
    "1": "!",
    "2": "@",
    "3": "#",
    "4": "$",
    "5": "%",
    "6": "^",
    "7": "&",
    "8": "*",
    "9": "(",
    "0": ")",
    "-": "_",
    "=": "+",
    "[": "{",
    "]": "}",
    "\\": "|",
    ";": ":",
    "'": '"',
    ",": "<",
    "<": ">",
    ".": ">",
    "/": "?",
}


class Key:
    """Output of a single key position on a layer.

    Use :meth:`Key.parse` to read the document token form; ``str(key)`` gives
    it back.
    """

    __slots__ = ()

    @staticmethod
    def parse(text: str) -> "Key":
        return parse_key(text)

    def shifted(self, table: Mapping[str, str] | None = None) -> "Key":
        return self


@dataclass(frozen=True)
class Empty(Key):
    def __str__(self) -> str:
        return "~"


@dataclass(frozen=True)
class Transparent(Key):
    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class Char(Key):
    char: str

    def shifted(self, table: Mapping[str, str] | None = None) -> Key:
        table = DEFAULT_SHIFT_TABLE if table is None else table
        if self.char in table:
            return Char(table[self.char])
        upper = self.char.upper()
        if len(upper) == 1:
            return Char(upper)
        return Word(upper)

    def __str__(self) -> str:
        if self.char in ("~", "*"):
            return "\\" + self.char
        return self.char


@dataclass(frozen=True)
class Word(Key):
    word: str

    def __str__(self) -> str:
        if parse_key(self.word) == self:
            return self.word
        return "#" + self.word


@dataclass(frozen=True)
class Special(Key):
    kind: SpecialKey

    def shifted(self, table: Mapping[str, str] | None = None) -> Key:
        return Transparent()

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class LayerKey(Key):
    """Switches to the layer called ``name``."""

    name: str

    def __str__(self) -> str:
        return "@" + self.name


_SINGLE_CHAR_KEYS: dict[str, Key] = {
    "~": Empty(),
    "*": Transparent(),
    " ": Special(SpecialKey.SPACE),
    "\n": Special(SpecialKey.ENTER),
    "\t": Special(SpecialKey.TAB),
}


def parse_key(text: str) -> Key:
    if not text:
        return Empty()
    if len(text) == 1:
        return _SINGLE_CHAR_KEYS.get(text, None) or Char(text)

    lower = text.lower()
    if lower == "\\~":
        return Char("~")
    if lower == "\\*":
        return Char("*")
    special = _SPECIAL_ALIASES.get(lower)
    if special is not None:
        return Special(special)
    if text.startswith("@"):
        return LayerKey(text[1:])
    if text.startswith(("#", "\\#", "\\@")):
        return Word(text[1:])
    return Word(text)


__all__ = [
    "Finger",
    "NamedFingering",
    "KeyboardType",
    "SpecialKey",
    "DEFAULT_SHIFT_TABLE",
    "Key",
    "Empty",
    "Transparent",
    "Char",
    "Word",
    "Special",
    "LayerKey",
    "parse_key",
]
