"""Document contracts exposed by dofkit."""

from .intermediate import DEFAULT_LANGUAGES, DofIntermediate, Language

__all__ = [
    "DofIntermediate",
    "Language",
    "DEFAULT_LANGUAGES",
]
