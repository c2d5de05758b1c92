"""dofkit top-level API.

External users can simply ``from dofkit import load_dof``.
"""

from .api import dump_dof, load_dof, parse_dof, save_dof
from .dof import Dof
from .errors import DofError
from .pipeline import resolve_layout

__all__ = ["Dof", "DofError", "dump_dof", "load_dof", "parse_dof", "resolve_layout", "save_dof"]
