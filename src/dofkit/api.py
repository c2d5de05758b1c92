"""Reading, resolving and writing layout documents.

``.dof`` and ``.json`` files are JSON; ``.yaml`` and ``.yml`` files are YAML.
Documents that fail field validation raise ``pydantic.ValidationError``;
documents that parse but do not resolve raise a :class:`dofkit.errors.DofError`.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .config.schema import DofkitConfig
from .contracts.intermediate import DofIntermediate
from .dof import Dof
from .pipeline import resolve_layout
from .utils.logging import logger

YAML_SUFFIXES = (".yaml", ".yml")


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def read_document(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) if _is_yaml(p) else json.load(f)
    if not isinstance(data, dict):
        raise TypeError(f"layout document at {path} must be a mapping")
    return data


def parse_dof(data: Mapping[str, Any], config: Optional[DofkitConfig] = None) -> Dof:
    """Validate a layout document and resolve it."""
    inter = DofIntermediate.model_validate(data)
    shift_table = config.shift_table() if config is not None else None
    return resolve_layout(inter, shift_table=shift_table)


def load_dof(path: str | Path, config: Optional[DofkitConfig] = None) -> Dof:
    logger.info("loading layout from %s", path)
    return parse_dof(read_document(path), config=config)


def dump_dof(dof: Dof) -> Dict[str, Any]:
    """Document form of ``dof``, without anything the pipeline would derive."""
    return dof.to_intermediate().to_document()


def save_dof(dof: Dof, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    doc = dump_dof(dof)
    with p.open("w", encoding="utf-8") as f:
        if _is_yaml(p):
            yaml.safe_dump(doc, f, allow_unicode=True, sort_keys=False)
        else:
            json.dump(doc, f, ensure_ascii=False, indent=2)
    logger.info("saved layout %r to %s", dof.name, p)
    return p


__all__ = ["read_document", "parse_dof", "load_dof", "dump_dof", "save_dof"]
