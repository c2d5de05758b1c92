"""Configuration loader."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from dofkit.utils.dict_merge import deep_update
from .schema import DofkitConfig

__all__ = ["CONFIG_ENV", "load_config"]

CONFIG_ENV = "DOFKIT_CONFIG"


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise TypeError(f"Top-level YAML at {path} must be a mapping")
        return data


def load_config(
    path: str | Path | None = None,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> DofkitConfig:
    """Load and validate dofkit configuration.

    ``path`` defaults to the file named by ``$DOFKIT_CONFIG``; a missing file
    means built-in defaults.  ``overrides`` is merged on top of the file.
    """

    if path is None:
        path = os.getenv(CONFIG_ENV)
    cfg: Dict[str, Any] = _read_yaml(path) if path else {}
    if overrides:
        cfg = deep_update(cfg, overrides)
    return DofkitConfig.model_validate(cfg)
