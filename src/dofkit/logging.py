from __future__ import annotations

import logging
import os
from typing import Optional

from .config.schema import DofkitConfig

LEVEL_ENV = "DOFKIT_LOG_LEVEL"

_LEVEL_MAP = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _normalize(level: Optional[str]) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().lower(), logging.WARNING)


def level_from_cfg(cfg: Optional[DofkitConfig]) -> int:
    """Logging level from ``$DOFKIT_LOG_LEVEL``, else from ``cfg``."""
    env = os.getenv(LEVEL_ENV)
    if env:
        return _normalize(env)
    return _normalize(cfg.logging.level if cfg is not None else None)


def init_logging(level: int | str | None = None) -> None:
    """
    Set up the root and ``dofkit`` loggers for an application.
    Safe to call repeatedly: the level is updated, handlers are not duplicated.
    """
    lvl = _normalize(level) if isinstance(level, str) or level is None else int(level)

    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    datefmt = "%H:%M:%S"

    root = logging.getLogger()
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        root.addHandler(h)
    root.setLevel(lvl)

    logging.getLogger("dofkit").setLevel(lvl)


def init_logging_from_cfg(cfg: Optional[DofkitConfig]) -> None:
    init_logging(level_from_cfg(cfg))
