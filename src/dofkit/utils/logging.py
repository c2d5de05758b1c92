"""Package logger for dofkit.

Every dofkit module logs through the single ``dofkit`` logger defined here.
It is silent by default (a ``NullHandler`` is installed); applications either
call :func:`configure_logging` or configure the standard ``logging`` tree
themselves, see :mod:`dofkit.logging`.
"""

import logging


logger = logging.getLogger("dofkit")
logger.addHandler(logging.NullHandler())


def configure_logging(enabled: bool = True, level: int = logging.INFO) -> None:
    """Attach or detach a console handler on the ``dofkit`` logger.

    Parameters
    ----------
    enabled:
        Install a ``StreamHandler`` when ``True``; silence the logger otherwise.
    level:
        Level for the handler.  Pipeline gates report at ``DEBUG``.
    """

    # Idempotent: repeated calls never stack handlers.
    logger.handlers.clear()

    if enabled:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)


__all__ = ["logger", "configure_logging"]
