"""Float helpers for physical key geometry."""
from __future__ import annotations

import numpy as np

# Widths and heights this close to 1.0 count as one key unit.
UNIT_EPSILON = 1e-6


def is_unit(value: float) -> bool:
    return bool(np.isclose(value, 1.0, rtol=0.0, atol=UNIT_EPSILON))


def format_float(value: float) -> str:
    """Shortest text form that reads back as ``value`` (``1.0`` -> ``1``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


__all__ = ["UNIT_EPSILON", "is_unit", "format_float"]
