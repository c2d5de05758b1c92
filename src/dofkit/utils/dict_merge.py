from copy import deepcopy
from typing import Any, Mapping


def deep_update(base: Mapping[str, Any], override: Mapping[str, Any] | None) -> dict:
    """Merge ``override`` into a copy of ``base``.

    Mappings present on both sides are merged key by key; anything else in
    ``override`` replaces the value from ``base``.  Neither argument is
    modified.
    """
    merged = deepcopy(dict(base))
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_update(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged
