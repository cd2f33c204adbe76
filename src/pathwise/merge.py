"""Structural merge of partial param updates.

Used for both path params and search params. Rules, per key over the
union of both objects:

- both values are mappings: merge recursively
- the update holds a list: the list replaces the base value
- the update holds ``UNSET``: the key is removed
- the update omits the key: the base value is kept

The merge never mutates its inputs; nested values in the result are
copies.
"""

import copy
from collections.abc import Mapping
from typing import Any

from pathwise._internal.types import UNSET


def _clone(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _clone(v) for k, v in value.items() if v is not UNSET}
    return copy.deepcopy(value)


def merge_params(
    base: Mapping[str, Any] | None,
    update: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Merge *update* into a copy of *base*.

    Example::

        merge_params({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}, "a": UNSET})
        # {"b": {"c": 2, "d": 3}}
    """
    merged: dict[str, Any] = {
        k: _clone(v) for k, v in (base or {}).items() if v is not UNSET
    }

    for key, value in (update or {}).items():
        if value is UNSET:
            merged.pop(key, None)
            continue
        existing = merged.get(key, UNSET)
        if isinstance(value, Mapping) and isinstance(existing, Mapping):
            merged[key] = merge_params(existing, value)
        else:
            merged[key] = _clone(value)

    return merged
