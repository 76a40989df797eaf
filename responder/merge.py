"""
Recursive metadata merge.

Rules, applied source by source from left to right:
- keys present in only one source are copied
- two mappings under the same key are merged with these same rules
- two lists (or tuples) under the same key are concatenated, earlier first
- any other collision, scalar or mixed, takes the later value
"""

from __future__ import annotations

from typing import Any, Dict, Mapping


def merge_recursive(*sources: Mapping[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for source in sources:
        for key, value in source.items():
            if key in merged:
                merged[key] = _merge_values(merged[key], value)
            else:
                merged[key] = _copy(value)
    return merged


def _merge_values(current: Any, incoming: Any) -> Any:
    if isinstance(current, Mapping) and isinstance(incoming, Mapping):
        return merge_recursive(current, incoming)
    if isinstance(current, (list, tuple)) and isinstance(incoming, (list, tuple)):
        return [*current, *map(_copy, incoming)]
    return _copy(incoming)


def _copy(value: Any) -> Any:
    # Nested containers are rebuilt so the inputs never alias the result.
    if isinstance(value, Mapping):
        return merge_recursive(value)
    if isinstance(value, (list, tuple)):
        return [_copy(v) for v in value]
    return value
