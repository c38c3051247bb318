"""
Deep merge of configuration trees.

Values are classified into one of three kinds before merging:

- mappings are unioned key by key, recursively
- sequences are concatenated, earlier items first
- everything else is a scalar and the later value wins

A kind mismatch between the two sides is treated like scalars.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Optional


class ValueKind(Enum):
    """Merge-relevant kind of a configuration value."""
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def value_kind(value: Any) -> ValueKind:
    """Classify a configuration value."""
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    # Strings are sequences to Python but scalars to a configuration tree
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def _copy_tree(value: Any) -> Any:
    """Copy containers, keep leaves (plugins, regexes, callables) by reference."""
    kind = value_kind(value)
    if kind is ValueKind.MAPPING:
        return {key: _copy_tree(item) for key, item in value.items()}
    if kind is ValueKind.SEQUENCE:
        return [_copy_tree(item) for item in value]
    return value


def _merge_values(base: Any, override: Any) -> Any:
    base_kind = value_kind(base)
    override_kind = value_kind(override)

    if base_kind is ValueKind.MAPPING and override_kind is ValueKind.MAPPING:
        merged = _copy_tree(base)
        for key, value in override.items():
            if key in merged:
                merged[key] = _merge_values(merged[key], value)
            else:
                merged[key] = _copy_tree(value)
        return merged

    if base_kind is ValueKind.SEQUENCE and override_kind is ValueKind.SEQUENCE:
        return _copy_tree(base) + _copy_tree(override)

    return _copy_tree(override)


def deep_merge(base: Optional[Dict[str, Any]], *fragments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Merge configuration fragments into a new tree.

    Args:
        base: Tree to start from (not modified); ``None`` means empty
        *fragments: Partial trees applied left to right; ``None`` is skipped

    Returns:
        A new merged dictionary
    """
    merged = _copy_tree(base) if base is not None else {}
    for fragment in fragments:
        if fragment is None:
            continue
        merged = _merge_values(merged, fragment)
    return merged
