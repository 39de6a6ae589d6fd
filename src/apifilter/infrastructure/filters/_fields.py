"""Tolerant field access over members and raw dump records."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# snake_case attribute -> API dump key
DUMP_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "name": "Name",
        "member_type": "MemberType",
        "tags": "Tags",
        "security": "Security",
        "value_type": "ValueType",
        "deprecated": "Deprecated",
        "read_only": "ReadOnly",
        "replicated": "Replicated",
        "scriptable": "Scriptable",
        "yields": "Yields",
        "thread_safe": "ThreadSafe",
        "readable": "Readable",
        "writable": "Writable",
        "service": "Service",
    }
)


def read_field(item: object, field: str) -> object | None:
    """Read a field from a member or a dump record.

    Args:
        item: Member-like object or mapping with dump keys.
        field: snake_case field name (key of DUMP_KEYS).

    Returns:
        Field value, None if the item does not carry it.
    """
    if isinstance(item, Mapping):
        return item.get(DUMP_KEYS[field])
    return getattr(item, field, None)
