"""Value type aliases.

Callers name types the way the scripting language does ("number"),
the dump stores the concrete value type ("float", "int64", ...).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

VALUE_TYPE_ALIASES: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "number": frozenset({"float", "double", "int", "int64"}),
        "string": frozenset({"string"}),
        "boolean": frozenset({"bool"}),
    }
)


def resolve_value_types(
    type_name: str,
    aliases: Mapping[str, frozenset[str]] = VALUE_TYPE_ALIASES,
) -> frozenset[str]:
    """Map a caller type name onto the stored value types it covers.

    Args:
        type_name: Type as the caller names it
        aliases: Alias table

    Returns:
        Stored value type names. Unknown names map to themselves.
    """
    return aliases.get(type_name, frozenset({type_name}))
