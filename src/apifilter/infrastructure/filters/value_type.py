"""Value type filter.

Caller type names ("number") are mapped onto the stored value types
("float", "double", "int", "int64") through an explicit alias table.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from apifilter.domain.exceptions import FilterDefinitionError
from apifilter.domain.model.value_types import VALUE_TYPE_ALIASES, resolve_value_types
from apifilter.infrastructure.filters._fields import read_field

if TYPE_CHECKING:
    from apifilter.infrastructure.filters.types import Item, ItemFilter


def _stored_value_type(item: Item) -> object | None:
    value_type = read_field(item, "value_type")
    # dump records carry {"Category": ..., "Name": ...}
    if isinstance(value_type, Mapping):
        return value_type.get("Name")
    return value_type


def has_value_type(
    type_name: str | None,
    *,
    aliases: Mapping[str, frozenset[str]] = VALUE_TYPE_ALIASES,
) -> ItemFilter:
    """Create filter that matches the item value type.

    Args:
        type_name: Type name, aliases allowed ("number" covers "float",
            "double", "int", "int64"). None matches items without a value type.
        aliases: Alias table. Unknown names compare as-is.

    Returns:
        Filter that returns True for items of a matching value type.

    Raises:
        FilterDefinitionError: If type_name is neither None nor a string.
    """
    if type_name is None:

        def _untyped(item: Item) -> bool:
            stored = _stored_value_type(item)
            return stored is None or stored == ""

        return _untyped

    if not isinstance(type_name, str):
        raise FilterDefinitionError("has_value_type", f"expected string or None, got {type_name!r}")

    accepted = resolve_value_types(type_name, aliases)

    def _filter(item: Item) -> bool:
        stored = _stored_value_type(item)
        return isinstance(stored, str) and stored in accepted

    return _filter
