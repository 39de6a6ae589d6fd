"""Member identity filters: tags, name, member type."""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from apifilter.domain.exceptions import FilterDefinitionError
from apifilter.infrastructure.filters._fields import read_field

if TYPE_CHECKING:
    from apifilter.infrastructure.filters.types import Item, ItemFilter

# Collections of characters or bytes, never tag sets
_TEXT_TYPES = (str, bytes, bytearray)


def _require_str(filter_name: str, value: object) -> str:
    if not isinstance(value, str):
        raise FilterDefinitionError(filter_name, f"expected string, got {value!r}")
    return value


def has_tags(*tags: str) -> ItemFilter:
    """Create filter that requires every given tag.

    Args:
        *tags: Required tags (AND). No tags = any item with a tag collection.

    Returns:
        Filter that returns True if the item carries all tags.
        Returns False for items without a tag collection.

    Raises:
        FilterDefinitionError: If a tag is not a string.
    """
    required = frozenset(_require_str("has_tags", tag) for tag in tags)

    def _filter(item: Item) -> bool:
        item_tags = read_field(item, "tags")
        if isinstance(item_tags, _TEXT_TYPES) or not isinstance(item_tags, Collection):
            return False
        return all(tag in item_tags for tag in required)

    return _filter


def has_name(name: str) -> ItemFilter:
    """Create filter that matches the member name exactly.

    Args:
        name: Member name.

    Returns:
        Filter that returns True for items with that name.
    """
    expected = _require_str("has_name", name)

    def _filter(item: Item) -> bool:
        value = read_field(item, "name")
        return isinstance(value, str) and value == expected

    return _filter


def is_member_type(member_type: str) -> ItemFilter:
    """Create filter that matches the member type exactly.

    Args:
        member_type: "Property", "Function", "Event", "Callback", ...

    Returns:
        Filter that returns True for items of that member type.
    """
    expected = _require_str("is_member_type", member_type)

    def _filter(item: Item) -> bool:
        value = read_field(item, "member_type")
        return isinstance(value, str) and value == expected

    return _filter
