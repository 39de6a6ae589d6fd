"""Infrastructure layer: stateless item filters.

Filters are pure functions: ItemFilter = Callable[[Item], bool]
True = include item, False = exclude item.
Items are Member instances or raw API dump records (PascalCase mappings).

Usage:
    from apifilter.infrastructure.filters import DEPRECATED, has_tags, invert

    # Single filter
    flt = is_member_type("Property")
    properties = [m for m in members if flt(m)]

    # Composed filters
    flt = all_of(invert(DEPRECATED), has_security("None"))
"""

from apifilter.infrastructure.filters.composite import all_of, any_of, invert
from apifilter.infrastructure.filters.flags import (
    DEPRECATED,
    READ_ONLY,
    READABLE,
    REPLICATED,
    SCRIPTABLE,
    SERVICE,
    THREAD_SAFE,
    WRITABLE,
    YIELDS,
    flag,
)
from apifilter.infrastructure.filters.member import has_name, has_tags, is_member_type
from apifilter.infrastructure.filters.security import has_security
from apifilter.infrastructure.filters.types import ItemFilter
from apifilter.infrastructure.filters.value_type import has_value_type

__all__ = [
    "DEPRECATED",
    "READABLE",
    "READ_ONLY",
    "REPLICATED",
    "SCRIPTABLE",
    "SERVICE",
    "THREAD_SAFE",
    "WRITABLE",
    "YIELDS",
    "ItemFilter",
    "all_of",
    "any_of",
    "flag",
    "has_name",
    "has_security",
    "has_tags",
    "has_value_type",
    "invert",
    "is_member_type",
]
