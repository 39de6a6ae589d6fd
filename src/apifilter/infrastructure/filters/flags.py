"""Flag filters.

Each constant tests the truthiness of one classification flag.
Flags are read as given; a missing flag counts as False.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apifilter.domain.exceptions import FilterDefinitionError
from apifilter.infrastructure.filters._fields import read_field

if TYPE_CHECKING:
    from apifilter.infrastructure.filters.types import Item, ItemFilter

FLAG_FIELDS = frozenset(
    {
        "deprecated",
        "read_only",
        "replicated",
        "scriptable",
        "yields",
        "thread_safe",
        "readable",
        "writable",
        "service",
    }
)


def flag(field: str) -> ItemFilter:
    """Create filter that tests a boolean flag.

    Args:
        field: snake_case flag name ("deprecated", "read_only", ...).

    Returns:
        Filter that returns True if the flag is truthy.

    Raises:
        FilterDefinitionError: If field is not a flag field.
    """
    if field not in FLAG_FIELDS:
        raise FilterDefinitionError("flag", f"unknown flag '{field}'")

    def _filter(item: Item) -> bool:
        return bool(read_field(item, field))

    return _filter


DEPRECATED = flag("deprecated")
READ_ONLY = flag("read_only")
REPLICATED = flag("replicated")
SCRIPTABLE = flag("scriptable")
YIELDS = flag("yields")
THREAD_SAFE = flag("thread_safe")
READABLE = flag("readable")
WRITABLE = flag("writable")
SERVICE = flag("service")
