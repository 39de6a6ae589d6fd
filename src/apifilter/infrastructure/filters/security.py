"""Security filters.

Filter items by Read/Write security. Each axis of the requested levels
is an OR-set; every requested axis must pass. Item axes may also carry
several strings, an item axis passes when any of them is accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from typing import TYPE_CHECKING

from apifilter.domain.exceptions import FilterDefinitionError
from apifilter.domain.model.member import SecurityLevels
from apifilter.infrastructure.filters._fields import read_field

if TYPE_CHECKING:
    from apifilter.infrastructure.filters.types import Item, ItemFilter

logger = logging.getLogger(__name__)

_AXIS_KEYS = frozenset({"Read", "Write"})


def _allowed(value: object) -> frozenset[str] | None:
    """Normalize one requested axis to an OR-set. None = axis not requested."""
    if value is None:
        return None
    if isinstance(value, str):
        return frozenset({value})
    if isinstance(value, (bytes, bytearray, Mapping)) or not isinstance(value, Iterable):
        raise FilterDefinitionError("has_security", f"expected string or strings, got {value!r}")

    values = tuple(value)
    for v in values:
        if not isinstance(v, str):
            raise FilterDefinitionError("has_security", f"expected string, got {v!r}")
    return frozenset(values)


def _requested(
    levels: str | SecurityLevels | Mapping[str, object],
) -> tuple[frozenset[str] | None, frozenset[str] | None]:
    if isinstance(levels, str):
        both = _allowed(levels)
        return both, both
    if isinstance(levels, SecurityLevels):
        return _allowed(levels.read), _allowed(levels.write)
    if isinstance(levels, Mapping):
        unknown = set(levels) - _AXIS_KEYS
        if unknown:
            raise FilterDefinitionError("has_security", f"unknown security keys: {sorted(map(str, unknown))}")
        return _allowed(levels.get("Read")), _allowed(levels.get("Write"))
    raise FilterDefinitionError("has_security", f"expected string, SecurityLevels or mapping, got {levels!r}")


def _item_axes(security: object) -> tuple[object, object] | None:
    """Split item security into (read, write). None = unusable shape."""
    if isinstance(security, str):
        return security, security
    if isinstance(security, SecurityLevels):
        return security.read, security.write
    if isinstance(security, Mapping):
        return security.get("Read"), security.get("Write")
    return None


def _item_values(axis: object) -> frozenset[str]:
    """Strings carried by one item axis. Non-string entries are ignored."""
    if isinstance(axis, str):
        return frozenset({axis})
    if isinstance(axis, (bytes, bytearray, Mapping)) or not isinstance(axis, Collection):
        return frozenset()
    return frozenset(v for v in axis if isinstance(v, str))


def has_security(levels: str | SecurityLevels | Mapping[str, object]) -> ItemFilter:
    """Create filter that requires the given security levels.

    A string applies to both Read and Write. A SecurityLevels or a mapping
    with "Read"/"Write" keys may give a string or several strings per axis;
    several strings are an OR condition. Items whose security is a single
    string (functions, events) check that string on every requested axis.

    Args:
        levels: Requested security levels. No axis requested = every item
            passes, and a warning is logged.

    Returns:
        Filter that returns True if every requested axis matches.
        Returns False for items without usable security.

    Raises:
        FilterDefinitionError: If levels have a bad shape.
    """
    read, write = _requested(levels)

    if read is None and write is None:
        logger.warning("has_security() called without Read or Write; every item will pass")

        def _pass(item: Item) -> bool:
            return True

        return _pass

    def _filter(item: Item) -> bool:
        axes = _item_axes(read_field(item, "security"))
        if axes is None:
            return False
        item_read, item_write = axes
        if read is not None and not (_item_values(item_read) & read):
            return False
        if write is not None and not (_item_values(item_write) & write):
            return False
        return True

    return _filter
