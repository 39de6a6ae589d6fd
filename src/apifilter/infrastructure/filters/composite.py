"""Composite filters: AND, OR, NOT composition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apifilter.domain.exceptions import FilterDefinitionError

if TYPE_CHECKING:
    from apifilter.infrastructure.filters.types import Item, ItemFilter

logger = logging.getLogger(__name__)


def _check_callables(filter_name: str, filters: tuple[object, ...]) -> None:
    for flt in filters:
        if not callable(flt):
            raise FilterDefinitionError(filter_name, f"expected a filter, got {type(flt).__name__}")


def all_of(*filters: ItemFilter) -> ItemFilter:
    """Create filter that requires ALL filters to pass (AND).

    Args:
        *filters: Filters to compose.

    Returns:
        Filter that returns True only if all filters return True.
        Empty filters = always True.

    Raises:
        FilterDefinitionError: If any argument is not callable.
    """
    _check_callables("all_of", filters)

    def _filter(item: Item) -> bool:
        return all(f(item) for f in filters)

    return _filter


def any_of(*filters: ItemFilter) -> ItemFilter:
    """Create filter that requires ANY filter to pass (OR).

    Args:
        *filters: Filters to compose.

    Returns:
        Filter that returns True if any filter returns True.
        Empty filters = always True, and a warning is logged.

    Raises:
        FilterDefinitionError: If any argument is not callable.
    """
    _check_callables("any_of", filters)

    if not filters:
        logger.warning("any_of() called without filters; every item will pass")

        def _pass(item: Item) -> bool:
            return True

        return _pass

    def _filter(item: Item) -> bool:
        return any(f(item) for f in filters)

    return _filter


def invert(flt: ItemFilter) -> ItemFilter:
    """Create filter that negates another filter (NOT).

    Args:
        flt: Filter to negate.

    Returns:
        Filter that returns opposite of input filter.

    Raises:
        FilterDefinitionError: If flt is not callable.
    """
    _check_callables("invert", (flt,))

    def _filter(item: Item) -> bool:
        return not flt(item)

    return _filter
