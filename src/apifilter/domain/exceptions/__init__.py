"""Domain exceptions."""

from apifilter.domain.exceptions.base import ApiFilterError
from apifilter.domain.exceptions.definition import FilterDefinitionError

__all__ = [
    "ApiFilterError",
    "FilterDefinitionError",
]
