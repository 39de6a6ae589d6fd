"""Domain model."""

from apifilter.domain.model.member import Member, SecurityLevels
from apifilter.domain.model.value_types import VALUE_TYPE_ALIASES, resolve_value_types

__all__ = [
    "Member",
    "SecurityLevels",
    "VALUE_TYPE_ALIASES",
    "resolve_value_types",
]
