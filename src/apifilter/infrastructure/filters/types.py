"""Filter type alias.

Filter function: takes an item, returns True to include.
"""

from collections.abc import Callable, Mapping
from typing import Any

from apifilter.domain.model.member import Member

# Member or raw API dump record
Item = Member | Mapping[str, Any]

ItemFilter = Callable[[Item], bool]
