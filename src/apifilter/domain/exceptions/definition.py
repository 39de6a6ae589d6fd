"""Filter definition exceptions."""

from apifilter.domain.exceptions.base import ApiFilterError


class FilterDefinitionError(ApiFilterError):
    """Error in filter construction arguments.

    Raised when a filter constructor gets arguments it cannot use.
    Evaluating a filter never raises this.

    Attributes:
        filter_name: Name of the filter constructor (must not be empty)
        reason: Why the arguments are invalid (must not be empty)
    """

    def __init__(self, filter_name: str, reason: str) -> None:
        if not filter_name:
            raise ValueError("filter_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.filter_name = filter_name
        self.reason = reason
        super().__init__(f"Invalid filter '{filter_name}': {reason}")
