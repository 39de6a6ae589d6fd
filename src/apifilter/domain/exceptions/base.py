"""Base exceptions for apifilter domain."""


class ApiFilterError(Exception):
    """Root exception for all apifilter errors.

    All domain exceptions inherit from this.
    Allows catching all apifilter-specific errors.
    """
