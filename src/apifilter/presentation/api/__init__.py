"""Public filter API."""

from apifilter.presentation.api.filter import Filter

__all__ = ["Filter"]
