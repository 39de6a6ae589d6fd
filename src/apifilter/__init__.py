"""apifilter - composable filters over API dump members."""

__version__ = "0.1.0"

from apifilter.presentation.api.filter import Filter

__all__ = ["Filter", "__version__"]
