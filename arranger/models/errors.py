"""Exception types raised to callers of the arranger core."""


class ArrangerError(Exception):
    """Base class for arranger errors."""


class InvalidConfigurationError(ArrangerError, ValueError):
    """Raised when a category table or option is rejected at the boundary."""
