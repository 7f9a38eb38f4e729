"""
Telegraph client exceptions

All Telegraph-related errors inherit from TelegraphError.
"""


class TelegraphError(Exception):
    """Base exception for all Telegraph client and service errors."""

    pass


class TelegraphAuthError(TelegraphError):
    """
    Raised when an operation needs an access token but there is none.

    Create an account (or load a saved one) before creating pages.
    """

    pass


class TelegraphConfigError(TelegraphError):
    """Raised when Telegraph configuration is invalid."""

    pass
