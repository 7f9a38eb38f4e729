"""
Telegraph publishing service.
"""

from .account_store import DEFAULT_ACCOUNT_FILE, TelegraphAccountStore
from .service import TelegraphService

__all__ = [
    "DEFAULT_ACCOUNT_FILE",
    "TelegraphAccountStore",
    "TelegraphService",
]
