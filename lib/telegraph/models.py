"""
Telegraph API Data Models

This module defines TypedDict data models for the Telegraph API responses
(https://telegra.ph/api#Available-types).
"""

import sys
from typing import Any, Dict, List, NotRequired, Union

if sys.version_info >= (3, 14):
    from typing import TypedDict
else:
    from typing_extensions import TypedDict


class TelegraphAccount(TypedDict, total=False):
    """Telegraph account, dood!

    access_token and auth_url are returned only by createAccount
    and revokeAccessToken methods.
    """

    short_name: str  # Account name, helps users with several accounts
    author_name: str  # Default author name used when creating new pages
    author_url: str  # Default profile link
    access_token: str  # Access token of the account
    auth_url: str  # URL to authorize a browser on telegra.ph
    page_count: int  # Number of pages belonging to the account


class TelegraphPage(TypedDict):
    """Telegraph page, dood!"""

    path: str  # Path to the page
    url: str  # URL of the page
    title: str  # Title of the page
    description: str  # Description of the page
    author_name: NotRequired[str]
    author_url: NotRequired[str]
    image_url: NotRequired[str]
    content: NotRequired[List[Union[str, Dict[str, Any]]]]  # Only if return_content was true
    views: int  # Number of page views
    can_edit: NotRequired[bool]


class TelegraphResponse(TypedDict):
    """Envelope of every Telegraph API response."""

    ok: bool
    result: NotRequired[Dict[str, Any]]
    error: NotRequired[str]
