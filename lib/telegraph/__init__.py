"""
Telegraph API Client Library

Async client for the Telegraph publishing API (https://telegra.ph/api).

Example usage:
    from lib.telegraph import TelegraphClient
    from lib.telegraph_markdown import convert

    client = TelegraphClient()
    account = await client.createAccount("Telegrapher", authorName="Agent")
    page = await client.createPage("Hello", convert("# Hello\\n\\n**World**"))
    print(page["url"])
"""

from lib.telegraph.client import TelegraphClient
from lib.telegraph.exceptions import TelegraphAuthError, TelegraphConfigError, TelegraphError
from lib.telegraph.models import TelegraphAccount, TelegraphPage, TelegraphResponse

__all__ = [
    "TelegraphClient",
    "TelegraphAccount",
    "TelegraphPage",
    "TelegraphResponse",
    "TelegraphError",
    "TelegraphAuthError",
    "TelegraphConfigError",
]
