"""
Telegraph API Async Client

This module provides the TelegraphClient class for interacting with
the Telegraph publishing API (api.telegra.ph).
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, cast

import httpx

import lib.utils as utils
from lib.telegraph_markdown.nodes import TelegraphNode, nodesToJson, validateDocument

from .exceptions import TelegraphAuthError
from .models import TelegraphAccount, TelegraphPage, TelegraphResponse

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 256


class TelegraphClient:
    """Async client for Telegraph API, dood!

    Creates new HTTP session for each request to support proper
    concurrent operations. All network and API errors are logged
    and reported as None result.

    Example:
        >>> from lib.telegraph import TelegraphClient
        >>> from lib.telegraph_markdown import convert
        >>>
        >>> client = TelegraphClient()
        >>> account = await client.createAccount("Telegrapher", authorName="Telegrapher")
        >>>
        >>> page = await client.createPage("Report", convert("# Results\\n\\n| a | b |"))
        >>> if page:
        ...     print(page["url"])
    """

    API_BASE_URL = "https://api.telegra.ph"

    def __init__(
        self,
        accessToken: Optional[str] = None,
        requestTimeout: int = 10,
        apiBaseUrl: Optional[str] = None,
    ):
        """Initialize Telegraph client, dood!

        Args:
            accessToken: Access token of existing account (default: None, create account first)
            requestTimeout: HTTP request timeout in seconds (default: 10)
            apiBaseUrl: API base URL override (default: https://api.telegra.ph)
        """
        self.accessToken = accessToken
        self.requestTimeout = requestTimeout
        self.apiBaseUrl = (apiBaseUrl or self.API_BASE_URL).rstrip("/")

    async def createAccount(
        self,
        shortName: str,
        authorName: Optional[str] = None,
        authorUrl: Optional[str] = None,
    ) -> Optional[TelegraphAccount]:
        """Create new Telegraph account and use its token for next requests, dood!

        Args:
            shortName: Account name, 1-32 characters
            authorName: Default author name for new pages (0-128 characters)
            authorUrl: Default profile link (0-512 characters)

        Returns:
            Created account (with access_token and auth_url) or None if error occurs
        """
        data: Dict[str, Any] = {"short_name": shortName}
        if authorName is not None:
            data["author_name"] = authorName
        if authorUrl is not None:
            data["author_url"] = authorUrl

        result = await self._makeRequest("createAccount", data)
        if result is None:
            return None

        account = cast(TelegraphAccount, result)
        accessToken = account.get("access_token")
        if accessToken:
            self.accessToken = accessToken
        else:
            logger.warning("Telegraph account created without access token")
        return account

    async def getAccountInfo(self, fields: Optional[List[str]] = None) -> Optional[TelegraphAccount]:
        """Get information about current account, dood!

        Args:
            fields: Fields to return (default: short_name, author_name, author_url)

        Returns:
            Account info or None if error occurs

        Raises:
            TelegraphAuthError: If client has no access token
        """
        data: Dict[str, Any] = {"access_token": self._requireToken()}
        if fields:
            data["fields"] = utils.jsonDumps(fields)

        result = await self._makeRequest("getAccountInfo", data)
        if result is None:
            return None
        return cast(TelegraphAccount, result)

    async def createPage(
        self,
        title: str,
        content: Sequence[TelegraphNode],
        authorName: Optional[str] = None,
        authorUrl: Optional[str] = None,
        returnContent: bool = False,
    ) -> Optional[TelegraphPage]:
        """Create new Telegraph page, dood!

        Content is validated before anything is sent, so broken trees never
        reach the API.

        Args:
            title: Page title, 1-256 characters
            content: Top-level document nodes (see lib.telegraph_markdown)
            authorName: Author name shown below the title
            authorUrl: Profile link opened on author name click
            returnContent: Ask API to return page content back

        Returns:
            Created page or None if error occurs

        Raises:
            TelegraphAuthError: If client has no access token
            ValueError: If title is empty or too long
            NodeValidationError: If content breaks document invariants
        """
        title = title.strip()
        if not title or len(title) > MAX_TITLE_LENGTH:
            raise ValueError(f"Page title must be 1-{MAX_TITLE_LENGTH} characters, got {len(title)}")

        validateDocument(content)

        data: Dict[str, Any] = {
            "access_token": self._requireToken(),
            "title": title,
            "content": nodesToJson(content),
            "return_content": "true" if returnContent else "false",
        }
        if authorName is not None:
            data["author_name"] = authorName
        if authorUrl is not None:
            data["author_url"] = authorUrl

        result = await self._makeRequest("createPage", data)
        if result is None:
            return None
        return cast(TelegraphPage, result)

    def _requireToken(self) -> str:
        if not self.accessToken:
            raise TelegraphAuthError("Telegraph access token is not set, create or load account first")
        return self.accessToken

    async def _makeRequest(
        self,
        method: str,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Make HTTP request to Telegraph API, dood!

        Single point for all HTTP requests with error handling.
        Creates new session per request for thread safety.

        Args:
            method: API method name (e.g., "createAccount", "createPage")
            data: Form parameters

        Returns:
            `result` field of the API response or None on error

        Error Handling:
            - ok=false: API error like ACCESS_TOKEN_INVALID (logs error, returns None)
            - 429: Flood control (logs error, returns None)
            - 5xx: Server error (logs error, returns None)
            - Timeout: Request timeout (logs error, returns None)
            - Network: Connection error (logs error, returns None)
        """
        try:
            url = f"{self.apiBaseUrl}/{method}"
            logger.debug(f"Making request to {url} with fields: {sorted(data.keys())}")

            async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                response = await session.post(url, data=data)

                if response.status_code == 200:
                    rawPayload = response.json()
                    if not isinstance(rawPayload, dict):
                        logger.error(f"Unexpected response from {method}: {rawPayload!r}")
                        return None
                    payload = cast(TelegraphResponse, rawPayload)
                    if not payload.get("ok", False):
                        logger.error(f"Telegraph API error in {method}: {payload.get('error', 'unknown error')}")
                        return None
                    logger.debug(f"API request {method} successful")
                    return payload.get("result", {})

                elif response.status_code == 429:
                    logger.error("Rate limit exceeded")
                    return None

                elif response.status_code >= 500:
                    logger.error(f"Server error: {response.status_code}")
                    return None

                else:
                    logger.error(f"API request failed: {response.status_code}")
                    logger.error(f"Response text: {response.text}")
                    return None

        except httpx.TimeoutException:
            logger.error("Request timeout")
            return None

        except httpx.RequestError as e:
            logger.error(f"Network error: {utils.sanitizeError(e)}")
            return None

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            return None

        except Exception as e:
            logger.error(f"Unexpected error during API request: {utils.sanitizeError(e)}")
            return None
