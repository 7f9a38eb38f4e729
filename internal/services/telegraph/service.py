"""
Telegraph service: Singleton service publishing markdown as Telegraph pages

This module glues together the markdown converter, the Telegraph API client
and account persistence. Usual flow:

    service = TelegraphService.getInstance()
    service.injectConfig(configManager)

    if service.shouldUseTelegraph(answer):
        url = await service.createPage("Answer", answer)
"""

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

import aiofiles

import lib.utils as utils
from lib.telegraph import TelegraphClient, TelegraphConfigError
from lib.telegraph_markdown import DEFAULT_TELEGRAPH_THRESHOLD, MarkdownConverter, TelegraphNode, shouldUseTelegraph

from .account_store import DEFAULT_ACCOUNT_FILE, TelegraphAccountStore

if TYPE_CHECKING:
    from internal.config.manager import ConfigManager

logger = logging.getLogger(__name__)

DEFAULT_SHORT_NAME = "Telegrapher"
DEFAULT_AUTHOR_NAME = "Telegrapher"


class TelegraphService:
    """
    Singleton service for publishing markdown to Telegraph, dood!

    Until injectConfig() is called the service works with defaults. The
    Telegraph account is loaded (or created) lazily on first publish.

    Thread Safety:
        The singleton instance creation is thread-safe using RLock.
        The converter itself is pure and keeps no state between calls.
    """

    _instance: Union["TelegraphService", None] = None
    _lock = threading.RLock()

    def __new__(cls) -> "TelegraphService":
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
            return cls._instance

    def __init__(self):
        if not hasattr(self, "initialized"):
            self.configure({})
            logger.info("TelegraphService created, dood!")

    @classmethod
    def getInstance(cls) -> "TelegraphService":
        """Get singleton instance."""
        return cls()

    def injectConfig(self, configManager: "ConfigManager") -> None:
        """
        Configure service from ConfigManager.

        Args:
            configManager: Configuration manager with `[telegraph]` and `[converter]` sections

        Raises:
            TelegraphConfigError: If configuration values are invalid
        """
        self.configure(configManager.getTelegraphConfig(), configManager.getConverterConfig())

    def configure(self, config: Dict[str, Any], converterConfig: Optional[Dict[str, Any]] = None) -> None:
        """
        Configure service from raw config dicts (resets current account).

        Raises:
            TelegraphConfigError: If threshold or request-timeout are not positive integers
        """
        try:
            threshold = int(config.get("threshold", DEFAULT_TELEGRAPH_THRESHOLD))
            requestTimeout = int(config.get("request-timeout", 10))
        except (TypeError, ValueError) as e:
            raise TelegraphConfigError(f"Invalid Telegraph configuration: {e}")
        if threshold <= 0 or requestTimeout <= 0:
            raise TelegraphConfigError("Telegraph threshold and request-timeout must be positive")

        self.threshold = threshold
        self.shortName: str = config.get("short-name", DEFAULT_SHORT_NAME)
        self.authorName: str = config.get("author-name", DEFAULT_AUTHOR_NAME)
        self.authorUrl: Optional[str] = config.get("author-url", None)
        self.accountStore = TelegraphAccountStore(config.get("account-file", DEFAULT_ACCOUNT_FILE))
        self.client = TelegraphClient(requestTimeout=requestTimeout, apiBaseUrl=config.get("api-url", None))
        self.converter = MarkdownConverter(converterConfig)
        self.initialized = False

    async def initialize(self) -> bool:
        """
        Load saved Telegraph account or create new one.

        Returns:
            True if service has usable account
        """
        try:
            account = await self.accountStore.load()
            if account is not None:
                self.client.accessToken = account.get("access_token")
                self.initialized = True
                logger.info("Loaded existing Telegraph account")
                return True

            account = await self.client.createAccount(
                self.shortName,
                authorName=self.authorName,
                authorUrl=self.authorUrl,
            )
            if account is None or not self.client.accessToken:
                logger.error("Failed to create Telegraph account")
                return False

            await self.accountStore.save(account)
            self.initialized = True
            logger.info("Created new Telegraph account")
            return True
        except Exception as e:
            logger.error(f"Failed to initialize Telegraph: {utils.sanitizeError(e)}")
            return False

    def shouldUseTelegraph(self, content: str) -> bool:
        """Check if content is long enough (or has tables) to be published as page."""
        return shouldUseTelegraph(content, self.threshold)

    def convert(self, markdown: str) -> List[TelegraphNode]:
        """Convert markdown into Telegraph nodes with configured converter."""
        return self.converter.convert(markdown)

    async def createPage(self, title: str, markdown: str) -> Optional[str]:
        """
        Publish markdown as Telegraph page.

        Args:
            title: Page title
            markdown: Page content in markdown

        Returns:
            URL of created page or None if anything failed
        """
        if not self.initialized and not await self.initialize():
            logger.error("Telegraph client not initialized")
            return None

        try:
            content = self.convert(markdown)
            page = await self.client.createPage(
                title,
                content,
                authorName=self.authorName,
                authorUrl=self.authorUrl,
                returnContent=False,
            )
        except Exception as e:
            logger.error(f"Failed to create Telegraph page: {utils.sanitizeError(e)}")
            return None

        if page is None:
            return None

        logger.info(f"Created Telegraph page {page.get('path')}")
        return page.get("url")

    async def createPageFromFile(self, filePath: str, title: Optional[str] = None) -> Optional[str]:
        """
        Publish markdown file as Telegraph page.

        Args:
            filePath: Path to markdown file
            title: Page title (default: built from file name)

        Returns:
            URL of created page or None if anything failed
        """
        path = Path(filePath)
        if not path.is_file():
            logger.error(f"File not found: {utils.sanitizePath(str(path))}")
            return None

        try:
            async with aiofiles.open(path, "rt", encoding="utf-8") as f:
                markdown = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {utils.sanitizePath(str(path))}: {utils.sanitizeError(e)}")
            return None

        return await self.createPage(title or utils.titleFromFilename(str(path)), markdown)
