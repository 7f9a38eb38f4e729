"""
Telegraph account persistence

Keeps the Telegraph account (and its access token) in a small JSON file so
the same account is reused between runs.
"""

import json
import logging
from pathlib import Path
from typing import Optional, cast

import aiofiles

import lib.utils as utils
from lib.telegraph import TelegraphAccount

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_FILE = ".telegraph-account.json"


class TelegraphAccountStore:
    """
    JSON file storage for Telegraph account.

    Args:
        path: Path to account file (default: .telegraph-account.json)

    Example:
        >>> store = TelegraphAccountStore("/var/lib/telegrapher/account.json")
        >>> account = await store.load()
        >>> if account is None:
        ...     account = await client.createAccount("Telegrapher")
        ...     await store.save(account)
    """

    def __init__(self, path: str = DEFAULT_ACCOUNT_FILE):
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if account file exists."""
        return self.path.is_file()

    async def load(self) -> Optional[TelegraphAccount]:
        """
        Load saved account.

        Returns:
            Saved account, or None if file is missing, unreadable or has no access token
        """
        if not self.exists():
            return None

        try:
            async with aiofiles.open(self.path, "rt", encoding="utf-8") as f:
                data = json.loads(await f.read())
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read Telegraph account from {self.path}: {utils.sanitizeError(e)}")
            return None

        if not isinstance(data, dict) or not data.get("access_token"):
            logger.warning(f"Telegraph account file {self.path} has no access token, ignoring it")
            return None

        return cast(TelegraphAccount, data)

    async def save(self, account: TelegraphAccount) -> None:
        """
        Save account to file.

        Raises:
            OSError: If file can't be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self.path, "wt", encoding="utf-8") as f:
            await f.write(utils.jsonDumps(dict(account), indent=2))
        logger.debug(f"Saved Telegraph account to {self.path}")
