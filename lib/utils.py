"""
Common utilities for Telegrapher.
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

HOME_DIR = os.path.expanduser("~")
try:
    USERNAME = os.getlogin()
except OSError:
    USERNAME = os.environ.get("USER", "")


def jsonDumps(data: Any, compact: Optional[bool] = None, **kwargs) -> str:
    dumpKwargs = {
        "ensure_ascii": False,
        "default": str,
        "sort_keys": True,
    }

    if compact is None:
        # If indent is passed, then user want pretty-printed JSON,
        #  no need to use compact separators
        compact = "indent" not in kwargs

    if compact:
        dumpKwargs["separators"] = (",", ":")
    dumpKwargs.update(kwargs)
    return json.dumps(data, **dumpKwargs)


def load_dotenv(path: str = ".env", populateEnv: bool = True) -> Dict[str, str]:
    """
    Simple dotenv file loader.
    Just read file line by line and put key-value pairs into dictionary.

    Args:
        path: Path to .env file (default ".env")
        populateEnv: Whether to populate environment variables (default True)

    Returns:
        Dictionary of key-value pairs from .env file (empty if file doesn't exist)
    """
    ret: Dict[str, str] = {}
    if not os.path.isfile(path):
        logger.debug(f"No dotenv file at {path}")
        return ret

    with open(path, "rt") as f:
        for line in f:
            splitted_line = line.split("=", 1)
            if len(splitted_line) == 2 and not line.lstrip().startswith("#"):
                key, value = splitted_line
                ret[key.strip()] = value.strip().strip('"')

    if populateEnv:
        for k, v in ret.items():
            os.environ[k] = v
    return ret


def titleFromFilename(filePath: str) -> str:
    """
    Build page title from file name: `release-notes_v2.md` -> `Release Notes V2`.
    """
    name = Path(filePath).stem
    name = re.sub(r"[-_]", " ", name)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), name)


def sanitizePath(text: str, homeDir: Optional[str] = None, username: Optional[str] = None) -> str:
    """
    Hide home directory and user name in text before logging or showing it.

    Args:
        text: Text to sanitize
        homeDir: Home directory to hide (default: current user's one)
        username: User name to hide (default: current user's one)

    Returns:
        Sanitized text
    """
    if not text:
        return text

    homeDir = HOME_DIR if homeDir is None else homeDir
    username = USERNAME if username is None else username

    sanitized = text
    if homeDir and homeDir != "/":
        sanitized = sanitized.replace(homeDir, "~")

    # Short names would give too many false positives
    if username and len(username) > 2:
        sanitized = sanitized.replace(f"/Users/{username}", "/Users/<user>")
        sanitized = sanitized.replace(f"/home/{username}", "/home/<user>")

    return sanitized


def sanitizeError(error: Any, homeDir: Optional[str] = None, username: Optional[str] = None) -> str:
    """Get sanitized message of exception (or error string) for logs."""
    if isinstance(error, BaseException):
        return sanitizePath(str(error), homeDir=homeDir, username=username)
    if isinstance(error, str):
        return sanitizePath(error, homeDir=homeDir, username=username)
    return "Unknown error"
