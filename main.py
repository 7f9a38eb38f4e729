"""
Telegrapher - publish markdown files as Telegraph pages.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

import lib.utils as utils
from internal.config.manager import ConfigManager
from internal.services.telegraph import TelegraphService
from lib.logging_utils import initLogging
from lib.telegraph_markdown import nodesToJson

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO)
# set higher logging level for httpx to avoid all GET and POST requests being logged
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


class Telegrapher:
    """Application wiring config, logging and Telegraph service together."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        self.configManager = ConfigManager(configPath, configDirs)
        initLogging(self.configManager.getLoggingConfig())

        self.telegraphService = TelegraphService.getInstance()
        self.telegraphService.injectConfig(self.configManager)

    def dryRun(self, filePath: str) -> str:
        """Convert file and return Telegraph content JSON without publishing."""
        with open(filePath, "rt", encoding="utf-8") as f:
            markdown = f.read()
        return nodesToJson(self.telegraphService.convert(markdown))

    def publish(self, filePath: str, title: Optional[str] = None) -> Optional[str]:
        """Publish file, return page URL."""
        return asyncio.run(self.telegraphService.createPageFromFile(filePath, title=title))


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Telegrapher - publish markdown files as Telegraph pages, dood!")
    parser.add_argument(
        "file",
        nargs="?",
        help="Markdown file to publish",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "-t",
        "--title",
        default=None,
        help="Page title (default: built from file name)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print Telegraph content JSON instead of publishing",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    args = parser.parse_args()
    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]

    if not args.print_config and not args.file:
        parser.error("the following arguments are required: file")

    return args


def prettyPrintConfig(configManager: ConfigManager):
    """Pretty-print the loaded configuration, dood!"""
    print("=== Telegrapher Configuration ===")
    print()
    print(utils.jsonDumps(configManager.config, indent=2))
    print()


def main():
    """Main entry point."""
    args = parse_arguments()

    try:
        if args.print_config:
            prettyPrintConfig(ConfigManager(args.config, args.config_dir))
            sys.exit(0)

        app = Telegrapher(configPath=args.config, configDirs=args.config_dir)

        if args.dry_run:
            print(app.dryRun(args.file))
            sys.exit(0)

        url = app.publish(args.file, title=args.title)
        if url is None:
            logger.error("Failed to publish page")
            sys.exit(1)
        print(url)
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except OSError as e:
        logger.error(f"Failed: {utils.sanitizeError(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
