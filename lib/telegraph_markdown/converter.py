"""
Main converter for Telegraph Markdown

This module wires the block parser and the inline parser together and
exposes the public conversion entry points.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .block_parser import segmentMarkdown
from .nodes import TelegraphNode, countElements, dumpTree, validateDocument

logger = logging.getLogger(__name__)


def convert(markdown: str) -> List[TelegraphNode]:
    """
    Convert markdown text into Telegraph document nodes.

    Pure function: same input always gives the same tree, nothing is shared
    between calls. Any string is accepted, malformed markup degrades to text.

    Args:
        markdown: Markdown text

    Returns:
        Top-level block nodes (empty list for empty input)

    Raises:
        TypeError: If markdown is not a string
    """
    if not isinstance(markdown, str):
        raise TypeError(f"Markdown must be a string, got {type(markdown).__name__}")
    return list(segmentMarkdown(markdown))


def markdownToTelegraph(markdown: str) -> List[Union[str, Dict[str, Any]]]:
    """
    Convert markdown text into Telegraph API `content` representation.

    Args:
        markdown: Markdown text

    Returns:
        List of node dicts ready to be JSON-encoded
    """
    return dumpTree(convert(markdown))


class MarkdownConverter:
    """
    Configurable converter used by the publishing service.

    Args:
        options: Optional converter configuration:
            - validate: check document invariants after conversion (default True)
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = options or {}
        self.validate = bool(self.options.get("validate", True))

    def convert(self, markdown: str) -> List[TelegraphNode]:
        """
        Convert markdown into Telegraph nodes.

        Raises:
            TypeError: If markdown is not a string
            NodeValidationError: If validation is enabled and the tree is malformed
        """
        nodes = convert(markdown)
        if self.validate:
            validateDocument(nodes)
        logger.debug(
            f"Converted {len(markdown)} chars of markdown into {len(nodes)} blocks "
            f"({countElements(nodes)} elements)"
        )
        return nodes
