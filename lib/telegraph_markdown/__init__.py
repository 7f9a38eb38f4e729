"""
Telegraph Markdown converter

Converts markdown text into the node tree accepted by the Telegraph API
(https://telegra.ph/api#Node).

This module provides:
- Block parsing of lines into paragraphs, headers, lists, quotes, rules,
  code blocks and degraded table rows
- Single-pass inline parsing of links, emphasis, strikethrough and code
- Immutable node model limited to the Telegraph tag vocabulary
- Heuristic deciding if text should be published to Telegraph at all

Usage:
    from lib.telegraph_markdown import convert, nodesToJson

    nodes = convert("# Hello World\\n\\nThis is **bold** text.")
    content = nodesToJson(nodes)
"""

from .block_parser import BlockMode, SegmenterState, segmentMarkdown
from .converter import MarkdownConverter, convert, markdownToTelegraph
from .heuristics import DEFAULT_TELEGRAPH_THRESHOLD, shouldUseTelegraph
from .inline_parser import INLINE_PATTERNS, InlinePattern, parseInline
from .nodes import (
    NodeValidationError,
    TelegraphElement,
    TelegraphNode,
    TelegraphTag,
    element,
    nodeFromDict,
    nodesToJson,
    nodeText,
    nodeToDict,
    validateDocument,
)

__all__ = [
    "convert",
    "markdownToTelegraph",
    "MarkdownConverter",
    "segmentMarkdown",
    "parseInline",
    "shouldUseTelegraph",
    "DEFAULT_TELEGRAPH_THRESHOLD",
    "INLINE_PATTERNS",
    "InlinePattern",
    "BlockMode",
    "SegmenterState",
    # Nodes
    "TelegraphTag",
    "TelegraphElement",
    "TelegraphNode",
    "NodeValidationError",
    "element",
    "nodeFromDict",
    "nodeToDict",
    "nodeText",
    "nodesToJson",
    "validateDocument",
]
