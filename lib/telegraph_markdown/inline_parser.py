"""
Inline Parser for Telegraph Markdown converter

This module turns the text content of a block (paragraph, header, list item,
quote) into a sequence of text leaves and inline elements: links, bold,
italic, strikethrough and inline code.

Parsing is a single left-to-right pass. At each step every pattern from
INLINE_PATTERNS is searched in the remaining text and the match starting at
the lowest index wins. If several patterns start at the same index, the one
listed first in INLINE_PATTERNS wins, so the order of that tuple is part of
the parser contract. Captured span content is not parsed again: `**a *b* c**`
becomes one bold element with the literal text `a *b* c`.
"""

import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from .nodes import TelegraphElement, TelegraphNode, TelegraphTag, element


class InlinePattern(NamedTuple):
    """Single inline span pattern, dood!"""

    name: str
    regex: re.Pattern[str]
    handler: Callable[[re.Match[str]], TelegraphElement]


class InlineMatch(NamedTuple):
    """Winning match of a scan step."""

    start: int
    end: int
    node: TelegraphElement


def _link(match: re.Match[str]) -> TelegraphElement:
    return element(TelegraphTag.LINK, match.group(1), attrs={"href": match.group(2)})


def _boldItalic(match: re.Match[str]) -> TelegraphElement:
    return element(TelegraphTag.BOLD, element(TelegraphTag.ITALIC, match.group(1)))


def _bold(match: re.Match[str]) -> TelegraphElement:
    return element(TelegraphTag.BOLD, match.group(1))


def _italic(match: re.Match[str]) -> TelegraphElement:
    return element(TelegraphTag.ITALIC, match.group(1))


def _strikethrough(match: re.Match[str]) -> TelegraphElement:
    return element(TelegraphTag.STRIKETHROUGH, match.group(1))


def _code(match: re.Match[str]) -> TelegraphElement:
    return element(TelegraphTag.CODE, match.group(1))


# Order matters: on equal start index the earlier pattern wins
INLINE_PATTERNS: Tuple[InlinePattern, ...] = (
    # [text](url)
    InlinePattern("link", re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), _link),
    # ***text***
    InlinePattern("bold-italic", re.compile(r"\*\*\*(.+?)\*\*\*"), _boldItalic),
    # **text** or __text__
    InlinePattern("bold", re.compile(r"\*\*(.+?)\*\*"), _bold),
    InlinePattern("bold-underscore", re.compile(r"__(.+?)__"), _bold),
    # *text* or _text_ (underscores inside words like snake_case are left alone)
    InlinePattern("italic", re.compile(r"\*(.+?)\*"), _italic),
    InlinePattern("italic-underscore", re.compile(r"(?<!\w)_(.+?)_(?!\w)", re.ASCII), _italic),
    # ~~text~~
    InlinePattern("strikethrough", re.compile(r"~~(.+?)~~"), _strikethrough),
    # `code`
    InlinePattern("code", re.compile(r"`([^`]+)`"), _code),
)


def findEarliestMatch(
    text: str, patterns: Tuple[InlinePattern, ...] = INLINE_PATTERNS
) -> Optional[InlineMatch]:
    """
    Find the leftmost match of any pattern in text.

    Args:
        text: Text to scan
        patterns: Ordered patterns, earlier ones win ties

    Returns:
        InlineMatch with span boundaries and built node, or None if nothing matched
    """
    earliest: Optional[re.Match[str]] = None
    earliestPattern: Optional[InlinePattern] = None

    for pattern in patterns:
        match = pattern.regex.search(text)
        if match is None:
            continue
        # Strictly less: on a tie the pattern found first is kept
        if earliest is None or match.start() < earliest.start():
            earliest = match
            earliestPattern = pattern

    if earliest is None or earliestPattern is None:
        return None

    return InlineMatch(start=earliest.start(), end=earliest.end(), node=earliestPattern.handler(earliest))


def parseInline(text: str, patterns: Tuple[InlinePattern, ...] = INLINE_PATTERNS) -> List[TelegraphNode]:
    """
    Parse inline markdown into Telegraph nodes.

    Never fails: unmatched or malformed markup stays literal text.

    Args:
        text: Raw inline text of a block
        patterns: Ordered span patterns (INLINE_PATTERNS by default)

    Returns:
        List of text leaves and inline elements in source order
    """
    nodes: List[TelegraphNode] = []
    remaining = text

    while remaining:
        found = findEarliestMatch(remaining, patterns)
        if found is None:
            nodes.append(remaining)
            break

        if found.start > 0:
            nodes.append(remaining[: found.start])
        nodes.append(found.node)
        remaining = remaining[found.end :]

    return nodes
