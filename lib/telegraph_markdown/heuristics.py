"""
Heuristics deciding whether text should be published to Telegraph
instead of being sent as a regular chat message.
"""

import re

# Messages longer than this go to Telegraph
DEFAULT_TELEGRAPH_THRESHOLD = 2500
# Markdown tables can't be rendered by chat markup
TABLE_PATTERN = re.compile(r"\|.*\|.*\|")


def hasMarkdownTable(content: str) -> bool:
    """Check if content has at least one line looking like a table row."""
    return TABLE_PATTERN.search(content) is not None


def shouldUseTelegraph(content: str, threshold: int = DEFAULT_TELEGRAPH_THRESHOLD) -> bool:
    """
    Check if content should be published as Telegraph page, dood!

    Args:
        content: Markdown text
        threshold: Length above which content is always published

    Returns:
        True for long content or content with tables
    """
    if len(content) > threshold:
        return True
    return hasMarkdownTable(content)
