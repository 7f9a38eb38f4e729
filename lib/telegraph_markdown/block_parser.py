"""
Block Parser for Telegraph Markdown converter

This module splits markdown into block-level Telegraph elements: paragraphs,
headers, lists, block quotes, horizontal rules, code blocks and table rows.

The parser is a fold over input lines. Each line moves an immutable
SegmenterState to the next one via stepLine(), so every transition of the
state machine can be checked on its own. The rules are tried in a fixed
order and the first matching one wins:

1. code fence toggle (```)
2. any line inside a fence (kept verbatim)
3. blank line
4. horizontal rule
5. #### / ### header (h4)
6. ## / # header (h3)
7. unordered list item
8. ordered list item
9. block quote
10. table row
11. paragraph

Telegraph has only two header tags, so levels 1-2 become h3 and 3-4 become h4.
Tables have no tag at all and degrade to a paragraph of code-styled cells.
"""

import dataclasses
import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .inline_parser import parseInline
from .nodes import TelegraphElement, TelegraphNode, TelegraphTag, element

CODE_FENCE = "```"
TABLE_CELL_SEPARATOR = " │ "

HORIZONTAL_RULE_RE = re.compile(r"^[-*_]{3,}\s*$")
UNORDERED_ITEM_RE = re.compile(r"^\s*[-*+]\s+")
ORDERED_ITEM_RE = re.compile(r"^\s*([0-9]+)\.\s+(.*)$")
TABLE_SEPARATOR_CELL_RE = re.compile(r"^[-:]+$")

# (prefix, tag), longest prefixes first
HEADER_PREFIXES: Tuple[Tuple[str, TelegraphTag], ...] = (
    ("#### ", TelegraphTag.HEADING_MINOR),
    ("### ", TelegraphTag.HEADING_MINOR),
    ("## ", TelegraphTag.HEADING_MAJOR),
    ("# ", TelegraphTag.HEADING_MAJOR),
)
BLOCKQUOTE_PREFIX = "> "


class BlockMode(Enum):
    """Mutually exclusive modes of the block parser."""

    NORMAL = "normal"
    CODE_FENCE = "code_fence"
    LIST = "list"


@dataclass(frozen=True)
class SegmenterState:
    """
    State carried between lines.

    Attributes:
        mode: Current parser mode
        codeBuffer: Accumulated text of the open code fence
        listKind: Tag of the open list (ul/ol) or None
        listItems: List items collected for the open list
        blocks: Block elements emitted so far
    """

    mode: BlockMode = BlockMode.NORMAL
    codeBuffer: str = ""
    listKind: Optional[TelegraphTag] = None
    listItems: Tuple[TelegraphElement, ...] = ()
    blocks: Tuple[TelegraphElement, ...] = ()


def initialState() -> SegmenterState:
    """Get state before the first line."""
    return SegmenterState()


def _emit(state: SegmenterState, block: TelegraphElement) -> SegmenterState:
    return dataclasses.replace(state, blocks=state.blocks + (block,))


def _codeBlock(content: str) -> TelegraphElement:
    return element(TelegraphTag.CODE_BLOCK, element(TelegraphTag.CODE, content.rstrip()))


def flushList(state: SegmenterState) -> SegmenterState:
    """Emit the open list (if it has items) and leave list mode."""
    if state.listKind is None or not state.listItems:
        return state

    listElement = TelegraphElement(tag=state.listKind, children=state.listItems)
    return dataclasses.replace(
        _emit(state, listElement),
        mode=BlockMode.NORMAL,
        listKind=None,
        listItems=(),
    )


def _addListItem(state: SegmenterState, kind: TelegraphTag, content: str) -> SegmenterState:
    if state.listKind != kind:
        state = dataclasses.replace(flushList(state), mode=BlockMode.LIST, listKind=kind)
    item = TelegraphElement(tag=TelegraphTag.LIST_ITEM, children=tuple(parseInline(content)))
    return dataclasses.replace(state, listItems=state.listItems + (item,))


def parseTableRow(line: str) -> Optional[TelegraphElement]:
    """
    Convert table row to paragraph of code-styled cells.

    Args:
        line: Source line containing at least one `|`

    Returns:
        Paragraph element, or None for separator rows (`|---|:--:|`) and rows without cells
    """
    cells = [cell.strip() for cell in line.split("|") if cell.strip()]
    if not cells or all(TABLE_SEPARATOR_CELL_RE.match(cell) for cell in cells):
        return None

    children: List[TelegraphNode] = []
    for idx, cell in enumerate(cells):
        if idx > 0:
            children.append(TABLE_CELL_SEPARATOR)
        children.append(element(TelegraphTag.CODE, cell))
    return TelegraphElement(tag=TelegraphTag.PARAGRAPH, children=tuple(children))


def stepLine(state: SegmenterState, line: str) -> SegmenterState:
    """
    Process single line of input.

    Args:
        state: State after the previous line
        line: Current line without trailing newline

    Returns:
        New state
    """
    # Code fence open/close
    if line.startswith(CODE_FENCE):
        state = flushList(state)
        if state.mode == BlockMode.CODE_FENCE:
            return dataclasses.replace(
                _emit(state, _codeBlock(state.codeBuffer)),
                mode=BlockMode.NORMAL,
                codeBuffer="",
            )
        return dataclasses.replace(state, mode=BlockMode.CODE_FENCE, codeBuffer="")

    if state.mode == BlockMode.CODE_FENCE:
        return dataclasses.replace(state, codeBuffer=state.codeBuffer + line + "\n")

    # Empty line finishes list
    if not line.strip():
        return flushList(state)

    if HORIZONTAL_RULE_RE.match(line):
        return _emit(flushList(state), element(TelegraphTag.HORIZONTAL_RULE))

    for prefix, tag in HEADER_PREFIXES:
        if line.startswith(prefix):
            header = TelegraphElement(tag=tag, children=tuple(parseInline(line[len(prefix) :])))
            return _emit(flushList(state), header)

    unorderedMatch = UNORDERED_ITEM_RE.match(line)
    if unorderedMatch:
        return _addListItem(state, TelegraphTag.UNORDERED_LIST, line[unorderedMatch.end() :])

    # Item number is dropped, Telegraph numbers <ol> items itself
    orderedMatch = ORDERED_ITEM_RE.match(line)
    if orderedMatch:
        return _addListItem(state, TelegraphTag.ORDERED_LIST, orderedMatch.group(2))

    if line.startswith(BLOCKQUOTE_PREFIX):
        quote = TelegraphElement(
            tag=TelegraphTag.BLOCKQUOTE, children=tuple(parseInline(line[len(BLOCKQUOTE_PREFIX) :]))
        )
        return _emit(flushList(state), quote)

    if "|" in line:
        state = flushList(state)
        row = parseTableRow(line)
        return _emit(state, row) if row is not None else state

    paragraph = TelegraphElement(tag=TelegraphTag.PARAGRAPH, children=tuple(parseInline(line)))
    return _emit(flushList(state), paragraph)


def finishState(state: SegmenterState) -> List[TelegraphElement]:
    """
    Finish parsing: flush open list and unterminated code fence.

    Args:
        state: State after the last line

    Returns:
        All emitted block elements in document order
    """
    state = flushList(state)
    if state.mode == BlockMode.CODE_FENCE and state.codeBuffer:
        state = _emit(state, _codeBlock(state.codeBuffer))
    return list(state.blocks)


def segmentMarkdown(markdown: str) -> List[TelegraphElement]:
    """
    Split markdown into block-level Telegraph elements.

    Args:
        markdown: Markdown text

    Returns:
        Block elements in document order (empty list for empty input)
    """
    return finishState(functools.reduce(stepLine, markdown.split("\n"), initialState()))
