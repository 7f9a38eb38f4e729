"""
Node model for Telegraph documents

This module defines the node tree accepted by the Telegraph API. A node is
either a plain string (text leaf) or a TelegraphElement with a tag from the
fixed Telegraph vocabulary, optional href/src attributes and ordered children.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import lib.utils as utils


class TelegraphTag(Enum):
    """All tags allowed by the Telegraph API, dood!"""

    LINK = "a"
    ASIDE = "aside"
    BOLD = "b"
    BLOCKQUOTE = "blockquote"
    LINEBREAK = "br"
    CODE = "code"
    ITALIC_ALT = "em"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    HEADING_MAJOR = "h3"
    HEADING_MINOR = "h4"
    HORIZONTAL_RULE = "hr"
    ITALIC = "i"
    IFRAME = "iframe"
    IMAGE = "img"
    LIST_ITEM = "li"
    ORDERED_LIST = "ol"
    PARAGRAPH = "p"
    CODE_BLOCK = "pre"
    STRIKETHROUGH = "s"
    BOLD_ALT = "strong"
    UNDERLINE = "u"
    UNORDERED_LIST = "ul"
    VIDEO = "video"


# Which tags may carry which attribute
ATTRIBUTE_TAGS: Dict[str, FrozenSet[TelegraphTag]] = {
    "href": frozenset({TelegraphTag.LINK}),
    "src": frozenset({TelegraphTag.IMAGE, TelegraphTag.VIDEO, TelegraphTag.IFRAME}),
}

BLOCK_TAGS: FrozenSet[TelegraphTag] = frozenset(
    {
        TelegraphTag.PARAGRAPH,
        TelegraphTag.HEADING_MAJOR,
        TelegraphTag.HEADING_MINOR,
        TelegraphTag.UNORDERED_LIST,
        TelegraphTag.ORDERED_LIST,
        TelegraphTag.BLOCKQUOTE,
        TelegraphTag.HORIZONTAL_RULE,
        TelegraphTag.CODE_BLOCK,
    }
)

LIST_TAGS: FrozenSet[TelegraphTag] = frozenset({TelegraphTag.UNORDERED_LIST, TelegraphTag.ORDERED_LIST})


class NodeValidationError(ValueError):
    """Raised when a node tree breaks the Telegraph document invariants."""

    pass


@dataclass(frozen=True)
class TelegraphElement:
    """
    Tagged element of a Telegraph document.

    Elements are immutable and hashable: children are stored as a tuple and
    attrs as a read-only mapping checked against the tag on construction.
    Passing anything other than a TelegraphTag as tag is a programming error
    and raises TypeError.

    Args:
        tag: Element tag
        attrs: Optional attributes, only href (on links) and src (on media)
        children: Ordered child nodes (strings or other elements)
    """

    tag: TelegraphTag
    attrs: Optional[Mapping[str, str]] = None
    children: Tuple["TelegraphNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.tag, TelegraphTag):
            raise TypeError(f"Element tag must be TelegraphTag, got {self.tag!r}")

        if self.attrs:
            for key in self.attrs:
                allowedTags = ATTRIBUTE_TAGS.get(key)
                if allowedTags is None:
                    raise ValueError(f"Unsupported attribute '{key}' on <{self.tag.value}>")
                if self.tag not in allowedTags:
                    raise ValueError(f"Attribute '{key}' is not allowed on <{self.tag.value}>")
            object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))
        else:
            object.__setattr__(self, "attrs", None)

        children = tuple(self.children)
        for child in children:
            if not isinstance(child, (str, TelegraphElement)):
                raise TypeError(f"Element child must be str or TelegraphElement, got {type(child).__name__}")
        object.__setattr__(self, "children", children)

    def toDict(self) -> Dict[str, Any]:
        """Convert element to Telegraph API representation."""
        ret: Dict[str, Any] = {"tag": self.tag.value}
        if self.attrs:
            ret["attrs"] = dict(self.attrs)
        if self.children:
            ret["children"] = [nodeToDict(child) for child in self.children]
        return ret

    def __hash__(self) -> int:
        attrs = tuple(sorted(self.attrs.items())) if self.attrs else None
        return hash((self.tag, attrs, self.children))

    def __repr__(self) -> str:
        return f"TelegraphElement(tag={self.tag.value}, children={len(self.children)})"


TelegraphNode = Union[str, TelegraphElement]


def element(
    tag: TelegraphTag, *children: TelegraphNode, attrs: Optional[Mapping[str, str]] = None
) -> TelegraphElement:
    """Shortcut for building elements: element(TelegraphTag.BOLD, "text")."""
    return TelegraphElement(tag=tag, attrs=attrs, children=children)


def nodeToDict(node: TelegraphNode) -> Union[str, Dict[str, Any]]:
    """Convert any node to its Telegraph API representation."""
    if isinstance(node, str):
        return node
    return node.toDict()


def nodeFromDict(data: Union[str, Mapping[str, Any]]) -> TelegraphNode:
    """
    Build node from Telegraph API representation.

    Args:
        data: String or dict with tag, optional attrs and children

    Returns:
        TelegraphNode

    Raises:
        ValueError: If tag is unknown or data has unexpected shape
    """
    if isinstance(data, str):
        return data
    if not isinstance(data, Mapping) or "tag" not in data:
        raise ValueError(f"Invalid node data: {data!r}")

    try:
        tag = TelegraphTag(data["tag"])
    except ValueError:
        raise ValueError(f"Unknown Telegraph tag: {data['tag']!r}")

    children = [nodeFromDict(child) for child in data.get("children", [])]
    return TelegraphElement(tag=tag, attrs=data.get("attrs"), children=tuple(children))


def nodeText(node: TelegraphNode) -> str:
    """Get plain text content of node and all its descendants."""
    if isinstance(node, str):
        return node
    return "".join(nodeText(child) for child in node.children)


def nodesToJson(nodes: Iterable[TelegraphNode]) -> str:
    """Serialize nodes into JSON array string as expected by Telegraph `content` field."""
    # sort_keys is disabled to keep tag/attrs/children order readable
    return utils.jsonDumps([nodeToDict(node) for node in nodes], sort_keys=False)


def _validateBlock(node: TelegraphElement, index: int) -> None:
    if node.tag not in BLOCK_TAGS:
        raise NodeValidationError(f"Node #{index}: <{node.tag.value}> is not a block element")

    if node.tag in LIST_TAGS:
        for child in node.children:
            if not isinstance(child, TelegraphElement) or child.tag != TelegraphTag.LIST_ITEM:
                raise NodeValidationError(f"Node #{index}: <{node.tag.value}> may contain only <li> elements")

    elif node.tag == TelegraphTag.CODE_BLOCK:
        if len(node.children) != 1:
            raise NodeValidationError(f"Node #{index}: <pre> must contain exactly one <code> element")
        code = node.children[0]
        if not isinstance(code, TelegraphElement) or code.tag != TelegraphTag.CODE:
            raise NodeValidationError(f"Node #{index}: <pre> must contain exactly one <code> element")
        if len(code.children) != 1 or not isinstance(code.children[0], str):
            raise NodeValidationError(f"Node #{index}: <pre><code> must contain single text")


def validateDocument(nodes: Sequence[TelegraphNode]) -> None:
    """
    Check document-level invariants of a node tree.

    Top level must be a flat sequence of block elements (never bare text),
    lists may contain only list items and code blocks must wrap exactly one
    code element with a single text child.

    Args:
        nodes: Top-level document nodes

    Raises:
        NodeValidationError: On first violated invariant
    """
    for index, node in enumerate(nodes):
        if not isinstance(node, TelegraphElement):
            raise NodeValidationError(f"Node #{index}: bare text is not allowed at top level")
        _validateBlock(node, index)


def countElements(nodes: Iterable[TelegraphNode]) -> int:
    """Count elements in tree (text leaves excluded)."""
    total = 0
    for node in nodes:
        if isinstance(node, TelegraphElement):
            total += 1 + countElements(node.children)
    return total


def dumpTree(nodes: Sequence[TelegraphNode]) -> List[Union[str, Dict[str, Any]]]:
    """Convert list of nodes to API representation."""
    return [nodeToDict(node) for node in nodes]
