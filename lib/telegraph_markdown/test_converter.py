"""
Tests for the public converter API.

Covers whole-document properties of markdown to Telegraph conversion.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from . import MarkdownConverter, convert, markdownToTelegraph
from .heuristics import hasMarkdownTable, shouldUseTelegraph
from .nodes import TelegraphElement, TelegraphTag, element, validateDocument

T = TelegraphTag

SAMPLE_DOCUMENT = """# Release notes

Some **important** changes, see [the docs](https://example.com/docs).

## Changes
- Faster `convert()`
- Fixed *italic* handling
1. First step
2. Second step

> Keep calm

| Name | Value |
|------|-------|
| a | 1 |

---

```python
def main():
    return 0

```
"""


class TestConvertProperties:
    """Properties every conversion must hold."""

    @pytest.mark.parametrize("line", ["hello world", "Just text, with punctuation.", "Привет, мир"])
    def testLiteralTextIdempotence(self, line):
        """Test markup-free line converts to one paragraph holding the line."""
        assert convert(line) == [element(T.PARAGRAPH, line)]

    @pytest.mark.parametrize("text", ["Title", "with **bold**", "`code` and *it*"])
    def testHeadingCollapse(self, text):
        """Test # and ## give h3, ### and #### give h4, with the same content."""
        major = [convert(prefix + text)[0] for prefix in ("# ", "## ")]
        minor = [convert(prefix + text)[0] for prefix in ("### ", "#### ")]

        assert all(node.tag == T.HEADING_MAJOR for node in major)
        assert all(node.tag == T.HEADING_MINOR for node in minor)
        assert len({node.children for node in major + minor}) == 1

    @pytest.mark.parametrize("body", ["x = 1", "a\n\nb", "  indented\n# not header\n\n\n"])
    def testFenceRoundTrip(self, body):
        """Test fenced body comes back as single code block."""
        result = convert("```\n" + body + "\n```")
        assert result == [element(T.CODE_BLOCK, element(T.CODE, body.rstrip()))]

    def testListFlushOnTypeChange(self):
        """Test different list types are never merged."""
        result = convert("- a\n1. b")
        assert result == [
            element(T.UNORDERED_LIST, element(T.LIST_ITEM, "a")),
            element(T.ORDERED_LIST, element(T.LIST_ITEM, "b")),
        ]

    def testTableDegradation(self):
        """Test table rows become code cells joined by separator, separator row dropped."""
        result = convert("| a | b |\n|---|---|\n| c | d |")
        # Header row is a row like any other
        assert result == [
            element(T.PARAGRAPH, element(T.CODE, "a"), " │ ", element(T.CODE, "b")),
            element(T.PARAGRAPH, element(T.CODE, "c"), " │ ", element(T.CODE, "d")),
        ]

    def testLeftmostMatchPrecedence(self):
        """Test italic comes before code in source order, without leftover markers."""
        (paragraph,) = convert("*hi* `code`")
        assert paragraph.children == (element(T.ITALIC, "hi"), " ", element(T.CODE, "code"))

    def testNestedEmphasisNonRecursion(self):
        """Test inner italic markers stay literal inside bold."""
        (paragraph,) = convert("**bold *not-italic* still bold**")
        (bold,) = paragraph.children
        assert bold.tag == T.BOLD
        assert bold.children == ("bold *not-italic* still bold",)

    def testEmptyInput(self):
        """Test empty input gives empty document."""
        assert convert("") == []

    def testTopLevelIsAlwaysBlocks(self):
        """Test converted document always passes validation."""
        nodes = convert(SAMPLE_DOCUMENT)
        validateDocument(nodes)
        assert all(isinstance(node, TelegraphElement) for node in nodes)

    def testSampleDocumentStructure(self):
        """Test block sequence of a realistic document."""
        tags = [node.tag for node in convert(SAMPLE_DOCUMENT)]
        assert tags == [
            T.HEADING_MAJOR,
            T.PARAGRAPH,
            T.HEADING_MAJOR,
            T.UNORDERED_LIST,
            T.ORDERED_LIST,
            T.BLOCKQUOTE,
            T.PARAGRAPH,
            T.PARAGRAPH,
            T.HORIZONTAL_RULE,
            T.CODE_BLOCK,
        ]

    def testDeterministic(self):
        """Test same input gives same tree, also from several threads."""
        expected = convert(SAMPLE_DOCUMENT)
        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(convert, [SAMPLE_DOCUMENT] * 8))
        assert all(result == expected for result in results)

    def testLongInput(self):
        """Test large documents are handled like small ones."""
        nodes = convert("line **x**\n" * 2000)
        assert len(nodes) == 2000

    def testNonStringRejected(self):
        """Test non-string input is a programming error."""
        with pytest.raises(TypeError):
            convert(None)  # type: ignore[arg-type]


class TestMarkdownToTelegraph:
    """API representation output."""

    def testWireFormat(self):
        """Test output is ready for JSON encoding."""
        assert markdownToTelegraph("**b**\n---") == [
            {"tag": "p", "children": [{"tag": "b", "children": ["b"]}]},
            {"tag": "hr"},
        ]


class TestMarkdownConverter:
    """Configurable converter."""

    def testDefaultValidates(self):
        """Test validation is on by default."""
        converter = MarkdownConverter()
        assert converter.validate is True
        assert converter.convert("# T") == [element(T.HEADING_MAJOR, "T")]

    def testValidationDisabled(self):
        """Test validation can be turned off."""
        assert MarkdownConverter({"validate": False}).validate is False


class TestHeuristics:
    """Telegraph delivery heuristic."""

    def testShortPlainText(self):
        """Test short text is sent inline."""
        assert shouldUseTelegraph("short answer") is False

    def testLongText(self):
        """Test long text goes to Telegraph."""
        assert shouldUseTelegraph("x" * 2501) is True
        assert shouldUseTelegraph("x" * 2500) is False

    def testCustomThreshold(self):
        """Test threshold can be changed."""
        assert shouldUseTelegraph("x" * 11, threshold=10) is True

    def testTable(self):
        """Test short text with a table goes to Telegraph."""
        assert hasMarkdownTable("| a | b |")
        assert shouldUseTelegraph("text\n| a | b |\n") is True
        assert shouldUseTelegraph("a | b") is False
