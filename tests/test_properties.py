"""Property-based tests using Hypothesis.

These tests check properties that must hold for every input: the segmenter
and formatter are total, fenced code survives untouched, and the markup
renderer writes text that segments back into the same blocks.
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from tinta import MarkupRenderer, format_inline, parse, plain_text, segment_blocks
from tinta.nodes import (
    Bold,
    Code,
    CodeBlock,
    Italic,
    Link,
    Paragraph,
    Table,
    Text,
    Underline,
)

_MARKUP_ALPHABET = "#>-*|`_[]()!:0123456789. abc\n\r\t"

# Without carriage returns: a second trailing "\r" is not preserved
_ROUND_TRIP_ALPHABET = "#>-*|`_[]()!:0123456789. abc\n\t"


def _walk(nodes):  # type: ignore[no-untyped-def]
    for node in nodes:
        yield node
        match node:
            case Bold(children=children) | Italic(children=children) | Underline(
                children=children
            ):
                yield from _walk(children)
            case Link(label=label):
                yield from _walk(label)


class TestTotality:
    """Neither pass ever raises."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_segment_any_text(self, source: str) -> None:
        blocks = segment_blocks(source)
        assert isinstance(blocks, list)

    @given(st.text(alphabet=_MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=300)
    def test_segment_markup_soup(self, source: str) -> None:
        for block in segment_blocks(source):
            assert block.location is not None
            assert 1 <= block.location.lineno <= block.location.end_lineno

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_format_any_text(self, source: str) -> None:
        nodes = format_inline(source)
        assert isinstance(nodes, list)

    @given(st.text(alphabet="*_`[]()ab ", max_size=200))
    @settings(max_examples=300)
    def test_format_delimiter_soup(self, source: str) -> None:
        for node in _walk(format_inline(source)):
            match node:
                case Text(content=content):
                    assert content
                case Code(code=code):
                    assert code
                case Bold(children=children) | Italic(children=children) | Underline(
                    children=children
                ):
                    assert children
                case Link(label=label, href=href):
                    assert label
                    assert href


class TestBlockContent:
    """Structural properties of segmenter output."""

    @given(st.text(alphabet=_MARKUP_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_no_empty_tables(self, source: str) -> None:
        for block in segment_blocks(source):
            if isinstance(block, Table):
                assert block.rows

    @given(st.text(alphabet="abc \n", max_size=200))
    @settings(max_examples=100)
    def test_plain_prose_is_paragraphs(self, source: str) -> None:
        blocks = segment_blocks(source)
        assert all(isinstance(b, Paragraph) for b in blocks)
        words = [w for b in blocks for w in b.text.split()]
        assert words == source.split()

    @given(st.text(alphabet=st.characters(exclude_characters="`*_["), max_size=200))
    @settings(max_examples=100)
    def test_text_without_specials_is_one_node(self, source: str) -> None:
        nodes = format_inline(source)
        if source:
            assert nodes == [Text(source)]
        else:
            assert nodes == []

    @given(st.text(alphabet="`ab *", max_size=100))
    @settings(max_examples=200)
    def test_code_spans_are_verbatim(self, source: str) -> None:
        for node in format_inline(source):
            if isinstance(node, Code):
                assert f"`{node.code}`" in source
                assert "`" not in node.code


class TestFenceRoundTrip:
    """A fenced body comes back exactly as written."""

    @given(
        st.from_regex(r"[a-z0-9+#]*", fullmatch=True),
        st.text(max_size=300),
    )
    @settings(max_examples=200)
    def test_fence_body(self, language: str, code: str) -> None:
        assume("```" not in code)
        blocks = segment_blocks(f"```{language}\n{code}\n```")
        assert blocks == [CodeBlock(language or "text", code)]


class TestMarkupRoundTrip:
    """MarkupRenderer output segments back into the same blocks."""

    @given(st.text(alphabet=_ROUND_TRIP_ALPHABET, max_size=300))
    @settings(max_examples=300)
    def test_round_trip(self, source: str) -> None:
        doc = parse(source)
        # Joined continuation lines can spell another block's marker
        # ("#" + "a" reads back as "# a"); only paragraphs that read back as
        # themselves are expected to survive
        assume(
            all(
                segment_blocks(b.text) == [b] for b in doc.children if isinstance(b, Paragraph)
            )
        )
        rendered = MarkupRenderer().render(doc)
        assert parse(rendered) == doc

    @given(st.text(alphabet=_MARKUP_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_render_is_stable(self, source: str) -> None:
        renderer = MarkupRenderer()
        once = renderer.render(parse(source))
        twice = renderer.render(parse(once))
        assert parse(twice) == parse(once)

    @given(st.text(alphabet="*_`[]()ab ", max_size=100))
    @settings(max_examples=100)
    def test_plain_text_never_longer(self, source: str) -> None:
        assert len(plain_text(format_inline(source))) <= len(source)


_SELF_CONTAINED_BLOCKS = [
    "# Heading",
    "### **Deep** heading",
    "- bullet",
    "7. numbered",
    "> quoted *line*",
    "---",
    "***",
    "| a | b |\n|---|---|\n| 1 | 2 |",
    "| no header |",
    "```py\nx = 1\n```",
    "[[ad:in-article]]",
    "[[poll]]",
    "plain paragraph\nwith continuation",
]


class TestClassificationOrder:
    """Reordering unrelated blocks never changes how each one is classified."""

    @given(st.lists(st.sampled_from(_SELF_CONTAINED_BLOCKS), min_size=1, max_size=8), st.data())
    @settings(max_examples=100)
    def test_permutation(self, snippets: list[str], data: st.DataObject) -> None:
        order = data.draw(st.permutations(range(len(snippets))))
        original = segment_blocks("\n\n".join(snippets))
        shuffled = segment_blocks("\n\n".join(snippets[i] for i in order))
        assert len(original) == len(snippets)
        assert shuffled == [original[i] for i in order]
