"""Tests for the top-level API: parse, render and the Markup processor."""

import pytest

import tinta
from tinta import Document, Markup, ParseConfig, parse, render
from tinta.location import SourceLocation
from tinta.nodes import CodeBlock, Heading, Opaque, Paragraph, Table


class TestParse:
    """parse() wraps segment_blocks in a Document."""

    def test_document(self) -> None:
        doc = parse("# A\n\ntext")
        assert isinstance(doc, Document)
        assert doc.children == (Heading(1, "A"), Paragraph("text"))

    def test_empty(self) -> None:
        assert parse("").children == ()

    def test_document_location(self) -> None:
        doc = parse("a\nb\nc", source_file="x.md")
        assert doc.location == SourceLocation(1, 3, "x.md")

    def test_children_are_a_tuple(self) -> None:
        assert isinstance(parse("x").children, tuple)

    def test_docstring_example(self) -> None:
        doc = parse("## Setup\n\n```sh\npip install tinta\n```")
        assert doc.children[1] == CodeBlock("sh", "pip install tinta")


class TestBlockInlines:
    """Text blocks format their own text on demand."""

    def test_paragraph_inlines(self) -> None:
        [para] = parse("a **b**").children
        assert tinta.plain_text(para.inlines()) == "a b"

    def test_inlines_are_a_tuple(self) -> None:
        [heading] = parse("# *x*").children
        assert isinstance(heading.inlines(), tuple)


class TestRender:
    """render() is HtmlRenderer with defaults."""

    def test_render(self) -> None:
        assert render(parse("hi")) == "<p>hi</p>\n"

    def test_render_with_handler(self) -> None:
        html = render(parse("[[ad]]"), opaque_handler=lambda b: f"<ins>{b.kind}</ins>")
        assert html == "<ins>ad</ins>\n"


class TestMarkup:
    """The Markup processor bundles config and renderer."""

    def test_call(self) -> None:
        assert Markup()("- one\n- two") == "<ul>\n<li>one</li>\n<li>two</li>\n</ul>\n"

    def test_config(self) -> None:
        md = Markup(image_blocks=True, opaque_kinds={"ad"}, default_language="py")
        assert md.config == ParseConfig(
            image_blocks_enabled=True,
            opaque_kinds=frozenset({"ad"}),
            default_language="py",
        )

    def test_parse_uses_config(self) -> None:
        md = Markup(opaque_kinds={"ad"})
        assert md.parse("[[ad]]\n\n[[poll]]").children == (
            Opaque("ad", ""),
            Paragraph("[[poll]]"),
        )

    def test_default_language(self) -> None:
        md = Markup(default_language="python")
        assert md.parse("```\nx\n```").children == (CodeBlock("python", "x"),)
        assert 'class="language-python"' in md("```\nx\n```")

    def test_heading_ids_off(self) -> None:
        assert Markup(heading_ids=False)("# T") == "<h1>T</h1>\n"

    def test_render(self) -> None:
        md = Markup()
        doc = md.parse("| a |", source_file="t.md")
        assert doc.children == (Table((("a",),), False),)
        assert "<td>a</td>" in md.render(doc)

    def test_opaque_handler(self) -> None:
        md = Markup(opaque_handler=lambda b: f"<x-{b.kind}>{b.payload}</x-{b.kind}>")
        assert md("[[poll:42]]") == "<x-poll>42</x-poll>\n"

    def test_ignores_context_config(self) -> None:
        with tinta.parse_config_context(ParseConfig(merge_blockquotes=True)):
            assert len(Markup().parse("> a\n> b").children) == 2


class TestPublicSurface:
    """Names exported from the package root."""

    @pytest.mark.parametrize("name", tinta.__all__)
    def test_exported(self, name: str) -> None:
        assert hasattr(tinta, name)

    def test_version(self) -> None:
        assert tinta.__version__ == "0.1.0"
