"""Tests for BaseVisitor and transform."""

import dataclasses

import pytest

from tinta import parse
from tinta.nodes import (
    Bold,
    Document,
    Heading,
    Italic,
    Link,
    ListItem,
    Node,
    Paragraph,
    Table,
    Text,
)
from tinta.visitor import BaseVisitor, transform


class HeadingCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.headings: list[str] = []

    def visit_heading(self, node: Heading) -> None:
        self.headings.append(node.text)


class LinkCollector(BaseVisitor[None]):
    walk_inlines = True

    def __init__(self) -> None:
        self.hrefs: list[str] = []

    def visit_link(self, node: Link) -> None:
        self.hrefs.append(node.href)


class TypeCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_default(self, node: Node) -> None:
        name = type(node).__name__
        self.counts[name] = self.counts.get(name, 0) + 1


class TestBaseVisitor:
    """Dispatch and child walking."""

    def test_collects_headings(self) -> None:
        collector = HeadingCollector()
        collector.visit(parse("# One\n\ntext\n\n## Two"))
        assert collector.headings == ["One", "Two"]

    def test_default_walk_stops_at_blocks(self) -> None:
        counter = TypeCounter()
        counter.visit(parse("**bold** text\n- item"))
        assert counter.counts == {"Document": 1, "Paragraph": 1, "ListItem": 1}

    def test_walk_inlines(self) -> None:
        collector = LinkCollector()
        collector.visit(
            parse(
                "See [a](/a).\n\n"
                "- **[b](/b)**\n\n"
                "| [c](/c) |\n\n"
                "```\n[not](/code)\n```"
            )
        )
        assert collector.hrefs == ["/a", "/b", "/c"]

    def test_nested_inline_walk(self) -> None:
        counter = TypeCounter()
        counter.walk_inlines = True
        counter.visit(parse("**a *b* [c](/c)**"))
        assert counter.counts == {
            "Document": 1,
            "Paragraph": 1,
            "Bold": 1,
            "Text": 4,
            "Italic": 1,
            "Link": 1,
        }

    def test_visit_inline_node_directly(self) -> None:
        counter = TypeCounter()
        counter.visit(Bold((Text("x"), Italic((Text("y"),)))))
        assert counter.counts == {"Bold": 1, "Text": 2, "Italic": 1}

    def test_return_value(self) -> None:
        class Namer(BaseVisitor[str]):
            def visit_default(self, node: Node) -> str:
                return type(node).__name__

        assert Namer().visit(parse("x")) == "Document"


class TestTransform:
    """Immutable bottom-up rewriting."""

    def test_demote_headings(self) -> None:
        def demote(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, level=min(node.level + 1, 6))
            return node

        doc = parse("# A\n###### B")
        result = transform(doc, demote)
        assert result.children == (Heading(2, "A"), Heading(6, "B"))
        assert doc.children == (Heading(1, "A"), Heading(6, "B"))

    def test_remove_nodes(self) -> None:
        doc = parse("keep\n\n- drop\n- drop too\n\n| also kept |")
        result = transform(doc, lambda n: None if isinstance(n, ListItem) else n)
        assert result.children == (Paragraph("keep"), Table((("also kept",),), False))

    def test_identity_returns_same_object(self) -> None:
        doc = parse("# A\n\ntext")
        assert transform(doc, lambda n: n) is doc

    def test_locations_survive(self) -> None:
        doc = parse("\n\n# a")

        def shout(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, text=node.text.upper())
            return node

        [heading] = transform(doc, shout).children
        assert heading.text == "A"
        assert heading.location is not None
        assert heading.location.lineno == 3

    def test_cannot_remove_root(self) -> None:
        with pytest.raises(TypeError):
            transform(parse("x"), lambda n: None)

    def test_transforms_inline_trees(self) -> None:
        doc = Document((Bold((Text("a"), Text("b"))),))  # type: ignore[arg-type]
        result = transform(doc, lambda n: None if n == Text("b") else n)
        assert result.children == (Bold((Text("a"),)),)
