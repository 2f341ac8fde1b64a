"""Node visitor and transformer for Tinta.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example: collect every link target in a document:

    class LinkCollector(BaseVisitor[None]):
        walk_inlines = True

        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.hrefs.append(node.href)

    collector = LinkCollector()
    collector.visit(parse(text))

Example: demote every heading one level:

    def demote(node: Node) -> Node:
        if isinstance(node, Heading):
            return dataclasses.replace(node, level=min(node.level + 1, 6))
        return node

    new_doc = transform(doc, demote)

Thread Safety:
    Visitors may accumulate state; create one per thread. ``transform`` is
    pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from tinta.inline import format_inline
from tinta.nodes import (
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    Italic,
    Link,
    ListItem,
    Node,
    Opaque,
    Paragraph,
    Table,
    Text,
    Underline,
)


class BaseVisitor[T]:
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for the node types you care
    about. Unhandled types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Blocks store raw text, so by default the walk stops at blocks. Set
    ``walk_inlines = True`` to also format and walk the inline nodes of
    headings, paragraphs, list items, quotes and table cells.

    """

    walk_inlines: bool = False

    def visit(self, node: Node) -> T:
        """Dispatch to the matching ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_block_quote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_opaque(self, node: Opaque) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_underline(self, node: Underline) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case ListItem():
                return self.visit_list_item(node)
            case BlockQuote():
                return self.visit_block_quote(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case Table():
                return self.visit_table(node)
            case Opaque():
                return self.visit_opaque(node)
            case Image():
                return self.visit_image(node)
            case Text():
                return self.visit_text(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Underline():
                return self.visit_underline(node)
            case Code():
                return self.visit_code(node)
            case Link():
                return self.visit_link(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        match node:
            case Document(children=children):
                for child in children:
                    self.visit(child)
            case Bold(children=children) | Italic(children=children) | Underline(
                children=children
            ):
                for child in children:
                    self.visit(child)
            case Link(label=label):
                for child in label:
                    self.visit(child)
            case Heading(text=text) | Paragraph(text=text) | ListItem(text=text) | BlockQuote(
                text=text
            ) if self.walk_inlines:
                for child in format_inline(text):
                    self.visit(child)
            case Table(rows=rows) if self.walk_inlines:
                for row in rows:
                    for cell in row:
                        for child in format_inline(cell):
                            self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent is transformed with its new children. Return ``None`` from ``fn``
    to remove a node. The root Document cannot be removed; returning None
    for it raises TypeError.

    Blocks are leaves here: their text is raw markup, so rewriting inline
    content means rewriting the block's text.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; removed (None) nodes are dropped."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...] | None:
        new = tuple(result for c in children if (result := _transform_node(c, fn)) is not None)
        # Identity, not equality: blocks compare equal across locations
        if len(new) == len(children) and all(a is b for a, b in zip(new, children)):
            return None
        return new

    match node:
        case Document(children=children) | Bold(children=children) | Italic(
            children=children
        ) | Underline(children=children):
            new_children = _filtered(children)
            if new_children is not None:
                return dataclasses.replace(node, children=new_children)
        case Link(label=label):
            new_label = _filtered(label)
            if new_label is not None:
                return dataclasses.replace(node, label=new_label)
        case _:
            pass  # Leaf nodes: return as-is

    return node
