"""Markup renderer: serializes blocks back to markup text.

The output segments back into the same blocks, which makes this renderer
the reference for the round-trip property: exact whitespace is not
preserved, but every block keeps its kind and content. Blank lines separate
blocks; consecutive list items stay on adjacent lines.

Known limit: a paragraph is written on one line, so joined continuation
lines can spell another block. A paragraph "#" followed by "a" reads back
as the heading "# a", and one that starts and ends with ``|`` reads back as
a table.

Example:
    >>> MarkupRenderer().render(parse("#  Title  \\n\\n\\n- a\\n- b"))
    '# Title\\n\\n- a\\n- b\\n'

"""

from __future__ import annotations

from collections.abc import Sequence

from tinta.errors import RenderError
from tinta.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    ListItem,
    Opaque,
    Paragraph,
    Table,
)
from tinta.segmenter.modes import FENCE_MARKER, QUOTE_PREFIX
from tinta.stringbuilder import StringBuilder


class MarkupRenderer:
    """Render a Document back to markup text."""

    __slots__ = ()

    def render(self, node: Document) -> str:
        if not isinstance(node, Document):
            msg = f"MarkupRenderer.render expects a Document, got {type(node).__name__}"
            raise RenderError(msg)
        return self.render_blocks(node.children)

    def render_blocks(self, blocks: Sequence[Block]) -> str:
        sb = StringBuilder()
        previous: Block | None = None
        for block in blocks:
            if previous is not None:
                list_run = isinstance(previous, ListItem) and isinstance(block, ListItem)
                sb.append("\n" if list_run else "\n\n")
            sb.append(self._render_block(block))
            previous = block
        if sb:
            sb.append("\n")
        return sb.build()

    def _render_block(self, block: Block) -> str:
        match block:
            case Heading(level=level, text=text):
                return f"{'#' * level} {text}"
            case Paragraph(text=text):
                return text
            case ListItem(ordered=True, index=index, text=text):
                return f"{index if index is not None else 1}. {text}"
            case ListItem(text=text):
                return f"- {text}"
            case BlockQuote(text=text):
                return "\n".join(QUOTE_PREFIX + line for line in text.split("\n"))
            case HorizontalRule():
                return "---"
            case CodeBlock(language=language, code=code):
                return f"{FENCE_MARKER}{language}\n{code}\n{FENCE_MARKER}"
            case Table():
                return self._render_table(block)
            case Opaque(kind=kind, payload=payload):
                return f"[[{kind}:{payload}]]" if payload else f"[[{kind}]]"
            case Image(alt=alt, src=src):
                return f"![{alt}]({src})"
            case _:
                msg = f"Cannot render {type(block).__name__} as a block"
                raise RenderError(msg)

    def _render_table(self, table: Table) -> str:
        lines = [self._render_row(row) for row in table.rows]
        if table.has_header:
            width = len(table.rows[0]) if table.rows else 1
            lines.insert(1, "|" + "|".join([" --- "] * width) + "|")
        return "\n".join(lines)

    def _render_row(self, row: tuple[str, ...]) -> str:
        # Empty cells stay tight: "|  |" would read back as a separator row
        return "|" + "|".join(f" {cell} " if cell else "" for cell in row) + "|"
