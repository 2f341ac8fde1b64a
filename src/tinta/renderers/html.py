"""HTML renderer using the StringBuilder pattern.

Maps blocks and inline nodes to HTML. All text is escaped here: the parser
never escapes anything.

Thread Safety:
All per-render state lives in a RenderContext created fresh for each
render() call, so one HtmlRenderer can be shared across threads.

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from tinta.errors import RenderError
from tinta.inline import format_inline, plain_text
from tinta.languages import normalize_language
from tinta.nodes import (
    Block,
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    Inline,
    Italic,
    Link,
    ListItem,
    Opaque,
    Paragraph,
    Table,
    Text,
    Underline,
)
from tinta.stringbuilder import StringBuilder
from tinta.utils.logger import get_logger
from tinta.utils.text import escape_html, slugify as default_slugify

logger = get_logger(__name__)

type OpaqueHandler = Callable[[Opaque], str]


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call.
    """

    seen_slugs: set[str] = field(default_factory=set)


class HtmlRenderer:
    """Render a Document to HTML.

    Consecutive list items of the same kind are grouped into one ``<ul>`` or
    ``<ol>``; an ordered list starts at its first item's number.

    Opaque blocks go through ``opaque_handler`` when one is given. If the
    handler raises, the failure is logged and the default placeholder is
    rendered instead.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> renderer.render(parse("# Hello **World**"))
        '<h1 id="hello-world">Hello <strong>World</strong></h1>\\n'

    """

    __slots__ = ("_opaque_handler", "_heading_ids", "_slugify")

    def __init__(
        self,
        *,
        opaque_handler: OpaqueHandler | None = None,
        heading_ids: bool = True,
        slugify: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            opaque_handler: Host callback returning HTML for an Opaque block
            heading_ids: Add slug ``id`` attributes to headings
            slugify: Custom slug function for heading ids
        """
        self._opaque_handler = opaque_handler
        self._heading_ids = heading_ids
        self._slugify = slugify or default_slugify

    def render(self, node: Document) -> str:
        """Render a document to HTML.

        Raises:
            RenderError: If node is not a Document.
        """
        if not isinstance(node, Document):
            msg = f"HtmlRenderer.render expects a Document, got {type(node).__name__}"
            raise RenderError(msg)
        return self.render_blocks(node.children)

    def render_blocks(self, blocks: Sequence[Block]) -> str:
        """Render a block sequence (as returned by ``segment_blocks``)."""
        ctx = RenderContext()
        sb = StringBuilder()
        i = 0
        count = len(blocks)
        while i < count:
            block = blocks[i]
            if isinstance(block, ListItem):
                i = self._render_list(blocks, i, sb)
                continue
            self._render_block(block, sb, ctx)
            i += 1
        return sb.build()

    def render_inlines(self, nodes: Sequence[Inline]) -> str:
        """Render inline nodes (as returned by ``format_inline``)."""
        sb = StringBuilder()
        self._render_inlines(nodes, sb)
        return sb.build()

    # =========================================================================
    # Blocks
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        match block:
            case Heading(level=level, text=text):
                sb.append(f"<h{level}")
                if self._heading_ids:
                    sb.append(f' id="{escape_html(self._unique_slug(text, ctx))}"')
                sb.append(">")
                self._render_text(text, sb)
                sb.append_line(f"</h{level}>")
            case Paragraph(text=text):
                sb.append("<p>")
                self._render_text(text, sb)
                sb.append_line("</p>")
            case BlockQuote(text=text):
                sb.append("<blockquote><p>")
                for n, line in enumerate(text.split("\n")):
                    if n:
                        sb.append("<br />\n")
                    self._render_text(line, sb)
                sb.append_line("</p></blockquote>")
            case HorizontalRule():
                sb.append_line("<hr />")
            case CodeBlock(language=language, code=code):
                lang = normalize_language(language)
                sb.append(f'<pre><code class="language-{escape_html(lang)}">')
                sb.append(escape_html(code))
                sb.append_line("</code></pre>")
            case Table():
                self._render_table(block, sb)
            case Opaque():
                sb.append_line(self._render_opaque(block))
            case Image(alt=alt, src=src):
                sb.append(f'<figure><img src="{escape_html(src)}" alt="{escape_html(alt)}" />')
                if alt:
                    sb.append(f"<figcaption>{escape_html(alt)}</figcaption>")
                sb.append_line("</figure>")
            case _:
                msg = f"Cannot render {type(block).__name__} as a block"
                raise RenderError(msg)

    def _render_list(self, blocks: Sequence[Block], start: int, sb: StringBuilder) -> int:
        """Render the run of same-kind list items beginning at start.

        Returns:
            Index of the first block after the run.
        """
        first = blocks[start]
        ordered = first.ordered

        if not ordered:
            sb.append_line("<ul>")
        elif first.index is not None and first.index != 1:
            sb.append_line(f'<ol start="{first.index}">')
        else:
            sb.append_line("<ol>")

        i = start
        while i < len(blocks):
            item = blocks[i]
            if not isinstance(item, ListItem) or item.ordered != ordered:
                break
            sb.append("<li>")
            self._render_text(item.text, sb)
            sb.append_line("</li>")
            i += 1

        sb.append_line("</ol>" if ordered else "</ul>")
        return i

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        sb.append_line("<table>")
        header = table.header
        if header is not None:
            sb.append("<thead><tr>")
            for cell in header:
                sb.append("<th>")
                self._render_text(cell, sb)
                sb.append("</th>")
            sb.append_line("</tr></thead>")
        sb.append_line("<tbody>")
        for row in table.body:
            sb.append("<tr>")
            for cell in row:
                sb.append("<td>")
                self._render_text(cell, sb)
                sb.append("</td>")
            sb.append_line("</tr>")
        sb.append_line("</tbody>")
        sb.append_line("</table>")

    def _render_opaque(self, block: Opaque) -> str:
        if self._opaque_handler is not None:
            try:
                return self._opaque_handler(block)
            except Exception:
                logger.debug("Opaque handler failed for kind %r", block.kind, exc_info=True)
        return (
            f'<div data-opaque-kind="{escape_html(block.kind)}" '
            f'data-opaque-payload="{escape_html(block.payload)}"></div>'
        )

    def _unique_slug(self, text: str, ctx: RenderContext) -> str:
        base = self._slugify(plain_text(format_inline(text))) or "section"
        slug = base
        n = 1
        while slug in ctx.seen_slugs:
            slug = f"{base}-{n}"
            n += 1
        ctx.seen_slugs.add(slug)
        return slug

    # =========================================================================
    # Inlines
    # =========================================================================

    def _render_text(self, text: str, sb: StringBuilder) -> None:
        self._render_inlines(format_inline(text), sb)

    def _render_inlines(self, nodes: Sequence[Inline], sb: StringBuilder) -> None:
        for node in nodes:
            match node:
                case Text(content=content):
                    sb.append(escape_html(content))
                case Bold(children=children):
                    sb.append("<strong>")
                    self._render_inlines(children, sb)
                    sb.append("</strong>")
                case Italic(children=children):
                    sb.append("<em>")
                    self._render_inlines(children, sb)
                    sb.append("</em>")
                case Underline(children=children):
                    sb.append("<u>")
                    self._render_inlines(children, sb)
                    sb.append("</u>")
                case Code(code=code):
                    sb.append(f"<code>{escape_html(code)}</code>")
                case Link(label=label, href=href):
                    sb.append(
                        f'<a href="{escape_html(href)}" target="_blank" rel="noopener noreferrer">'
                    )
                    self._render_inlines(label, sb)
                    sb.append("</a>")
                case _:
                    msg = f"Cannot render {type(node).__name__} as an inline"
                    raise RenderError(msg)
