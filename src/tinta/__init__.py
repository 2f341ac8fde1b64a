"""
Tinta: lightweight markup segmenter and inline formatter.

Turns loosely structured text (chat messages, lesson bodies, docs) into a
flat sequence of typed blocks, and the text of each block into a tree of
inline nodes. Both steps are pure, total functions: no I/O, no shared
state, no exceptions for any input.

Quick Start:
    >>> from tinta import segment_blocks, format_inline
    >>> segment_blocks("# Intro\\n\\nSome **bold** text")
    [Heading(level=1, text='Intro'), Paragraph(text='Some **bold** text')]
    >>> format_inline("Some **bold** text")
    [Text(content='Some '), Bold(children=(Text(content='bold'),)), Text(content=' text')]

    >>> # Or parse and render HTML in one go
    >>> from tinta import Markup
    >>> md = Markup()
    >>> md("- one\\n- two")
    '<ul>\\n<li>one</li>\\n<li>two</li>\\n</ul>\\n'

Host widgets:
    A line like ``[[ad:in-article]]`` becomes ``Opaque(kind="ad",
    payload="in-article")``; pass ``opaque_handler`` to the HTML renderer to
    turn it into real markup.
"""

from __future__ import annotations

from tinta.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tinta.errors import RenderError, SerializationError, TintaError
from tinta.inline import InlineFormatter, format_inline, plain_text
from tinta.languages import normalize_language
from tinta.location import SourceLocation
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
    Node,
    Opaque,
    Paragraph,
    Table,
    Text,
    Underline,
)
from tinta.renderers.html import HtmlRenderer, OpaqueHandler
from tinta.renderers.markup import MarkupRenderer
from tinta.renderers.protocol import BlockRenderer
from tinta.segmenter import Segmenter, segment_blocks
from tinta.serialization import from_dict, from_json, to_dict, to_json
from tinta.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Segment markup source into a Document.

    Args:
        source: Markup source text
        source_file: Optional source file path recorded on locations
        config: Explicit config (defaults to the context's config)

    Returns:
        Document whose children are the segmented blocks

    Example:
        >>> doc = parse("## Setup\\n\\n```sh\\npip install tinta\\n```")
        >>> doc.children[1]
        CodeBlock(language='sh', code='pip install tinta')
    """
    blocks = segment_blocks(source, config=config, source_file=source_file)
    line_count = source.count("\n") + 1
    loc = SourceLocation(lineno=1, end_lineno=line_count, source_file=source_file)
    return Document(tuple(blocks), location=loc)


def render(doc: Document, *, opaque_handler: OpaqueHandler | None = None) -> str:
    """Render a Document to HTML.

    Args:
        doc: Document to render
        opaque_handler: Host callback returning HTML for Opaque blocks

    Returns:
        HTML string
    """
    return HtmlRenderer(opaque_handler=opaque_handler).render(doc)


class Markup:
    """High-level processor combining segmenter, formatter and HTML renderer.

    Usage:
        >>> md = Markup(merge_blockquotes=True)
        >>> md("> first\\n> second")
        '<blockquote><p>first<br />\\nsecond</p></blockquote>\\n'

        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

    Thread Safety:
        The config is built once and passed explicitly on every call, and
        the renderer keeps no per-call state. Safe to share one instance
        across threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        image_blocks: bool = False,
        merge_blockquotes: bool = False,
        opaque_kinds: frozenset[str] | set[str] | None = None,
        default_language: str = "text",
        opaque_handler: OpaqueHandler | None = None,
        heading_ids: bool = True,
    ) -> None:
        """Initialize the processor.

        Args:
            image_blocks: Recognize ``![alt](src)`` lines as Image blocks
            merge_blockquotes: Join consecutive quote lines into one block
            opaque_kinds: Sentinel kinds to accept (None accepts any)
            default_language: Tag for fences without an info string
            opaque_handler: Host callback returning HTML for Opaque blocks
            heading_ids: Add slug ids to rendered headings
        """
        self._config = ParseConfig(
            image_blocks_enabled=image_blocks,
            merge_blockquotes=merge_blockquotes,
            opaque_kinds=frozenset(opaque_kinds) if opaque_kinds is not None else None,
            default_language=default_language,
        )
        self._renderer = HtmlRenderer(opaque_handler=opaque_handler, heading_ids=heading_ids)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render to HTML in one call."""
        return self._renderer.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source into a Document using this instance's config."""
        return parse(source, source_file=source_file, config=self._config)

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return self._renderer.render(doc)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "segment_blocks",
    "format_inline",
    "parse",
    "render",
    "plain_text",
    # Block nodes
    "Block",
    "BlockQuote",
    "CodeBlock",
    "Document",
    "Heading",
    "HorizontalRule",
    "Image",
    "ListItem",
    "Opaque",
    "Paragraph",
    "Table",
    # Inline nodes
    "Inline",
    "Bold",
    "Code",
    "Italic",
    "Link",
    "Text",
    "Underline",
    "Node",
    # Components
    "Segmenter",
    "InlineFormatter",
    # Renderers
    "BlockRenderer",
    "HtmlRenderer",
    "MarkupRenderer",
    "OpaqueHandler",
    "normalize_language",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "TintaError",
    "RenderError",
    "SerializationError",
    # Location
    "SourceLocation",
    # High-level
    "Markup",
]
