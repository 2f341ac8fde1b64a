"""Typed nodes for Tinta.

All nodes are frozen dataclasses with slots:
- Immutability: a parsed tree can be shared across threads and cached
- Pattern matching: ``match`` statements work naturally
- Structural equality: blocks compare by content, never by source position

Node Hierarchy:
Node (base)
├── Block (segmenter output)
│   ├── Heading
│   ├── Paragraph
│   ├── ListItem
│   ├── BlockQuote
│   ├── HorizontalRule
│   ├── CodeBlock
│   ├── Table
│   ├── Opaque
│   └── Image (opt-in)
├── Inline (formatter output)
│   ├── Text
│   ├── Bold
│   ├── Italic
│   ├── Underline
│   ├── Code
│   └── Link
└── Document (root returned by ``tinta.parse``)

Text-bearing blocks keep their raw markup string. Inline formatting is a
separate pass (``format_inline``) that consumers run per block, so blocks
whose text is never displayed never pay for it.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from tinta.location import SourceLocation

# =============================================================================
# Base Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes."""


@dataclass(frozen=True, slots=True)
class BlockNode(Node):
    """Base class for block nodes.

    ``location`` is keyword-only and excluded from equality, hashing and repr.

    """

    location: SourceLocation | None = field(default=None, compare=False, repr=False, kw_only=True)


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text. Never escaped by the parser."""

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold run.

    Markup: **text**

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic run.

    Markup: *text*

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Underline(Node):
    """Underlined run.

    Markup: __text__

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code span. Always a leaf: its content is never formatted.

    Markup: `code`

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink. ``href`` is kept verbatim.

    Markup: [label](href)

    """

    label: tuple[Inline, ...]
    href: str


# =============================================================================
# Block Nodes
# =============================================================================


def _format(text: str) -> tuple[Inline, ...]:
    from tinta.inline import format_inline

    return tuple(format_inline(text))


@dataclass(frozen=True, slots=True)
class Heading(BlockNode):
    """Heading, level 1-6.

    Markup: ## Title

    """

    level: int
    text: str

    def inlines(self) -> tuple[Inline, ...]:
        return _format(self.text)


@dataclass(frozen=True, slots=True)
class Paragraph(BlockNode):
    """Paragraph. Continuation lines are joined with single spaces."""

    text: str

    def inlines(self) -> tuple[Inline, ...]:
        return _format(self.text)


@dataclass(frozen=True, slots=True)
class ListItem(BlockNode):
    """One bullet or numbered line.

    Consecutive items are separate blocks; grouping them into a list
    container is left to the renderer.

    Markup: ``- text``, ``* text`` or ``3. text``

    """

    ordered: bool
    index: int | None
    text: str

    def inlines(self) -> tuple[Inline, ...]:
        return _format(self.text)


@dataclass(frozen=True, slots=True)
class BlockQuote(BlockNode):
    """Quoted line, with the ``> `` prefix removed.

    With ``merge_blockquotes`` enabled, ``text`` holds consecutive quote
    lines joined by newlines.

    """

    text: str

    def inlines(self) -> tuple[Inline, ...]:
        return _format(self.text)


@dataclass(frozen=True, slots=True)
class HorizontalRule(BlockNode):
    """Horizontal rule.

    Markup: ``---`` or ``***``

    """


@dataclass(frozen=True, slots=True)
class CodeBlock(BlockNode):
    """Fenced code block.

    Markup:
        ```python
        print("hi")
        ```

    ``code`` holds the body lines verbatim, joined with newlines.

    """

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class Table(BlockNode):
    """Pipe table. Cells are trimmed raw markup strings.

    Markup:
        | A | B |
        |---|---|
        | 1 | 2 |

    The separator row is consumed: it sets ``has_header`` and never appears
    in ``rows``.

    """

    rows: tuple[tuple[str, ...], ...]
    has_header: bool

    @property
    def header(self) -> tuple[str, ...] | None:
        if self.has_header and self.rows:
            return self.rows[0]
        return None

    @property
    def body(self) -> tuple[tuple[str, ...], ...]:
        return self.rows[1:] if self.has_header else self.rows


@dataclass(frozen=True, slots=True)
class Opaque(BlockNode):
    """Host-owned block recognized by its sentinel and passed through.

    Markup: ``[[kind]]`` or ``[[kind:payload]]`` on a line of its own

    """

    kind: str
    payload: str


@dataclass(frozen=True, slots=True)
class Image(BlockNode):
    """Standalone image line (only with ``image_blocks_enabled``).

    Markup: ![alt](src)

    """

    alt: str
    src: str


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node wrapping a segmented block sequence."""

    children: tuple[Block, ...]
    location: SourceLocation | None = field(default=None, compare=False, repr=False, kw_only=True)


# PEP 695 type aliases for the closed unions
type Inline = Text | Bold | Italic | Underline | Code | Link

type Block = (
    Heading
    | Paragraph
    | ListItem
    | BlockQuote
    | HorizontalRule
    | CodeBlock
    | Table
    | Opaque
    | Image
)

BLOCK_TYPES: tuple[type[BlockNode], ...] = (
    Heading,
    Paragraph,
    ListItem,
    BlockQuote,
    HorizontalRule,
    CodeBlock,
    Table,
    Opaque,
    Image,
)

INLINE_TYPES: tuple[type[Node], ...] = (Text, Bold, Italic, Underline, Code, Link)
