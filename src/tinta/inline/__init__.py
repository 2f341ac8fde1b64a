"""Inline formatter for Tinta.

Resolves bold, italic, underline, inline code and links inside the text of
a single block.

Usage:
    >>> from tinta.inline import format_inline
    >>> format_inline("see `code` or [docs](https://example.com)")
    [Text(content='see '), Code(code='code'), Text(content=' or '), Link(...)]

"""

from collections.abc import Iterable

from tinta.inline.core import InlineFormatter
from tinta.inline.scanner import INLINE_SPECIAL, DelimiterIndex
from tinta.nodes import Bold, Code, Inline, Italic, Link, Text, Underline


def format_inline(text: str) -> list[Inline]:
    """Format one block's text into inline nodes.

    Total: never raises, for any string. Text is not escaped.

    Args:
        text: Raw text of a paragraph, heading, list item, quote or table cell

    Returns:
        Inline nodes in order.
    """
    return InlineFormatter(text).format()


def plain_text(nodes: Iterable[Inline]) -> str:
    """Concatenate the visible text of inline nodes, dropping all markup.

    Link targets are dropped; link labels are kept.

    Example:
        >>> plain_text(format_inline("**Intro** to [sets](/sets)"))
        'Intro to sets'
    """
    parts: list[str] = []
    for node in nodes:
        match node:
            case Text(content=content):
                parts.append(content)
            case Code(code=code):
                parts.append(code)
            case Bold(children=children) | Italic(children=children) | Underline(
                children=children
            ):
                parts.append(plain_text(children))
            case Link(label=label):
                parts.append(plain_text(label))
    return "".join(parts)


__all__ = [
    "DelimiterIndex",
    "INLINE_SPECIAL",
    "InlineFormatter",
    "format_inline",
    "plain_text",
]
