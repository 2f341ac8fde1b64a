"""Core inline formatting.

A single left-to-right cursor. At each special character the patterns for
that character are tried in priority order and the first match is taken:

1. Inline code     `...`
2. Bold            **...**
3. Italic          *...*
4. Underline       __...__
5. Link            [label](href)

Anything else is text. A special character that starts no pattern (a lone
``*``, an unclosed backtick) becomes a one-character Text node and the cursor
moves on, so malformed markup never swallows the rest of the string.

There is no backtracking: emitted nodes are final.

Thread Safety:
InlineFormatter instances are single-use. Create one per string.

"""

from __future__ import annotations

from collections.abc import Callable

from tinta.inline.emphasis import EmphasisParsingMixin
from tinta.inline.links import LinkParsingMixin
from tinta.inline.scanner import INLINE_SPECIAL, DelimiterIndex
from tinta.nodes import Inline, Text

type _PatternParser = Callable[[InlineFormatter, int], tuple[Inline, int] | None]

# Patterns each special character can start, highest priority first
_PATTERNS: dict[str, tuple[_PatternParser, ...]] = {
    "`": (EmphasisParsingMixin._try_parse_code,),
    "*": (EmphasisParsingMixin._try_parse_bold, EmphasisParsingMixin._try_parse_italic),
    "_": (EmphasisParsingMixin._try_parse_underline,),
    "[": (LinkParsingMixin._try_parse_link,),
}


class InlineFormatter(EmphasisParsingMixin, LinkParsingMixin):
    """Formats one block's text into inline nodes.

    Usage:
            >>> InlineFormatter("**bold** and *italic*").format()
            [Bold(children=(Text(content='bold'),)), Text(content=' and '), ...]

    """

    __slots__ = ("_text", "_index")

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = DelimiterIndex(text)

    def format(self) -> list[Inline]:
        """Format the whole string.

        Returns:
            Inline nodes in order. Empty for an empty string.

        Complexity: O(n) where n = len(text); nested content is rescanned
        once per nesting level, and nesting depth is bounded by the number
        of distinct delimiters.
        """
        text = self._text
        text_len = len(text)
        nodes: list[Inline] = []
        nodes_append = nodes.append
        pos = 0

        while pos < text_len:
            char = text[pos]
            if char not in INLINE_SPECIAL:
                end = self._index.next_special(pos)
                nodes_append(Text(text[pos:end]))
                pos = end
                continue

            for parse in _PATTERNS[char]:
                result = parse(self, pos)
                if result is not None:
                    node, pos = result
                    nodes_append(node)
                    break
            else:
                nodes_append(Text(text[pos]))
                pos += 1

        return nodes

    def _format_nested(self, text: str) -> tuple[Inline, ...]:
        return tuple(InlineFormatter(text).format())
