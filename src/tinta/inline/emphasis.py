"""Code span and emphasis parsing for the inline formatter.

Every construct here takes the shortest match to its own closing delimiter
and needs at least one character of content that does not begin with the
delimiter character. Content of bold, italic and
underline runs is formatted recursively; code spans are leaves.
"""

from __future__ import annotations

from tinta.inline.scanner import DelimiterIndex
from tinta.nodes import Bold, Code, Inline, Italic, Underline


class EmphasisParsingMixin:
    """Inline code, bold, italic and underline.

    Required Host Attributes:
        - _text: str
        - _index: DelimiterIndex

    Required Host Methods:
        - _format_nested(text) -> tuple[Inline, ...]

    """

    _text: str
    _index: DelimiterIndex

    def _format_nested(self, text: str) -> tuple[Inline, ...]:
        raise NotImplementedError

    def _find_close(self, pos: int, delimiter: str) -> int:
        """Find the closing delimiter for an opener at pos.

        Content may not be empty and may not begin with the delimiter
        character, so the first character of a run like ``**`` or ``***``
        never opens anything; the cursor moves on and the next one can.

        Returns:
            Index of the closing delimiter, or -1.
        """
        start = pos + len(delimiter)
        if self._text.startswith(delimiter[0], start):
            return -1
        return self._index.find(delimiter, start)

    def _try_parse_code(self, pos: int) -> tuple[Inline, int] | None:
        """Parse `code` at pos. Content is kept raw."""
        close = self._find_close(pos, "`")
        if close == -1:
            return None
        return Code(self._text[pos + 1 : close]), close + 1

    def _try_parse_bold(self, pos: int) -> tuple[Inline, int] | None:
        """Parse **bold** at pos."""
        if not self._text.startswith("**", pos):
            return None
        close = self._find_close(pos, "**")
        if close == -1:
            return None
        return Bold(self._format_nested(self._text[pos + 2 : close])), close + 2

    def _try_parse_italic(self, pos: int) -> tuple[Inline, int] | None:
        """Parse *italic* at pos.

        Tried after bold, so a ``**`` pair that closes is never split into
        two italic markers.
        """
        close = self._find_close(pos, "*")
        if close == -1:
            return None
        return Italic(self._format_nested(self._text[pos + 1 : close])), close + 1

    def _try_parse_underline(self, pos: int) -> tuple[Inline, int] | None:
        """Parse __underline__ at pos."""
        if not self._text.startswith("__", pos):
            return None
        close = self._find_close(pos, "__")
        if close == -1:
            return None
        return Underline(self._format_nested(self._text[pos + 2 : close])), close + 2
