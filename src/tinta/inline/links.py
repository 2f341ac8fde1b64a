"""Link parsing for the inline formatter."""

from __future__ import annotations

from tinta.inline.scanner import DelimiterIndex
from tinta.nodes import Inline, Link


class LinkParsingMixin:
    """Inline links: ``[label](href)``.

    The label runs to the first ``]``, which must be followed immediately
    by ``(``; the href runs to the first ``)``. Both must be non-empty.
    The label is formatted recursively, the href is kept verbatim.

    """

    _text: str
    _index: DelimiterIndex

    def _format_nested(self, text: str) -> tuple[Inline, ...]:
        raise NotImplementedError

    def _try_parse_link(self, pos: int) -> tuple[Inline, int] | None:
        """Try to parse a link starting at the ``[`` at pos.

        Returns:
            (Link, position after the closing parenthesis) or None.
        """
        text = self._text

        label_end = self._index.find("]", pos + 1)
        if label_end <= pos + 1:
            return None
        if not text.startswith("(", label_end + 1):
            return None

        href_end = self._index.find(")", label_end + 2)
        if href_end <= label_end + 2:
            return None

        label = self._format_nested(text[pos + 1 : label_end])
        return Link(label, text[label_end + 2 : href_end]), href_end + 1
