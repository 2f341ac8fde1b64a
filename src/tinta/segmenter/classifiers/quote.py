"""Block quote classifier mixin."""

from tinta.segmenter.modes import QUOTE_PREFIX


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    def _is_quote(self, line: str) -> bool:
        return line.startswith(QUOTE_PREFIX)

    def _quote_content(self, line: str) -> str:
        """Strip the ``> `` prefix. Only valid after ``_is_quote``."""
        return line[len(QUOTE_PREFIX) :]
