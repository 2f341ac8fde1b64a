"""Delimiter lookup for the inline formatter.

Every inline pattern closes on a fixed delimiter string, so "does this
pattern match here" reduces to "where is the next closing delimiter". The
cursor only moves forward, which lets each lookup reuse the previous answer
for the same delimiter: a string full of unmatched ``*`` costs one scan,
not one scan per ``*``.

Thread Safety:
DelimiterIndex instances are local to one format() call.

"""

from __future__ import annotations

import re

# Characters that can start an inline pattern
INLINE_SPECIAL = frozenset("`*_[")

_SPECIAL_RE = re.compile("[" + re.escape("".join(sorted(INLINE_SPECIAL))) + "]")


class DelimiterIndex:
    """Forward-only ``str.find`` with per-delimiter memoization.

    Usage:
            >>> index = DelimiterIndex("a * b")
            >>> index.find("*", 3)
            -1
            >>> index.find("*", 4)  # answered from the cache
            -1

    """

    __slots__ = ("_text", "_cache")

    def __init__(self, text: str) -> None:
        self._text = text
        # delimiter -> (searched_from, found_at)
        self._cache: dict[str, tuple[int, int]] = {}

    def find(self, delimiter: str, start: int) -> int:
        """Return the first index >= start where delimiter occurs, or -1."""
        cached = self._cache.get(delimiter)
        if cached is not None:
            searched_from, found = cached
            if searched_from <= start and (found == -1 or found >= start):
                return found

        found = self._text.find(delimiter, start)
        self._cache[delimiter] = (start, found)
        return found

    def next_special(self, start: int) -> int:
        """Return the index of the next special character at or after start.

        Returns:
            Index of the character, or len(text) if there is none.
        """
        match = _SPECIAL_RE.search(self._text, start)
        return match.start() if match else len(self._text)
