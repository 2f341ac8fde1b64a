"""Pipe table classifier mixin."""

import re

# A row made only of pipes, dashes, colons and whitespace marks the header
_SEPARATOR_RE = re.compile(r"^\|[\s\-:|]+\|$")


class TableClassifierMixin:
    """Mixin providing pipe table row classification.

    Rows are recognized on the line with surrounding whitespace removed.
    """

    def _is_table_row(self, line: str) -> bool:
        content = line.strip()
        return len(content) >= 2 and content[0] == "|" and content[-1] == "|"

    def _is_table_separator(self, line: str) -> bool:
        return _SEPARATOR_RE.match(line.strip()) is not None

    def _split_table_row(self, line: str) -> tuple[str, ...]:
        """Split a row into trimmed cells.

        The empty outer cells produced by the leading and trailing pipes are
        dropped.
        """
        content = line.strip()
        return tuple(cell.strip() for cell in content[1:-1].split("|"))
