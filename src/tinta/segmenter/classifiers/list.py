"""List item classifier mixin."""

import re

from tinta.location import SourceLocation
from tinta.nodes import ListItem

_BULLET_RE = re.compile(r"^[-*] (.*)$", re.DOTALL)
_NUMBERED_RE = re.compile(r"^(\d+)\. (.*)$", re.DOTALL)


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _try_classify_list_item(
        self, line: str, location: SourceLocation | None = None
    ) -> ListItem | None:
        """Try to classify a line as a bullet or numbered list item.

        Bullets are ``- `` or ``* ``; numbered items are digits followed by
        ``. ``. Each line is its own item.

        Returns:
            ListItem if the line matches, None otherwise.
        """
        match = _BULLET_RE.match(line)
        if match is not None:
            return ListItem(False, None, match.group(1), location=location)

        match = _NUMBERED_RE.match(line)
        if match is not None:
            return ListItem(True, int(match.group(1)), match.group(2), location=location)

        return None
