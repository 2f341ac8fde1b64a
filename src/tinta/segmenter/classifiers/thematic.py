"""Horizontal rule classifier mixin."""

from tinta.location import SourceLocation
from tinta.nodes import HorizontalRule


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _try_classify_rule(
        self, line: str, location: SourceLocation | None = None
    ) -> HorizontalRule | None:
        """Try to classify a line as a horizontal rule.

        A rule is three or more of the same character, ``-`` or ``*``, with
        nothing else on the line apart from surrounding whitespace.
        """
        content = line.strip()
        if len(content) < 3 or content[0] not in "-*":
            return None
        if content.count(content[0]) != len(content):
            return None
        return HorizontalRule(location=location)
