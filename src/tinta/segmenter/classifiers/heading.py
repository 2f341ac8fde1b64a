"""Heading classifier mixin."""

import re

from tinta.location import SourceLocation
from tinta.nodes import Heading

# 1-6 hashes, exactly one space, then the heading text
_HEADING_RE = re.compile(r"^(#{1,6}) (.*)$")


class HeadingClassifierMixin:
    """Mixin providing heading classification."""

    def _try_classify_heading(
        self, line: str, location: SourceLocation | None = None
    ) -> Heading | None:
        """Try to classify a line as a heading.

        A heading with no text after the marker is not a heading; the line
        falls through to the paragraph rule.

        Returns:
            Heading if the line matches, None otherwise.
        """
        match = _HEADING_RE.match(line)
        if match is None:
            return None

        text = match.group(2).strip()
        if not text:
            return None
        return Heading(len(match.group(1)), text, location=location)
