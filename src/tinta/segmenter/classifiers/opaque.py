"""Opaque sentinel and standalone image classifier mixin.

Sentinel markers sit on a line of their own::

    [[ad]]
    [[ad:in-article]]
    [[quiz:{"id": 42}]]

The kind names the host widget; the payload after the first colon is handed
over untouched.
"""

import re

from tinta.location import SourceLocation
from tinta.nodes import Image, Opaque

_SENTINEL_RE = re.compile(r"^\[\[([A-Za-z][A-Za-z0-9_-]*)(?::(.*))?\]\]$", re.DOTALL)

_IMAGE_RE = re.compile(r"^!\[([^\]]*)\]\(([^)]+)\)$")


class OpaqueClassifierMixin:
    """Mixin providing sentinel marker and image line classification."""

    def _try_classify_opaque(
        self,
        line: str,
        kinds: frozenset[str] | None = None,
        location: SourceLocation | None = None,
    ) -> Opaque | None:
        """Try to classify a line as an opaque sentinel marker.

        Args:
            line: Line content
            kinds: Accepted kinds, or None to accept any kind
            location: Location to attach to the block

        Returns:
            Opaque if the line is a sentinel of an accepted kind, None otherwise.
        """
        match = _SENTINEL_RE.match(line.strip())
        if match is None:
            return None

        kind = match.group(1)
        if kinds is not None and kind not in kinds:
            return None
        return Opaque(kind, (match.group(2) or "").strip(), location=location)

    def _try_classify_image(
        self, line: str, location: SourceLocation | None = None
    ) -> Image | None:
        match = _IMAGE_RE.match(line.strip())
        if match is None:
            return None
        return Image(match.group(1), match.group(2).strip(), location=location)
