"""Segmenter operating modes.

Most lines are classified on their own. Four constructs carry state from
one line to the next, and each gets a mode:
- BLOCK: Between blocks, classifying each line independently
- CODE_FENCE: Inside a fenced code block, collecting lines verbatim
- TABLE: Collecting consecutive pipe rows
- PARAGRAPH: Joining continuation lines into one paragraph
- QUOTE: Joining consecutive quote lines (only with ``merge_blockquotes``)
"""

from __future__ import annotations

from enum import Enum, auto


class SegmenterMode(Enum):
    """Segmenter operating modes."""

    BLOCK = auto()
    CODE_FENCE = auto()
    TABLE = auto()
    PARAGRAPH = auto()
    QUOTE = auto()


# Opening and closing fences: three or more backticks at the start of a line
FENCE_MARKER = "```"

QUOTE_PREFIX = "> "
