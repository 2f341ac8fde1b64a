"""Block segmenter for Tinta.

Turns markup text into a flat, ordered sequence of typed blocks.

Usage:
    >>> from tinta.segmenter import segment_blocks
    >>> segment_blocks("# Title\\n\\n- one\\n- two")
    [Heading(level=1, text='Title'), ListItem(ordered=False, index=None, text='one'), ...]

"""

from tinta.config import ParseConfig
from tinta.nodes import Block
from tinta.segmenter.core import Segmenter
from tinta.segmenter.modes import SegmenterMode


def segment_blocks(
    text: str,
    *,
    config: ParseConfig | None = None,
    source_file: str | None = None,
) -> list[Block]:
    """Segment markup text into blocks.

    Total: never raises, for any string.

    Args:
        text: Markup source
        config: Explicit config (defaults to the context's config)
        source_file: Optional path recorded on block locations

    Returns:
        Blocks in source order. Empty for empty or blank input.
    """
    return Segmenter(text, source_file=source_file, config=config).segment()


__all__ = ["Segmenter", "SegmenterMode", "segment_blocks"]
