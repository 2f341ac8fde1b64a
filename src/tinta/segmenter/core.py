"""Single-pass block segmenter.

Walks the input one line at a time with a small state machine:
1. Classify the line (pure classifier mixins, fixed priority order)
2. Either emit a block, or enter/extend a multi-line mode
3. Advance; a line is re-dispatched in BLOCK mode only after the mode that
   rejected it has flushed its block, so every line is consumed exactly once

The segmenter has no failure mode. Anything no rule recognizes becomes a
Paragraph, and unterminated fences still produce a CodeBlock.

Thread Safety:
Segmenter instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from tinta.config import ParseConfig, get_parse_config
from tinta.location import SourceLocation
from tinta.nodes import Block, BlockQuote, CodeBlock, Paragraph, Table
from tinta.segmenter.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    OpaqueClassifierMixin,
    QuoteClassifierMixin,
    TableClassifierMixin,
    ThematicClassifierMixin,
)
from tinta.segmenter.modes import SegmenterMode
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


class Segmenter(
    FenceClassifierMixin,
    OpaqueClassifierMixin,
    HeadingClassifierMixin,
    ThematicClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
    TableClassifierMixin,
):
    """Turns markup text into an ordered list of blocks.

    Usage:
            >>> Segmenter("# Hello\\n\\nWorld").segment()
            [Heading(level=1, text='Hello'), Paragraph(text='World')]

    Rule order per line (first match wins):
        fence, opaque sentinel, image (opt-in), heading, horizontal rule,
        block quote, list item, table row, blank line, paragraph.
    Once a table or fence is open, its mode sees the line first.

    """

    __slots__ = (
        "_lines",
        "_pos",
        "_mode",
        "_config",
        "_source_file",
        "_blocks",
        # Multi-line construct state
        "_buffer",  # Lines collected by the active mode
        "_start",  # 0-based index of the line that opened the active mode
        "_fence_language",
        "_table_has_header",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize segmenter with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path recorded on locations
            config: Parse configuration (defaults to the context's config)
        """
        self._lines = source.split("\n")
        self._pos = 0
        self._mode = SegmenterMode.BLOCK
        self._config = config if config is not None else get_parse_config()
        self._source_file = source_file
        self._blocks: list[Block] = []

        self._buffer: list[str] = []
        self._start = 0
        self._fence_language = ""
        self._table_has_header = False

    def segment(self) -> list[Block]:
        """Segment the whole source.

        Returns:
            Blocks in source order.

        Complexity: O(n) where n = len(source)
        """
        line_count = len(self._lines)
        while self._pos < line_count:
            raw = self._lines[self._pos]
            if self._dispatch_mode(raw):
                self._pos += 1

        self._flush_at_eof()
        return self._blocks

    def _dispatch_mode(self, raw: str) -> bool:
        """Hand the current line to the active mode.

        Returns:
            True if the line was consumed, False if the active mode ended
            and the line must be classified again in BLOCK mode.
        """
        if self._mode == SegmenterMode.CODE_FENCE:
            return self._scan_fence_line(raw)

        # Outside fences a trailing carriage return never matters
        line = raw[:-1] if raw.endswith("\r") else raw

        if self._mode == SegmenterMode.BLOCK:
            return self._scan_block_line(line)
        if self._mode == SegmenterMode.TABLE:
            return self._scan_table_line(line)
        if self._mode == SegmenterMode.PARAGRAPH:
            return self._scan_paragraph_line(line)
        return self._scan_quote_line(line)

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _here(self) -> SourceLocation:
        lineno = self._pos + 1
        return SourceLocation(lineno, lineno, self._source_file)

    def _span(self) -> SourceLocation:
        """Location from the line that opened the active mode to the last line it took."""
        return SourceLocation(self._start + 1, self._start + len(self._buffer), self._source_file)

    # =========================================================================
    # Mode scanners
    # =========================================================================

    def _scan_block_line(self, line: str) -> bool:
        config = self._config
        location = self._here()

        if self._is_fence(line):
            self._enter(SegmenterMode.CODE_FENCE)
            self._fence_language = self._fence_info(line, self._config.default_language)
            return True

        block: Block | None = self._try_classify_opaque(line, config.opaque_kinds, location)
        if block is None and config.image_blocks_enabled:
            block = self._try_classify_image(line, location)
        if block is None:
            block = self._try_classify_heading(line, location)
        if block is None:
            block = self._try_classify_rule(line, location)
        if block is not None:
            self._blocks.append(block)
            return True

        if self._is_quote(line):
            if config.merge_blockquotes:
                self._enter(SegmenterMode.QUOTE)
                self._buffer.append(self._quote_content(line))
            else:
                self._blocks.append(BlockQuote(self._quote_content(line), location=location))
            return True

        block = self._try_classify_list_item(line, location)
        if block is not None:
            self._blocks.append(block)
            return True

        if self._is_table_row(line):
            self._enter(SegmenterMode.TABLE)
            self._table_has_header = False
            return self._scan_table_line(line)

        if not line.strip():
            return True

        self._enter(SegmenterMode.PARAGRAPH)
        self._buffer.append(line)
        return True

    def _scan_fence_line(self, raw: str) -> bool:
        """Collect a fence body line, or close the fence."""
        if self._is_fence(raw):
            self._emit_code_block()
            return True
        self._buffer.append(raw)
        return True

    def _scan_table_line(self, line: str) -> bool:
        """Collect a table row. Any other line ends the table."""
        if not self._is_table_row(line):
            self._emit_table()
            return False

        # Separator rows only mark the header; they never become data. The
        # buffer still records them so the block's span covers every line.
        if self._is_table_separator(line):
            self._table_has_header = True
            self._buffer.append("")
        else:
            self._buffer.append(line)
        return True

    def _scan_paragraph_line(self, line: str) -> bool:
        if not line.strip():
            self._emit_paragraph()
            return True
        if self._interrupts_paragraph(line):
            self._emit_paragraph()
            return False
        self._buffer.append(line)
        return True

    def _scan_quote_line(self, line: str) -> bool:
        if not self._is_quote(line):
            self._emit_quote()
            return False
        self._buffer.append(self._quote_content(line))
        return True

    def _interrupts_paragraph(self, line: str) -> bool:
        """Check whether a line starts a block that ends paragraph continuation."""
        return (
            self._is_fence(line)
            or self._is_quote(line)
            or self._is_table_row(line)
            or self._try_classify_heading(line) is not None
            or self._try_classify_list_item(line) is not None
            or self._try_classify_opaque(line, self._config.opaque_kinds) is not None
        )

    # =========================================================================
    # Emission
    # =========================================================================

    def _enter(self, mode: SegmenterMode) -> None:
        self._mode = mode
        self._start = self._pos
        self._buffer = []

    def _leave(self) -> None:
        self._mode = SegmenterMode.BLOCK
        self._buffer = []

    def _emit_code_block(self) -> None:
        # The closing fence line is not in the buffer; include it in the span
        location = SourceLocation(self._start + 1, self._pos + 1, self._source_file)
        self._blocks.append(
            CodeBlock(self._fence_language, "\n".join(self._buffer), location=location)
        )
        self._leave()

    def _emit_table(self) -> None:
        rows = tuple(self._split_table_row(row) for row in self._buffer if row)
        location = SourceLocation(self._start + 1, self._pos, self._source_file)
        if rows:
            self._blocks.append(Table(rows, self._table_has_header, location=location))
        else:
            logger.debug("Dropping table at %s: no data rows", location)
        self._leave()

    def _emit_paragraph(self) -> None:
        self._blocks.append(Paragraph(" ".join(self._buffer), location=self._span()))
        self._leave()

    def _emit_quote(self) -> None:
        self._blocks.append(BlockQuote("\n".join(self._buffer), location=self._span()))
        self._leave()

    def _flush_at_eof(self) -> None:
        """Emit whatever multi-line construct is still open."""
        if self._mode == SegmenterMode.CODE_FENCE:
            logger.debug("Closing unterminated code fence opened at line %d", self._start + 1)
            location = SourceLocation(self._start + 1, len(self._lines), self._source_file)
            self._blocks.append(
                CodeBlock(self._fence_language, "\n".join(self._buffer), location=location)
            )
            self._leave()
        elif self._mode == SegmenterMode.TABLE:
            self._emit_table()
        elif self._mode == SegmenterMode.PARAGRAPH:
            self._emit_paragraph()
        elif self._mode == SegmenterMode.QUOTE:
            self._emit_quote()
