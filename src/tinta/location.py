"""Source location tracking for blocks.

Blocks remember the source lines they were segmented from so consumers can
point back into the original text (editor highlighting, debugging output).

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line span of a block in the source text.

    Lines are 1-indexed and inclusive on both ends.

    Attributes:
        lineno: First source line of the block
        end_lineno: Last source line of the block
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, end_lineno=5)
            >>> str(loc)
            '3-5'
            >>> str(SourceLocation(1, 1, "lesson.md"))
            'lesson.md:1'

    """

    lineno: int
    end_lineno: int
    source_file: str | None = None

    def __str__(self) -> str:
        span = str(self.lineno)
        if self.end_lineno != self.lineno:
            span = f"{self.lineno}-{self.end_lineno}"
        if self.source_file:
            return f"{self.source_file}:{span}"
        return span

