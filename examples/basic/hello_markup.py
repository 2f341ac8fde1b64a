"""Segment and render a chat message in a few lines, no config needed."""

from tinta import Markup, segment_blocks

message = """# Quick recap

Use **sets** for membership tests and `dict` for lookups.

- sets: O(1) `in`
- lists: O(n) `in`
"""

for block in segment_blocks(message):
    print(type(block).__name__, repr(block))

print(Markup()(message))
