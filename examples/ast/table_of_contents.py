"""Typed blocks: collect headings for a table of contents."""

from tinta import format_inline, parse, plain_text
from tinta.nodes import Heading
from tinta.utils import slugify
from tinta.visitor import BaseVisitor


class TocCollector(BaseVisitor[None]):
    """Collect (level, text, anchor) for every heading."""

    def __init__(self) -> None:
        self.headings: list[tuple[int, str, str]] = []

    def visit_heading(self, node: Heading) -> None:
        text = plain_text(format_inline(node.text))
        self.headings.append((node.level, text, slugify(text)))


source = """# Introduction

Welcome to the lesson.

## Getting *Started*

First steps.

### Installing `tinta`

```sh
pip install tinta
```

## Next Steps
"""

collector = TocCollector()
collector.visit(parse(source))

print("Table of Contents:")
for level, text, anchor in collector.headings:
    indent = "  " * (level - 1)
    print(f"{indent}- [{text}](#{anchor})")
