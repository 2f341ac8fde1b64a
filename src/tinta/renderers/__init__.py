"""Reference renderers for Tinta documents.

- HtmlRenderer: HTML with escaping, list grouping and heading ids
- MarkupRenderer: markup text that segments back into the same blocks
"""

from tinta.renderers.html import HtmlRenderer
from tinta.renderers.markup import MarkupRenderer
from tinta.renderers.protocol import BlockRenderer

__all__ = ["BlockRenderer", "HtmlRenderer", "MarkupRenderer"]
