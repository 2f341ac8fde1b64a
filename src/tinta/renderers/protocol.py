"""BlockRenderer protocol: the interface presentation layers implement.

Any object with ``render(document) -> str`` conforms. The parser never
depends on a renderer; renderers depend only on the node types.

Example:
    from tinta.renderers.protocol import BlockRenderer

    def render_lesson(renderer: BlockRenderer, text: str) -> str:
        return renderer.render(parse(text))

"""

from typing import Protocol

from tinta.nodes import Document


class BlockRenderer(Protocol):
    """Protocol for document renderers.

    Implementations are responsible for what the parser leaves to them:
    grouping consecutive list items, mapping opaque blocks to host widgets,
    choosing code presentation by language, and escaping text for the
    target format.

    """

    def render(self, node: Document) -> str:
        """Render a Document to a string."""
        ...
