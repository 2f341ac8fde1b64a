"""Host widgets: turn sentinel lines into application markup.

Lines like ``[[ad:in-article]]`` become Opaque blocks. The segmenter does not
interpret them; the host decides what each kind renders as.
"""

import json

from tinta import Markup
from tinta.nodes import Opaque


def render_widget(block: Opaque) -> str:
    if block.kind == "ad":
        return f'<ins class="ad-slot" data-slot="{block.payload or "default"}"></ins>'
    if block.kind == "quiz":
        quiz = json.loads(block.payload)
        return f'<div class="quiz" data-quiz-id="{quiz["id"]}"></div>'
    raise KeyError(block.kind)


lesson = """## Loops

A `for` loop walks any iterable.

[[ad:in-article]]

[[quiz:{"id": 17}]]

[[poll]]
"""

md = Markup(opaque_kinds={"ad", "quiz", "poll"}, opaque_handler=render_widget)
# "poll" has no handler branch, so it falls back to the placeholder div
print(md(lesson))
