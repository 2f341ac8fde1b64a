"""Thread safety tests.

Segmentation, formatting and rendering share no mutable state, so running
them from many threads at once must give the same results as running them
one after another. These tests use real threads.
"""

from concurrent.futures import ThreadPoolExecutor

from tinta import HtmlRenderer, Markup, format_inline, parse, segment_blocks

_DOCUMENTS = [
    "# Title\n\nSome **bold** and *italic* text.",
    "- one\n- two\n- three\n\n1. first\n2. second",
    "```python\nfor i in range(3):\n    print(i)\n```",
    "| A | B |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |",
    "> quote\n> more\n\n[[ad:in-article]]\n\n---",
    "# Same\n# Same\n# Same",
    "[link](/x) `code` __under__ " * 20,
]


class TestConcurrentParsing:
    """Many threads, one set of inputs."""

    def test_segment_blocks(self) -> None:
        expected = [segment_blocks(doc) for doc in _DOCUMENTS]
        with ThreadPoolExecutor(max_workers=8) as pool:
            for _ in range(20):
                results = list(pool.map(segment_blocks, _DOCUMENTS))
                assert results == expected

    def test_format_inline(self) -> None:
        expected = [format_inline(doc) for doc in _DOCUMENTS]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(format_inline, _DOCUMENTS * 20))
        assert results == expected * 20


class TestSharedRenderer:
    """One renderer instance shared by every thread."""

    def test_html_renderer(self) -> None:
        renderer = HtmlRenderer()
        docs = [parse(source) for source in _DOCUMENTS]
        expected = [renderer.render(doc) for doc in docs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(renderer.render, docs * 20))
        assert results == expected * 20

    def test_heading_ids_do_not_leak_between_renders(self) -> None:
        renderer = HtmlRenderer()
        doc = parse("# Same\n# Same\n# Same")
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = set(pool.map(renderer.render, [doc] * 100))
        assert len(results) == 1
        assert 'id="same-2"' in results.pop()

    def test_markup_processor(self) -> None:
        md = Markup(merge_blockquotes=True)
        expected = [md(source) for source in _DOCUMENTS]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(md, _DOCUMENTS * 10))
        assert results == expected * 10
