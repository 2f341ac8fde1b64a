"""Tests for utilities: text helpers, logging, locations, languages."""

import logging

import pytest

from tinta.languages import LANGUAGE_ALIASES, normalize_language
from tinta.location import SourceLocation
from tinta.stringbuilder import StringBuilder
from tinta.utils import escape_html, get_logger, slugify


class TestSlugify:
    """slugify for heading ids."""

    def test_basic(self) -> None:
        assert slugify("Hello World!") == "hello-world"

    def test_punctuation_and_symbols(self) -> None:
        assert slugify("Lesson 3: Loops & Ranges") == "lesson-3-loops-ranges"

    def test_unicode_words_kept(self) -> None:
        assert slugify("日本語の文法") == "日本語の文法"

    def test_empty(self) -> None:
        assert slugify("") == ""

    def test_entities_unescaped(self) -> None:
        assert slugify("Fish &amp; Chips") == "fish-chips"


class TestEscapeHtml:
    """escape_html for text and attributes."""

    def test_specials(self) -> None:
        assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_single_quote_untouched(self) -> None:
        assert escape_html("it's") == "it's"

    def test_empty(self) -> None:
        assert escape_html("") == ""


class TestLogger:
    """get_logger namespaces under tinta."""

    def test_prefix_added(self) -> None:
        assert get_logger("segmenter").name == "tinta.segmenter"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("tinta.renderers.html").name == "tinta.renderers.html"

    def test_root_package(self) -> None:
        assert get_logger("tinta").name == "tinta"

    def test_is_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestSourceLocation:
    """SourceLocation formatting and helpers."""

    def test_single_line(self) -> None:
        assert str(SourceLocation(3, 3)) == "3"

    def test_span(self) -> None:
        assert str(SourceLocation(3, 5)) == "3-5"

    def test_with_file(self) -> None:
        assert str(SourceLocation(1, 2, "a.md")) == "a.md:1-2"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            SourceLocation(1, 1).lineno = 2  # type: ignore[misc]


class TestLanguages:
    """Fence tag normalization."""

    @pytest.mark.parametrize(
        "tag,expected",
        [("js", "javascript"), ("TS", "typescript"), ("py", "python"), ("sh", "bash")],
    )
    def test_aliases(self, tag: str, expected: str) -> None:
        assert normalize_language(tag) == expected

    def test_unknown_lowercased(self) -> None:
        assert normalize_language("Kotlin") == "kotlin"

    def test_empty(self) -> None:
        assert normalize_language("  ") == "text"
        assert normalize_language("", default="plain") == "plain"

    def test_aliases_are_canonical(self) -> None:
        for canonical in LANGUAGE_ALIASES.values():
            assert normalize_language(canonical) == canonical


class TestStringBuilder:
    """StringBuilder accumulation."""

    def test_build(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("hi").append_line("</p>")
        assert sb.build() == "<p>hi</p>\n"

    def test_empty_fragments_skipped(self) -> None:
        sb = StringBuilder()
        sb.append("")
        assert not sb
        assert sb.build() == ""

    def test_append_line_empty(self) -> None:
        assert StringBuilder().append_line().build() == "\n"
