"""Text processing utilities for Tinta.

Example:
    >>> from tinta.utils.text import slugify
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html as html_module
import re

_NON_WORD_RE = re.compile(r"[^\w\s-]")
_SEPARATOR_RUN_RE = re.compile(r"[-\s]+")


def slugify(text: str) -> str:
    """Convert text to a URL-safe slug, keeping Unicode word characters.

    Args:
        text: Text to slugify

    Returns:
        Lowercase slug

    Examples:
        >>> slugify("Lesson 3: Loops & Ranges")
        'lesson-3-loops-ranges'
        >>> slugify("日本語の文法")
        '日本語の文法'
    """
    if not text:
        return ""

    text = html_module.unescape(text).lower().strip()
    text = _NON_WORD_RE.sub("", text)
    return _SEPARATOR_RUN_RE.sub("-", text).strip("-")


def escape_html(text: str) -> str:
    """Escape text for HTML element content and double-quoted attributes.

    Escapes ``&``, ``<``, ``>`` and ``"``; single quotes are left alone.

    Examples:
        >>> escape_html('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")
