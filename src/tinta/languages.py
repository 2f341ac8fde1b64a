"""Code block language normalization.

Fences carry whatever tag the author typed. Renderers and highlighters want
one canonical name per language, so common short forms are mapped here.
The segmenter never normalizes: ``CodeBlock.language`` is the raw tag.

Example:
    >>> normalize_language("JS")
    'javascript'
    >>> normalize_language("Kotlin")
    'kotlin'
"""

from __future__ import annotations

LANGUAGE_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "rb": "ruby",
    "sh": "bash",
    "shell": "bash",
    "yml": "yaml",
    "md": "markdown",
    "html": "markup",
    "xml": "markup",
    "svg": "markup",
    "plaintext": "text",
}


def normalize_language(language: str, default: str = "text") -> str:
    """Map a fence tag to its canonical lowercase name.

    Args:
        language: Raw tag from the fence
        default: Name used for an empty tag

    Returns:
        Canonical language name.
    """
    key = language.strip().lower()
    if not key:
        return default
    return LANGUAGE_ALIASES.get(key, key)
