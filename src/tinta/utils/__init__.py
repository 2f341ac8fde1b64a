"""Utility modules for Tinta.

Provides:
- text: slugify, escape_html for rendering
- logger: get_logger for logging
"""

from tinta.utils.logger import get_logger
from tinta.utils.text import escape_html, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
]
