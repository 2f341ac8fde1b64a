"""Exception classes for Tinta.

Segmentation and inline formatting are total and never raise. These
exceptions belong to the surfaces around them: renderers and serialization.
"""

from __future__ import annotations


class TintaError(Exception):
    """Base exception for all Tinta errors."""

    pass


class RenderError(TintaError):
    """Error during rendering.

    Raised when a renderer is handed something that is not a Tinta node.
    """

    pass


class SerializationError(TintaError, ValueError):
    """Error rebuilding nodes from serialized data.

    Raised for missing or unknown ``_type`` discriminators, for fields that
    do not fit the node type, for payloads that are not dicts and for text
    that is not JSON.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Description of the problem
            type_name: Offending ``_type`` value, when there was one
        """
        self.type_name = type_name
        super().__init__(message)
