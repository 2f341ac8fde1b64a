"""Code fence classifier mixin."""

from tinta.segmenter.modes import FENCE_MARKER


class FenceClassifierMixin:
    """Mixin providing code fence classification."""

    def _is_fence(self, line: str) -> bool:
        """Check whether a line opens or closes a fence.

        Any line beginning with three backticks toggles fence mode; a closing
        fence does not need to match the opener's length or info string.
        """
        return line.startswith(FENCE_MARKER)

    def _fence_info(self, line: str, default: str) -> str:
        """Extract the language tag from an opening fence line.

        Args:
            line: The opening fence line
            default: Tag used when the info string is empty

        Returns:
            The trimmed remainder after the backtick run, or ``default``.
        """
        return line.lstrip("`").strip() or default
