"""Line classifiers for the block segmenter.

Each mixin recognizes one construct. Classifiers are pure: they inspect a
line and return a block (or a yes/no answer) without touching segmenter
state, so they can be checked in any order the grammar needs.
"""

from tinta.segmenter.classifiers.fence import FenceClassifierMixin
from tinta.segmenter.classifiers.heading import HeadingClassifierMixin
from tinta.segmenter.classifiers.list import ListClassifierMixin
from tinta.segmenter.classifiers.opaque import OpaqueClassifierMixin
from tinta.segmenter.classifiers.quote import QuoteClassifierMixin
from tinta.segmenter.classifiers.table import TableClassifierMixin
from tinta.segmenter.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "OpaqueClassifierMixin",
    "QuoteClassifierMixin",
    "TableClassifierMixin",
    "ThematicClassifierMixin",
]
