"""
Model classes for text spans, edits, and diff segments.
"""

from .edit import Correction, Edit
from .segment import AnnotatedSegment, DiffSegment, SegmentKind
from .span import TextSpan

__all__ = [
    "AnnotatedSegment",
    "Correction",
    "DiffSegment",
    "Edit",
    "SegmentKind",
    "TextSpan",
]
