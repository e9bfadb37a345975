"""
Segment models produced by the diff engine and the renderers.

DiffSegment is the public output of compute_diff(). AnnotatedSegment is the
intermediate form used by render_with_edits(); it is derived and never stored.
"""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """How a run of text relates the original to the modified version.

    Attributes:
        ADDED: Text present only in the modified version
        REMOVED: Text present only in the original
        UNCHANGED: Text present in both
    """

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DiffSegment:
    """A labeled, contiguous run of text in a diff.

    A list of segments encodes both inputs losslessly: joining the text of
    UNCHANGED and REMOVED segments gives the original, joining UNCHANGED and
    ADDED gives the modified version.

    Attributes:
        text: The run of text (never empty)
        kind: Whether the run was added, removed, or left unchanged
    """

    text: str
    kind: SegmentKind

    @property
    def is_added(self) -> bool:
        return self.kind is SegmentKind.ADDED

    @property
    def is_removed(self) -> bool:
        return self.kind is SegmentKind.REMOVED

    @property
    def is_unchanged(self) -> bool:
        return self.kind is SegmentKind.UNCHANGED

    @property
    def is_whitespace(self) -> bool:
        """True if the segment only differs in whitespace."""
        return self.text.isspace()

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "kind": self.kind.value}


@dataclass
class AnnotatedSegment:
    """A run of text in the replace-and-annotate view.

    Attributes:
        text: The run of text
        removed: True if the run is original text replaced by an edit
        added: True if the run is replacement text introduced by an edit
        comment: Reviewer note attached to an added run, if any
    """

    text: str
    removed: bool = False
    added: bool = False
    comment: str | None = None

    @property
    def is_unchanged(self) -> bool:
        return not self.removed and not self.added
