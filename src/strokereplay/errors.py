"""Exception types raised and handled across the stroke codec."""

from __future__ import annotations


class StrokeReplayError(Exception):
    """Base class for all strokereplay errors."""


class InsufficientInputError(StrokeReplayError):
    """A capture holds too few valid points to produce an animated document."""

    def __init__(self, found: int, required: int) -> None:
        super().__init__(
            f"Need a stroke with at least {required} captured points to encode, got {found}"
        )
        self.found = found
        self.required = required


class MalformedDocumentError(StrokeReplayError):
    """An animated segment is missing its timing or geometry sub-fields.

    Raised while reading a single ``<path>`` element. The analyzer catches it
    and skips the segment, so it never escapes ``analyze``.
    """


class ExternalSeekFailure(StrokeReplayError):
    """The playback collaborator refused to seek to a given time."""
