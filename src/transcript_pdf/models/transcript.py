"""Transcript data models produced by the line classifier.

These are frozen stdlib dataclasses: a :class:`Line` never changes after
the classifier emits it, and a :class:`Transcript` is treated as a value
once assembled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineType(str, Enum):
    """Semantic kind of a transcript line."""

    SPEECH = "SPEECH"
    HEADER = "HEADER"
    ANNOTATION = "ANNOTATION"
    INFO = "INFO"
    RULER = "RULER"
    PARAGRAPH = "PARAGRAPH"


_TEXT_TYPES = frozenset({LineType.SPEECH, LineType.HEADER, LineType.ANNOTATION, LineType.INFO})


@dataclass(frozen=True)
class Line:
    """One classified line of a transcript.

    Attributes:
        type: The semantic kind of the line.
        page: The transcript's own printed page label (not a PDF page index).
        line: 0-based index of the originating visual line within its page,
            counting the page-label line itself.
        speaker: Display name of the speaker; set only for ``SPEECH``.
        text: Line content; set for ``SPEECH``, ``HEADER``, ``ANNOTATION``
            and ``INFO``, absent for ``RULER`` and ``PARAGRAPH``.

    Raises:
        ValueError: If the fields break the per-type presence rules or
            *line* is negative.
    """

    type: LineType
    page: str
    line: int
    speaker: str | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError(f"line index must be non-negative, got {self.line}")
        if (self.speaker is not None) != (self.type is LineType.SPEECH):
            raise ValueError(f"{self.type.value} line must {'' if self.type is LineType.SPEECH else 'not '}have a speaker")
        if (self.text is not None) != (self.type in _TEXT_TYPES):
            raise ValueError(f"{self.type.value} line must {'' if self.type in _TEXT_TYPES else 'not '}have text")


@dataclass(frozen=True)
class Transcript:
    """A fully classified transcript.

    Attributes:
        speakers: Unique speaker display names, ordered by first appearance.
        lines: Classified lines in document order.
    """

    speakers: tuple[str, ...] = ()
    lines: tuple[Line, ...] = ()
