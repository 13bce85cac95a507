"""Pydantic schema for the transcript JSON interchange record.

The record mirrors :class:`~transcript_pdf.models.transcript.Transcript`:
a list of speaker names and a list of line objects.  Optional line fields
are omitted from the JSON when absent (serialise with
``exclude_none=True``), never written as ``null``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from transcript_pdf.models.transcript import Line, LineType, Transcript


class LineRecord(BaseModel):
    """JSON form of a single :class:`Line`.

    Attributes:
        type: One of the six line type names, verbatim.
        speaker: Speaker display name (``SPEECH`` only).
        text: Line text (``SPEECH``, ``HEADER``, ``ANNOTATION``, ``INFO``).
        page: Printed page label.
        line: 0-based visual line index within the page.
    """

    model_config = ConfigDict(extra="forbid")

    type: LineType
    speaker: str | None = None
    text: str | None = None
    page: str
    line: int = Field(ge=0)

    @classmethod
    def from_line(cls, line: Line) -> LineRecord:
        return cls(
            type=line.type,
            speaker=line.speaker,
            text=line.text,
            page=line.page,
            line=line.line,
        )

    def to_line(self) -> Line:
        """Convert to a :class:`Line`.

        Raises:
            ValueError: If the record breaks the per-type field rules.
        """
        return Line(
            type=self.type,
            page=self.page,
            line=self.line,
            speaker=self.speaker,
            text=self.text,
        )


class TranscriptRecord(BaseModel):
    """JSON form of a complete :class:`Transcript`.

    Attributes:
        speakers: Unique speaker names in first-appearance order.
        lines: Line records in document order.
    """

    model_config = ConfigDict(extra="forbid")

    speakers: list[str]
    lines: list[LineRecord]

    @classmethod
    def from_transcript(cls, transcript: Transcript) -> TranscriptRecord:
        return cls(
            speakers=list(transcript.speakers),
            lines=[LineRecord.from_line(line) for line in transcript.lines],
        )

    def to_transcript(self) -> Transcript:
        """Convert to a :class:`Transcript`, keeping the recorded speaker order.

        Raises:
            ValueError: If any line record breaks the per-type field rules.
        """
        return Transcript(
            speakers=tuple(self.speakers),
            lines=tuple(record.to_line() for record in self.lines),
        )
