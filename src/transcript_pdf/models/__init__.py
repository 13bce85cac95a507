"""Data models for transcript-pdf."""

from __future__ import annotations

from transcript_pdf.models.interchange import LineRecord, TranscriptRecord
from transcript_pdf.models.layout import Glyph, PageLayout, Rect, VisualLine
from transcript_pdf.models.transcript import Line, LineType, Transcript

__all__ = [
    "Glyph",
    "Line",
    "LineRecord",
    "LineType",
    "PageLayout",
    "Rect",
    "Transcript",
    "TranscriptRecord",
    "VisualLine",
]
