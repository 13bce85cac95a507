"""transcript-pdf: structured records from court transcript PDFs.

Classifies the visual lines of a deposition or courtroom transcript PDF
into speech, headers, annotations, informational lines, rulers and
paragraph breaks, attributing each speech line to a speaker.
"""

from __future__ import annotations

from transcript_pdf.assembler import assemble_transcript, merge_transcripts
from transcript_pdf.classifier import ClassifierOptions, LineClassifier
from transcript_pdf.exceptions import (
    InputAccessError,
    MalformedAliasLine,
    MalformedInterchangeRecord,
    TranscriptError,
    UnderlyingDecodeFailure,
)
from transcript_pdf.interchange import dumps_transcript, loads_transcript
from transcript_pdf.models.transcript import Line, LineType, Transcript
from transcript_pdf.parser import parse_transcript, parse_transcript_file
from transcript_pdf.speakers import AliasTable, load_alias_table

__version__ = "0.1.0"

__all__ = [
    "AliasTable",
    "ClassifierOptions",
    "InputAccessError",
    "Line",
    "LineClassifier",
    "LineType",
    "MalformedAliasLine",
    "MalformedInterchangeRecord",
    "Transcript",
    "TranscriptError",
    "UnderlyingDecodeFailure",
    "assemble_transcript",
    "dumps_transcript",
    "load_alias_table",
    "loads_transcript",
    "merge_transcripts",
    "parse_transcript",
    "parse_transcript_file",
]
