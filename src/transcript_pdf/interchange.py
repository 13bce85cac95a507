"""JSON encoding and decoding of transcripts.

The JSON shape is defined by
:class:`~transcript_pdf.models.interchange.TranscriptRecord`.  Decoding
failures of any kind surface as
:class:`~transcript_pdf.exceptions.MalformedInterchangeRecord`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from transcript_pdf.exceptions import MalformedInterchangeRecord
from transcript_pdf.models.interchange import TranscriptRecord
from transcript_pdf.models.transcript import Transcript

logger = logging.getLogger(__name__)


def dumps_transcript(transcript: Transcript) -> str:
    """Encode *transcript* as compact JSON, omitting absent line fields."""
    return TranscriptRecord.from_transcript(transcript).model_dump_json(exclude_none=True)


def loads_transcript(data: str | bytes, source: str = "<string>") -> Transcript:
    """Decode a transcript from JSON.

    Args:
        data: The JSON document.
        source: Label for error messages (e.g. a file path).

    Raises:
        MalformedInterchangeRecord: If *data* is not valid JSON, does not
            match the record schema, or contains a line whose fields do
            not fit its type.
    """
    try:
        record = TranscriptRecord.model_validate_json(data)
    except ValidationError as exc:
        raise MalformedInterchangeRecord(source, _summarize(exc)) from exc

    try:
        return record.to_transcript()
    except ValueError as exc:
        raise MalformedInterchangeRecord(source, str(exc)) from exc


def read_transcript_file(path: str | Path) -> Transcript:
    """Read and decode a transcript JSON file (UTF-8).

    Raises:
        MalformedInterchangeRecord: If the file does not decode.
    """
    path = Path(path)
    try:
        data = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInterchangeRecord(str(path), f"not UTF-8 text ({exc.reason})") from exc
    transcript = loads_transcript(data, source=str(path))
    logger.debug("Read %d line(s) from %s", len(transcript.lines), path)
    return transcript


def write_transcript_file(transcript: Transcript, path: str | Path) -> None:
    """Encode *transcript* and write it to *path* as UTF-8 JSON."""
    Path(path).write_text(dumps_transcript(transcript), encoding="utf-8")


def _summarize(exc: ValidationError) -> str:
    """Condense a pydantic error into one line naming the first problem."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    extra = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{location}: {first.get('msg', 'invalid')}{extra}"
