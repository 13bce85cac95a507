"""Plain-text rendering of a classified transcript.

Produces a readable script of the transcript, one output line per record:

- ``RULER``      -> ``===``
- ``HEADER``     -> ``NARRATOR: <text>``
- ``SPEECH``     -> ``<speaker>: <text>``
- ``ANNOTATION`` / ``INFO`` -> the text alone
- ``PARAGRAPH``  -> an empty line
"""

from __future__ import annotations

from pathlib import Path

from transcript_pdf.models.transcript import Line, LineType, Transcript

RULER_MARK = "==="
NARRATOR = "NARRATOR"


def render_line(line: Line) -> str:
    """Render a single record as one line of text (without newline)."""
    if line.type is LineType.RULER:
        return RULER_MARK
    if line.type is LineType.PARAGRAPH:
        return ""
    if line.type is LineType.HEADER:
        return f"{NARRATOR}: {line.text}"
    if line.type is LineType.SPEECH:
        return f"{line.speaker}: {line.text}"
    return line.text or ""


def render_plain_text(transcript: Transcript) -> str:
    """Render the whole transcript; ends with a newline unless empty."""
    if not transcript.lines:
        return ""
    return "\n".join(render_line(line) for line in transcript.lines) + "\n"


def write_plain_text(transcript: Transcript, path: str | Path) -> None:
    Path(path).write_text(render_plain_text(transcript), encoding="utf-8")
