"""Unit tests for the transcript JSON interchange format."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from transcript_pdf.exceptions import MalformedInterchangeRecord
from transcript_pdf.interchange import (
    dumps_transcript,
    loads_transcript,
    read_transcript_file,
    write_transcript_file,
)
from transcript_pdf.models.transcript import Line, LineType, Transcript

_TRANSCRIPT = Transcript(
    speakers=("MR. JONES",),
    lines=(
        Line(type=LineType.SPEECH, page="42", line=1, speaker="MR. JONES", text="Good morning."),
        Line(type=LineType.RULER, page="42", line=2),
        Line(type=LineType.INFO, page="42", line=3, text="Recess."),
    ),
)

# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestDumps:
    def test_shape(self) -> None:
        data = json.loads(dumps_transcript(_TRANSCRIPT))

        assert data == {
            "speakers": ["MR. JONES"],
            "lines": [
                {"type": "SPEECH", "speaker": "MR. JONES", "text": "Good morning.", "page": "42", "line": 1},
                {"type": "RULER", "page": "42", "line": 2},
                {"type": "INFO", "text": "Recess.", "page": "42", "line": 3},
            ],
        }

    def test_absent_fields_are_omitted_not_null(self) -> None:
        assert "null" not in dumps_transcript(_TRANSCRIPT)

    def test_empty_transcript(self) -> None:
        assert json.loads(dumps_transcript(Transcript())) == {"speakers": [], "lines": []}

    def test_decode_restores_value(self) -> None:
        assert loads_transcript(dumps_transcript(_TRANSCRIPT)) == _TRANSCRIPT


# ---------------------------------------------------------------------------
# Decoding failures
# ---------------------------------------------------------------------------


class TestLoadsErrors:
    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedInterchangeRecord, match="in transcript.json"):
            loads_transcript("{not json", source="transcript.json")

    def test_missing_field(self) -> None:
        with pytest.raises(MalformedInterchangeRecord, match="lines"):
            loads_transcript('{"speakers": []}')

    def test_unknown_line_type(self) -> None:
        data = '{"speakers": [], "lines": [{"type": "FOOTNOTE", "page": "1", "line": 1}]}'

        with pytest.raises(MalformedInterchangeRecord, match=r"lines\.0\.type"):
            loads_transcript(data)

    def test_unexpected_field(self) -> None:
        data = '{"speakers": [], "lines": [], "title": "x"}'

        with pytest.raises(MalformedInterchangeRecord, match="title"):
            loads_transcript(data)

    def test_negative_line_index(self) -> None:
        data = '{"speakers": [], "lines": [{"type": "RULER", "page": "1", "line": -1}]}'

        with pytest.raises(MalformedInterchangeRecord):
            loads_transcript(data)

    def test_speech_without_speaker(self) -> None:
        data = '{"speakers": [], "lines": [{"type": "SPEECH", "text": "Hi.", "page": "1", "line": 1}]}'

        with pytest.raises(MalformedInterchangeRecord, match="must have a speaker"):
            loads_transcript(data)

    def test_error_chains_cause(self) -> None:
        with pytest.raises(MalformedInterchangeRecord) as exc_info:
            loads_transcript("[]")

        assert exc_info.value.__cause__ is not None
        assert exc_info.value.source == "<string>"


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFiles:
    def test_write_then_read(self, tmp_path: Path) -> None:
        target = tmp_path / "t.json"

        write_transcript_file(_TRANSCRIPT, target)

        assert read_transcript_file(target) == _TRANSCRIPT

    def test_non_ascii_written_as_utf8(self, tmp_path: Path) -> None:
        target = tmp_path / "t.json"
        transcript = Transcript(
            speakers=("MR. NÚÑEZ",),
            lines=(Line(type=LineType.SPEECH, page="1", line=1, speaker="MR. NÚÑEZ", text="Sí."),),
        )

        write_transcript_file(transcript, target)

        assert read_transcript_file(target) == transcript

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        target = tmp_path / "t.json"
        target.write_bytes(b'{"speakers": ["\xff"], "lines": []}')

        with pytest.raises(MalformedInterchangeRecord, match="not UTF-8"):
            read_transcript_file(target)
