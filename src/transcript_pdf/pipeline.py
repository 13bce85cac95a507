"""Pipeline orchestrator for the ``parse`` and ``combine`` commands.

Each run validates every input path first, then does all the work in
memory, and only writes output once the complete transcript exists.  A
failure at any stage therefore leaves no output file behind.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from transcript_pdf.assembler import merge_transcripts
from transcript_pdf.config import Settings
from transcript_pdf.exceptions import InputAccessError, OutputWriteError
from transcript_pdf.interchange import dumps_transcript, read_transcript_file
from transcript_pdf.models.transcript import LineType, Transcript
from transcript_pdf.parser import parse_transcript_file
from transcript_pdf.rendering import render_plain_text
from transcript_pdf.speakers import load_alias_table

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass
class RunResult:
    """Outcome of one ``parse`` or ``combine`` run.

    Attributes:
        command: ``"parse"`` or ``"combine"``.
        output_path: Where the JSON record was written.
        sources: Input files, in the order they were used.
        transcript: The transcript that was written.
        text_output_path: Where the plain-text rendering was written, if
            requested.
        alias_count: Number of speaker aliases applied (``parse`` only).
        duration_seconds: Wall-clock time for the run.
    """

    command: str
    output_path: Path
    transcript: Transcript
    sources: list[Path] = field(default_factory=list)
    text_output_path: Path | None = None
    alias_count: int = 0
    duration_seconds: float = 0.0

    @property
    def line_counts(self) -> dict[LineType, int]:
        """Number of lines of each type, in :class:`LineType` order."""
        counts = Counter(line.type for line in self.transcript.lines)
        return {line_type: counts[line_type] for line_type in LineType if counts[line_type]}


# ---------------------------------------------------------------------------
# Path checks and output
# ---------------------------------------------------------------------------


def check_input_file(path: str | Path) -> Path:
    """Ensure *path* is an existing, readable regular file.

    Raises:
        InputAccessError: If the path is missing, a directory (or other
            non-regular file), or cannot be read.
    """
    path = Path(path)
    if not path.exists():
        raise InputAccessError(path, "file not found")
    if not path.is_file():
        raise InputAccessError(path, "not a file")

    # Check readability by attempting to open the file.
    try:
        with open(path, "rb") as f:
            f.read(1)
    except PermissionError as exc:
        raise InputAccessError(path, "permission denied") from exc
    except OSError as exc:
        raise InputAccessError(path, exc.strerror or type(exc).__name__) from exc
    return path


def check_output_path(path: str | Path) -> Path:
    """Ensure *path* can name an output file.

    Raises:
        InputAccessError: If *path* is an existing directory, or its parent
            directory does not exist.
    """
    path = Path(path)
    if path.is_dir():
        raise InputAccessError(path, "is a directory")
    if not path.parent.is_dir():
        raise InputAccessError(path, "parent directory not found")
    return path


def write_outputs(outputs: list[tuple[Path, str]]) -> None:
    """Write each ``(path, text)`` pair as UTF-8, all or nothing.

    When a write fails, the files already written by this call are removed.

    Raises:
        OutputWriteError: If any file cannot be written.
    """
    written: list[Path] = []
    for path, text in outputs:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            for done in written:
                done.unlink(missing_ok=True)
            raise OutputWriteError(path, exc.strerror or type(exc).__name__) from exc
        written.append(path)


# ---------------------------------------------------------------------------
# Pipeline entry points
# ---------------------------------------------------------------------------


def run_parse(
    pdf_path: str | Path,
    output_path: str | Path,
    alias_path: str | Path | None = None,
    text_path: str | Path | None = None,
    settings: Settings | None = None,
) -> RunResult:
    """Parse a transcript PDF and write its JSON record.

    Args:
        pdf_path: The transcript PDF.
        output_path: Destination of the JSON record.
        alias_path: Optional speaker alias file.
        text_path: Optional destination of a plain-text rendering.
        settings: Thresholds and page prefix; defaults apply when ``None``.

    Returns:
        A :class:`RunResult` describing the written transcript.

    Raises:
        InputAccessError: If an input path is unusable.
        MalformedAliasLine: If the alias file is malformed.
        UnderlyingDecodeFailure: If the PDF cannot be decoded.
        OutputWriteError: If an output cannot be written.
    """
    start = time.monotonic()
    settings = settings or Settings()

    pdf = check_input_file(pdf_path)
    alias_file = check_input_file(alias_path) if alias_path is not None else None
    output = check_output_path(output_path)
    text_output = check_output_path(text_path) if text_path is not None else None

    aliases = load_alias_table(alias_file) if alias_file is not None else None

    logger.info("Parsing transcript PDF %s", pdf)
    transcript = parse_transcript_file(
        pdf,
        aliases=aliases,
        options=settings.classifier_options(),
        transcript_prefix=settings.transcript_page_prefix,
    )

    outputs = [(output, dumps_transcript(transcript))]
    if text_output is not None:
        outputs.append((text_output, render_plain_text(transcript)))
    write_outputs(outputs)
    logger.info("Wrote %d line(s) to %s", len(transcript.lines), output)
    if text_output is not None:
        logger.info("Wrote plain-text rendering to %s", text_output)

    return RunResult(
        command="parse",
        output_path=output,
        transcript=transcript,
        sources=[pdf],
        text_output_path=text_output,
        alias_count=len(aliases) if aliases is not None else 0,
        duration_seconds=time.monotonic() - start,
    )


def run_combine(input_paths: list[str | Path], output_path: str | Path) -> RunResult:
    """Merge several transcript JSON records into one.

    Args:
        input_paths: One or more transcript JSON files, in merge order.
        output_path: Destination of the merged record.

    Returns:
        A :class:`RunResult` describing the merged transcript.

    Raises:
        InputAccessError: If an input path is unusable.
        MalformedInterchangeRecord: If an input does not decode.
        OutputWriteError: If the output cannot be written.
        ValueError: If *input_paths* is empty.
    """
    start = time.monotonic()
    if not input_paths:
        raise ValueError("At least one input transcript is required")

    inputs = [check_input_file(path) for path in input_paths]
    output = check_output_path(output_path)

    transcripts = [read_transcript_file(path) for path in inputs]
    merged = merge_transcripts(transcripts)

    write_outputs([(output, dumps_transcript(merged))])
    logger.info("Combined %d transcript(s) into %s", len(inputs), output)

    return RunResult(
        command="combine",
        output_path=output,
        transcript=merged,
        sources=inputs,
        duration_seconds=time.monotonic() - start,
    )
