"""Assembly of classified lines into transcripts, and merging of transcripts.

Both operations are pure: they build new :class:`Transcript` values and
never modify their inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from transcript_pdf.models.transcript import Line, Transcript

logger = logging.getLogger(__name__)


def collect_speakers(lines: Iterable[Line]) -> tuple[str, ...]:
    """Return the distinct speakers of *lines* in order of first appearance."""
    return tuple(dict.fromkeys(line.speaker for line in lines if line.speaker is not None))


def assemble_transcript(lines: Iterable[Line]) -> Transcript:
    """Build a :class:`Transcript` from one document's classified lines.

    Args:
        lines: The complete, ordered line sequence of a document.

    Returns:
        A transcript whose ``speakers`` lists each speaker once, in
        first-appearance order.
    """
    ordered = tuple(lines)
    return Transcript(speakers=collect_speakers(ordered), lines=ordered)


def merge_transcripts(transcripts: Sequence[Transcript]) -> Transcript:
    """Fold several transcripts into one.

    Lines are concatenated in input order with no re-sorting and no page
    renumbering.  Speakers are the union of the inputs' speaker lists,
    deduplicated, keeping the order in which each name first appears.

    Args:
        transcripts: One or more transcripts.

    Returns:
        The merged transcript.

    Raises:
        ValueError: If *transcripts* is empty.
    """
    if not transcripts:
        raise ValueError("At least one transcript is required to merge")

    speakers = tuple(dict.fromkeys(name for t in transcripts for name in t.speakers))
    lines = tuple(line for t in transcripts for line in t.lines)

    logger.debug(
        "Merged %d transcript(s): %d line(s), %d speaker(s)",
        len(transcripts),
        len(lines),
        len(speakers),
    )
    return Transcript(speakers=speakers, lines=lines)
