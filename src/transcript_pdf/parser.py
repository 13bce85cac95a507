"""Transcript parser for court and deposition transcript PDFs.

Feeds the pages of one document through a fresh
:class:`~transcript_pdf.classifier.LineClassifier` and assembles the
emitted records into a :class:`~transcript_pdf.models.transcript.Transcript`.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from transcript_pdf.assembler import assemble_transcript
from transcript_pdf.classifier import ClassifierOptions, LineClassifier
from transcript_pdf.extraction import DEFAULT_TRANSCRIPT_PREFIX, read_pages
from transcript_pdf.models.layout import PageLayout
from transcript_pdf.models.transcript import Transcript
from transcript_pdf.speakers import AliasTable

logger = logging.getLogger(__name__)


def parse_transcript(
    pages: Iterable[PageLayout],
    aliases: AliasTable | None = None,
    options: ClassifierOptions | None = None,
    source: str = "<pages>",
) -> Transcript:
    """Classify a sequence of pages into a transcript.

    Args:
        pages: Page layouts in document order.
        aliases: Speaker alias table applied to ``SPEECH`` speakers.
        options: Layout thresholds for the classifier.
        source: Label for log messages (e.g. a file path).

    Returns:
        The assembled :class:`Transcript`.
    """
    classifier = LineClassifier(aliases=aliases, options=options)
    for page in pages:
        classifier.classify_page(page)

    transcript = assemble_transcript(classifier.lines)

    if not transcript.lines:
        logger.info("Empty transcript from %s", source)
    else:
        counts = Counter(line.type.value for line in transcript.lines)
        logger.info(
            "Parsed %s: %d page(s), %d line(s), %d speaker(s) [%s]",
            source,
            classifier.state.pages_seen,
            len(transcript.lines),
            len(transcript.speakers),
            ", ".join(f"{name}={count}" for name, count in sorted(counts.items())),
        )
    return transcript


def parse_transcript_file(
    file_path: str | Path,
    aliases: AliasTable | None = None,
    options: ClassifierOptions | None = None,
    transcript_prefix: str = DEFAULT_TRANSCRIPT_PREFIX,
) -> Transcript:
    """Parse a transcript PDF.

    Args:
        file_path: Path to the PDF.
        aliases: Speaker alias table.
        options: Layout thresholds for the classifier.
        transcript_prefix: Page-label prefix marking the transcript body.

    Returns:
        The assembled :class:`Transcript`.

    Raises:
        FileNotFoundError: If *file_path* does not exist.
        UnderlyingDecodeFailure: If the PDF cannot be decoded.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Transcript PDF not found: {path}")

    pages = read_pages(path, transcript_prefix=transcript_prefix)
    return parse_transcript(pages, aliases=aliases, options=options, source=str(path))


def parse_transcript_files(
    file_paths: Sequence[str | Path],
    aliases: AliasTable | None = None,
    options: ClassifierOptions | None = None,
    transcript_prefix: str = DEFAULT_TRANSCRIPT_PREFIX,
    max_workers: int | None = None,
) -> list[Transcript]:
    """Parse several PDFs concurrently, one classifier per document.

    Results are returned in the order of *file_paths*.  The first failure
    is raised once all submitted parses have finished.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(
                parse_transcript_file,
                path,
                aliases=aliases,
                options=options,
                transcript_prefix=transcript_prefix,
            )
            for path in file_paths
        ]
    return [future.result() for future in futures]
