"""Line classification state machine.

Turns the visual lines of a transcript PDF into typed :class:`Line`
records.  A PDF carries no semantic markup, so every decision combines
weak visual signals (bold glyphs, regex shape, indentation, a drawn
ruler under the text) with context carried from earlier lines: who is
speaking, and who the ``Q``/``A`` role tokens currently stand for.

Per visual line, in reading order:

1. Blank lines are skipped without touching any state.
2. The first non-blank line of a page is its printed page label.
3. The running line number printed at the end of the line is removed.
4. A line crossing a ruler becomes ``RULER`` and ends the current turn.
5. A bold line, or an examination announcement, becomes ``HEADER`` and
   ends the current turn; an announcement also names the witness.
6. A leading speaker label, when the line is not indented past the
   document's left margin, starts a new turn.
7. What remains is a ``PARAGRAPH`` break, an ``ANNOTATION``, ``INFO``
   outside any turn, or ``SPEECH`` by the current speaker.

All of this state lives on one :class:`LineClassifier` per document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from transcript_pdf.models.layout import PageLayout, Rect, VisualLine
from transcript_pdf.models.transcript import Line, LineType
from transcript_pdf.patterns import (
    is_parenthesized,
    match_examination_header,
    match_speaker_token,
    strip_line_number,
    strip_parentheses,
)
from transcript_pdf.ruler import RulerDetector
from transcript_pdf.speakers import AliasTable, SpeakerResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifierOptions:
    """Layout thresholds, in PDF layout units.

    Attributes:
        ruler_min_width: A ruler must be strictly wider than this.
        ruler_min_height: A ruler must be strictly taller than this.
        speaker_max_indent: A speaker label is only accepted when its line
            starts at most this far right of the document's left margin.
    """

    ruler_min_width: float = 100.0
    ruler_min_height: float = 1.0
    speaker_max_indent: float = 20.0


@dataclass
class ClassifierState:
    """Mutable context of one document parse.

    ``page_label`` and ``visual_line_index`` reset at every page; the label
    stays empty until the page's first non-blank line is read.  The rest
    carries over for the whole document.
    """

    page_label: str = ""
    visual_line_index: int = 0
    active_speaker: str | None = None
    min_left_margin: float | None = None
    pages_seen: int = 0
    records: list[Line] = field(default_factory=list)


class LineClassifier:
    """Classifies the visual lines of one document.

    Create one instance per document and feed it pages in order, either
    with :meth:`classify_page` or with :meth:`start_page` followed by
    :meth:`feed` for each line.

    Args:
        aliases: Alias table applied to speaker names of ``SPEECH`` lines.
        options: Layout thresholds.
    """

    def __init__(
        self,
        aliases: AliasTable | None = None,
        options: ClassifierOptions | None = None,
    ) -> None:
        self.options = options or ClassifierOptions()
        self.state = ClassifierState()
        self.rulers = RulerDetector(
            min_width=self.options.ruler_min_width,
            min_height=self.options.ruler_min_height,
        )
        self.speakers = SpeakerResolver(aliases)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def lines(self) -> list[Line]:
        """Records emitted so far, in order."""
        return list(self.state.records)

    def start_page(self, width: float, height: float, rectangles: Iterable[Rect] = ()) -> None:
        """Begin a new page, resetting the per-page state."""
        self.state.page_label = ""
        self.state.visual_line_index = 0
        self.state.pages_seen += 1
        self.rulers.start_page(width, height)
        self.rulers.add_rectangles(rectangles)

    def classify_page(self, page: PageLayout) -> list[Line]:
        """Classify every line of *page*; return the records it produced."""
        logger.debug("Page %d: %d visual line(s), %d rectangle(s)", page.index, len(page.lines), len(page.rectangles))
        self.start_page(page.width, page.height, page.rectangles)
        emitted = []
        for visual_line in page.lines:
            record = self.feed(visual_line)
            if record is not None:
                emitted.append(record)
        return emitted

    def feed(self, visual_line: VisualLine) -> Line | None:
        """Classify one visual line of the current page.

        Returns:
            The emitted record, or ``None`` for blank lines, the page
            label line, and lines that produce no record.
        """
        if not visual_line.text.strip():
            return None

        if not self.state.page_label:
            self.state.page_label = visual_line.text.strip()
            record = None
        else:
            record = self._classify(visual_line)
            self.state.records.append(record)

        self.state.visual_line_index += 1
        return record

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def _classify(self, visual_line: VisualLine) -> Line:
        state = self.state
        text = strip_line_number(visual_line.text, state.visual_line_index)
        start_x = visual_line.start_x

        if text.strip() and start_x is not None:
            if state.min_left_margin is None or start_x < state.min_left_margin:
                state.min_left_margin = start_x

        if self.rulers.hits_any(visual_line.glyphs):
            state.active_speaker = None
            return self._line(LineType.RULER)

        witness = match_examination_header(text)
        if witness is not None or any(g.bold and not g.is_blank for g in visual_line.glyphs):
            if witness is not None:
                self.speakers.bind_answering(witness)
            state.active_speaker = None
            return self._line(LineType.HEADER, text=text.strip())

        body = text
        speaker_matched = False
        match = match_speaker_token(text)
        if match is not None and self._indent(start_x) <= self.options.speaker_max_indent:
            state.active_speaker = self.speakers.resolve_token(match.token)
            speaker_matched = True
            body = match.text

        if not body.strip():
            return self._line(LineType.PARAGRAPH)

        if not speaker_matched and is_parenthesized(body) and self._after_paragraph():
            return self._line(LineType.ANNOTATION, text=strip_parentheses(body))

        if state.active_speaker is None:
            return self._line(LineType.INFO, text=strip_parentheses(body))

        return self._line(
            LineType.SPEECH,
            speaker=self.speakers.display_name(state.active_speaker),
            text=body.strip(),
        )

    def _indent(self, start_x: float | None) -> float:
        if start_x is None or self.state.min_left_margin is None:
            return 0.0
        return start_x - self.state.min_left_margin

    def _after_paragraph(self) -> bool:
        records = self.state.records
        return not records or records[-1].type is LineType.PARAGRAPH

    def _line(self, line_type: LineType, speaker: str | None = None, text: str | None = None) -> Line:
        return Line(
            type=line_type,
            page=self.state.page_label,
            line=self.state.visual_line_index,
            speaker=speaker,
            text=text,
        )
