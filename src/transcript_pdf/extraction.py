"""PDF reading: visual lines, glyph geometry and drawn rectangles per page.

Text comes from :mod:`pdfplumber`, which groups characters into lines in
reading order and reports each character's position and font.  Drawn
rectangles come from a second pass over the page's content stream with a
pdfminer interpreter that intercepts the ``re`` (append rectangle)
operator and maps its operands through the current transformation matrix
into page space.

Only pages from the start of the transcript body are returned: when the
PDF defines page labels, the first page whose label starts with the
transcript prefix (``"T"`` by default) opens the transcript, and the
pages before it (cover, index, appearances) are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

import pdfplumber
from pdfminer.pdfdevice import PDFDevice
from pdfminer.pdfinterp import PDFPageInterpreter, PDFResourceManager
from pdfminer.psparser import PSException
from pdfminer.utils import apply_matrix_pt
from pdfplumber.utils.exceptions import PdfminerException

from transcript_pdf.exceptions import UnderlyingDecodeFailure
from transcript_pdf.models.layout import Glyph, PageLayout, Rect, VisualLine

logger = logging.getLogger(__name__)

DEFAULT_TRANSCRIPT_PREFIX = "T"

# Font names of bold faces carry this marker (e.g. "Courier-Bold").
_BOLD_MARKER = "Bold"


class RectangleInterpreter(PDFPageInterpreter):
    """Content-stream interpreter that reports every ``re`` rectangle.

    Each rectangle is transformed by the current transformation matrix and
    passed to *on_rectangle* in bottom-up page space with non-negative
    width and height.  Path construction continues as normal.
    """

    def __init__(
        self,
        rsrcmgr: PDFResourceManager,
        device: PDFDevice,
        on_rectangle: Callable[[Rect], None],
    ) -> None:
        super().__init__(rsrcmgr, device)
        self._on_rectangle = on_rectangle

    def dup(self) -> RectangleInterpreter:
        # Form XObjects are rendered by a duplicate; it must report to the same callback.
        return self.__class__(self.rsrcmgr, self.device, self._on_rectangle)

    def do_re(self, x: Any, y: Any, w: Any, h: Any) -> None:
        super().do_re(x, y, w, h)
        try:
            x1, y1, width, height = float(x), float(y), float(w), float(h)
        except (TypeError, ValueError):
            logger.debug("Ignoring 're' with non-numeric operands: %r", (x, y, w, h))
            return
        ax, ay = apply_matrix_pt(self.ctm, (x1, y1))
        bx, by = apply_matrix_pt(self.ctm, (x1 + width, y1 + height))
        self._on_rectangle(Rect(min(ax, bx), min(ay, by), abs(bx - ax), abs(by - ay)))


def first_transcript_page(labels: Sequence[str | None], prefix: str = DEFAULT_TRANSCRIPT_PREFIX) -> int:
    """Index of the first page whose label starts with *prefix*.

    Returns ``0`` when no label matches, including when the document has
    no page labels at all.
    """
    for index, label in enumerate(labels):
        if label is not None and label.startswith(prefix):
            return index
    return 0


def glyph_from_char(char: dict[str, Any]) -> Glyph:
    """Convert a pdfplumber character dict into a :class:`Glyph`."""
    return Glyph(
        text=char.get("text", ""),
        x=float(char["x0"]),
        y=float(char["bottom"]),
        width=float(char.get("width", char["x1"] - char["x0"])),
        height=float(char.get("height", char["bottom"] - char["top"])),
        bold=_BOLD_MARKER in (char.get("fontname") or ""),
    )


def visual_lines(text_lines: Iterable[dict[str, Any]]) -> tuple[VisualLine, ...]:
    """Convert pdfplumber ``extract_text_lines`` output into visual lines."""
    return tuple(
        VisualLine(
            text=line["text"],
            glyphs=tuple(glyph_from_char(char) for char in line.get("chars", ())),
        )
        for line in text_lines
    )


def page_rectangles(page: Any) -> tuple[Rect, ...]:
    """Run the rectangle interpreter over one pdfplumber page."""
    rectangles: list[Rect] = []
    rsrcmgr = PDFResourceManager()
    interpreter = RectangleInterpreter(rsrcmgr, PDFDevice(rsrcmgr), rectangles.append)
    interpreter.process_page(page.page_obj)
    return tuple(rectangles)


def page_layout(page: Any, index: int) -> PageLayout:
    """Extract the :class:`PageLayout` of one pdfplumber page."""
    return PageLayout(
        index=index,
        width=float(page.width),
        height=float(page.height),
        lines=visual_lines(page.extract_text_lines(return_chars=True)),
        rectangles=page_rectangles(page),
        label=getattr(page.page_obj, "label", None),
    )


def read_pages(
    path: str | Path,
    transcript_prefix: str = DEFAULT_TRANSCRIPT_PREFIX,
) -> list[PageLayout]:
    """Read the transcript pages of a PDF.

    Args:
        path: Path to the PDF file.
        transcript_prefix: Page-label prefix marking the transcript body.

    Returns:
        One :class:`PageLayout` per page, from the first transcript page
        to the end of the document.

    Raises:
        UnderlyingDecodeFailure: If the PDF engine cannot decode the file.
    """
    try:
        with pdfplumber.open(path) as pdf:
            labels = [getattr(page.page_obj, "label", None) for page in pdf.pages]
            start = first_transcript_page(labels, transcript_prefix)
            if start:
                logger.info("Skipping %d page(s) before transcript page label %r", start, labels[start])
            return [page_layout(pdf.pages[i], i) for i in range(start, len(pdf.pages))]
    except (PdfminerException, PSException) as exc:
        raise UnderlyingDecodeFailure(path, str(exc) or type(exc).__name__) from exc
