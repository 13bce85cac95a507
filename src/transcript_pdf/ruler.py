"""Detection of drawn separator bars ("rulers") on a transcript page.

Transcripts mark section breaks with a thick horizontal bar drawn as a
filled rectangle.  The bar is usually accompanied by thin shading strokes,
so only rectangles wider than ``min_width`` and taller than ``min_height``
count as rulers.  A retained ruler is stretched to the full page width so
that any text printed on the same vertical band intersects it, wherever
the bar itself starts and ends horizontally.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from transcript_pdf.models.layout import Glyph, Rect

logger = logging.getLogger(__name__)


class RulerDetector:
    """Tracks the ruler rectangles of the current page.

    The detector has no memory across pages: :meth:`start_page` discards
    every rectangle seen so far.

    Args:
        min_width: Rectangles must be strictly wider than this.
        min_height: Rectangles must be strictly taller than this.
    """

    def __init__(self, min_width: float = 100.0, min_height: float = 1.0) -> None:
        self.min_width = min_width
        self.min_height = min_height
        self._page_width = 0.0
        self._page_height = 0.0
        self._rulers: list[Rect] = []

    @property
    def rulers(self) -> tuple[Rect, ...]:
        """Normalized ruler rectangles retained for the current page."""
        return tuple(self._rulers)

    def start_page(self, width: float, height: float) -> None:
        """Reset for a new page of the given size."""
        self._page_width = width
        self._page_height = height
        self._rulers.clear()

    def add_rectangle(self, rect: Rect) -> bool:
        """Consider a drawn rectangle; keep it if it is large enough.

        Returns:
            ``True`` if the rectangle was retained as a ruler.
        """
        if not (rect.width > self.min_width and rect.height > self.min_height):
            return False
        ruler = Rect(0.0, rect.y, self._page_width, rect.height)
        self._rulers.append(ruler)
        logger.debug("Ruler at y=%.2f (height %.2f)", rect.y, rect.height)
        return True

    def add_rectangles(self, rects: Iterable[Rect]) -> None:
        for rect in rects:
            self.add_rectangle(rect)

    def intersects(self, glyph: Glyph) -> bool:
        """Whether *glyph*'s bounding box overlaps any ruler on this page."""
        box = glyph.page_box(self._page_height)
        return any(ruler.intersects(box) for ruler in self._rulers)

    def hits_any(self, glyphs: Iterable[Glyph]) -> bool:
        """Whether any of *glyphs* overlaps a ruler on this page."""
        return any(self.intersects(glyph) for glyph in glyphs)
