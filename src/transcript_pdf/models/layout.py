"""Visual layout values handed over by the PDF engine.

The classifier never touches the PDF itself.  It consumes, per page, the
visual lines (text plus per-glyph geometry and weight) and the rectangles
drawn on that page, all expressed with these small value types.

Coordinates follow two conventions, as the PDF engine reports them:

- :class:`Glyph` positions are top-down (``y`` grows toward the bottom of
  the page and marks the glyph's baseline edge).
- :class:`Rect` positions are bottom-up PDF user space.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in bottom-up page space."""

    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """Return ``True`` when the interiors of the two rectangles overlap.

        Rectangles that only touch along an edge do not intersect, and an
        empty rectangle intersects nothing.
        """
        if self.width <= 0 or self.height <= 0 or other.width <= 0 or other.height <= 0:
            return False
        return (
            other.x + other.width > self.x
            and other.y + other.height > self.y
            and other.x < self.x + self.width
            and other.y < self.y + self.height
        )


@dataclass(frozen=True)
class Glyph:
    """A single rendered character sample.

    Attributes:
        text: The character(s) the glyph renders.
        x: Left edge, from the left of the page.
        y: Baseline edge, from the top of the page.
        width: Advance width.
        height: Glyph height.
        bold: Whether the glyph's font is a bold weight.
    """

    text: str
    x: float
    y: float
    width: float
    height: float
    bold: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    def page_box(self, page_height: float) -> Rect:
        """Return the glyph's bounding box in bottom-up page space."""
        return Rect(self.x, page_height - self.y, self.width, self.height)


@dataclass(frozen=True)
class VisualLine:
    """One line of text as laid out on the page, in reading order."""

    text: str
    glyphs: tuple[Glyph, ...] = ()

    @property
    def start_x(self) -> float | None:
        """Horizontal start of the first non-blank glyph, if any."""
        for glyph in self.glyphs:
            if not glyph.is_blank:
                return glyph.x
        return None


@dataclass(frozen=True)
class PageLayout:
    """Everything the classifier needs from one PDF page.

    Attributes:
        index: 0-based structural page index within the PDF.
        width: Page width in layout units.
        height: Page height in layout units.
        lines: Visual lines in reading order.
        rectangles: Every rectangle drawn on the page, unfiltered.
        label: The PDF page label, when the document defines one.
    """

    index: int
    width: float
    height: float
    lines: tuple[VisualLine, ...] = ()
    rectangles: tuple[Rect, ...] = ()
    label: str | None = None
