"""Builders for synthetic page layouts used across the test suite."""

from __future__ import annotations

from transcript_pdf.models.layout import Glyph, PageLayout, Rect, VisualLine

PAGE_WIDTH = 612.0
PAGE_HEIGHT = 792.0
CHAR_WIDTH = 6.0
CHAR_HEIGHT = 10.0


def vline(text: str, x: float = 72.0, y: float = 100.0, bold: bool = False) -> VisualLine:
    """A visual line whose glyphs start at *x* on baseline *y* (top-down)."""
    glyphs = tuple(
        Glyph(
            text=char,
            x=x + i * CHAR_WIDTH,
            y=y,
            width=CHAR_WIDTH,
            height=CHAR_HEIGHT,
            bold=bold,
        )
        for i, char in enumerate(text)
    )
    return VisualLine(text=text, glyphs=glyphs)


def page(
    label: str,
    *lines: VisualLine | str,
    index: int = 0,
    rectangles: tuple[Rect, ...] = (),
) -> PageLayout:
    """A page whose first visual line is *label*, followed by *lines*.

    Plain strings become left-aligned lines at ``x=72``; lines are spaced
    20 units apart vertically unless given as :class:`VisualLine`.
    """
    visual = [vline(label, x=300.0, y=40.0)]
    for offset, line in enumerate(lines, start=1):
        visual.append(vline(line, y=40.0 + 20.0 * offset) if isinstance(line, str) else line)
    return PageLayout(
        index=index,
        width=PAGE_WIDTH,
        height=PAGE_HEIGHT,
        lines=tuple(visual),
        rectangles=rectangles,
    )


def ruler_at(baseline_y: float, width: float = 300.0, height: float = 3.0) -> Rect:
    """A drawn bar crossing the glyph boxes of lines on *baseline_y* (top-down)."""
    return Rect(50.0, PAGE_HEIGHT - baseline_y + 2.0, width, height)


# ---------------------------------------------------------------------------
# Minimal PDF documents
# ---------------------------------------------------------------------------


def text_op(x: float, y: float, text: str, bold: bool = False, size: int = 12) -> str:
    """Content-stream operators drawing *text* with its baseline at (x, y), bottom-up."""
    font = "/F2" if bold else "/F1"
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    return f"BT {font} {size} Tf {x} {y} Td ({escaped}) Tj ET"


def rect_op(x: float, y: float, width: float, height: float) -> str:
    """Content-stream operators filling a rectangle, bottom-up."""
    return f"0 0 0 rg {x} {y} {width} {height} re f"


def build_pdf(pages: list[list[str]], page_labels: str | None = None) -> bytes:
    """Assemble a letter-size PDF with one content stream per page.

    Args:
        pages: Content-stream operator lines for each page.
        page_labels: Raw ``/Nums`` array body of a ``/PageLabels`` number
            tree, e.g. ``"0 << /S /r >> 1 << /P (T) /S /D >>"``.

    Returns:
        The PDF file contents.  ``/F1`` is Helvetica, ``/F2`` Helvetica-Bold.
    """
    first_page_obj = 5
    kids = " ".join(f"{first_page_obj + 2 * i} 0 R" for i in range(len(pages)))
    labels = f" /PageLabels << /Nums [{page_labels}] >>" if page_labels else ""

    objects = [
        f"<< /Type /Catalog /Pages 2 0 R{labels} >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica-Bold >>",
    ]
    for i, operators in enumerate(pages):
        content = "\n".join(operators)
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {PAGE_WIDTH:g} {PAGE_HEIGHT:g}] "
            f"/Resources << /Font << /F1 3 0 R /F2 4 0 R >> >> /Contents {first_page_obj + 2 * i + 1} 0 R >>"
        )
        objects.append(f"<< /Length {len(content.encode('latin-1'))} >>\nstream\n{content}\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1")

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode("latin-1")
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode("latin-1")
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n"
    ).encode("latin-1")
    return bytes(out)


def deposition_pdf() -> bytes:
    """A two-page transcript preceded by a cover page.

    Page labels: ``i`` for the cover, ``T1``/``T2`` for the transcript.
    """
    cover = [
        text_op(300, 750, "i"),
        text_op(72, 720, "INDEX OF EXAMINATIONS"),
        text_op(72, 690, "MR. NOBODY: This page is skipped."),
    ]
    first = [
        text_op(300, 750, "42"),
        text_op(72, 720, "MR. JONES: Good morning."),
        rect_op(72, 688, 300, 3),
        rect_op(72, 600, 300, 0.5),
        text_op(72, 690, "RECESS TAKEN"),
        text_op(72, 660, "DIRECT EXAMINATION", bold=True),
        text_op(72, 600, "Back on the record."),
    ]
    second = [
        text_op(300, 750, "43"),
        text_op(72, 720, "JOHN DOE, Sworn, Examined by Mr. Smith"),
        text_op(72, 690, "Q MR. SMITH: Were you there?"),
        text_op(72, 660, "A Yes."),
        text_op(540, 660, "3"),
        text_op(72, 630, "Q And then?"),
    ]
    return build_pdf(
        [cover, first, second],
        page_labels="0 << /S /r >> 1 << /P (T) /S /D >>",
    )
