"""Formatter for paginated PDF documents (.pdf).

Layout happens in two pure steps that can be tested without a renderer:
:func:`wrap_lines` breaks the text into visual lines using a width
measurement callable, and :func:`paginate` assigns each line a page and a
vertical position with a greedy flow layout. :func:`build_document` then
draws the result with ``fpdf2``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from fpdf import FPDF

from audio_scribe.exceptions import PdfGenerationError
from audio_scribe.timestamps.models import TranscriptResult
from audio_scribe.utils.constant import (
    PDF_BODY_FONT_SIZE,
    PDF_BODY_OFFSET_MM,
    PDF_BYLINE_FONT_SIZE,
    PDF_BYLINE_GRAY,
    PDF_BYLINE_OFFSET_MM,
    PDF_FONT_FAMILY,
    PDF_LINE_HEIGHT_MM,
    PDF_MARGIN_MM,
    PDF_PAGE_FORMAT,
    PDF_TITLE,
    PDF_TITLE_FONT_SIZE,
    PRODUCT_NAME,
)
from audio_scribe.utils.logging_config import get_logger

logger = get_logger(__name__)

Measure = Callable[[str], float]


@dataclass(frozen=True)
class PlacedLine:
    """A wrapped line and the baseline it is drawn at on its page."""

    text: str
    y: float


def _split_word(word: str, max_width: float, measure: Measure) -> list[str]:
    """Break a word wider than ``max_width`` into character runs that fit."""
    pieces: list[str] = []
    piece = ""
    for char in word:
        if piece and measure(piece + char) > max_width:
            pieces.append(piece)
            piece = char
        else:
            piece += char
    pieces.append(piece)
    return pieces


def wrap_lines(text: str, max_width: float, measure: Measure) -> list[str]:
    """Word-wrap text to a maximum rendered width.

    Explicit newlines always start a new line; blank lines are kept as empty
    strings. Words are separated by single spaces in the output. A word
    wider than `max_width` on its own is split between characters.

    Parameters:
        text (str): Text to wrap.
        max_width (float): Usable width in the renderer's unit.
        measure (Callable[[str], float]): Returns the rendered width of a string.

    Returns:
        list[str]: Visual lines in reading order.
    """
    lines: list[str] = []
    for paragraph in text.replace("\r\n", "\n").split("\n"):
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if measure(candidate) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            if measure(word) <= max_width:
                current = word
            else:
                *full, current = _split_word(word, max_width, measure)
                lines.extend(full)
        lines.append(current)
    return lines


def paginate(
    lines: Sequence[str],
    *,
    page_height: float,
    margin: float = PDF_MARGIN_MM,
    line_height: float = PDF_LINE_HEIGHT_MM,
    first_top: float = PDF_MARGIN_MM + PDF_BODY_OFFSET_MM,
) -> list[list[PlacedLine]]:
    """Distribute lines over pages with a greedy top-to-bottom flow.

    Before a line is placed, a new page is started if advancing the cursor by
    one line height would cross the bottom margin. The cursor starts at
    `first_top` on the first page and at `margin` on every following page.

    Returns:
        list[list[PlacedLine]]: One list per page; the first page is always
            present, even when `lines` is empty.
    """
    bottom = page_height - margin
    pages: list[list[PlacedLine]] = [[]]
    cursor = first_top
    for line in lines:
        if cursor + line_height > bottom:
            pages.append([])
            cursor = margin
        pages[-1].append(PlacedLine(text=line, y=cursor))
        cursor += line_height
    return pages


def _to_core_font(text: str) -> str:
    # Built-in PDF fonts only cover latin-1.
    return text.encode("latin-1", errors="replace").decode("latin-1")


def build_document(result: TranscriptResult, generated_on: date | None = None) -> FPDF:
    """Lay out and draw the transcript into an ``FPDF`` document.

    Args:
        result: The transcription to render.
        generated_on: Date shown in the byline; defaults to today.

    Returns:
        The populated document, ready for output.
    """
    generated_on = generated_on or date.today()
    margin = PDF_MARGIN_MM

    pdf = FPDF(orientation="P", unit="mm", format=PDF_PAGE_FORMAT)
    pdf.set_auto_page_break(auto=False)
    pdf.set_title(PDF_TITLE)
    pdf.set_creator(PRODUCT_NAME)
    pdf.add_page()

    pdf.set_font(PDF_FONT_FAMILY, size=PDF_TITLE_FONT_SIZE)
    pdf.text(margin, margin, _to_core_font(PDF_TITLE))

    pdf.set_font(PDF_FONT_FAMILY, size=PDF_BYLINE_FONT_SIZE)
    pdf.set_text_color(PDF_BYLINE_GRAY)
    byline = f"Gerado em {generated_on.strftime('%x')} via {PRODUCT_NAME}"
    pdf.text(margin, margin + PDF_BYLINE_OFFSET_MM, _to_core_font(byline))

    pdf.set_text_color(0)
    pdf.set_font(PDF_FONT_FAMILY, size=PDF_BODY_FONT_SIZE)
    lines = wrap_lines(_to_core_font(result.text), pdf.w - 2 * margin, pdf.get_string_width)
    pages = paginate(lines, page_height=pdf.h)
    for index, page in enumerate(pages):
        if index:
            pdf.add_page()
        for placed in page:
            if placed.text:
                pdf.text(margin, placed.y, placed.text)

    logger.debug("Laid out %d lines over %d page(s)", len(lines), len(pages))
    return pdf


def encode_pdf(
    result: TranscriptResult, generated_on: date | None = None, **kwargs: object
) -> bytes:
    """Convert a ``TranscriptResult`` to a paginated PDF document.

    Args:
        result: The transcription to render.
        generated_on: Date shown in the byline; defaults to today.
        **kwargs: Ignored.

    Returns:
        The PDF file content.

    Raises:
        PdfGenerationError: If the renderer fails for any reason.
    """
    try:
        return bytes(build_document(result, generated_on).output())
    except Exception as exc:
        logger.error("PDF generation error: %s", exc, exc_info=True)
        raise PdfGenerationError(str(exc)) from exc
