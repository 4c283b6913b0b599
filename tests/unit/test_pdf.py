"""Unit tests for PDF line wrapping, pagination and rendering."""

from __future__ import annotations

from datetime import date

import pytest

import audio_scribe.formatting._pdf as pdf_mod
from audio_scribe.exceptions import PdfGenerationError
from audio_scribe.formatting import encode_pdf
from audio_scribe.formatting._pdf import PlacedLine, build_document, paginate, wrap_lines
from audio_scribe.timestamps.models import TranscriptResult

A4_HEIGHT_MM = 297.0


class TestWrapLines:
    """Greedy word wrapping over a width measurement."""

    def test_wraps_at_width(self) -> None:
        """Words are packed while the measured line fits."""
        assert wrap_lines("aaa bbb ccc", 7, len) == ["aaa bbb", "ccc"]

    def test_keeps_explicit_and_blank_lines(self) -> None:
        """Newlines always break, blank lines survive as empty strings."""
        assert wrap_lines("a\n\nb", 80, len) == ["a", "", "b"]
        assert wrap_lines("", 80, len) == [""]

    def test_collapses_runs_of_spaces(self) -> None:
        """Words are rejoined with single spaces."""
        assert wrap_lines("a   b\tc", 80, len) == ["a b c"]

    def test_splits_overlong_words(self) -> None:
        """A word wider than the line is cut between characters."""
        assert wrap_lines("abcdefghij", 4, len) == ["abcd", "efgh", "ij"]
        assert wrap_lines("ab abcdefghij x", 4, len) == ["ab", "abcd", "efgh", "ij x"]

    def test_lines_never_exceed_width(self) -> None:
        """Every produced line fits the measured width."""
        text = " ".join(f"word{i}" for i in range(200))
        lines = wrap_lines(text, 30, len)
        assert all(len(line) <= 30 for line in lines)
        assert " ".join(lines) == text


class TestPaginate:
    """Greedy page-break placement."""

    def test_single_page(self) -> None:
        """Short texts stay on the first page below the header."""
        pages = paginate(["a", "b"], page_height=A4_HEIGHT_MM, margin=20, line_height=7, first_top=40)
        assert pages == [[PlacedLine("a", 40), PlacedLine("b", 47)]]

    def test_empty_text_still_has_a_page(self) -> None:
        """The header page exists even without body lines."""
        assert paginate([], page_height=A4_HEIGHT_MM) == [[]]

    def test_breaks_before_bottom_margin(self) -> None:
        """No line ends below the bottom margin; overflow starts a new page."""
        lines = [f"line {i}" for i in range(100)]
        pages = paginate(
            lines, page_height=A4_HEIGHT_MM, margin=20, line_height=7, first_top=40
        )

        assert [len(page) for page in pages] == [33, 36, 31]
        for page in pages:
            for placed in page:
                assert placed.y + 7 <= A4_HEIGHT_MM - 20
        assert pages[1][0] == PlacedLine("line 33", 20)
        assert [p.text for page in pages for p in page] == lines


class TestRendering:
    """fpdf2 document generation."""

    def test_encode_pdf_produces_pdf_bytes(self, demo_result: TranscriptResult) -> None:
        """The payload is a PDF file."""
        payload = encode_pdf(demo_result, generated_on=date(2024, 1, 2))
        assert payload.startswith(b"%PDF-")
        assert payload.rstrip().endswith(b"%%EOF")

    def test_long_text_spans_pages(self) -> None:
        """Text longer than one page yields a multi-page document."""
        text = "\n".join(f"Linha {i} da transcrição." for i in range(100))
        document = build_document(TranscriptResult(text=text), generated_on=date(2024, 1, 2))
        assert document.page_no() == 3

    def test_short_text_single_page(self, demo_result: TranscriptResult) -> None:
        """Two short lines fit on the first page."""
        assert build_document(demo_result).page_no() == 1

    def test_characters_outside_core_font(self) -> None:
        """Text the built-in font cannot encode does not break generation."""
        payload = encode_pdf(TranscriptResult(text="emoji 🎙️ and 漢字"))
        assert payload.startswith(b"%PDF-")

    def test_renderer_failure_is_reported(
        self, monkeypatch: pytest.MonkeyPatch, demo_result: TranscriptResult
    ) -> None:
        """Internal renderer errors surface as PdfGenerationError."""

        def broken(*args: object, **kwargs: object) -> None:
            raise RuntimeError("renderer exploded")

        monkeypatch.setattr(pdf_mod, "build_document", broken)
        with pytest.raises(PdfGenerationError) as exc_info:
            encode_pdf(demo_result)
        assert "renderer exploded" in str(exc_info.value)
        assert exc_info.value.user_message == "Failed to generate the PDF document."
