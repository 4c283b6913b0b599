"""Registry of export encoders for transcription results.

Each supported format maps to a :class:`FormatterSpec` holding the encoder
function and the metadata the export dispatcher needs to name and deliver
its payload.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from audio_scribe.timestamps.models import TranscriptResult

from ._doc import encode_doc
from ._pdf import encode_pdf
from ._srt import encode_srt
from ._txt import encode_txt


class ExportFormat(str, Enum):
    """Closed set of export formats offered to the user."""

    TXT = "txt"
    DOCX = "docx"
    PDF = "pdf"
    SRT = "srt"


@dataclass(frozen=True)
class FormatterSpec:
    """Metadata and function for a specific export format.

    Attributes:
        format_func: Encoder converting a TranscriptResult to bytes.
        file_extension: The file extension for this format (including the dot).
        mime_type: MIME type announced when the payload is delivered.
        requires_segments: Whether the format needs timed segments.

    """

    format_func: Callable[..., bytes]
    file_extension: str
    mime_type: str
    requires_segments: bool = False


# A registry mapping export formats to their respective formatter specifications.
FORMATTERS: dict[ExportFormat, FormatterSpec] = {
    ExportFormat.TXT: FormatterSpec(
        format_func=encode_txt,
        file_extension=".txt",
        mime_type="text/plain;charset=utf-8",
    ),
    # HTML content served with a legacy Word extension, not an OOXML package.
    ExportFormat.DOCX: FormatterSpec(
        format_func=encode_doc,
        file_extension=".doc",
        mime_type="application/msword",
    ),
    ExportFormat.PDF: FormatterSpec(
        format_func=encode_pdf,
        file_extension=".pdf",
        mime_type="application/pdf",
    ),
    ExportFormat.SRT: FormatterSpec(
        format_func=encode_srt,
        file_extension=".srt",
        mime_type="text/plain;charset=utf-8",
        requires_segments=True,
    ),
}


def get_formatter_spec(format_name: ExportFormat | str) -> FormatterSpec:
    """Retrieve the FormatterSpec metadata for the given export format.

    Parameters:
        format_name (ExportFormat | str): Format member or case-insensitive
            identifier (e.g., "txt", "srt").

    Returns:
        FormatterSpec: The metadata and encoder for the requested format.

    Raises:
        ValueError: If the specified format is not supported.
    """
    key = format_name.value if isinstance(format_name, ExportFormat) else format_name.lower()
    try:
        return FORMATTERS[ExportFormat(key)]
    except ValueError:
        supported = [fmt.value for fmt in FORMATTERS]
        raise ValueError(
            f"Unsupported format: '{format_name}'. Supported formats are: {supported}"
        ) from None


def get_formatter(format_name: ExportFormat | str) -> Callable[[TranscriptResult], bytes]:
    """Get the encoder function registered for the given format.

    Raises:
        ValueError: If `format_name` is not supported.
    """
    return get_formatter_spec(format_name).format_func


def extension_for(format_name: ExportFormat | str) -> str:
    """Return the filename extension (without dot) used for a format."""
    return get_formatter_spec(format_name).file_extension.lstrip(".")


__all__ = [
    "FORMATTERS",
    "ExportFormat",
    "FormatterSpec",
    "encode_doc",
    "encode_pdf",
    "encode_srt",
    "encode_txt",
    "extension_for",
    "get_formatter",
    "get_formatter_spec",
]
