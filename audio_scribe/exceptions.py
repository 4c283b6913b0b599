"""Error types raised by the export subsystem.

Encoders raise subclasses of :class:`ExportError`; the export dispatcher
turns them into failed outcomes carrying a user-facing message so that no
encoder failure ever terminates the host session.
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class for recoverable, user-visible export failures.

    Attributes:
        user_message: Message suitable for showing to the end user.
    """

    default_message = "Export failed."

    def __init__(self, message: str | None = None, *, user_message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.user_message = user_message or self.default_message


class MissingTimingDataError(ExportError):
    """Raised when SRT export is requested for a result without segments."""

    default_message = (
        "No timing data is available for SRT export: the transcription has no timed segments."
    )


class PdfGenerationError(ExportError):
    """Raised when the paginated document renderer fails internally."""

    default_message = "Failed to generate the PDF document."


class InvalidTimestampError(ValueError):
    """Raised when a time string cannot be parsed into a timestamp."""

    pass


class TranscriptionError(RuntimeError):
    """Raised when the transcription service returns no usable result."""

    pass


__all__ = [
    "ExportError",
    "InvalidTimestampError",
    "MissingTimingDataError",
    "PdfGenerationError",
    "TranscriptionError",
]
