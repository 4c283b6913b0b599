"""Export dispatcher.

Selects the encoder for a requested format, names the payload and turns
encoder failures into typed outcomes. Delivery to the host (writing to
disk) is a separate step so hosts can route payloads elsewhere.
"""

from __future__ import annotations

import pathlib
from dataclasses import dataclass, replace

from audio_scribe.exceptions import ExportError
from audio_scribe.formatting import ExportFormat, get_formatter_spec
from audio_scribe.timestamps.models import TranscriptResult
from audio_scribe.utils.file_utils import get_unique_filename
from audio_scribe.utils.logging_config import get_logger

logger = get_logger(__name__)

__all__ = [
    "ExportOutcome",
    "ExportPayload",
    "ExportRequest",
    "deliver",
    "export_as",
    "export_to_file",
]


@dataclass(frozen=True)
class ExportRequest:
    """A transcription result, the format to produce and the filename stem."""

    result: TranscriptResult
    target_format: ExportFormat
    base_filename: str

    @property
    def filename(self) -> str:
        spec = get_formatter_spec(self.target_format)
        return f"{self.base_filename}{spec.file_extension}"


@dataclass(frozen=True)
class ExportPayload:
    """Encoded bytes ready to be saved by the host."""

    filename: str
    mime_type: str
    content: bytes


@dataclass(frozen=True)
class ExportOutcome:
    """Result of one export: a payload on success, an error otherwise.

    Attributes:
        request: The request that produced this outcome.
        payload: Encoded payload, ``None`` on failure.
        error: The encoder failure, ``None`` on success.
        path: Where the payload was written, once delivered.
    """

    request: ExportRequest
    payload: ExportPayload | None = None
    error: ExportError | None = None
    path: pathlib.Path | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """User-facing description of the outcome."""
        if self.error is not None:
            return self.error.user_message
        if self.path is not None:
            return f"Saved {self.path}"
        return f"{self.request.filename} ready"


def export_as(
    result: TranscriptResult, target_format: ExportFormat | str, base_filename: str
) -> ExportOutcome:
    """Encode `result` in `target_format` and name the payload.

    Encoder failures are reported through the returned outcome rather than
    raised, so a failing export never interrupts the caller.

    Args:
        result: The transcription to export. Callers only offer export when
            a result with text exists; this is not re-validated.
        target_format: One of the formats registered in
            :data:`audio_scribe.formatting.FORMATTERS`.
        base_filename: Filename stem; the format's extension is appended.

    Returns:
        ExportOutcome: Payload on success, error on encoder failure.

    Raises:
        ValueError: If `target_format` is not a supported format.
    """
    spec = get_formatter_spec(target_format)
    request = ExportRequest(
        result=result,
        target_format=ExportFormat(_format_key(target_format)),
        base_filename=base_filename,
    )

    try:
        content = spec.format_func(result, title=base_filename)
    except ExportError as exc:
        logger.warning("Export of %s failed: %s", request.filename, exc)
        return ExportOutcome(request=request, error=exc)

    logger.info("Encoded %s (%d bytes)", request.filename, len(content))
    payload = ExportPayload(filename=request.filename, mime_type=spec.mime_type, content=content)
    return ExportOutcome(request=request, payload=payload)


def _format_key(target_format: ExportFormat | str) -> str:
    """Return the registry key for a format member or case-insensitive name."""
    if isinstance(target_format, ExportFormat):
        return target_format.value
    return target_format.lower()


def deliver(
    payload: ExportPayload, output_dir: pathlib.Path, overwrite: bool = False
) -> pathlib.Path:
    """Write a payload into `output_dir`.

    Existing files are kept unless `overwrite` is set; a numbered suffix is
    added to the new file instead.

    Returns:
        pathlib.Path: The path the payload was written to.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    target = get_unique_filename(output_dir / payload.filename, overwrite=overwrite)
    target.write_bytes(payload.content)
    logger.info("Saved %s", target)
    return target


def export_to_file(
    result: TranscriptResult,
    target_format: ExportFormat | str,
    base_filename: str,
    output_dir: pathlib.Path,
    overwrite: bool = False,
) -> ExportOutcome:
    """Export `result` and write the payload to disk when encoding succeeds.

    Returns:
        ExportOutcome: The export outcome, with `path` set on success.
    """
    outcome = export_as(result, target_format, base_filename)
    if outcome.payload is None:
        return outcome
    return replace(outcome, path=deliver(outcome.payload, output_dir, overwrite=overwrite))
