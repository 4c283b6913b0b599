"""Contract of the external transcription service.

The service itself (a hosted generative model) lives outside this package.
It is described by :class:`TranscriptionCall`; this module turns its JSON
response into a :class:`~audio_scribe.timestamps.models.TranscriptResult`.
"""

from __future__ import annotations

import json
from typing import Protocol

from pydantic import ValidationError

from audio_scribe.exceptions import TranscriptionError
from audio_scribe.timestamps.models import TranscriptResult, now_ms
from audio_scribe.transcription.models import AudioFile, MediaSource, YoutubeVideo
from audio_scribe.utils.logging_config import get_logger

logger = get_logger(__name__)

__all__ = [
    "AudioFile",
    "MediaSource",
    "TranscriptionCall",
    "YoutubeVideo",
    "parse_transcription_response",
]


class TranscriptionCall(Protocol):
    """Asynchronous transcription collaborator.

    Implementations resolve to a TranscriptResult or raise
    :class:`~audio_scribe.exceptions.TranscriptionError`.
    """

    async def __call__(self, source: MediaSource) -> TranscriptResult: ...


def parse_transcription_response(
    response_text: str | None, *, timestamp: int | None = None
) -> TranscriptResult:
    """Parse the model's JSON response into a TranscriptResult.

    The expected payload is ``{"text": ..., "segments": [{"startTime": ...,
    "endTime": ..., "text": ...}]}``; `segments` may be missing. The result
    is stamped with the current time unless `timestamp` is given.

    Args:
        response_text: Raw response body returned by the service.
        timestamp: Optional creation time in epoch milliseconds.

    Returns:
        The parsed, immutable transcription result.

    Raises:
        TranscriptionError: If the response is empty, not JSON, or does not
            match the expected shape.
    """
    if not response_text or not response_text.strip():
        raise TranscriptionError("No transcript generated.")

    try:
        payload = json.loads(response_text)
    except json.JSONDecodeError as exc:
        raise TranscriptionError(f"Transcription response is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise TranscriptionError("Transcription response must be a JSON object.")

    # The service's own timestamp, if any, is replaced by the local creation time.
    payload["timestamp"] = timestamp if timestamp is not None else now_ms()
    try:
        result = TranscriptResult.model_validate(payload)
    except ValidationError as exc:
        raise TranscriptionError(f"Unexpected transcription response shape: {exc}") from exc

    logger.info(
        "Parsed transcription: %d characters, %d segment(s)",
        len(result.text),
        len(result.segments or ()),
    )
    return result
