"""Formatter for SubRip Subtitle format (.srt)."""

from audio_scribe.exceptions import ExportError, InvalidTimestampError, MissingTimingDataError
from audio_scribe.timestamps.models import TranscriptResult
from audio_scribe.timestamps.normalize import normalize_timestamp, parse_timestamp
from audio_scribe.utils.constant import STRICT_TIMESTAMPS


def _format_timestamp(raw: str | None, strict: bool) -> str:
    """Render a segment time as ``HH:MM:SS,mmm``.

    Parameters:
        raw (str | None): Time string as returned by the transcription service, if any.
        strict (bool): Reject malformed or out-of-range times instead of coercing them.

    Returns:
        str: Canonical SRT timestamp.

    Raises:
        InvalidTimestampError: If `strict` is set and `raw` fails strict parsing.
    """
    if strict:
        return parse_timestamp(raw, strict=True).to_srt()
    return normalize_timestamp(raw)


def encode_srt(
    result: TranscriptResult, strict: bool = STRICT_TIMESTAMPS, **kwargs: object
) -> bytes:
    """Convert a ``TranscriptResult`` to an SRT document.

    Cues are numbered from 1 in the order the segments are given. Segments
    are neither reordered nor checked for start/end consistency.

    Args:
        result: The transcription containing timed segments.
        strict: Reject malformed segment times instead of coercing them.
        **kwargs: Ignored.

    Returns:
        The SRT document encoded as UTF-8.

    Raises:
        MissingTimingDataError: If the result has no segments.
        ExportError: If `strict` is set and a segment time is invalid.
    """
    if not result.segments:
        raise MissingTimingDataError()

    cues = []
    for i, segment in enumerate(result.segments, start=1):
        try:
            start_time = _format_timestamp(segment.start_time, strict)
            end_time = _format_timestamp(segment.end_time, strict)
        except InvalidTimestampError as exc:
            raise ExportError(
                str(exc),
                user_message=f"Segment {i} has an invalid timestamp; SRT export aborted.",
            ) from exc
        cues.append(f"{i}\n{start_time} --> {end_time}\n{segment.text}\n\n")
    return "".join(cues).encode("utf-8")
