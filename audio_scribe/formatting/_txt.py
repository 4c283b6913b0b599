"""Formatter for plain text (.txt) output."""

from audio_scribe.timestamps.models import TranscriptResult


def encode_txt(result: TranscriptResult, **kwargs: object) -> bytes:
    """
    Encode a TranscriptResult as plain text.

    Parameters:
        result (TranscriptResult): The transcription whose full `text` is exported.
        **kwargs: Additional keyword arguments (ignored for plain text output).

    Returns:
        bytes: `result.text` encoded as UTF-8, without any transformation.
    """
    return result.text.encode("utf-8")
