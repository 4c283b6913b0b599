"""Unit tests for parsing transcription service responses."""

from __future__ import annotations

import json

import pytest

from audio_scribe.exceptions import TranscriptionError
from audio_scribe.transcription import parse_transcription_response


def test_parse_full_response() -> None:
    """Text and segments are read and the result is stamped."""
    body = json.dumps(
        {
            "text": "Olá mundo.",
            "segments": [
                {"startTime": "00:00:00,000", "endTime": "00:00:02,000", "text": "Olá mundo."}
            ],
        }
    )
    result = parse_transcription_response(body, timestamp=42)
    assert result.text == "Olá mundo."
    assert result.segments is not None
    assert result.segments[0].end_time == "00:00:02,000"
    assert result.timestamp == 42


def test_parse_response_without_segments() -> None:
    """Segments are optional in the response."""
    result = parse_transcription_response('{"text": "abc"}')
    assert result.segments is None
    assert result.timestamp > 0


def test_parse_response_overrides_remote_timestamp() -> None:
    """The creation time is set locally, never taken from the service."""
    result = parse_transcription_response('{"text": "abc", "timestamp": 1}', timestamp=99)
    assert result.timestamp == 99


@pytest.mark.parametrize("body", [None, "", "   "])
def test_parse_empty_response(body: str | None) -> None:
    """An empty response means no transcript was generated."""
    with pytest.raises(TranscriptionError, match="No transcript generated"):
        parse_transcription_response(body)


@pytest.mark.parametrize("body", ["not json", "[1, 2]", '{"segments": []}'])
def test_parse_malformed_response(body: str) -> None:
    """Invalid JSON or an unexpected shape is a transcription error."""
    with pytest.raises(TranscriptionError):
        parse_transcription_response(body)


def test_parse_response_segment_without_times() -> None:
    """A segment missing its times does not reject the whole transcription."""
    result = parse_transcription_response('{"text": "a", "segments": [{"text": "x"}]}')
    assert result.segments is not None
    assert result.segments[0].start_time is None
    assert result.segments[0].text == "x"
