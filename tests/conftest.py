"""Shared test fixtures for the audio_scribe test suite."""

from __future__ import annotations

import pytest

from audio_scribe.timestamps.models import TranscriptResult, TranscriptSegment


@pytest.fixture
def demo_result() -> TranscriptResult:
    """Two-line transcription with a single loosely timed segment."""
    return TranscriptResult(
        text="Hello world.\nSecond line.",
        segments=[TranscriptSegment(start_time="0:01", end_time="0:04", text="Hello world.")],
        timestamp=1700000000000,
    )


@pytest.fixture
def untimed_result() -> TranscriptResult:
    """Transcription without any timing data."""
    return TranscriptResult(text="Only text, no segments.", timestamp=1700000000000)
