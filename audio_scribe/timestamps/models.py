"""Common data models for transcription results.

This module defines the pydantic models shared by transcription response
parsing, the export dispatcher and every format encoder. Results are frozen:
they are built once when a transcription finishes and only read afterwards.
"""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "TranscriptSegment",
    "TranscriptResult",
    "now_ms",
]


def now_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class TranscriptSegment(BaseModel):
    """A timed caption unit.

    Times are kept as the loose strings the transcription service returned;
    they are canonicalized only when rendered (see
    :func:`audio_scribe.timestamps.normalize.normalize_timestamp`). A missing
    time renders as zero.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_time: str | None = Field(None, alias="startTime", description="Segment start time.")
    end_time: str | None = Field(None, alias="endTime", description="Segment end time.")
    text: str = Field(..., description="Caption content.")


class TranscriptResult(BaseModel):
    """Full output of a transcription."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(..., description="Complete transcription, paragraph formatted.")
    segments: tuple[TranscriptSegment, ...] | None = Field(
        None, description="Ordered timed segments, if the service produced any."
    )
    timestamp: int = Field(
        default_factory=now_ms, description="Creation time in epoch milliseconds."
    )

    @property
    def has_segments(self) -> bool:
        """Whether the result carries timing data usable for subtitles."""
        return bool(self.segments)
