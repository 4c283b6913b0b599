"""Media sources handed to the transcription service.

Only the metadata the export layer needs is modelled here: uploaded or
recorded audio files and YouTube videos.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "AudioFile",
    "MediaSource",
    "YoutubeVideo",
]


class AudioFile(BaseModel):
    """An uploaded or recorded audio file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["file"] = "file"
    name: str = Field(..., description="Original filename, including extension.")
    mime_type: str = Field("audio/mpeg", alias="mimeType", description="MIME type of the audio.")
    base64: str | None = Field(None, description="Raw base64 content without data URI prefix.")


class YoutubeVideo(BaseModel):
    """A YouTube video selected by URL."""

    model_config = ConfigDict(frozen=True)

    type: Literal["youtube"] = "youtube"
    id: str = Field(..., description="11-character YouTube video id.")
    url: str = Field(..., description="URL the video was selected from.")
    title: str | None = Field(None, description="Optional human-readable title.")


MediaSource = Annotated[AudioFile | YoutubeVideo, Field(discriminator="type")]
