"""Helpers for YouTube URLs."""

from __future__ import annotations

import re

# Standard, short (youtu.be), embed, /v/, /u/x/ and Shorts URLs
_VIDEO_ID_RE = re.compile(r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=|shorts/)([^#&?]*).*")

VIDEO_ID_LENGTH = 11


def get_youtube_video_id(url: str) -> str | None:
    """Extract the video id from a YouTube URL.

    Args:
        url: Any common YouTube URL form.

    Returns:
        The 11-character video id, or ``None`` if none could be found.

    Examples:
        >>> get_youtube_video_id("https://youtu.be/dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> get_youtube_video_id("https://example.com") is None
        True
    """
    match = _VIDEO_ID_RE.match(url)
    if match and len(match.group(2)) == VIDEO_ID_LENGTH:
        return match.group(2)
    return None


def get_youtube_thumbnail(video_id: str) -> str:
    """Return the medium-quality thumbnail URL for a video id."""
    return f"https://img.youtube.com/vi/{video_id}/mqdefault.jpg"


__all__ = [
    "get_youtube_thumbnail",
    "get_youtube_video_id",
]
