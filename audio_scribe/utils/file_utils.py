"""Utilities for export naming and overwrite protection.

The module exposes:
• `derive_base_filename` – filename stem for a media source
• `get_unique_filename` – collision-free output path
"""

from __future__ import annotations

import pathlib

from audio_scribe.transcription.models import AudioFile, MediaSource, YoutubeVideo
from audio_scribe.utils.constant import DEFAULT_BASE_FILENAME

PathLike = str | pathlib.Path

__all__ = [
    "derive_base_filename",
    "get_unique_filename",
]


def derive_base_filename(
    source: MediaSource | None, default: str = DEFAULT_BASE_FILENAME
) -> str:
    """Return the filename stem exports of `source` are saved under.

    Uploaded files use the part of their name before the first dot, YouTube
    videos use ``youtube-<id>``, anything else falls back to `default`.

    Args:
        source: The media source that was transcribed, if known.
        default: Stem used when no better name is available.

    Returns:
        A non-empty filename stem without extension.
    """
    if isinstance(source, AudioFile):
        stem = source.name.split(".")[0]
        return stem or default
    if isinstance(source, YoutubeVideo):
        return f"youtube-{source.id}"
    return default


def get_unique_filename(
    base_path: PathLike,
    overwrite: bool = False,
    separator: str = "-",
) -> pathlib.Path:
    """Generate a unique filename to avoid overwriting existing files.

    If the file does not exist or overwrite is True, returns the original path.
    Otherwise, appends a numbered suffix like "-1", "-2", etc.

    Args:
        base_path: The desired file path.
        overwrite: If True, return the original path even if it exists.
        separator: The separator to use before the number suffix.

    Returns:
        A pathlib.Path that is guaranteed not to exist (unless overwrite=True).

    Raises:
        RuntimeError: If a unique filename cannot be found after 9,999 attempts.

    """
    path = pathlib.Path(base_path)

    if overwrite or not path.exists():
        return path

    counter = 1
    while True:
        new_path = path.parent / f"{path.stem}{separator}{counter}{path.suffix}"
        if not new_path.exists():
            return new_path
        counter += 1

        # Safety check to prevent infinite loops
        if counter > 9999:
            raise RuntimeError(f"Cannot find unique filename for {base_path}")
