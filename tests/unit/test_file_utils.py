"""Tests for file naming utilities and YouTube helpers."""

from __future__ import annotations

import pathlib

import pytest

from audio_scribe.transcription.models import AudioFile, YoutubeVideo
from audio_scribe.utils.file_utils import derive_base_filename, get_unique_filename
from audio_scribe.utils.youtube import get_youtube_thumbnail, get_youtube_video_id


def test_get_unique_filename_no_conflict(tmp_path: pathlib.Path) -> None:
    """Original filename is returned when no conflict exists."""
    test_path = tmp_path / "test.txt"
    assert get_unique_filename(test_path) == test_path


def test_get_unique_filename_multiple_conflicts(tmp_path: pathlib.Path) -> None:
    """The next free number is chosen."""
    (tmp_path / "test.txt").write_text("x")
    (tmp_path / "test-1.txt").write_text("x")
    assert get_unique_filename(tmp_path / "test.txt") == tmp_path / "test-2.txt"


def test_get_unique_filename_custom_separator(tmp_path: pathlib.Path) -> None:
    """The separator before the counter is configurable."""
    (tmp_path / "test.txt").write_text("x")
    assert get_unique_filename(tmp_path / "test.txt", separator="_") == tmp_path / "test_1.txt"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("entrevista.mp3", "entrevista"),
        ("aula.parte1.wav", "aula"),
        ("gravacao", "gravacao"),
        (".hidden", "transcricao"),
    ],
)
def test_derive_base_filename_from_file(name: str, expected: str) -> None:
    """Uploaded files use the part of the name before the first dot."""
    assert derive_base_filename(AudioFile(name=name)) == expected


def test_derive_base_filename_from_youtube() -> None:
    """Videos are named after their id."""
    video = YoutubeVideo(id="dQw4w9WgXcQ", url="https://youtu.be/dQw4w9WgXcQ")
    assert derive_base_filename(video) == "youtube-dQw4w9WgXcQ"


def test_derive_base_filename_default() -> None:
    """Unknown sources use the fallback stem."""
    assert derive_base_filename(None) == "transcricao"
    assert derive_base_filename(None, default="saida") == "saida"


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
    ],
)
def test_get_youtube_video_id(url: str) -> None:
    """All common URL shapes yield the 11-character id."""
    assert get_youtube_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize(
    "url", ["https://example.com/video", "https://youtu.be/short", "not a url"]
)
def test_get_youtube_video_id_invalid(url: str) -> None:
    """URLs without a well-formed id are rejected."""
    assert get_youtube_video_id(url) is None


def test_get_youtube_thumbnail() -> None:
    """Thumbnails use the medium-quality image."""
    assert (
        get_youtube_thumbnail("dQw4w9WgXcQ")
        == "https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg"
    )
