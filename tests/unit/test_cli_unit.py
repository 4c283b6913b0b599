"""Unit tests for the top-level CLI entry points."""

from __future__ import annotations

import pytest
import typer
from typer.testing import CliRunner

from audio_scribe import cli


def test_version_callback() -> None:
    """Ensure ``--version`` callback exits the process cleanly."""
    with pytest.raises(typer.Exit):
        cli.version_callback(True)


def test_main_help() -> None:
    """Invoking the app without args should print usage and exit 0."""
    result = CliRunner().invoke(cli.app, [])
    assert result.exit_code == 0
    assert "Usage" in result.stdout


def test_formats_command_lists_registry() -> None:
    """The formats table shows every format and the .doc extension."""
    result = CliRunner().invoke(cli.app, ["formats"])
    assert result.exit_code == 0
    for name in ("txt", "docx", "pdf", "srt", ".doc"):
        assert name in result.stdout


def test_resolve_source_prefers_youtube() -> None:
    """A YouTube URL takes precedence over a file name."""
    source = cli._resolve_source("clip.mp3", "https://youtu.be/dQw4w9WgXcQ")
    assert source is not None
    assert source.type == "youtube"


def test_resolve_source_file_uses_basename() -> None:
    """Directories in the source path are dropped."""
    source = cli._resolve_source("/data/audio/aula.mp3", None)
    assert source is not None
    assert source.type == "file"
    assert source.name == "aula.mp3"


def test_resolve_source_rejects_bad_youtube_url() -> None:
    """Unrecognised URLs are reported as a bad parameter."""
    with pytest.raises(typer.BadParameter):
        cli._resolve_source(None, "https://example.com")


def test_resolve_source_none() -> None:
    """Without hints the source is unknown."""
    assert cli._resolve_source(None, None) is None
