"""Command-line interface for Audio Scribe exports using Typer.

Features:
- `export` command writing a saved transcription to TXT, DOC, PDF or SRT.
- `formats` command listing the supported export formats.
- Verbose/quiet switches wired to the central logging configuration.
"""

import pathlib
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from audio_scribe import __version__
from audio_scribe.exceptions import TranscriptionError
from audio_scribe.export import export_to_file
from audio_scribe.formatting import FORMATTERS, ExportFormat
from audio_scribe.transcription import parse_transcription_response
from audio_scribe.transcription.models import AudioFile, MediaSource, YoutubeVideo
from audio_scribe.utils.constant import DEFAULT_OUTPUT_DIR
from audio_scribe.utils.file_utils import derive_base_filename
from audio_scribe.utils.logging_config import configure_logging
from audio_scribe.utils.youtube import get_youtube_video_id

console = Console()


def version_callback(value: bool) -> None:
    """Show the application's version and exit.

    Args:
        value: When True, print the version and exit.

    Raises:
        typer.Exit: Always raised after printing when value is True.

    """
    if value:
        print(f"audio-scribe version: {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="audio-scribe",
    help="Export transcriptions to text, Word, PDF and SRT subtitle files.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the application's version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Print help when no subcommand is given.

    Raises:
        typer.Exit: Raised to terminate after displaying help or version.

    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _resolve_source(source_file: str | None, youtube_url: str | None) -> MediaSource | None:
    """Build the media source a transcription came from, if one was named.

    Raises:
        typer.BadParameter: If `youtube_url` contains no recognisable video id.
    """
    if youtube_url:
        video_id = get_youtube_video_id(youtube_url)
        if video_id is None:
            raise typer.BadParameter(
                f"Not a recognisable YouTube URL: {youtube_url}", param_hint="--youtube-url"
            )
        return YoutubeVideo(id=video_id, url=youtube_url)
    if source_file:
        return AudioFile(name=pathlib.Path(source_file).name)
    return None


@app.command()
def export(
    transcript: Annotated[
        pathlib.Path,
        typer.Argument(
            help="JSON transcription ({'text': ..., 'segments': [...]}) to export.",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    formats: Annotated[
        list[ExportFormat],
        typer.Option("--format", "-f", help="Export format; repeat for several."),
    ] = [ExportFormat.TXT],  # noqa: B006
    output_dir: Annotated[
        pathlib.Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory to save the exported files.",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = DEFAULT_OUTPUT_DIR,
    base_name: Annotated[
        str | None,
        typer.Option("--base-name", help="Filename stem for the exports."),
    ] = None,
    source_file: Annotated[
        str | None,
        typer.Option("--source-file", help="Name of the transcribed audio file."),
    ] = None,
    youtube_url: Annotated[
        str | None,
        typer.Option("--youtube-url", help="URL of the transcribed YouTube video."),
    ] = None,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Overwrite existing files instead of numbering."),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only log critical errors.")
    ] = False,
) -> list[pathlib.Path]:
    """Export a transcription in one or more formats.

    Each format is exported independently: a failing format (for example SRT
    without timing data) is reported and the remaining formats still run.

    Returns:
        list[pathlib.Path]: Paths of the files written.

    Raises:
        typer.Exit: With code 1 if the transcript cannot be read or any
            export failed.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        result = parse_transcription_response(transcript.read_text(encoding="utf-8"))
    except TranscriptionError as exc:
        console.print(f"[bold red]Cannot read transcription:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    stem = base_name or derive_base_filename(_resolve_source(source_file, youtube_url))

    written: list[pathlib.Path] = []
    failed = False
    for fmt in dict.fromkeys(formats):
        outcome = export_to_file(result, fmt, stem, output_dir, overwrite=overwrite)
        if outcome.ok and outcome.path is not None:
            written.append(outcome.path)
            console.print(f"[green]✔[/green] {escape(outcome.message)}")
        else:
            failed = True
            console.print(f"[red]✘ {fmt.value.upper()}:[/red] {escape(outcome.message)}")

    if failed:
        raise typer.Exit(code=1)
    return written


@app.command("formats")
def list_formats() -> None:
    """List the supported export formats."""
    table = Table(title="Export Formats", show_header=True, header_style="bold magenta")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Extension", style="green")
    table.add_column("MIME Type", style="yellow")
    table.add_column("Needs Segments")
    for fmt, spec in FORMATTERS.items():
        table.add_row(fmt.value, spec.file_extension, spec.mime_type, str(spec.requires_segments))
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
