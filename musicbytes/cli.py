"""Command-line interface for musicbytes.

Provides commands for:
- wav: Render a file as a WAV sound file
- arduino: Print a C array of tone frequencies
- json: Print a JSON list of tone frequencies
- info: Show the decoded melody
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import FREQUENCY_CAP, Melody, MusicBytesError

app = typer.Typer(
    name="musicbytes",
    help="Turn any file into music",
    rich_markup_mode="markdown",
)
console = Console()

DEFAULT_WAV_FILE = Path("audio.wav")


def _setup_logging(verbose: bool) -> None:
    """Route library logging through rich when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_melody(input_file: Path, key: str) -> Melody:
    """Decode `input_file`, turning every failure into exit status 1."""
    from .decoding import decode_file
    from .mapping import c_major, scale_mapper

    if not input_file.is_file():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    try:
        mapper = c_major if key.lower() == "c" else scale_mapper(key)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        return decode_file(input_file, mapper)
    except (MusicBytesError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def wav(
    input_file: Path = typer.Argument(..., help="Any file to sonify"),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Output WAV file path (default: audio.wav)"
    ),
    key: str = typer.Option(
        "c", "-k", "--key", help="Tonic of the major scale tones are mapped onto"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Render a file as a mono 16-bit WAV file.

    **Examples:**

        musicbytes wav photo.jpg

        musicbytes wav photo.jpg -o photo.wav -k eflat
    """
    from .output import WAVExporter

    _setup_logging(verbose)
    melody = _load_melody(input_file, key)

    if output is None:
        output = DEFAULT_WAV_FILE

    exporter = WAVExporter()
    try:
        exporter.export(melody, output)
    except OSError as e:
        console.print(f"[red]Error creating '{output}':[/red]\n{e}")
        raise typer.Exit(1)

    console.print(f"[green]Successfully created '{output}'[/green]")
    if verbose:
        duration = exporter.synthesizer.get_duration(melody)
        console.print(f"  Tempo: {melody.bpm} BPM, {len(melody)} tones, {duration:.2f}s")


@app.command()
def arduino(
    input_file: Path = typer.Argument(..., help="Any file to sonify"),
    limit: int = typer.Option(
        FREQUENCY_CAP, "--limit", min=0, help="Maximum number of tones in the array"
    ),
    key: str = typer.Option(
        "c", "-k", "--key", help="Tonic of the major scale tones are mapped onto"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Print tone frequencies as a C array for an Arduino sketch."""
    from .output import ArduinoExporter

    _setup_logging(verbose)
    melody = _load_melody(input_file, key)
    typer.echo(ArduinoExporter(limit=limit).render(melody), nl=False)


@app.command()
def json(
    input_file: Path = typer.Argument(..., help="Any file to sonify"),
    key: str = typer.Option(
        "c", "-k", "--key", help="Tonic of the major scale tones are mapped onto"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Print tone frequencies as a JSON array."""
    from .output import JSONExporter

    _setup_logging(verbose)
    melody = _load_melody(input_file, key)
    typer.echo(JSONExporter().render(melody), nl=False)


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Any file to sonify"),
    key: str = typer.Option(
        "c", "-k", "--key", help="Tonic of the major scale tones are mapped onto"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Show the melody a file decodes to."""
    from .synthesis import ToneSynthesizer

    _setup_logging(verbose)
    melody = _load_melody(input_file, key)
    synthesizer = ToneSynthesizer()

    console.print(f"\n[bold]Melody:[/bold] {input_file.name}")
    console.print(f"  Size: {input_file.stat().st_size:,} bytes")
    console.print(f"  Tempo: {melody.bpm} BPM")
    console.print(f"  Tones: {len(melody):,}")
    console.print(f"  Duration: {synthesizer.get_duration(melody):.2f} seconds")

    _show_tones_table(melody, synthesizer)


def _show_tones_table(melody: Melody, synthesizer, limit: int = 50):
    """Display the first tones in a table."""
    table = Table(title="Decoded Tones")
    table.add_column("#", style="dim")
    table.add_column("Pitch", style="cyan")
    table.add_column("Duration", style="green")
    table.add_column("Volume", style="magenta")
    table.add_column("Frequency (Hz)", style="yellow")
    table.add_column("Samples", style="blue")

    for index, tone in enumerate(melody.units[:limit]):
        table.add_row(
            str(index),
            tone.pitch_name,
            tone.duration.name.replace("_", " ").title(),
            f"{tone.volume:.3f}",
            f"{tone.frequency:.2f}",
            f"{synthesizer.sample_count(tone.duration, melody.bpm):,}",
        )

    console.print(table)
    if len(melody) > limit:
        console.print(f"  [dim]... {len(melody) - limit} more[/dim]")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
