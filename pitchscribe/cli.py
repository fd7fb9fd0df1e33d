"""Command-line interface for Pitchscribe.

Provides commands for:
- transcribe: Print the notes found in a WAV file
- info: Show audio file information
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core import Note, WavFileError
from .core.constants import DEFAULT_MPM_THRESHOLD

app = typer.Typer(
    name="pitchscribe",
    help="Monophonic audio to note transcription",
    rich_markup_mode="markdown",
)
console = Console()


@dataclass
class StageTimings:
    """Track timing of processing stages."""

    stages: Dict[str, float] = field(default_factory=dict)
    _current_stage: Optional[str] = field(default=None, repr=False)
    _start_time: float = field(default=0.0, repr=False)

    def start(self, stage: str) -> None:
        """Start timing a stage."""
        self._current_stage = stage
        self._start_time = time.perf_counter()

    def stop(self) -> float:
        """Stop timing the current stage, return duration."""
        if self._current_stage is None:
            return 0.0
        duration = time.perf_counter() - self._start_time
        self.stages[self._current_stage] = duration
        self._current_stage = None
        return duration

    @property
    def total_time(self) -> float:
        return sum(self.stages.values())

    def print_summary(self) -> None:
        """Print timing summary to console."""
        console.print("\n[bold]Timing Summary:[/bold]")
        for stage, duration in self.stages.items():
            console.print(f"  {stage}: {duration:.2f}s")
        console.print(f"  [bold]Total: {self.total_time:.2f}s[/bold]")

    def to_dict(self) -> Dict[str, Any]:
        return {"stages": self.stages, "total_time": self.total_time}


def collapse_repeats(names: List[str]) -> List[str]:
    """Merge runs of identical consecutive names into one."""
    collapsed = []
    for name in names:
        if not collapsed or collapsed[-1] != name:
            collapsed.append(name)
    return collapsed


def format_note_names(notes: List[Note], collapse: bool = False) -> str:
    """Comma-separated note names, e.g. 'A4, C#3'."""
    names = [note.pitch_name for note in notes]
    if collapse:
        names = collapse_repeats(names)
    return ", ".join(names)


def _load(input_file: Path):
    from .input import AudioLoader

    try:
        return AudioLoader().load(input_file)
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)
    except (WavFileError, ValueError, RuntimeError) as e:
        console.print(f"[red]Error reading wav file: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def transcribe(
    input_file: Path = typer.Argument(..., help="Input WAV file"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Also write the note list to this file"
    ),
    collapse: bool = typer.Option(
        False, "--collapse", "-c", help="Merge repeated consecutive notes"
    ),
    threshold: float = typer.Option(
        DEFAULT_MPM_THRESHOLD, "--threshold", "-t", help="MPM peak threshold (0-1)"
    ),
    workers: int = typer.Option(
        1, "--workers", "-w", help="Threads used for pitch detection"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Transcribe a WAV file to a list of notes.

    **Examples:**

        pitchscribe transcribe melody.wav

        pitchscribe transcribe melody.wav --collapse -o notes.txt
    """
    from .transcription import MonophonicTranscriber

    timings = StageTimings()

    timings.start("Loading")
    audio = _load(input_file)
    timings.stop()

    if verbose and not json_output:
        console.print(f"[blue]Loaded audio:[/blue] {input_file}")
        console.print(
            f"  Duration: {audio.duration_seconds:.2f}s, Sample rate: {audio.sample_rate}Hz"
        )

    timings.start("Transcription")
    transcriber = MonophonicTranscriber(threshold=threshold, max_workers=workers)
    notes = transcriber.get_notes(audio)
    timings.stop()

    text = format_note_names(notes, collapse=collapse)

    if output is not None:
        output.write_text(text + "\n")

    if json_output:
        console.print_json(
            data={
                "input": str(input_file),
                "sample_rate": audio.sample_rate,
                "notes_count": len(notes),
                "notes": [note.to_dict(audio.sample_rate) for note in notes],
                "timings": timings.to_dict(),
            }
        )
        return

    console.print(text, highlight=False)

    if verbose:
        console.print(f"  Detected {len(notes)} notes")
        if notes:
            _show_notes_table(notes, audio.sample_rate)
        if output is not None:
            console.print(f"[blue]Saved to:[/blue] {output}")
        timings.print_summary()


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Input WAV file"),
):
    """Show information about an audio file."""
    from .analysis import root_mean_square

    audio = _load(input_file)

    console.print(f"\n[bold]Audio Info:[/bold] {input_file.name}")
    console.print(f"  Duration: {audio.duration_seconds:.2f} seconds")
    console.print(f"  Sample rate: {audio.sample_rate} Hz")
    console.print(f"  Samples: {audio.duration:,}")
    if audio.duration:
        console.print(f"  Peak: {abs(audio.samples).max():.3f}")
        console.print(f"  RMS: {root_mean_square(audio.samples):.3f}")


def _show_notes_table(notes: List[Note], sample_rate: int):
    """Display notes in a table."""
    table = Table(title="Detected Notes")
    table.add_column("Note", style="cyan")
    table.add_column("Start", style="green")
    table.add_column("Duration", style="yellow")
    table.add_column("Start (s)", style="green")
    table.add_column("Duration (s)", style="yellow")

    for note in notes:
        table.add_row(
            note.pitch_name,
            str(note.start),
            str(note.duration),
            f"{note.start_time(sample_rate):.3f}",
            f"{note.duration_time(sample_rate):.3f}",
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
