"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from glyphpack.exceptions import GlyphPackError, GlyphRenderError

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for icon rendering.

    Returns:
        Configured Progress instance with bar, count and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]Glyphpack[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(style: str, family: str, licensed: bool, metadata_path: str) -> None:
    """Print the resolved style, font family and metadata source.

    Args:
        style: Requested icon style
        family: Font family the style renders with
        licensed: Whether the licensed set is used
        metadata_path: Path of the icon catalog document
    """
    edition = "licensed" if licensed else "free"
    console.print(f"  {style} {SYM_DOT} {family} {SYM_DOT} {edition}")
    line = Text("  ")
    line.append(metadata_path)
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    rendered: int,
    skipped: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Pack root directory
        total_time_s: Total generation time in seconds
        rendered: Number of icons written
        skipped: Number of icons skipped
        errors: Number of icons that failed to render
        avg_time_ms: Average time per icon in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {rendered} icons {SYM_DOT} {skipped} skipped {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_stage_error(error: GlyphPackError) -> None:
    """Print an error together with the pipeline stage it came from.

    Render errors also name the icon being processed.
    """
    stage = error.stage or "unknown"
    details = None
    if isinstance(error, GlyphRenderError) and error.label is not None:
        details = escape(f"icon: {error.label} {SYM_DOT} slug: {error.slug}")
    print_error(f"{stage} failed: {escape(str(error))}", details=details)
