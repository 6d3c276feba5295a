"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages. Messages go to stderr so that
stdout only carries the output path when it is requested.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph files.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]glyphspack[/bold] v{version}")
    console.print("─" * 44)


def print_step(operation: str, input_path: str, output_path: str) -> None:
    """Print which conversion is about to run.

    Args:
        operation: "Packing" or "Unpacking"
        input_path: Path being converted
        output_path: Path being created
    """
    # Use Text to safely handle paths with special characters
    line = Text(f"\n{SYM_STEP} {operation} ")
    line.append(input_path, style="bold")
    line.append(" into ")
    line.append(output_path, style="bold")
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
    glyphs: int,
    files_written: int,
    orphans: int = 0,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file or directory
        total_time_s: Total conversion time in seconds
        glyphs: Number of glyphs converted
        files_written: Number of files written
        orphans: Number of glyph files skipped because the order omits them
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(f"  {glyphs} glyphs {SYM_DOT} {files_written} files written")
    if orphans:
        console.print(
            f"  [yellow]{orphans} glyph files not listed in the order were skipped[/yellow]"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(Text.assemble((f"\n{SYM_ERR} Error:", "bold red"), " ", message))
    if details:
        console.print(Text(f"  {details}"))
