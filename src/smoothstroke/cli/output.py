"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted summaries and messages.
"""

from rich.console import Console
from rich.text import Text

from smoothstroke.utils import StrokeStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Smoothstroke[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_stroke_info(
    stroke_path: str,
    point_count: int,
    duration_ms: int,
    bounds: tuple[float, float, float, float],
) -> None:
    """Print stroke information.

    Args:
        stroke_path: Path to the stroke file
        point_count: Number of recorded points
        duration_ms: Time between first and last point
        bounds: Bounding box as (min_x, min_y, max_x, max_y)
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(stroke_path)
    console.print(line)
    min_x, min_y, max_x, max_y = bounds
    console.print(
        f"  {point_count:,} points {SYM_DOT} {_format_time(duration_ms / 1000)} "
        f"{SYM_DOT} bounds ({min_x:.1f}, {min_y:.1f})–({max_x:.1f}, {max_y:.1f})"
    )


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


def print_replay_summary(
    stats: StrokeStats,
    total_time_s: float,
    output_path: str | None = None,
    verbose: bool = False,
) -> None:
    """Print the result of a replay.

    Args:
        stats: Counters from the finished processor
        total_time_s: Wall time spent replaying
        output_path: Where stamps were written, if anywhere
        verbose: Whether to show segment and suppression counts
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(
        f"  {stats.points_fed} points {SYM_DOT} {stats.points_accepted} accepted "
        f"{SYM_DOT} {stats.points_rejected} rejected"
    )
    console.print(f"  [green]{stats.stamps_emitted}[/green] stamps")

    if verbose:
        console.print(
            f"  {stats.segments_fitted} segments {SYM_DOT} "
            f"{stats.stamps_suppressed} samples suppressed {SYM_DOT} "
            f"{stats.acceptance_rate:.0%} acceptance"
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
