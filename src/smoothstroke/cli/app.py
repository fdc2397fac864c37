"""CLI application entry point for smoothstroke.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from smoothstroke import __version__
from smoothstroke.cli.output import (
    console,
    print_error,
    print_header,
    print_replay_summary,
    print_step,
    print_stroke_info,
)
from smoothstroke.config import (
    DEFAULT_COLOR,
    BrushConfig,
    ColorConfig,
    LoggingConfig,
    ReplayConfig,
    SmoothStrokeSettings,
    TimingSource,
)
from smoothstroke.core import StampCollector, replay_stroke
from smoothstroke.domain import Stroke
from smoothstroke.exceptions import SmoothStrokeError, StrokeLoadError, StrokeSaveError
from smoothstroke.io import StampWriter, StrokeReader
from smoothstroke.utils import StrokeLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="smoothstroke",
    help="Smooth recorded pointer strokes into evenly spaced brush stamps.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Smoothstroke[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Smooth recorded pointer strokes into evenly spaced brush stamps."""


@app.command()
def replay(
    stroke_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a stroke JSON file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write emitted stamps to this JSON file",
        ),
    ] = None,
    color: Annotated[
        tuple[float, float, float, float],
        typer.Option(
            "--color",
            "-c",
            help="Stroke color as four RGBA channels in [0, 1]",
        ),
    ] = DEFAULT_COLOR,
    brush_size: Annotated[
        float,
        typer.Option(
            "--brush-size",
            "-b",
            help="Brush diameter in pixels",
            min=0.1,
        ),
    ] = 8.0,
    step_size: Annotated[
        float,
        typer.Option(
            "--step-size",
            "-s",
            help="Stamp spacing as a fraction of the brush size",
            min=0.001,
            max=10.0,
        ),
    ] = 0.12,
    timing: Annotated[
        str,
        typer.Option(
            "--timing",
            "-t",
            help="Elapsed-time source for point acceptance (wall_clock|timestamps)",
        ),
    ] = "wall_clock",
    realtime: Annotated[
        bool,
        typer.Option(
            "--realtime",
            help="Replay at the recorded speed",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Replay a recorded stroke through the smoothing pipeline.

    Every recorded point is fed to a fresh stroke processor, the last one
    flagged as the end of the gesture, and the emitted brush stamps are
    counted and optionally written out.

    Example:
        smoothstroke replay heart.json -o heart-stamps.json
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate timing argument
    try:
        timing_source = TimingSource(timing.lower())
    except ValueError:
        print_error(
            f"Invalid timing: {timing}",
            details="Valid values: wall_clock, timestamps",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = SmoothStrokeSettings(
        brush=BrushConfig(brush_size=brush_size, step_size=step_size),
        color=ColorConfig(color=color),
        replay=ReplayConfig(timing=timing_source, realtime=realtime),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    stroke_logger = StrokeLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    )

    try:
        if not quiet:
            print_step("Loading stroke")

        stroke = _load_stroke(stroke_file)
        stroke_logger.log_stroke_loaded(str(stroke_file), len(stroke), stroke.duration_ms)

        if not quiet:
            print_stroke_info(
                stroke_path=str(stroke_file),
                point_count=len(stroke),
                duration_ms=stroke.duration_ms,
                bounds=stroke.bounding_box(),
            )
            print_step("Replaying")

        collector = StampCollector()
        start_time = time.time()
        processor = replay_stroke(
            stroke,
            settings.color.color,
            collector,
            settings.brush,
            timing=settings.replay.timing,
            realtime=settings.replay.realtime,
        )
        elapsed_s = time.time() - start_time
        stroke_logger.log_stroke_complete(processor.stats, elapsed_s * 1000)

        if output is not None:
            StampWriter(output).save(collector.stamps)

        if not quiet:
            print_replay_summary(
                stats=processor.stats,
                total_time_s=elapsed_s,
                output_path=str(output) if output is not None else None,
                verbose=verbose,
            )

    except StrokeLoadError as e:
        print_error(f"Could not load stroke: {e.reason}")
        raise typer.Exit(code=1)
    except StrokeSaveError as e:
        print_error(f"Could not save stamps: {e.reason}")
        raise typer.Exit(code=1)
    except SmoothStrokeError as e:
        stroke_logger.log_stroke_error(str(stroke_file), e)
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def inspect(
    stroke_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a stroke JSON file",
            show_default=False,
        ),
    ],
) -> None:
    """Show point count, duration and bounds of a recorded stroke."""
    try:
        stroke = _load_stroke(stroke_file)
    except SmoothStrokeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_stroke_info(
        stroke_path=str(stroke_file),
        point_count=len(stroke),
        duration_ms=stroke.duration_ms,
        bounds=stroke.bounding_box(),
    )


def _load_stroke(path: Path) -> Stroke:
    """Load a stroke file.

    Args:
        path: Path to stroke file

    Returns:
        The loaded stroke
    """
    reader = StrokeReader(path)
    return reader.load()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
