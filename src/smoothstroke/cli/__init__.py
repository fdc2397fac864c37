"""Command-line interface for smoothstroke.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Replay of recorded strokes with stamp export
- Stroke inspection
- Verbose/quiet output modes
- Detailed error reporting
"""

from smoothstroke.cli.app import cli, main

__all__ = ["cli", "main"]
