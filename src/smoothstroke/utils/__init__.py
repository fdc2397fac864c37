"""Utility functions for smoothstroke.

This module provides utility functions including:

- Logging setup and configuration
- Per-stroke statistics
"""

from smoothstroke.utils.logging import (
    StrokeLogger,
    StrokeStats,
    configure_logging,
)

__all__ = [
    "StrokeLogger",
    "StrokeStats",
    "configure_logging",
]
