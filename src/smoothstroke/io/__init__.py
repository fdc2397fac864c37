"""Stroke I/O layer for smoothstroke.

This module handles reading and writing stroke files and dumping emitted
stamps, all as JSON.

Key classes:
- StrokeReader: Load recorded strokes
- StrokeWriter: Save recorded strokes
- StampWriter: Save emitted brush stamps
"""

from smoothstroke.io.reader import StrokeReader
from smoothstroke.io.writer import StampWriter, StrokeWriter

__all__ = [
    "StampWriter",
    "StrokeReader",
    "StrokeWriter",
]
