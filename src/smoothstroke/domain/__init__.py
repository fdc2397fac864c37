"""Domain models for smoothstroke.

This module contains the value types and the stroke buffer shared by the
processing core, the I/O layer and the CLI. All value types are frozen
dataclasses; the stroke buffer is append-only.

Key classes:
- Point: A 2D position
- TimedPoint: A raw pointer sample with a timestamp and a transient end flag
- CurveSegment: A cubic Bezier curve segment
- BrushStamp: One paint application for the renderer
- Stroke: The recorded samples of one gesture
"""

from smoothstroke.domain.point import BrushStamp, CurveSegment, FloatColor, Point, TimedPoint
from smoothstroke.domain.stroke import Stroke

__all__: list[str] = [
    "BrushStamp",
    "CurveSegment",
    "FloatColor",
    "Point",
    "Stroke",
    "TimedPoint",
]
