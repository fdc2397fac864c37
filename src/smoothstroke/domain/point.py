"""Core value types for stroke smoothing.

This module defines the value types that flow through the pipeline:
- Point: A 2D position
- TimedPoint: A raw pointer sample with a timestamp
- CurveSegment: A cubic Bezier fitted to a 4-point neighborhood
- BrushStamp: One paint application handed to the renderer
"""

from dataclasses import dataclass
from typing import Any

# RGBA, each channel in [0, 1]
FloatColor = tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable; a pure value with no identity.

    Attributes:
        x: X coordinate in canvas pixels
        y: Y coordinate in canvas pixels
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class TimedPoint:
    """One raw pointer sample.

    Attributes:
        x: X coordinate in canvas pixels
        y: Y coordinate in canvas pixels
        t: Milliseconds since the start of the gesture
        last: True for the sample that ends the gesture. Never persisted.
    """

    x: float
    y: float
    t: int
    last: bool = False

    @property
    def position(self) -> Point:
        """Position of the sample without its timing."""
        return Point(self.x, self.y)

    def as_last(self) -> "TimedPoint":
        """Return a copy of this sample flagged as the end of the gesture."""
        return TimedPoint(self.x, self.y, self.t, last=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted stroke format (without ``last``).

        Returns:
            Dictionary with x, y and t fields
        """
        return {"x": self.x, "y": self.y, "t": self.t}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimedPoint":
        """Deserialize from the persisted stroke format.

        Args:
            data: Dictionary with x, y and t fields

        Returns:
            TimedPoint instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]), t=int(data["t"]))


@dataclass(frozen=True, slots=True)
class CurveSegment:
    """A cubic Bezier curve given by its 4 control points.

    Recomputed every time the sliding window shifts, never stored.
    """

    b0: Point
    b1: Point
    b2: Point
    b3: Point

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t using the Bernstein blend.

        Exact at the ends: t=0 gives b0 and t=1 gives b3.
        """
        mt = 1.0 - t
        w0 = mt * mt * mt
        w1 = 3.0 * mt * mt * t
        w2 = 3.0 * mt * t * t
        w3 = t * t * t
        return Point(
            w0 * self.b0.x + w1 * self.b1.x + w2 * self.b2.x + w3 * self.b3.x,
            w0 * self.b0.y + w1 * self.b1.y + w2 * self.b2.y + w3 * self.b3.y,
        )

    def control_points(self) -> tuple[Point, Point, Point, Point]:
        return (self.b0, self.b1, self.b2, self.b3)


@dataclass(frozen=True, slots=True)
class BrushStamp:
    """One discrete paint application.

    Attributes:
        position: Center of the stamp
        size: Brush diameter in pixels
        sharpness: Edge hardness in [0, 1]
        color: RGBA color with opacity already multiplied in
    """

    position: Point
    size: float
    sharpness: float
    color: FloatColor

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary with x, y, size, sharpness and color fields
        """
        return {
            "x": self.position.x,
            "y": self.position.y,
            "size": self.size,
            "sharpness": self.sharpness,
            "color": list(self.color),
        }
