"""Geometric operations for curve fitting and sampling.

This module provides the math used by the stroke processor:
- Vector subtraction and Euclidean length
- Catmull-Rom to cubic Bezier conversion
- Lazy, evenly spaced sampling of a cubic Bezier

All functions are pure and stateless.
"""

import math
from collections.abc import Iterator

from smoothstroke.domain import CurveSegment, Point


def subtract(a: Point, b: Point) -> Point:
    """Return the vector a - b.

    Examples:
        >>> subtract(Point(3.0, 5.0), Point(1.0, 1.0))
        Point(x=2.0, y=4.0)
    """
    return Point(a.x - b.x, a.y - b.y)


def length(v: Point) -> float:
    """Euclidean length of a vector.

    Examples:
        >>> length(Point(3.0, 4.0))
        5.0
    """
    return math.hypot(v.x, v.y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return length(subtract(a, b))


def catmull_rom_to_bezier(p0: Point, p1: Point, p2: Point, p3: Point) -> CurveSegment:
    """Convert a uniform Catmull-Rom span into a cubic Bezier.

    The resulting curve runs from p1 to p2. Its end tangents come from the
    neighbors p0 and p3, so consecutive spans sharing three points join with
    a continuous tangent.

    Args:
        p0: Point before the span
        p1: Start of the span
        p2: End of the span
        p3: Point after the span

    Returns:
        CurveSegment with b0 == p1 and b3 == p2

    Examples:
        >>> seg = catmull_rom_to_bezier(
        ...     Point(0.0, 0.0), Point(6.0, 0.0), Point(12.0, 0.0), Point(18.0, 0.0)
        ... )
        >>> seg.b1, seg.b2
        (Point(x=8.0, y=0.0), Point(x=10.0, y=0.0))
    """
    return CurveSegment(
        b0=p1,
        b1=Point(p1.x + (p2.x - p0.x) / 6.0, p1.y + (p2.y - p0.y) / 6.0),
        b2=Point(p2.x - (p3.x - p1.x) / 6.0, p2.y - (p3.y - p1.y) / 6.0),
        b3=p2,
    )


class BezierSamples:
    """Evenly spaced samples along a cubic Bezier.

    Finite and restartable: every iteration evaluates the curve again from
    t=0, and ``len()`` is known up front without evaluating anything.
    """

    __slots__ = ("_count", "_segment")

    def __init__(self, segment: CurveSegment, count: int) -> None:
        self._segment = segment
        self._count = count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Point]:
        n = self._count
        if n == 0:
            return
        if n == 1:
            yield self._segment.b0
            return
        last = n - 1
        for i in range(n):
            # i == last is exact, so the final sample is b3
            yield self._segment.point_at(i / last)

    @property
    def segment(self) -> CurveSegment:
        return self._segment


def eval_bezier(segment: CurveSegment, count: float) -> BezierSamples:
    """Sample a cubic Bezier at evenly spaced parameters over [0, 1].

    The count is rounded to the nearest integer. A count that rounds to 1 is
    raised to 2 so a non-empty sampling always covers both endpoints.

    Args:
        segment: Curve to sample
        count: Requested number of samples (may be fractional)

    Returns:
        Lazy sequence of sample points

    Raises:
        ValueError: If count is negative or not finite
    """
    if not math.isfinite(count) or count < 0:
        raise ValueError(f"Sample count must be a finite non-negative number, got {count}")

    n = int(round(count))
    if n == 1:
        n = 2
    return BezierSamples(segment, n)
