"""Stroke buffer: the recorded samples of one gesture.

A stroke is the append-only record of raw samples captured during a gesture.
It is what gets persisted and what a replay feeds back through a fresh
processor, for example after a brush parameter changed.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from smoothstroke.domain.point import TimedPoint
from smoothstroke.exceptions import TimestampRegressionError


@dataclass
class Stroke:
    """Ordered, append-only sequence of timed samples.

    Points are kept in non-decreasing ``t`` order. The transient ``last``
    flag is stripped on append; replaying callers synthesize it again for
    the final point.

    Attributes:
        _points: Recorded samples (use ``points`` for read access)
    """

    _points: list[TimedPoint] = field(default_factory=list)

    def __post_init__(self) -> None:
        initial, self._points = self._points, []
        self.extend(initial)

    @property
    def points(self) -> tuple[TimedPoint, ...]:
        """Read-only view of the recorded samples."""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TimedPoint]:
        return iter(self._points)

    def is_empty(self) -> bool:
        return not self._points

    def append(self, point: TimedPoint) -> None:
        """Record a sample at the end of the stroke.

        Args:
            point: Sample to record; its ``last`` flag is not kept

        Raises:
            TimestampRegressionError: If the sample is older than the last one
        """
        if self._points and point.t < self._points[-1].t:
            raise TimestampRegressionError(self._points[-1].t, point.t)
        if point.last:
            point = TimedPoint(point.x, point.y, point.t)
        self._points.append(point)

    def extend(self, points: Iterable[TimedPoint]) -> None:
        for point in points:
            self.append(point)

    @property
    def duration_ms(self) -> int:
        """Time between the first and the last sample."""
        if len(self._points) < 2:
            return 0
        return self._points[-1].t - self._points[0].t

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the recorded samples.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self._points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self._points]
        ys = [p.y for p in self._points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted stroke format.

        Returns:
            Dictionary of the form {"points": [{"x", "y", "t"}, ...]}
        """
        return {"points": [p.to_dict() for p in self._points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stroke":
        """Deserialize from the persisted stroke format.

        Args:
            data: Dictionary with a "points" list

        Returns:
            Stroke instance
        """
        return cls([TimedPoint.from_dict(p) for p in data["points"]])
