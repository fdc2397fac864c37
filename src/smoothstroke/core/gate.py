"""Output gate between the curve sampler and the brush-stamp sink.

The sampler over-estimates how many points it needs along each curve. The
gate drops every candidate that lands too close to the previously emitted
stamp, so the sink sees an evenly spaced stream regardless of how densely
the curve was sampled.
"""

from typing import Protocol

from smoothstroke.core.geometry import distance
from smoothstroke.domain import BrushStamp, FloatColor, Point


class BrushSink(Protocol):
    """Receiver of brush stamps, typically a renderer."""

    def __call__(
        self, position: Point, size: float, sharpness: float, color: FloatColor
    ) -> None: ...


class DistanceFilter:
    """Forward a stamp only if it moved at least ``min_distance``.

    Holds the position of the last forwarded stamp; one instance per stroke.

    Example:
        collector = StampCollector()
        gate = DistanceFilter(0.96, collector)
        gate(Point(0, 0), 8.0, 0.73, color)   # forwarded
        gate(Point(0.5, 0), 8.0, 0.73, color) # dropped
    """

    def __init__(self, min_distance: float, sink: BrushSink) -> None:
        """Initialize the gate.

        Args:
            min_distance: Spacing a candidate must strictly exceed
            sink: Receiver of the forwarded stamps
        """
        self._min_distance = min_distance
        self._sink = sink
        self._last_position: Point | None = None
        self.emitted_count = 0
        self.suppressed_count = 0

    @property
    def min_distance(self) -> float:
        return self._min_distance

    @property
    def last_position(self) -> Point | None:
        """Position of the last forwarded stamp, None before the first."""
        return self._last_position

    def __call__(
        self, position: Point, size: float, sharpness: float, color: FloatColor
    ) -> bool:
        """Offer a candidate stamp.

        Returns:
            True if the stamp was forwarded to the sink, False if dropped
        """
        if (
            self._last_position is None
            or distance(self._last_position, position) > self._min_distance
        ):
            self._sink(position, size, sharpness, color)
            self._last_position = position
            self.emitted_count += 1
            return True

        self.suppressed_count += 1
        return False


class StampCollector:
    """Sink that records every stamp it receives, in order."""

    def __init__(self) -> None:
        self.stamps: list[BrushStamp] = []

    def __call__(
        self, position: Point, size: float, sharpness: float, color: FloatColor
    ) -> None:
        self.stamps.append(BrushStamp(position, size, sharpness, color))

    def __len__(self) -> int:
        return len(self.stamps)

    def positions(self) -> list[Point]:
        return [stamp.position for stamp in self.stamps]
