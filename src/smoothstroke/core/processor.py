"""Incremental stroke smoothing.

This module turns a live stream of pointer samples into brush stamps. The
processor keeps the 4 most recently accepted samples in a sliding window,
fits a Catmull-Rom curve between the middle two whenever a new sample is
accepted, and samples that curve into the output gate.

Key components:
- move_threshold: Adaptive minimum movement for accepting a sample
- StrokeProcessor: Per-gesture state machine fed one sample at a time
"""

import math
import time
from collections.abc import Callable, Sequence
from enum import Enum, auto
from typing import ClassVar

import structlog

from smoothstroke.config import BrushConfig, TimingSource
from smoothstroke.core.gate import BrushSink, DistanceFilter
from smoothstroke.core.geometry import catmull_rom_to_bezier, distance, eval_bezier
from smoothstroke.domain import FloatColor, TimedPoint
from smoothstroke.exceptions import (
    InvalidPointError,
    StrokeFinishedError,
    TimestampRegressionError,
)
from smoothstroke.utils import StrokeStats

logger = structlog.get_logger(__name__)

# (upper bound of elapsed ms, required movement in px), checked in order
MOVE_THRESHOLDS: tuple[tuple[float, float], ...] = (
    (10.0, 20.0),
    (25.0, 12.0),
    (50.0, 5.0),
    (100.0, 1.5),
)
SLOW_MOVE_THRESHOLD = 0.1


def move_threshold(elapsed_ms: float) -> float:
    """Minimum movement a sample needs to be accepted.

    Samples arriving in quick bursts must move further, slow input is
    accepted almost regardless of movement.

    Args:
        elapsed_ms: Time since the last accepted sample

    Returns:
        Required distance from the newest window point, in pixels

    Examples:
        >>> move_threshold(5)
        20.0
        >>> move_threshold(150)
        0.1
    """
    for upper_ms, threshold in MOVE_THRESHOLDS:
        if elapsed_ms <= upper_ms:
            return threshold
    return SLOW_MOVE_THRESHOLD


class ProcessorState(Enum):
    """Lifecycle of a stroke processor."""

    PRIMING = auto()
    STREAMING = auto()
    FINISHED = auto()


class StrokeProcessor:
    """Smooths one gesture into brush stamps.

    Feed samples in temporal order with ``feed``. The first 4 samples only
    prime the sliding window. After that each sample is either dropped (it
    did not move far enough for how quickly it arrived) or shifted into the
    window, which fits a curve between the two middle window points and
    stamps along it. The sample flagged ``last`` is shifted in 3 times so
    the window drains and the stroke ends on that sample.

    Example:
        collector = StampCollector()
        processor = StrokeProcessor((0.2, 0.2, 0.2, 1.0), collector)
        for point in points[:-1]:
            processor.feed(point)
        processor.feed(points[-1].as_last())
    """

    WINDOW_SIZE: ClassVar[int] = 4
    # Shifts of the last sample; fills p1..p3 so the final span ends on it
    TAIL_REPEAT: ClassVar[int] = 3
    # Deliberate over-sampling; the output gate removes the excess
    SAMPLE_DENSITY: ClassVar[float] = 2.0

    def __init__(
        self,
        color: Sequence[float],
        sink: BrushSink,
        config: BrushConfig | None = None,
        *,
        timing: TimingSource = TimingSource.WALL_CLOCK,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize a processor for one gesture.

        Args:
            color: RGBA stroke color, channels in [0, 1]
            sink: Receiver of the emitted stamps
            config: Brush settings (defaults if None)
            timing: Elapsed-time source for the movement threshold
            clock: Seconds counter used for wall-clock timing

        Raises:
            ValueError: If color does not have exactly 4 channels
        """
        if len(color) != 4:
            raise ValueError(f"Color needs 4 channels, got {len(color)}")

        self.config = config or BrushConfig()
        self._timing = timing
        self._clock = clock
        self._color: FloatColor = tuple(c * self.config.opacity for c in color)  # type: ignore[assignment]
        self._gate = DistanceFilter(self.config.min_spacing, sink)

        self._slots: list[TimedPoint | None] = [None] * self.WINDOW_SIZE
        self._head = 0
        self._filled = 0
        self._state = ProcessorState.PRIMING

        self._last_fed_t: int | None = None
        self._reference_clock = 0.0
        self._reference_t = 0

        self._stats = StrokeStats()

    @property
    def state(self) -> ProcessorState:
        return self._state

    @property
    def finished(self) -> bool:
        return self._state is ProcessorState.FINISHED

    @property
    def color(self) -> FloatColor:
        """Emitted color, opacity already multiplied in."""
        return self._color

    @property
    def window(self) -> tuple[TimedPoint, ...]:
        """Current window contents, oldest first."""
        return tuple(
            p
            for p in (
                self._slots[(self._head + i) % self.WINDOW_SIZE]
                for i in range(self._filled)
            )
            if p is not None
        )

    @property
    def stats(self) -> StrokeStats:
        """Counters for the stroke so far."""
        self._stats.stamps_emitted = self._gate.emitted_count
        self._stats.stamps_suppressed = self._gate.suppressed_count
        return self._stats

    def feed(self, point: TimedPoint) -> None:
        """Process the next sample of the gesture.

        Args:
            point: Next sample; flag the final one with ``last=True``

        Raises:
            StrokeFinishedError: If the stroke already ended
            InvalidPointError: If the sample has non-finite coordinates
            TimestampRegressionError: If the sample is older than the previous one
        """
        if self._state is ProcessorState.FINISHED:
            raise StrokeFinishedError()
        self._validate(point)

        self._last_fed_t = point.t
        self._stats.points_fed += 1

        if self._state is ProcessorState.PRIMING:
            self._prime(point)
            return

        if not point.last:
            moved = distance(self._newest().position, point.position)
            if moved <= move_threshold(self._elapsed_ms(point)):
                self._stats.points_rejected += 1
                return

        self._stats.points_accepted += 1
        repeat = self.TAIL_REPEAT if point.last else 1
        for _ in range(repeat):
            self._shift(point)
            self._stamp_window()
        self._mark_time(point)

        if point.last:
            self._finish()

    def _validate(self, point: TimedPoint) -> None:
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise InvalidPointError(point.x, point.y)
        if self._last_fed_t is not None and point.t < self._last_fed_t:
            raise TimestampRegressionError(self._last_fed_t, point.t)

    def _prime(self, point: TimedPoint) -> None:
        self._slots[self._filled] = point
        self._filled += 1
        self._stats.points_accepted += 1

        if point.last:
            # Too short to fit a curve; valid but draws nothing
            logger.debug("Stroke ended while priming", points=self._filled)
            self._finish()
        elif self._filled == self.WINDOW_SIZE:
            self._state = ProcessorState.STREAMING
            self._mark_time(point)
            logger.debug("Sliding window primed", t=point.t)

    def _newest(self) -> TimedPoint:
        newest = self._slots[(self._head + self.WINDOW_SIZE - 1) % self.WINDOW_SIZE]
        assert newest is not None
        return newest

    def _shift(self, point: TimedPoint) -> None:
        # Overwrite the oldest slot and rotate, p0..p3 <- p1, p2, p3, point
        self._slots[self._head] = point
        self._head = (self._head + 1) % self.WINDOW_SIZE

    def _stamp_window(self) -> None:
        p0, p1, p2, p3 = (p.position for p in self.window)
        segment = catmull_rom_to_bezier(p0, p1, p2, p3)
        count = self.SAMPLE_DENSITY * distance(p0, p3) / self.config.step_size

        for position in eval_bezier(segment, count):
            self._gate(position, self.config.brush_size, self.config.sharpness, self._color)
        self._stats.segments_fitted += 1

    def _elapsed_ms(self, point: TimedPoint) -> float:
        if self._timing is TimingSource.TIMESTAMPS:
            return float(point.t - self._reference_t)
        return (self._clock() - self._reference_clock) * 1000.0

    def _mark_time(self, point: TimedPoint) -> None:
        self._reference_clock = self._clock()
        self._reference_t = point.t

    def _finish(self) -> None:
        self._state = ProcessorState.FINISHED
        stats = self.stats
        logger.debug(
            "Stroke finished",
            fed=stats.points_fed,
            accepted=stats.points_accepted,
            rejected=stats.points_rejected,
            segments=stats.segments_fitted,
            stamps=stats.stamps_emitted,
        )
