"""Gesture capture and stroke replay.

Live drawing records every raw sample into a Stroke while feeding it to a
processor. Replay feeds a recorded Stroke through a fresh processor, which
is how a stroke is redrawn after its parameters change.
"""

import time
from collections.abc import Callable, Sequence

from smoothstroke.config import BrushConfig, TimingSource
from smoothstroke.core.gate import BrushSink
from smoothstroke.core.processor import StrokeProcessor
from smoothstroke.domain import Stroke, TimedPoint
from smoothstroke.exceptions import EmptyStrokeError


class GestureRecorder:
    """Records a live gesture while smoothing it.

    Example:
        recorder = GestureRecorder(color, renderer.draw_brush)
        recorder.move(10.0, 12.0, 0)
        recorder.move(14.0, 15.0, 8)
        stroke = recorder.release(20.0, 18.0, 16)
    """

    def __init__(
        self,
        color: Sequence[float],
        sink: BrushSink,
        config: BrushConfig | None = None,
        *,
        timing: TimingSource = TimingSource.WALL_CLOCK,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.stroke = Stroke()
        self.processor = StrokeProcessor(color, sink, config, timing=timing, clock=clock)

    def move(self, x: float, y: float, t: int) -> None:
        """Record and process one sample of the ongoing gesture."""
        self._record(TimedPoint(x, y, t))

    def release(self, x: float, y: float, t: int) -> Stroke:
        """Record and process the final sample.

        Returns:
            The recorded stroke, without the end flag
        """
        self._record(TimedPoint(x, y, t, last=True))
        return self.stroke

    def _record(self, point: TimedPoint) -> None:
        # Feed first so an invalid sample raises before it is recorded
        self.processor.feed(point)
        self.stroke.append(point)


def replay_stroke(
    stroke: Stroke,
    color: Sequence[float],
    sink: BrushSink,
    config: BrushConfig | None = None,
    *,
    timing: TimingSource = TimingSource.WALL_CLOCK,
    realtime: bool = False,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> StrokeProcessor:
    """Feed a recorded stroke through a fresh processor.

    The final point is fed with ``last=True``.

    Args:
        stroke: Recorded stroke to replay
        color: RGBA stroke color
        sink: Receiver of the emitted stamps
        config: Brush settings (defaults if None)
        timing: Elapsed-time source for the movement threshold
        realtime: Wait between points as long as the recording did
        clock: Seconds counter used for wall-clock timing
        sleep: Called with seconds to wait when ``realtime`` is set

    Returns:
        The finished processor, for its statistics

    Raises:
        EmptyStrokeError: If the stroke has no points
    """
    if stroke.is_empty():
        raise EmptyStrokeError()

    processor = StrokeProcessor(color, sink, config, timing=timing, clock=clock)
    points = stroke.points
    previous_t = points[0].t

    for index, point in enumerate(points):
        if realtime and point.t > previous_t:
            sleep((point.t - previous_t) / 1000.0)
        previous_t = point.t

        if index == len(points) - 1:
            point = point.as_last()
        processor.feed(point)

    return processor
