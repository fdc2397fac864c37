"""Core processing algorithms for smoothstroke.

This module contains the core algorithms for:

- Geometry operations (vector math, Catmull-Rom to Bezier, Bezier sampling)
- Output gating (minimum spacing between emitted stamps)
- Stroke processing (sliding window, adaptive acceptance, curve fitting)
- Sessions (live gesture recording, stroke replay)

Key functions:
- subtract, length, distance: Vector math
- catmull_rom_to_bezier: Fit a Bezier span through a 4-point neighborhood
- eval_bezier: Lazily sample a Bezier at evenly spaced parameters
- move_threshold: Adaptive minimum movement for accepting a sample
- replay_stroke: Feed a recorded stroke through a fresh processor

Key classes:
- DistanceFilter: Output gate enforcing stamp spacing
- StampCollector: Sink that records stamps
- StrokeProcessor: Per-gesture smoothing state machine
- GestureRecorder: Records a live gesture while smoothing it
"""

from smoothstroke.core.gate import BrushSink, DistanceFilter, StampCollector
from smoothstroke.core.geometry import (
    BezierSamples,
    catmull_rom_to_bezier,
    distance,
    eval_bezier,
    length,
    subtract,
)
from smoothstroke.core.processor import ProcessorState, StrokeProcessor, move_threshold
from smoothstroke.core.session import GestureRecorder, replay_stroke

__all__ = [
    # Geometry
    "BezierSamples",
    # Gate
    "BrushSink",
    "DistanceFilter",
    # Sessions
    "GestureRecorder",
    # Processor
    "ProcessorState",
    "StampCollector",
    "StrokeProcessor",
    "catmull_rom_to_bezier",
    "distance",
    "eval_bezier",
    "length",
    "move_threshold",
    "replay_stroke",
    "subtract",
]
