"""Smoothstroke - Turn live pointer samples into smooth brush strokes.

Smoothstroke consumes a stream of timestamped pointer samples one at a time,
fits Catmull-Rom curves over a 4-point sliding window and emits evenly spaced
brush stamps along them for an external renderer to composite.

Example:
    $ smoothstroke replay heart.json --output heart-stamps.json

This replays a recorded stroke and writes the emitted brush stamps as JSON.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
