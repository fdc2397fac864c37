"""Stroke reader for loading recorded strokes.

This module provides the StrokeReader class for loading stroke JSON files
of the form ``{"points": [{"x": ..., "y": ..., "t": ...}, ...]}`` into
domain models.
"""

import json
from pathlib import Path

import structlog

from smoothstroke.domain import Stroke
from smoothstroke.exceptions import (
    StrokeFormatError,
    StrokeLoadError,
    TimestampRegressionError,
)

logger = structlog.get_logger(__name__)


class StrokeReader:
    """Loads stroke JSON files.

    Example:
        reader = StrokeReader(Path("heart.json"))
        reader.load()
        stroke = reader.stroke
    """

    def __init__(self, stroke_path: Path) -> None:
        """Initialize the stroke reader.

        Args:
            stroke_path: Path to the stroke JSON file
        """
        self._stroke_path = stroke_path
        self._stroke: Stroke | None = None

    def load(self) -> Stroke:
        """Load and validate the stroke file.

        Returns:
            The loaded stroke

        Raises:
            StrokeLoadError: If the file is missing or unreadable
            StrokeFormatError: If the content is not a valid stroke
        """
        path = str(self._stroke_path)
        if not self._stroke_path.exists():
            raise StrokeLoadError(path, "file not found")

        try:
            raw = self._stroke_path.read_text(encoding="utf-8")
        except OSError as e:
            raise StrokeLoadError(path, str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StrokeFormatError(path, f"not valid JSON ({e.msg} at line {e.lineno})") from e

        if not isinstance(data, dict) or not isinstance(data.get("points"), list):
            raise StrokeFormatError(path, "expected an object with a 'points' list")

        try:
            self._stroke = Stroke.from_dict(data)
        except TimestampRegressionError as e:
            raise StrokeFormatError(path, str(e)) from e
        except (KeyError, TypeError, ValueError) as e:
            raise StrokeFormatError(path, f"malformed point: {e}") from e

        logger.debug(
            "Stroke file read",
            path=path,
            points=len(self._stroke),
        )
        return self._stroke

    @property
    def stroke(self) -> Stroke:
        """Return the loaded stroke.

        Raises:
            RuntimeError: If the stroke has not been loaded yet
        """
        if self._stroke is None:
            raise RuntimeError("Stroke not loaded. Call load() first.")

        return self._stroke

    @property
    def point_count(self) -> int:
        """Return the number of recorded points.

        Raises:
            RuntimeError: If the stroke has not been loaded yet
        """
        return len(self.stroke)
