"""Writers for strokes and emitted brush stamps.

This module provides StrokeWriter for persisting recorded strokes and
StampWriter for dumping the stamps a replay produced.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from smoothstroke.domain import BrushStamp, Stroke
from smoothstroke.exceptions import StrokeSaveError

logger = structlog.get_logger(__name__)


def _write_json(path: Path, data: dict[str, Any]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as e:
        raise StrokeSaveError(str(path), str(e)) from e


class StrokeWriter:
    """Saves recorded strokes as JSON.

    Example:
        writer = StrokeWriter(Path("heart.json"))
        writer.save(stroke)
    """

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    def save(self, stroke: Stroke) -> None:
        """Write the stroke in the persisted format.

        Args:
            stroke: Stroke to save

        Raises:
            StrokeSaveError: If the file cannot be written
        """
        _write_json(self._output_path, stroke.to_dict())
        logger.info("Stroke saved", path=str(self._output_path), points=len(stroke))

    @staticmethod
    def get_stamps_path(stroke_path: Path) -> Path:
        """Generate the default stamp output path for a stroke file.

        Args:
            stroke_path: Path to the stroke file

        Returns:
            Path with "-stamps" inserted before the extension

        Example:
            >>> StrokeWriter.get_stamps_path(Path("heart.json"))
            PosixPath('heart-stamps.json')
        """
        return stroke_path.parent / f"{stroke_path.stem}-stamps{stroke_path.suffix or '.json'}"


class StampWriter:
    """Saves emitted brush stamps as JSON, in emission order."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    def save(self, stamps: Iterable[BrushStamp]) -> int:
        """Write the stamps.

        Args:
            stamps: Stamps in emission order

        Returns:
            Number of stamps written

        Raises:
            StrokeSaveError: If the file cannot be written
        """
        records = [stamp.to_dict() for stamp in stamps]
        _write_json(self._output_path, {"stamps": records})
        logger.info("Stamps saved", path=str(self._output_path), stamps=len(records))
        return len(records)
