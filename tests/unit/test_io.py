"""Unit tests for the stroke I/O layer.

Tests for StrokeReader, StrokeWriter and StampWriter.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from smoothstroke.domain import BrushStamp, Point, Stroke, TimedPoint
from smoothstroke.exceptions import StrokeFormatError, StrokeLoadError, StrokeSaveError
from smoothstroke.io.reader import StrokeReader
from smoothstroke.io.writer import StampWriter, StrokeWriter


@pytest.fixture
def stroke_file(tmp_path: Path) -> Path:
    """Write a small valid stroke file."""
    path = tmp_path / "heart.json"
    path.write_text(
        json.dumps(
            {
                "points": [
                    {"x": 10, "y": 20, "t": 0},
                    {"x": 12.5, "y": 22, "t": 16},
                    {"x": 15, "y": 25.5, "t": 33},
                ]
            }
        )
    )
    return path


class TestStrokeReader:
    """Tests for StrokeReader class."""

    def test_init(self):
        """Test StrokeReader initialization."""
        path = Path("stroke.json")
        reader = StrokeReader(path)
        assert reader._stroke_path == path
        assert reader._stroke is None

    def test_stroke_before_load(self):
        """Test accessing the stroke before loading raises RuntimeError."""
        reader = StrokeReader(Path("stroke.json"))
        with pytest.raises(RuntimeError, match="Stroke not loaded"):
            _ = reader.stroke

    def test_point_count_before_load(self):
        """Test accessing point_count before loading raises RuntimeError."""
        reader = StrokeReader(Path("stroke.json"))
        with pytest.raises(RuntimeError, match="Stroke not loaded"):
            _ = reader.point_count

    def test_load(self, stroke_file: Path):
        """Test loading a valid stroke file."""
        reader = StrokeReader(stroke_file)
        stroke = reader.load()

        assert reader.point_count == 3
        assert reader.stroke is stroke
        assert stroke.points[1] == TimedPoint(12.5, 22.0, 16)

    def test_load_nonexistent_file(self, tmp_path: Path):
        """Test loading a nonexistent file raises StrokeLoadError."""
        reader = StrokeReader(tmp_path / "missing.json")
        with pytest.raises(StrokeLoadError, match="file not found"):
            reader.load()

    def test_load_unreadable_file(self, stroke_file: Path):
        """Test that OS errors become StrokeLoadError."""
        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(StrokeLoadError, match="denied"):
                StrokeReader(stroke_file).load()

    def test_invalid_json(self, tmp_path: Path):
        """Test that broken JSON raises StrokeFormatError."""
        path = tmp_path / "broken.json"
        path.write_text("{points: [")
        with pytest.raises(StrokeFormatError, match="not valid JSON"):
            StrokeReader(path).load()

    @pytest.mark.parametrize("content", [[], {"samples": []}, {"points": {}}])
    def test_missing_points_list(self, tmp_path: Path, content):
        """Test that content without a points list is rejected."""
        path = tmp_path / "odd.json"
        path.write_text(json.dumps(content))
        with pytest.raises(StrokeFormatError, match="'points' list"):
            StrokeReader(path).load()

    @pytest.mark.parametrize(
        "point", [{"x": 1, "y": 2}, {"x": "left", "y": 2, "t": 0}, [1, 2, 3]]
    )
    def test_malformed_point(self, tmp_path: Path, point):
        """Test that a malformed point is rejected."""
        path = tmp_path / "bad-point.json"
        path.write_text(json.dumps({"points": [point]}))
        with pytest.raises(StrokeFormatError, match="malformed point"):
            StrokeReader(path).load()

    def test_time_regression(self, tmp_path: Path):
        """Test that out-of-order timestamps are a format error."""
        path = tmp_path / "backwards.json"
        path.write_text(
            json.dumps({"points": [{"x": 0, "y": 0, "t": 10}, {"x": 1, "y": 1, "t": 5}]})
        )
        with pytest.raises(StrokeFormatError, match="backwards"):
            StrokeReader(path).load()

    def test_empty_points_allowed(self, tmp_path: Path):
        """Test that an empty stroke loads fine."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"points": []}))
        assert StrokeReader(path).load().is_empty()


class TestStrokeWriter:
    """Tests for StrokeWriter class."""

    def test_round_trip(self, tmp_path: Path):
        """Test that a saved stroke loads back unchanged."""
        stroke = Stroke([TimedPoint(1.0, 2.0, 0), TimedPoint(3.0, 4.0, 8, last=True)])
        path = tmp_path / "nested" / "stroke.json"

        StrokeWriter(path).save(stroke)
        loaded = StrokeReader(path).load()

        assert loaded.points == stroke.points
        assert "last" not in path.read_text()

    def test_save_failure(self, tmp_path: Path):
        """Test that write failures raise StrokeSaveError."""
        with patch.object(Path, "write_text", side_effect=OSError("disk full")):
            with pytest.raises(StrokeSaveError, match="disk full"):
                StrokeWriter(tmp_path / "stroke.json").save(Stroke())

    def test_get_stamps_path(self):
        """Test default stamp output naming."""
        assert StrokeWriter.get_stamps_path(Path("data/heart.json")) == Path(
            "data/heart-stamps.json"
        )
        assert StrokeWriter.get_stamps_path(Path("heart")) == Path("heart-stamps.json")


class TestStampWriter:
    """Tests for StampWriter class."""

    def test_save(self, tmp_path: Path):
        """Test that stamps are written in order."""
        stamps = [
            BrushStamp(Point(1.0, 1.0), 8.0, 0.73, (0.06, 0.06, 0.06, 0.3)),
            BrushStamp(Point(2.0, 1.0), 8.0, 0.73, (0.06, 0.06, 0.06, 0.3)),
        ]
        path = tmp_path / "stamps.json"

        count = StampWriter(path).save(stamps)

        data = json.loads(path.read_text())
        assert count == 2
        assert [s["x"] for s in data["stamps"]] == [1.0, 2.0]
        assert data["stamps"][0]["color"] == [0.06, 0.06, 0.06, 0.3]
