"""End-to-end tests for the command line interface."""

import json
import math
from pathlib import Path

import pytest
from typer.testing import CliRunner

from smoothstroke import __version__
from smoothstroke.cli.app import app

runner = CliRunner()


@pytest.fixture
def heart_file(tmp_path: Path) -> Path:
    """Write a heart-shaped stroke sampled every 16 ms."""
    points = []
    for i in range(60):
        a = 2 * math.pi * i / 60
        x = 16 * math.sin(a) ** 3
        y = 13 * math.cos(a) - 5 * math.cos(2 * a) - 2 * math.cos(3 * a) - math.cos(4 * a)
        points.append({"x": 200 + 8 * x, "y": 200 - 8 * y, "t": i * 16})
    path = tmp_path / "heart.json"
    path.write_text(json.dumps({"points": points}))
    return path


class TestReplayCommand:
    """Tests for `smoothstroke replay`."""

    def test_replay_writes_stamps(self, heart_file: Path, tmp_path: Path):
        """Test a full replay with stamp output."""
        output = tmp_path / "stamps.json"
        result = runner.invoke(
            app, ["replay", str(heart_file), "-o", str(output), "--timing", "timestamps"]
        )

        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        stamps = json.loads(output.read_text())["stamps"]
        assert len(stamps) > 100
        assert all(s["size"] == 8.0 for s in stamps)

    def test_replay_color_and_brush(self, heart_file: Path, tmp_path: Path):
        """Test that brush options reach the stamps."""
        output = tmp_path / "stamps.json"
        result = runner.invoke(
            app,
            [
                "replay",
                str(heart_file),
                "-o",
                str(output),
                "--color",
                "1",
                "0",
                "0",
                "1",
                "--brush-size",
                "4",
                "-q",
            ],
        )

        assert result.exit_code == 0, result.output
        stamp = json.loads(output.read_text())["stamps"][0]
        assert stamp["size"] == 4.0
        assert stamp["color"] == pytest.approx([0.3, 0.0, 0.0, 0.3])

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing stroke file exits with an error."""
        result = runner.invoke(app, ["replay", str(tmp_path / "nope.json"), "-q"])
        assert result.exit_code == 1
        assert "Could not load stroke" in result.output

    def test_invalid_timing(self, heart_file: Path):
        """Test that an unknown timing source is rejected."""
        result = runner.invoke(app, ["replay", str(heart_file), "--timing", "sundial"])
        assert result.exit_code == 1
        assert "Invalid timing" in result.output

    def test_verbose_and_quiet(self, heart_file: Path):
        """Test that --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, ["replay", str(heart_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_empty_stroke(self, tmp_path: Path):
        """Test that an empty stroke is reported as an error."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"points": []}))
        result = runner.invoke(app, ["replay", str(path), "-q"])
        assert result.exit_code == 1
        assert "no points" in result.output


class TestInspectCommand:
    """Tests for `smoothstroke inspect`."""

    def test_inspect(self, heart_file: Path):
        """Test stroke summary output."""
        result = runner.invoke(app, ["inspect", str(heart_file)])
        assert result.exit_code == 0, result.output
        assert "60 points" in result.output

    def test_inspect_bad_file(self, tmp_path: Path):
        """Test that a malformed file is reported."""
        path = tmp_path / "bad.json"
        path.write_text("not json")
        result = runner.invoke(app, ["inspect", str(path)])
        assert result.exit_code == 1
        assert "Invalid stroke format" in result.output


def test_version():
    """Test the version flag."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
