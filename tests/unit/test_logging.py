"""Tests for logging utilities."""

import logging
from pathlib import Path
from unittest.mock import Mock

from smoothstroke.utils import StrokeLogger, StrokeStats, configure_logging


class TestStrokeStats:
    """Tests for StrokeStats class."""

    def test_acceptance_rate(self):
        """Test the accepted fraction of fed points."""
        assert StrokeStats(points_fed=8, points_accepted=6).acceptance_rate == 0.75

    def test_acceptance_rate_empty(self):
        """Test that no input gives a zero rate."""
        assert StrokeStats().acceptance_rate == 0.0


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path: Path):
        """Test that events reach the log file."""
        log_file = tmp_path / "smoothstroke.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Stroke loaded", points=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "Logging initialized" in content
        assert "Stroke loaded" in content

    def test_reconfigure_replaces_handlers(self):
        """Test that repeated configuration does not stack handlers."""
        root = logging.getLogger()
        configure_logging(quiet=True)
        count = len(root.handlers)
        configure_logging(quiet=True)

        assert len(root.handlers) == count


class TestStrokeLogger:
    """Tests for StrokeLogger class."""

    def test_log_stroke_complete(self):
        """Test that completed strokes are logged and kept."""
        bound = Mock()
        stroke_logger = StrokeLogger(bound)
        stats = StrokeStats(points_fed=10, points_accepted=7, points_rejected=3)

        stroke_logger.log_stroke_complete(stats, duration_ms=1.234)

        assert stroke_logger.strokes == [stats]
        bound.info.assert_called_once()
        assert bound.info.call_args.kwargs["rejected"] == 3
        assert bound.info.call_args.kwargs["duration_ms"] == 1.23

    def test_log_stroke_error(self):
        """Test error logging details."""
        bound = Mock()
        StrokeLogger(bound).log_stroke_error("a.json", ValueError("boom"))

        kwargs = bound.error.call_args.kwargs
        assert kwargs["error"] == "boom"
        assert kwargs["error_type"] == "ValueError"
