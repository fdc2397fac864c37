"""Unit tests for the output gate."""

from unittest.mock import Mock

import pytest

from smoothstroke.config import BrushConfig
from smoothstroke.core.gate import DistanceFilter, StampCollector
from smoothstroke.domain import BrushStamp, Point

COLOR = (0.06, 0.06, 0.06, 0.3)


class TestDistanceFilter:
    """Tests for DistanceFilter class."""

    def test_first_candidate_always_forwarded(self):
        """Test that the very first stamp reaches the sink."""
        sink = Mock()
        gate = DistanceFilter(1.0, sink)

        assert gate(Point(3, 4), 8.0, 0.73, COLOR) is True
        sink.assert_called_once_with(Point(3, 4), 8.0, 0.73, COLOR)
        assert gate.last_position == Point(3, 4)

    def test_close_candidate_dropped(self):
        """Test that a stamp within the spacing is dropped."""
        sink = Mock()
        gate = DistanceFilter(1.0, sink)
        gate(Point(0, 0), 8.0, 0.73, COLOR)

        assert gate(Point(0.5, 0.5), 8.0, 0.73, COLOR) is False
        assert sink.call_count == 1
        assert gate.last_position == Point(0, 0)

    def test_spacing_is_strict(self):
        """Test that a stamp exactly at the spacing is dropped."""
        collector = StampCollector()
        gate = DistanceFilter(1.0, collector)
        gate(Point(0, 0), 8.0, 0.73, COLOR)
        gate(Point(1.0, 0), 8.0, 0.73, COLOR)
        gate(Point(1.5, 0), 8.0, 0.73, COLOR)

        assert collector.positions() == [Point(0, 0), Point(1.5, 0)]

    def test_distance_measured_from_last_emitted(self):
        """Test that dropped candidates do not move the reference point."""
        collector = StampCollector()
        gate = DistanceFilter(1.0, collector)
        for x in (0.0, 0.4, 0.8, 1.2, 1.6, 2.0, 2.4):
            gate(Point(x, 0), 8.0, 0.73, COLOR)

        assert collector.positions() == [Point(0.0, 0), Point(1.2, 0), Point(2.4, 0)]

    def test_counters(self):
        """Test emitted and suppressed counts."""
        gate = DistanceFilter(1.0, StampCollector())
        for x in (0.0, 0.1, 0.2, 5.0):
            gate(Point(x, 0), 8.0, 0.73, COLOR)

        assert gate.emitted_count == 2
        assert gate.suppressed_count == 2

    def test_gates_are_independent(self):
        """Test that two gates keep separate state."""
        first = DistanceFilter(1.0, StampCollector())
        second = DistanceFilter(1.0, StampCollector())
        first(Point(0, 0), 8.0, 0.73, COLOR)

        assert second.last_position is None
        assert second(Point(0.1, 0), 8.0, 0.73, COLOR) is True

    def test_default_spacing(self):
        """Test the spacing derived from the default brush."""
        assert BrushConfig().min_spacing == pytest.approx(0.96)


class TestStampCollector:
    """Tests for StampCollector class."""

    def test_records_in_order(self):
        """Test that stamps are kept in emission order."""
        collector = StampCollector()
        collector(Point(1, 1), 8.0, 0.73, COLOR)
        collector(Point(2, 2), 4.0, 0.5, COLOR)

        assert len(collector) == 2
        assert collector.stamps[0] == BrushStamp(Point(1, 1), 8.0, 0.73, COLOR)
        assert collector.positions() == [Point(1, 1), Point(2, 2)]
