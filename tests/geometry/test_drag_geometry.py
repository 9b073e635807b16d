"""
Unit tests for DragGeometry.
"""

import math

import numpy as np
import pytest

from conica.geometry.drag import DragGeometry


class TestDrawAngle:
    """Tests for the start -> end angle."""

    def test_horizontal_drag(self):
        assert DragGeometry(0, 0, 10, 0).draw_angle == 0.0

    def test_downward_drag(self):
        """Image coordinates: positive y points down, angle is +pi/2."""
        assert DragGeometry(0, 0, 0, 5).draw_angle == pytest.approx(math.pi / 2)

    def test_backward_drag_is_pi(self):
        assert DragGeometry(10, 3, 0, 3).draw_angle == pytest.approx(math.pi)

    def test_derived_lengths(self):
        drag = DragGeometry.from_points((1, 2), (4, 6))
        assert drag.dx == 3
        assert drag.dy == 4
        assert drag.length == pytest.approx(5.0)


class TestQueries:
    """Tests for per-point measurements."""

    def test_angle_from_start_scalar(self):
        drag = DragGeometry(0, 0, 10, 0)
        assert drag.angle_from_start_to(10, 1) == pytest.approx(math.atan2(1, 10))

    def test_angle_from_start_array(self):
        drag = DragGeometry(5, 5, 10, 5)
        xs = np.array([6.0, 5.0, 4.0])
        ys = np.array([5.0, 6.0, 5.0])
        np.testing.assert_allclose(drag.angle_from_start_to(xs, ys), [0.0, math.pi / 2, math.pi])

    def test_angle_range(self):
        drag = DragGeometry(0, 0, 1, 0)
        ys, xs = np.indices((21, 21), dtype=float) - 10
        angles = drag.angle_from_start_to(xs, ys)
        assert np.all(angles > -math.pi)
        assert np.all(angles <= math.pi)

    def test_taxi_cab_metric(self):
        drag = DragGeometry(2, 3, 10, 3)
        assert drag.taxi_cab_metric(5, 7) == 7
        assert drag.taxi_cab_metric(-1, 0) == 6

    def test_taxi_cab_metric_never_below_one(self):
        drag = DragGeometry(2, 3, 10, 3)
        assert drag.taxi_cab_metric(2, 3) == 1
        assert drag.taxi_cab_metric(2.25, 3.25) == 1
        metric = drag.taxi_cab_metric(np.array([2.0, 2.1, 20.0]), np.array([3.0, 3.0, 3.0]))
        np.testing.assert_allclose(metric, [1.0, 1.0, 18.0])


class TestDegenerate:
    """Tests for zero-length drag detection."""

    def test_zero_length_is_degenerate(self):
        drag = DragGeometry(4, 4, 4, 4)
        assert drag.is_degenerate()
        assert drag.is_click()

    def test_tiny_offset_within_epsilon(self):
        assert DragGeometry(4, 4, 4 + 1e-12, 4).is_degenerate()

    def test_real_drag_is_not_degenerate(self):
        assert not DragGeometry(4, 4, 5, 4).is_degenerate()

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError, match="must be finite"):
            DragGeometry(0, 0, float("nan"), 1)


class TestImmutability:
    """DragGeometry is immutable and has value semantics."""

    def test_cannot_assign(self):
        drag = DragGeometry(0, 0, 1, 1)
        with pytest.raises(AttributeError, match="immutable"):
            drag._x0 = 5

    def test_equality_and_hash(self):
        a = DragGeometry(0, 0, 1, 1)
        b = DragGeometry(0.0, 0.0, 1.0, 1.0)
        assert a == b
        assert hash(a) == hash(b)

    def test_reversed(self):
        drag = DragGeometry(0, 0, 3, 4).reversed()
        assert drag.start == (3.0, 4.0)
        assert drag.end == (0.0, 0.0)

    def test_translated(self):
        drag = DragGeometry(0, 0, 3, 4).translated(10, -2)
        assert drag.start == (10.0, -2.0)
        assert drag.end == (13.0, 2.0)
        assert drag.draw_angle == pytest.approx(DragGeometry(0, 0, 3, 4).draw_angle)
