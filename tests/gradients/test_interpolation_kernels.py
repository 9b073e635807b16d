"""
Unit tests for the angle gradient kernels: base fraction, cycle folding,
seam band detection and the supersampling grid.
"""

import numpy as np
import pytest

from conica.geometry.drag import DragGeometry
from conica.gradients.interpolation import (
    base_fraction,
    fold_fraction,
    interpolate,
    needs_antialiasing,
    subsample_offsets,
)
from conica.types.cycle_mode import CycleMode

ALL_MODES = [CycleMode.CLAMP, CycleMode.REFLECT, CycleMode.REPEAT]
OPEN_FRACTIONS = np.linspace(0.0, 1.0, 201)[1:-1]


class TestBaseFraction:
    """Tests for the angular position relative to the drag direction."""

    def test_draw_direction_is_zero(self):
        drag = DragGeometry(0, 0, 10, 0)
        assert base_fraction(drag, 25, 0) == 0.0

    def test_quarter_turns(self):
        drag = DragGeometry(0, 0, 10, 0)
        xs = np.array([0.0, -5.0, 0.0])
        ys = np.array([5.0, 0.0, -5.0])
        np.testing.assert_allclose(base_fraction(drag, xs, ys), [0.25, 0.5, 0.75])

    def test_relative_to_rotated_drag(self):
        drag = DragGeometry(0, 0, 0, 10)  # pointing down (+y)
        assert base_fraction(drag, 0, 3) == pytest.approx(0.0)
        assert base_fraction(drag, -3, 0) == pytest.approx(0.25)

    def test_range_over_window(self):
        drag = DragGeometry(3.5, -2.0, -7.0, 11.0)
        ys, xs = np.indices((40, 40), dtype=float) - 20
        f = base_fraction(drag, xs, ys)
        assert np.all(f >= 0.0)
        assert np.all(f < 1.0)

    def test_unresolvable_negative_angle_folds_to_zero(self):
        """An angle just below the draw direction rounds onto the seam, which is 0, not 1."""
        drag = DragGeometry(0, 0, 10, 0)
        f = base_fraction(drag, 1.0, -1e-20)
        assert f == 0.0


class TestFoldFraction:
    """Tests for the three cycle folds."""

    def test_clamp_is_identity(self):
        np.testing.assert_array_equal(fold_fraction(OPEN_FRACTIONS, CycleMode.CLAMP), OPEN_FRACTIONS)

    def test_reflect_values(self):
        f = np.array([0.0, 0.25, 0.5, 0.75])
        np.testing.assert_allclose(fold_fraction(f, CycleMode.REFLECT), [0.0, 0.5, 1.0, 0.5])

    def test_repeat_values(self):
        f = np.array([0.0, 0.25, 0.5, 0.75])
        np.testing.assert_allclose(fold_fraction(f, CycleMode.REPEAT), [0.0, 0.5, 0.0, 0.5])

    def test_reflect_symmetry(self):
        folded = fold_fraction(OPEN_FRACTIONS, CycleMode.REFLECT)
        mirrored = fold_fraction(1.0 - OPEN_FRACTIONS, CycleMode.REFLECT)
        np.testing.assert_allclose(folded, mirrored, atol=1e-12)

    def test_repeat_periodicity(self):
        folded = fold_fraction(OPEN_FRACTIONS, CycleMode.REPEAT)
        shifted = fold_fraction(np.mod(OPEN_FRACTIONS + 0.5, 1.0), CycleMode.REPEAT)
        np.testing.assert_allclose(folded, shifted, atol=1e-12)

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_folded_range(self, mode):
        folded = fold_fraction(np.linspace(0.0, 1.0, 1000, endpoint=False), mode)
        assert np.all(folded >= 0.0)
        assert np.all(folded <= 1.0)

    def test_unknown_mode_fails_fast(self):
        with pytest.raises(ValueError, match="Unsupported cycle mode"):
            fold_fraction(np.array([0.3]), "spiral")


class TestSeamContinuity:
    """Approaching the seam from either side gives the same value modulo the fold's wrap."""

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_both_sides_converge(self, mode):
        drag = DragGeometry(0, 0, 10, 0)
        eps = 1e-9
        above = interpolate(drag, 100.0, eps, mode)
        below = interpolate(drag, 100.0, -eps, mode)
        # Circular distance: 0 and 1 are the same point on the seam.
        gap = abs(float(above) - float(below))
        assert min(gap, 1.0 - gap) < 1e-6

    def test_reflect_is_continuous_across_seam(self):
        drag = DragGeometry(0, 0, 10, 0)
        above = interpolate(drag, 100.0, 1e-9, CycleMode.REFLECT)
        below = interpolate(drag, 100.0, -1e-9, CycleMode.REFLECT)
        assert float(above) == pytest.approx(float(below), abs=1e-6)


class TestNeedsAntialiasing:
    """Tests for the seam band heuristic."""

    def test_reflect_never_antialiased(self):
        drag = DragGeometry(0, 0, 10, 0)
        t = np.array([0.0, 0.001, 0.999])
        xs = np.array([10.0, 10.0, 10.0])
        ys = np.array([0.0, 0.0, 0.0])
        assert not np.any(needs_antialiasing(drag, xs, ys, t, CycleMode.REFLECT, 0.2))

    @pytest.mark.parametrize("mode", [CycleMode.CLAMP, CycleMode.REPEAT])
    def test_band_edges(self, mode):
        drag = DragGeometry(0, 0, 10, 0)
        # Distance 10: band is 0.02 wide on each side.
        t = np.array([0.01, 0.03, 0.5, 0.97, 0.99])
        xs = np.full(5, 10.0)
        ys = np.zeros(5)
        mask = needs_antialiasing(drag, xs, ys, t, mode, 0.2)
        np.testing.assert_array_equal(mask, [True, False, False, False, True])

    def test_band_narrows_with_distance(self):
        drag = DragGeometry(0, 0, 10, 0)
        t = np.array([0.05, 0.05])
        xs = np.array([2.0, 200.0])
        ys = np.zeros(2)
        mask = needs_antialiasing(drag, xs, ys, t, CycleMode.CLAMP, 0.2)
        np.testing.assert_array_equal(mask, [True, False])


class TestSubsampleOffsets:
    def test_default_grid(self):
        offsets = subsample_offsets(4)
        assert offsets.shape == (16, 2)
        np.testing.assert_array_equal(offsets[0], [-0.5, -0.5])
        np.testing.assert_array_equal(offsets[1], [-0.25, -0.5])
        np.testing.assert_array_equal(offsets[4], [-0.5, -0.25])
        np.testing.assert_array_equal(offsets[-1], [0.25, 0.25])

    def test_single_sample(self):
        np.testing.assert_array_equal(subsample_offsets(1), [[-0.5, -0.5]])

    def test_read_only(self):
        with pytest.raises(ValueError):
            subsample_offsets(4)[0, 0] = 1.0

    def test_invalid_resolution(self):
        with pytest.raises(ValueError, match="resolution must be >= 1"):
            subsample_offsets(0)
