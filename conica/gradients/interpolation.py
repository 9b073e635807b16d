"""
Angle gradient kernels.

Pure, vectorized functions shared by every channel layout: the angular base
fraction, cycle folding, the seam band test and the supersampling grid.
"""

from __future__ import annotations
from functools import lru_cache

import numpy as np

from ..geometry.drag import DragGeometry
from ..types.array_types import Coordinate, ndarray_fraction, ndarray_mask
from ..types.cycle_mode import CycleMode

TWO_PI = 2.0 * np.pi


def base_fraction(drag: DragGeometry, x: Coordinate, y: Coordinate) -> ndarray_fraction:
    """
    Angular position of (x, y) relative to the draw direction, in [0, 1).

    0 is the draw direction itself; the fraction grows with the angle and
    wraps back to 0 after a full turn (the seam).
    """
    relative_angle = drag.angle_from_start_to(x, y) - drag.draw_angle  # (-2pi, 2pi)
    f = np.mod(np.asarray(relative_angle, dtype=np.float64) / TWO_PI + 1.0, 1.0)
    # Rounding can land exactly on 1.0, which is the seam itself.
    return np.where(f >= 1.0, 0.0, f)


def fold_fraction(f: ndarray_fraction, cycle_mode: CycleMode) -> ndarray_fraction:
    """
    Map the base fraction through a cycle mode.

    CLAMP keeps it, REFLECT turns it into a triangle wave peaking at f = 0.5,
    REPEAT into a sawtooth with seams at f = 0 and f = 0.5.

    Raises:
        ValueError: for anything that is not a CycleMode member.
    """
    f = np.asarray(f, dtype=np.float64)
    if cycle_mode is CycleMode.CLAMP:
        return f
    if cycle_mode is CycleMode.REFLECT:
        return np.where(f < 0.5, 2.0 * f, 2.0 * (1.0 - f))
    if cycle_mode is CycleMode.REPEAT:
        return np.where(f < 0.5, 2.0 * f, 2.0 * (f - 0.5))
    raise ValueError(f"Unsupported cycle mode: {cycle_mode!r}")


def interpolate(drag: DragGeometry, x: Coordinate, y: Coordinate, cycle_mode: CycleMode) -> ndarray_fraction:
    """Interpolation fraction t for (x, y): base fraction folded by cycle mode."""
    return fold_fraction(base_fraction(drag, x, y), cycle_mode)


def needs_antialiasing(
    drag: DragGeometry,
    x: Coordinate,
    y: Coordinate,
    t: ndarray_fraction,
    cycle_mode: CycleMode,
    threshold: float,
) -> ndarray_mask:
    """
    Mask of pixels whose fraction lies within the seam band.

    The band is ``threshold / distance`` wide, so it narrows in fraction
    units as pixels get farther from the drag origin. Modes without a seam
    never need anti-aliasing.
    """
    t = np.asarray(t)
    if not cycle_mode.has_seam:
        return np.zeros(t.shape, dtype=bool)
    band = threshold / drag.taxi_cab_metric(x, y)
    return (t > 1.0 - band) | (t < band)


@lru_cache(maxsize=8)
def subsample_offsets(resolution: int) -> np.ndarray:
    """
    Sub-pixel offsets of the supersampling grid, shape (resolution**2, 2).

    Rows are (dx, dy) = (n / R - 0.5, m / R - 0.5), m major.
    """
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")
    steps = np.arange(resolution, dtype=np.float64) / resolution - 0.5
    dy, dx = np.meshgrid(steps, steps, indexing='ij')
    offsets = np.stack([dx.ravel(), dy.ravel()], axis=-1)
    offsets.setflags(write=False)
    return offsets
