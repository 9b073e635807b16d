"""
Drag Geometry
=============

The start/end point pair of a drag gesture and the measurements the angle
gradient derives from it. All query methods accept scalars or numpy arrays
and broadcast like numpy ufuncs.
"""

from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from ..defaults import DEGENERATE_EPSILON
from ..types.array_types import Coordinate, Point


class DragGeometry:
    __slots__ = ('_x0', '_y0', '_x1', '_y1', '_draw_angle', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, start_x: float, start_y: float, end_x: float, end_y: float) -> None:
        for name, v in (("start_x", start_x), ("start_y", start_y), ("end_x", end_x), ("end_y", end_y)):
            if not math.isfinite(v):
                raise ValueError(f"{name} must be finite, got {v!r}")
        self._x0 = float(start_x)
        self._y0 = float(start_y)
        self._x1 = float(end_x)
        self._y1 = float(end_y)
        self._draw_angle = math.atan2(self._y1 - self._y0, self._x1 - self._x0)
        self._is_frozen = True

    @classmethod
    def from_points(cls, start: Point, end: Point) -> DragGeometry:
        return cls(start[0], start[1], end[0], end[1])

    # ---- Endpoints ----
    @property
    def start(self) -> Tuple[float, float]:
        return self._x0, self._y0

    @property
    def end(self) -> Tuple[float, float]:
        return self._x1, self._y1

    @property
    def dx(self) -> float:
        return self._x1 - self._x0

    @property
    def dy(self) -> float:
        return self._y1 - self._y0

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def draw_angle(self) -> float:
        """Angle of the start -> end vector in radians, in (-pi, pi]."""
        return self._draw_angle

    def is_degenerate(self, eps: float = DEGENERATE_EPSILON) -> bool:
        """True when the drag has (numerically) zero length."""
        return abs(self.dx) <= eps and abs(self.dy) <= eps

    # The host tool calls a zero-length drag a click.
    is_click = is_degenerate

    # ---- Queries ----
    def angle_from_start_to(self, x: Coordinate, y: Coordinate) -> Coordinate:
        """Angle of the vector from the start point to (x, y), in (-pi, pi]."""
        return np.arctan2(np.subtract(y, self._y0), np.subtract(x, self._x0))

    def taxi_cab_metric(self, x: Coordinate, y: Coordinate) -> Coordinate:
        """
        Manhattan distance from the start point to (x, y), never below 1.

        Cheap proxy for the radius of a pixel; used as a divisor when sizing
        the anti-aliasing band, hence the floor.
        """
        d = np.abs(np.subtract(x, self._x0)) + np.abs(np.subtract(y, self._y0))
        return np.maximum(d, 1.0)

    # ---- Derived drags ----
    def reversed(self) -> DragGeometry:
        return DragGeometry(self._x1, self._y1, self._x0, self._y0)

    def translated(self, dx: float, dy: float) -> DragGeometry:
        return DragGeometry(self._x0 + dx, self._y0 + dy, self._x1 + dx, self._y1 + dy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DragGeometry):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __repr__(self) -> str:
        return f"DragGeometry(start={self.start}, end={self.end})"
