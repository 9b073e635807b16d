from __future__ import annotations
import warnings
from typing import List, Tuple, Union

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.channel_layout import ChannelLayout

ColorInput = Union[Tuple[int, ...], List[int], np.ndarray]
RGBA = Tuple[int, int, int, int]

CHANNEL_MAX = 255
OPAQUE_ALPHA = 255


def validate_and_return_1d_array(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise ValueError("Input array must be 1-dimensional.")
    return arr


def normalize_color_input(color_input: ColorInput) -> Tuple:  # type: ignore
    if isinstance(color_input, np.ndarray):
        return tuple(validate_and_return_1d_array(color_input).tolist())
    elif isinstance(color_input, tuple):
        return color_input
    elif isinstance(color_input, list):
        return tuple(color_input)
    else:
        raise TypeError("Unsupported color input type.")


def to_rgba(color_input: ColorInput) -> RGBA:
    """
    Normalize a color to an (r, g, b, a) tuple of ints in [0, 255].

    RGB inputs are taken as opaque. Out-of-range channels are clamped and
    reported with a UserWarning.

    Raises:
        ValueError: if the color does not have 3 or 4 channels.
        TypeError: if the color is not a tuple, list or 1-D array of numbers.
    """
    value = normalize_color_input(color_input)
    if len(value) == 3:
        value = (*value, OPAQUE_ALPHA)
    if len(value) != 4:
        raise ValueError(f"Expected 3 or 4 color channels, got {len(value)}")
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise TypeError(f"Color channels must be numbers, got {value!r}") from e
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"Color channels must be finite, got {value!r}")

    clamp = bound_type_to_np_function[BoundType.CLAMP]
    clamped = np.asarray(clamp(arr.copy(), 0.0, float(CHANNEL_MAX)))
    if np.any(clamped != arr):
        warnings.warn(
            f"Color channels {value!r} outside [0, {CHANNEL_MAX}] were clamped",
            stacklevel=3,
        )
    return tuple(int(c) for c in clamped)  # type: ignore[return-value]


class EndpointColors:
    """The start and end colors of a two-stop gradient, as RGBA ints."""
    __slots__ = ('_start', '_end')

    def __init__(self, start: ColorInput, end: ColorInput) -> None:
        self._start = to_rgba(start)
        self._end = to_rgba(end)

    @property
    def start(self) -> RGBA:
        return self._start

    @property
    def end(self) -> RGBA:
        return self._end

    @property
    def start_gray(self) -> int:
        # Gray is read from the red channel.
        return self._start[0]

    @property
    def end_gray(self) -> int:
        return self._end[0]

    @property
    def is_opaque(self) -> bool:
        return self._start[3] == OPAQUE_ALPHA and self._end[3] == OPAQUE_ALPHA

    def channels(self, layout: ChannelLayout) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """Start and end channel vectors in the output order of ``layout``."""
        if layout is ChannelLayout.GRAY:
            return (self.start_gray,), (self.end_gray,)
        if layout is ChannelLayout.RGBA:
            return self._start, self._end
        raise ValueError(f"Unsupported channel layout: {layout!r}")

    def swapped(self) -> EndpointColors:
        return EndpointColors(self._end, self._start)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndpointColors):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"EndpointColors(start={self._start}, end={self._end})"
