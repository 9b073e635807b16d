from __future__ import annotations
from typing import Sequence

import numpy as np

from ..colors.endpoint import EndpointColors
from ..types.array_types import ndarray_fraction
from ..types.channel_layout import ChannelLayout


def lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Linear interpolation between a and b, written as a + t * (b - a)."""
    return a + t * (b - a)


class ChannelBlend:
    """
    Blends two channel vectors at a fraction t.

    The only part of the angle gradient that depends on the channel layout:
    the sampler asks for ``blend(t)`` and never looks at channel counts.
    """
    __slots__ = ('start', 'end')

    def __init__(self, start: Sequence[int], end: Sequence[int]) -> None:
        start_arr = np.asarray(start, dtype=np.float64)
        end_arr = np.asarray(end, dtype=np.float64)
        if start_arr.ndim != 1 or start_arr.shape != end_arr.shape:
            raise ValueError("start and end must be 1-D channel vectors of the same length")
        self.start = start_arr
        self.end = end_arr

    @property
    def num_channels(self) -> int:
        return self.start.shape[0]

    def blend(self, t: ndarray_fraction) -> np.ndarray:
        """Float channel values for fractions t, shape t.shape + (num_channels,)."""
        return lerp(self.start, self.end, np.asarray(t, dtype=np.float64)[..., None])

    def blend_truncated(self, t: ndarray_fraction) -> np.ndarray:
        """Channel values truncated toward zero, as int64."""
        return np.trunc(self.blend(t)).astype(np.int64)


def blend_for_layout(colors: EndpointColors, layout: ChannelLayout) -> ChannelBlend:
    start, end = colors.channels(layout)
    return ChannelBlend(start, end)
