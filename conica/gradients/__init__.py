from .angle_gradient import AngleGradientSampler, split_rows
from .blend import ChannelBlend, blend_for_layout, lerp
from .interpolation import (
    base_fraction,
    fold_fraction,
    interpolate,
    needs_antialiasing,
    subsample_offsets,
)

__all__ = [
    "AngleGradientSampler",
    "split_rows",
    "ChannelBlend",
    "blend_for_layout",
    "lerp",
    "base_fraction",
    "fold_fraction",
    "interpolate",
    "needs_antialiasing",
    "subsample_offsets",
]
