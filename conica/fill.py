"""
Fill helpers at the host boundary.

These wrap AngleGradientSampler with the checks a drawing tool performs
before filling: a zero-length drag (a click) draws nothing, and the invert
flag swaps the endpoint colors.
"""

from __future__ import annotations
import logging
from typing import Optional, Tuple

import numpy as np

from .colors.endpoint import ColorInput, EndpointColors
from .geometry.drag import DragGeometry
from .gradients.angle_gradient import AngleGradientSampler
from .types.channel_layout import ChannelLayout
from .types.cycle_mode import CycleMode, CycleModeInput

logger = logging.getLogger(__name__)


def _endpoint_colors(start_color: ColorInput, end_color: ColorInput, invert: bool) -> EndpointColors:
    colors = EndpointColors(start_color, end_color)
    return colors.swapped() if invert else colors


def layout_for_buffer(out: np.ndarray) -> ChannelLayout:
    """Infer the channel layout from a (h, w), (h, w, 1) or (h, w, 4) buffer."""
    if not isinstance(out, np.ndarray):
        raise TypeError("out must be a numpy array")
    if out.ndim == 2:
        return ChannelLayout.GRAY
    if out.ndim == 3:
        return ChannelLayout.from_num_components(out.shape[2])
    raise ValueError(f"Expected a 2-D or 3-D buffer, got shape {out.shape}")


def render_angle_gradient(
    drag: DragGeometry,
    start_color: ColorInput,
    end_color: ColorInput,
    cycle_mode: CycleModeInput,
    width: int,
    height: int,
    *,
    layout: ChannelLayout = ChannelLayout.RGBA,
    invert: bool = False,
    origin: Tuple[int, int] = (0, 0),
    num_threads: Optional[int] = None,
    band_height: Optional[int] = None,
    **sampler_options,
) -> Optional[np.ndarray]:
    """
    Render an angle gradient over a width x height window at ``origin``.

    Returns None when the drag has zero length; there is no gradient to draw.
    """
    cycle_mode = CycleMode.coerce(cycle_mode)
    if drag.is_degenerate():
        logger.debug("Skipping angle gradient: zero-length drag at %s", drag.start)
        return None

    sampler = AngleGradientSampler(
        drag,
        _endpoint_colors(start_color, end_color, invert),
        cycle_mode,
        layout,
        **sampler_options,
    )
    return sampler.render(origin[0], origin[1], width, height, num_threads=num_threads, band_height=band_height)


def fill_angle_gradient(
    out: np.ndarray,
    drag: DragGeometry,
    start_color: ColorInput,
    end_color: ColorInput,
    cycle_mode: CycleModeInput,
    *,
    invert: bool = False,
    origin: Tuple[int, int] = (0, 0),
    num_threads: Optional[int] = None,
    band_height: Optional[int] = None,
    **sampler_options,
) -> bool:
    """
    Fill a uint8 buffer with an angle gradient, in place.

    The layout follows the buffer shape: (h, w) or (h, w, 1) is gray,
    (h, w, 4) is RGBA. ``origin`` is the image coordinate of out[0, 0].

    Returns:
        False if the drag has zero length and the buffer was left untouched,
        True otherwise.
    """
    layout = layout_for_buffer(out)
    if layout is ChannelLayout.RGBA and out.shape[2] != layout.num_channels:
        raise ValueError(f"RGBA buffers need {layout.num_channels} channels, got {out.shape[2]}")
    cycle_mode = CycleMode.coerce(cycle_mode)
    if drag.is_degenerate():
        logger.debug("Skipping angle gradient fill: zero-length drag at %s", drag.start)
        return False

    target = out[..., 0] if (layout is ChannelLayout.GRAY and out.ndim == 3) else out
    sampler = AngleGradientSampler(
        drag,
        _endpoint_colors(start_color, end_color, invert),
        cycle_mode,
        layout,
        **sampler_options,
    )
    sampler.render_into(target, origin[0], origin[1], num_threads=num_threads, band_height=band_height)
    return True
