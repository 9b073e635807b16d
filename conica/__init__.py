"""
Conica - Angle Gradient Fill Engine
===================================

Renders angle ("conic") gradients for a drag gesture: each pixel's color
follows its angle around the drag start, measured from the drag direction.

Quick Start
-----------
>>> from conica import DragGeometry, render_angle_gradient, CycleMode
>>>
>>> drag = DragGeometry(50, 50, 90, 50)
>>> pixels = render_angle_gradient(
...     drag, (0, 0, 0, 255), (255, 255, 255, 255),
...     CycleMode.REFLECT, width=100, height=100,
... )
>>> pixels.shape
(100, 100, 4)

Modules
-------
- geometry: DragGeometry, the drag start/end points and derived angles
- colors: EndpointColors, validated RGBA endpoint pairs
- gradients: the sampler and its vectorized kernels
- fill: host-boundary helpers (zero-length drags, invert flag)
- defaults: tunable anti-aliasing and threading defaults
"""

from .geometry import DragGeometry
from .colors import EndpointColors
from .types import CycleMode, ChannelLayout, CYCLE_MODE_LABELS
from .gradients import AngleGradientSampler, fold_fraction
from .fill import render_angle_gradient, fill_angle_gradient

__version__ = "1.0.0"

__all__ = [
    "DragGeometry",
    "EndpointColors",
    "CycleMode",
    "ChannelLayout",
    "CYCLE_MODE_LABELS",
    "AngleGradientSampler",
    "fold_fraction",
    "render_angle_gradient",
    "fill_angle_gradient",
    "__version__",
]
