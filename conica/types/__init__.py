from .cycle_mode import CycleMode, CycleModeInput, CYCLE_MODE_LABELS
from .channel_layout import ChannelLayout

__all__ = [
    "CycleMode",
    "CycleModeInput",
    "CYCLE_MODE_LABELS",
    "ChannelLayout",
]
