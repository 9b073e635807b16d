# No dependencies
from enum import Enum


class ChannelLayout(str, Enum):
    RGBA = "rgba"
    GRAY = "gray"

    @property
    def num_channels(self) -> int:
        return layout_channels[self]

    @classmethod
    def from_num_components(cls, num_components: int) -> "ChannelLayout":
        """Pick the layout for a target color model with the given component count."""
        if num_components < 1:
            raise ValueError(f"num_components must be positive, got {num_components}")
        if num_components == 1:
            return cls.GRAY
        return cls.RGBA


layout_channels = {
    ChannelLayout.RGBA: 4,
    ChannelLayout.GRAY: 1,
}
