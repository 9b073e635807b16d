from __future__ import annotations
from enum import Enum
from typing import Union


class CycleMode(str, Enum):
    """How the angular fraction repeats around the drag origin."""
    CLAMP = "clamp"
    REFLECT = "reflect"
    REPEAT = "repeat"

    @property
    def label(self) -> str:
        return cycle_mode_labels[self]

    @property
    def has_seam(self) -> bool:
        """True when the folded fraction jumps from 1 back to 0 somewhere."""
        return self is not CycleMode.REFLECT

    @classmethod
    def coerce(cls, value: Union["CycleMode", str]) -> "CycleMode":
        """
        Resolve a member, its value or its UI label to a CycleMode.

        Raises:
            ValueError: if value names no known cycle mode.
        """
        if isinstance(value, CycleMode):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if key == mode.value or key == mode.label.lower():
                    return mode
        raise ValueError(f"Unknown cycle mode: {value!r}")


cycle_mode_labels = {
    CycleMode.CLAMP: "No Cycle",
    CycleMode.REFLECT: "Reflect",
    CycleMode.REPEAT: "Repeat",
}

CYCLE_MODE_LABELS = tuple(cycle_mode_labels.values())

CycleModeInput = Union[CycleMode, str]
