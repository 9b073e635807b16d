"""Central place for conica default settings."""
from typing import Optional, TypeVar

T = TypeVar('T')

# Anti-aliasing
DEFAULT_AA_THRESHOLD: float = 0.2  # seam band width, scaled by 1 / taxicab distance
DEFAULT_AA_RESOLUTION: int = 4  # supersampling grid is RES x RES

# Rendering
DEFAULT_NUM_THREADS: Optional[int] = None  # None = render in the calling thread
DEFAULT_BAND_HEIGHT: int = 64  # rows per work unit

# Geometry
DEGENERATE_EPSILON: float = 1e-9


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
