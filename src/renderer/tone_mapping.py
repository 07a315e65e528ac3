# renderer/tone_mapping.py
import math
from typing import Tuple
from numba import njit
from core.vector import Vector3

@njit
def tone_map_channel(value):
    """
    Map a linear radiance channel to 8 bits: clamp to [0, 1], apply a
    gamma 2 curve and scale to [0, 255].
    """
    if value != value:  # NaN
        value = 0.0
    value = min(1.0, max(0.0, value))
    return int(math.sqrt(value) * 255.0)

def to_color(color: Vector3) -> Tuple[int, int, int]:
    return (tone_map_channel(color.x),
            tone_map_channel(color.y),
            tone_map_channel(color.z))
