from .num_utils import sq, cub, clamp01, interp_angle
from .rand import RandomSource, DefaultRandomSource, LCGRandomSource, default_random_source

__all__ = [
    "sq",
    "cub",
    "clamp01",
    "interp_angle",
    "RandomSource",
    "DefaultRandomSource",
    "LCGRandomSource",
    "default_random_source",
]
