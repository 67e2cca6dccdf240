from .color_types import Triple, WhiteRef, LabConstraint
from .white_point import D65, D50, HSLUV_D65, DELTA

__all__ = [
    "Triple",
    "WhiteRef",
    "LabConstraint",
    "D65",
    "D50",
    "HSLUV_D65",
    "DELTA",
]
