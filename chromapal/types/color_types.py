from __future__ import annotations
from typing import Callable, Tuple

Triple = Tuple[float, float, float]
WhiteRef = Tuple[float, float, float]
LabConstraint = Callable[[float, float, float], bool]
