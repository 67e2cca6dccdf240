# No dependencies
from .color_types import WhiteRef

# Reference white points (CIE XYZ, Y normalized to 1).
D65: WhiteRef = (0.95047, 1.0, 1.08883)
D50: WhiteRef = (0.96422, 1.0, 0.82521)

# HSLuv uses a rounded version of D65. It does not change final RGB values but
# keeps the internal HSLuv math aligned with the HSLuv reference snapshots.
HSLUV_D65: WhiteRef = (0.95045592705167, 1.0, 1.089057750759878)

# Tolerance used by Color.almost_equal_rgb.
DELTA = 1.0 / 255.0
