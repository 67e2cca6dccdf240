"""
Hex string serialization, the only text format chromapal reads and writes.
"""

from __future__ import annotations
import re

from ..errors import HexParseError
from .color import Color

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def hex_encode(color: Color) -> str:
    """
    Format a color as lowercase ``#rrggbb``.

    Channels are rounded with ``floor(v * 255 + 0.5)``. Colors outside the
    gamut produce meaningless digits; clamp them first.
    """
    r, g, b = color.rgb255()
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_decode(value: str) -> Color:
    """
    Parse ``#rgb`` or ``#rrggbb`` (case-insensitive).

    Raises:
        HexParseError: If ``value`` is not exactly one of those two forms
    """
    match = _HEX_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise HexParseError(value)

    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return Color(
        int(digits[0:2], 16) / 255.0,
        int(digits[2:4], 16) / 255.0,
        int(digits[4:6], 16) / 255.0,
    )


Color.hex = hex_encode
