"""
RGBA8 color helpers.

Shadow colors are stored as ``(r, g, b, a)`` tuples of ints in 0..255. The
alpha component is the target shadow opacity; it is independent from the
coverage carried by the rasterized silhouette.

Accepted inputs:
- RGB tuple/list: ``(68, 68, 68)`` (alpha defaults to 255)
- RGBA tuple/list: ``(0, 0, 0, 128)``
- Hex string: ``'#444444'`` or ``'#00000080'`` (``#RRGGBBAA``)
- Packed 32-bit ARGB integer: ``0xFF444444``
"""

from typing import Any, Tuple

RGBA8 = Tuple[int, int, int, int]

MAX_ALPHA = 255

DKGRAY: RGBA8 = (0x44, 0x44, 0x44, MAX_ALPHA)


def _clamp8(value: Any) -> int:
    return max(0, min(MAX_ALPHA, int(value)))


def _hex_to_rgba(hex_str: str) -> RGBA8:
    """Convert ``#RRGGBB`` or ``#RRGGBBAA`` to an RGBA tuple."""
    hex_str = hex_str.strip().lstrip('#')
    if len(hex_str) not in (6, 8):
        raise ValueError(f"Invalid hex color: {hex_str}")
    try:
        r = int(hex_str[0:2], 16)
        g = int(hex_str[2:4], 16)
        b = int(hex_str[4:6], 16)
        a = int(hex_str[6:8], 16) if len(hex_str) == 8 else MAX_ALPHA
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_str}") from None
    return (r, g, b, a)


def _argb_to_rgba(value: int) -> RGBA8:
    value &= 0xFFFFFFFF
    return (
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )


def parse_color(color: Any) -> RGBA8:
    """
    Parse a color from any supported format to an RGBA tuple.

    Args:
        color: Tuple/list, hex string or packed ARGB integer

    Returns:
        RGBA tuple (0-255)

    Raises:
        ValueError: If the value cannot be interpreted as a color
    """
    if isinstance(color, bool):
        raise ValueError(f"Invalid color format: {color!r}")
    if isinstance(color, str):
        return _hex_to_rgba(color)
    if isinstance(color, int):
        return _argb_to_rgba(color)
    if isinstance(color, (list, tuple)):
        if len(color) == 3:
            r, g, b = color
            return (_clamp8(r), _clamp8(g), _clamp8(b), MAX_ALPHA)
        if len(color) == 4:
            r, g, b, a = color
            return (_clamp8(r), _clamp8(g), _clamp8(b), _clamp8(a))
    raise ValueError(f"Invalid color format: {color!r}")


def color_alpha(color: Any) -> int:
    """Alpha channel of a color. Never raises; unusable values yield 0."""
    try:
        return parse_color(color)[3]
    except (ValueError, TypeError):
        return 0


def color_to_hex(color: RGBA8) -> str:
    """Convert an RGBA tuple to ``#RRGGBBAA``."""
    return f"#{color[0]:02X}{color[1]:02X}{color[2]:02X}{color[3]:02X}"
