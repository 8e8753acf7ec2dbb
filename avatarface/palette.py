"""Named RGB565 colour palettes and colour conversion helpers."""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

COLOR_PRIMARY = "primary"
COLOR_SECONDARY = "secondary"
COLOR_BACKGROUND = "background"
COLOR_BALLOON_FOREGROUND = "balloon_f"
COLOR_BALLOON_BACKGROUND = "balloon_b"

TFT_BLACK = 0x0000
TFT_WHITE = 0xFFFF
TFT_RED = 0xF800
TFT_BLUE = 0x001F
TFT_YELLOW = 0xFFE0
TFT_DARKCYAN = 0x03EF
TFT_PINK = 0xFE19

_DEFAULT_COLORS = {
    COLOR_PRIMARY: TFT_WHITE,
    COLOR_SECONDARY: TFT_BLACK,
    COLOR_BACKGROUND: TFT_BLACK,
    COLOR_BALLOON_FOREGROUND: TFT_BLACK,
    COLOR_BALLOON_BACKGROUND: TFT_WHITE,
}


def color565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue components into an RGB565 value."""
    for component in (r, g, b):
        if not 0 <= component <= 0xFF:
            raise ValueError(f"colour component out of range: {component}")
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)


def color24_to_16(rgb: int) -> int:
    """Convert a 0xRRGGBB colour to RGB565."""
    if not 0 <= rgb <= 0xFFFFFF:
        raise ValueError(f"24-bit colour out of range: {rgb:#x}")
    return color565((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


def color16_to_rgb(color: int) -> tuple[int, int, int]:
    """Expand an RGB565 value to 8-bit (r, g, b) components."""
    color &= 0xFFFF
    r5 = (color >> 11) & 0x1F
    g6 = (color >> 5) & 0x3F
    b5 = color & 0x1F
    return ((r5 << 3) | (r5 >> 2), (g6 << 2) | (g6 >> 4), (b5 << 3) | (b5 >> 2))


class ColorPalette:
    """A mapping of colour roles to RGB565 values used to draw a face."""

    def __init__(self, colors: Mapping[str, int] | None = None) -> None:
        self._colors: dict[str, int] = dict(_DEFAULT_COLORS)
        for key, value in (colors or {}).items():
            self.set(key, value)

    def get(self, key: str) -> int:
        """Return the colour for ``key``; unknown keys give black."""
        try:
            return self._colors[key]
        except KeyError:
            logger.warning("no color with the key %s", key)
            return TFT_BLACK

    def set(self, key: str, value: int) -> None:
        self._colors[key] = int(value) & 0xFFFF

    def copy(self) -> ColorPalette:
        return ColorPalette(self._colors)

    def __contains__(self, key: object) -> bool:
        return key in self._colors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorPalette):
            return NotImplemented
        return self._colors == other._colors

    def __repr__(self) -> str:
        return f"ColorPalette({self._colors!r})"