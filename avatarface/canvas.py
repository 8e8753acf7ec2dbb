"""An off-screen drawing surface and the interface of drawable face parts."""

from __future__ import annotations

import functools
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont

from avatarface.palette import TFT_BLACK, TFT_WHITE, color16_to_rgb

if TYPE_CHECKING:
    from avatarface.context import DrawContext
    from avatarface.geometry import BoundingRect

_SUPPORTED_DEPTHS = (1, 8, 16)


@functools.lru_cache(maxsize=1)
def _font():
    return ImageFont.load_default()


def _to_int(value: float) -> int:
    return math.trunc(value)


def _rgb332_to_rgb(value: int) -> tuple[int, int, int]:
    r3 = (value >> 5) & 0x07
    g3 = (value >> 2) & 0x07
    b2 = value & 0x03
    return (r3 * 255 // 7, g3 * 255 // 7, b2 * 85)


class Canvas:
    """A sprite holding raw pixel values at a colour depth of 1, 8 or 16 bits.

    Colours are given as RGB565 values; in 8-bit mode they are stored as
    RGB332, and in 1-bit mode any non-zero colour sets the bit. A 1-bit
    canvas is shown with its bitmap foreground and background colours.
    """

    def __init__(
        self,
        width: int,
        height: int,
        color_depth: int = 16,
        bitmap_foreground: int = TFT_WHITE,
        bitmap_background: int = TFT_BLACK,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive: {width}x{height}")
        if color_depth not in _SUPPORTED_DEPTHS:
            raise ValueError(f"unsupported colour depth: {color_depth}")
        self.width = width
        self.height = height
        self.color_depth = color_depth
        self.bitmap_foreground = bitmap_foreground
        self.bitmap_background = bitmap_background
        self._image = Image.new("I", (width, height), 0)
        self._draw = ImageDraw.Draw(self._image)

    def _native(self, color: int) -> int:
        color = int(color)
        if self.color_depth == 1:
            return 1 if color else 0
        color &= 0xFFFF
        if self.color_depth == 8:
            r5 = (color >> 11) & 0x1F
            g6 = (color >> 5) & 0x3F
            b5 = color & 0x1F
            return ((r5 >> 2) << 5) | ((g6 >> 3) << 2) | (b5 >> 3)
        return color

    def fill_sprite(self, color: int) -> None:
        self._draw.rectangle([0, 0, self.width - 1, self.height - 1], fill=self._native(color))

    def get_pixel(self, x: int, y: int) -> int:
        """Return the raw stored value at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self._image.getpixel((x, y))

    @staticmethod
    def _normalise(pos: int, length: int) -> tuple[int, int]:
        if length < 0:
            pos += length + 1
            length = -length
        return pos, length

    def fill_rect(self, x: float, y: float, w: float, h: float, color: int) -> None:
        x, w = self._normalise(_to_int(x), _to_int(w))
        y, h = self._normalise(_to_int(y), _to_int(h))
        if w == 0 or h == 0:
            return
        self._draw.rectangle([x, y, x + w - 1, y + h - 1], fill=self._native(color))

    def draw_rect(self, x: float, y: float, w: float, h: float, color: int) -> None:
        x, w = self._normalise(_to_int(x), _to_int(w))
        y, h = self._normalise(_to_int(y), _to_int(h))
        if w == 0 or h == 0:
            return
        self._draw.rectangle([x, y, x + w - 1, y + h - 1], outline=self._native(color))

    def fill_circle(self, x: float, y: float, r: float, color: int) -> None:
        self.fill_ellipse(x, y, r, r, color)

    def draw_circle(self, x: float, y: float, r: float, color: int) -> None:
        x, y, r = _to_int(x), _to_int(y), _to_int(r)
        if r < 0:
            return
        self._draw.ellipse([x - r, y - r, x + r, y + r], outline=self._native(color))

    def fill_ellipse(self, x: float, y: float, rx: float, ry: float, color: int) -> None:
        x, y, rx, ry = _to_int(x), _to_int(y), _to_int(rx), _to_int(ry)
        if rx < 0 or ry < 0:
            return
        self._draw.ellipse([x - rx, y - ry, x + rx, y + ry], fill=self._native(color))

    def fill_triangle(self, x0, y0, x1, y1, x2, y2, color: int) -> None:
        points = [(_to_int(x0), _to_int(y0)), (_to_int(x1), _to_int(y1)), (_to_int(x2), _to_int(y2))]
        native = self._native(color)
        self._draw.polygon(points, fill=native, outline=native)

    def fill_arc(self, x, y, r0, r1, angle0: float, angle1: float, color: int) -> None:
        """Fill the ring sector between radii r0 and r1.

        Angles are in degrees, measured clockwise from the positive x axis.
        """
        x, y = _to_int(x), _to_int(y)
        r_in, r_out = sorted((_to_int(r0), _to_int(r1)))
        if r_out < 0:
            return
        if angle1 < angle0:
            angle0, angle1 = angle1, angle0
        span = angle1 - angle0
        full = span >= 360.0
        native = self._native(color)
        pixels = self._image.load()
        inner, outer = r_in - 0.5, r_out + 0.5
        for py in range(max(0, y - r_out), min(self.height, y + r_out + 1)):
            dy = py - y
            for px in range(max(0, x - r_out), min(self.width, x + r_out + 1)):
                dx = px - x
                distance = math.hypot(dx, dy)
                if not inner <= distance <= outer:
                    continue
                if not full:
                    angle = math.degrees(math.atan2(dy, dx)) % 360.0
                    if (angle - angle0) % 360.0 > span:
                        continue
                pixels[px, py] = native

    def draw_line(self, x0, y0, x1, y1, color: int) -> None:
        points = [(_to_int(x0), _to_int(y0)), (_to_int(x1), _to_int(y1))]
        self._draw.line(points, fill=self._native(color), width=1)

    def text_width(self, text: str, size: int = 1) -> int:
        """Width in pixels of ``text`` drawn at the given magnification."""
        if size < 1:
            raise ValueError(f"text size must be at least 1: {size}")
        if not text:
            return 0
        left, _, right, _ = _font().getbbox(text)
        return (right - left) * size

    def draw_string(self, text: str, x: float, y: float, color: int, size: int = 1) -> int:
        """Draw ``text`` centred on (x, y); return the width drawn."""
        if size < 1:
            raise ValueError(f"text size must be at least 1: {size}")
        if not text:
            return 0
        font = _font()
        left, top, right, bottom = font.getbbox(text)
        w, h = right - left, bottom - top
        if w <= 0 or h <= 0:
            return 0
        mask = Image.new("L", (w, h), 0)
        ImageDraw.Draw(mask).text((-left, -top), text, fill=255, font=font)
        mask = mask.point(lambda p: 255 if p >= 128 else 0)
        if size != 1:
            mask = mask.resize((w * size, h * size), Image.Resampling.NEAREST)
        origin = (_to_int(x) - mask.width // 2, _to_int(y) - mask.height // 2)
        self._image.paste(self._native(color), origin, mask)
        return mask.width

    def _to_rgb(self, value: int) -> tuple[int, int, int]:
        if self.color_depth == 1:
            return color16_to_rgb(self.bitmap_foreground if value else self.bitmap_background)
        if self.color_depth == 8:
            return _rgb332_to_rgb(value)
        return color16_to_rgb(value)

    def to_image(self) -> Image.Image:
        """Render the canvas as an RGB image."""
        lookup = functools.lru_cache(maxsize=None)(self._to_rgb)
        image = Image.new("RGB", (self.width, self.height))
        image.putdata([lookup(v) for v in self._image.getdata()])
        return image

    def rotate_zoom(self, angle: float, scale: float, background: int) -> Canvas:
        """Return a copy rotated by ``angle`` degrees clockwise and scaled about
        the centre, with uncovered pixels set to ``background``."""
        if scale == 0:
            raise ValueError("scale must not be zero")
        theta = math.radians(angle)
        cos_t, sin_t = math.cos(theta) / scale, math.sin(theta) / scale
        cx, cy = self.width / 2, self.height / 2
        data = (
            cos_t, sin_t, cx - cos_t * cx - sin_t * cy,
            -sin_t, cos_t, cy + sin_t * cx - cos_t * cy,
        )
        result = Canvas(
            self.width,
            self.height,
            self.color_depth,
            self.bitmap_foreground,
            self.bitmap_background,
        )
        result._image = self._image.transform(
            (self.width, self.height),
            Image.Transform.AFFINE,
            data,
            resample=Image.Resampling.NEAREST,
            fillcolor=self._native(background),
        )
        result._draw = ImageDraw.Draw(result._image)
        return result


class Drawable(ABC):
    """A face part that draws itself onto a canvas."""

    @abstractmethod
    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        """Draw this part within ``rect`` using the state in ``ctx``."""