"""Mouth parts for the template faces: bar, omega, U-shaped and doggy mouths."""

from __future__ import annotations

import math

from avatarface.canvas import Canvas, Drawable
from avatarface.context import DrawContext, Expression
from avatarface.geometry import BoundingRect
from avatarface.palette import TFT_RED


def _div(a: float, b: float) -> int:
    """Integer division rounding toward zero."""
    return math.trunc(a / b)


class BaseMouth(Drawable):
    """Common state of the template mouths, refreshed from the context each frame."""

    def __init__(
        self,
        min_width: int = 80,
        max_width: int = 80,
        min_height: int = 15,
        max_height: int = 30,
    ) -> None:
        self.min_width = int(min_width)
        self.max_width = int(max_width)
        self.min_height = int(min_height)
        self.max_height = int(max_height)

        self.center_x = 0
        self.center_y = 0
        self.primary_color = 0
        self.secondary_color = 0
        self.background_color = 0
        self.open_ratio = 0.0
        self.breath = 0.0
        self.expression = Expression.NEUTRAL

    def update(self, rect: BoundingRect, ctx: DrawContext) -> None:
        """Cache the drawing parameters for this frame."""
        self.primary_color = ctx.primary_color()
        self.background_color = ctx.background_color()
        self.secondary_color = ctx.secondary_color()
        self.center_x = rect.center_x()
        self.center_y = rect.center_y()
        self.open_ratio = ctx.mouth_open_ratio
        self.breath = min(1.0, ctx.breath)
        self.expression = ctx.expression

    def _size(self) -> tuple[int, int]:
        """Width and height of the mouth for the current opening."""
        h = math.trunc(
            self.min_height + (self.max_height - self.min_height) * self.open_ratio
        )
        w = math.trunc(
            self.min_width + (self.max_width - self.min_width) * (1 - self.open_ratio)
        )
        return w, h

    def _draw_cheeks(self, canvas: Canvas) -> None:
        cx, cy = self.center_x, self.center_y
        canvas.fill_ellipse(cx - 132, cy - 23, 24, 10, self.secondary_color)
        canvas.fill_ellipse(cx + 132, cy - 23, 24, 10, self.secondary_color)


class RectMouth(BaseMouth):
    """A bar mouth centred on the rectangle's top-left point."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        w, h = self._size()
        top_left_x = rect.left - _div(w, 2)
        top_left_y = math.trunc(rect.top - _div(h, 2) + self.breath * 2)
        canvas.fill_rect(top_left_x, top_left_y, w, h, self.primary_color)


class OmegaMouth(BaseMouth):
    """An omega-shaped mouth with rosy cheeks."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        cx, cy = self.center_x, self.center_y
        max_w, max_h = self.max_width, self.max_height
        primary, background = self.primary_color, self.background_color
        base_y = cy - max_h // 2

        # inner mouth
        canvas.fill_ellipse(cx, base_y, max_w // 4, math.trunc(max_h * self.open_ratio), primary)

        # omega
        canvas.fill_ellipse(cx - 16, base_y, 20, 15, primary)
        canvas.fill_ellipse(cx + 16, base_y, 20, 15, primary)
        canvas.fill_ellipse(cx - 16, base_y, 18, 13, background)
        canvas.fill_ellipse(cx + 16, base_y, 18, 13, background)
        canvas.fill_rect(cx - max_w // 2, cy - max_h * 1.5, max_w, max_h, background)

        self._draw_cheeks(canvas)


class UShapeMouth(BaseMouth):
    """A U-shaped smile whose inside fills as the mouth opens."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        cx = self.center_x
        max_w, max_h = self.max_width, self.max_height
        primary, background = self.primary_color, self.background_color
        ellipse_center_y = self.center_y - max_h // 2
        thickness = 6

        canvas.fill_ellipse(cx, ellipse_center_y, max_w // 2, max_h, primary)
        canvas.fill_rect(
            cx - max_w // 2, ellipse_center_y - max_h, max_w + 1, max_h, background
        )
        canvas.fill_ellipse(
            cx,
            ellipse_center_y,
            max_w // 2 - thickness,
            (max_h - thickness) * (1.0 - self.open_ratio),
            background,
        )

        self._draw_cheeks(canvas)


class DoggyMouth(BaseMouth):
    """A dog's snout with a red tongue that shows when the mouth opens."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        cx, cy = self.center_x, self.center_y
        primary, background = self.primary_color, self.background_color
        w, h = self._size()

        if h > self.min_height:
            canvas.fill_ellipse(cx, cy, w // 2, h // 2, primary)
            canvas.fill_ellipse(cx, cy, w // 2 - 4, h // 2 - 4, TFT_RED)
            canvas.fill_rect(cx - w // 2, cy - h // 2, w, h // 2, background)
        canvas.fill_ellipse(cx, cy - 15, 10, 6, primary)
        canvas.fill_ellipse(cx - 28, cy, 30, 15, primary)
        canvas.fill_ellipse(cx + 28, cy, 30, 15, primary)
        canvas.fill_ellipse(cx - 29, cy - 4, 27, 15, background)
        canvas.fill_ellipse(cx + 29, cy - 4, 27, 15, background)