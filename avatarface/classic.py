"""The original face parts: round eyes, bar eyebrows and a bar mouth."""

from __future__ import annotations

import math
from dataclasses import dataclass

from avatarface.canvas import Canvas, Drawable
from avatarface.context import DrawContext, Expression
from avatarface.geometry import BoundingRect


def _div(a: float, b: float) -> int:
    """Integer division rounding toward zero."""
    return math.trunc(a / b)


@dataclass
class Eye(Drawable):
    """A filled round eye of radius ``r`` that follows the gaze."""

    r: int
    is_left: bool

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        exp = ctx.expression
        x = rect.center_x()
        y = rect.center_y()
        gaze = ctx.left_gaze if self.is_left else ctx.right_gaze
        open_ratio = ctx.left_eye_open_ratio if self.is_left else ctx.right_eye_open_ratio
        offset_x = math.trunc(gaze.horizontal * 3)
        offset_y = math.trunc(gaze.vertical * 3)
        primary = ctx.primary_color()
        background = ctx.background_color()
        r = self.r
        cx, cy = x + offset_x, y + offset_y

        if open_ratio <= 0:
            canvas.fill_rect(x - r + offset_x, y - 2 + offset_y, r * 2, 4, primary)
            return

        canvas.fill_circle(cx, cy, r, primary)
        if exp in (Expression.ANGRY, Expression.SAD):
            x0 = cx - r
            y0 = cy - r
            x1 = x0 + r * 2
            x2 = x0 if self.is_left != (exp is Expression.SAD) else x1
            canvas.fill_triangle(x0, y0, x1, y0, x2, y0 + r, background)
        elif exp in (Expression.HAPPY, Expression.SLEEPY):
            x0 = cx - r
            y0 = cy - r
            if exp is Expression.HAPPY:
                y0 += r
                canvas.fill_circle(cx, cy, r / 1.5, background)
            canvas.fill_rect(x0, y0, r * 2 + 4, r + 2, background)


@dataclass
class Eyeblow(Drawable):
    """A straight eyebrow centred on the rectangle's top-left point.

    A zero width or height hides the eyebrow.
    """

    width: int
    height: int
    is_left: bool

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        exp = ctx.expression
        x = rect.left
        y = rect.top
        primary = ctx.primary_color()
        if self.width == 0 or self.height == 0:
            return
        half_w = self.width // 2
        half_h = self.height // 2
        if exp in (Expression.ANGRY, Expression.SAD):
            a = -1 if self.is_left ^ (exp is Expression.SAD) else 1
            dx = a * 3
            dy = a * 5
            x1 = x - half_w
            x2 = x1 - dx
            x4 = x + half_w
            x3 = x4 + dx
            y1 = y - half_h - dy
            y2 = y + half_h - dy
            y3 = y - half_h + dy
            y4 = y + half_h + dy
            canvas.fill_triangle(x1, y1, x2, y2, x3, y3, primary)
            canvas.fill_triangle(x2, y2, x3, y3, x4, y4, primary)
        else:
            x1 = x - half_w
            y1 = y - half_h
            if exp is Expression.HAPPY:
                y1 -= 5
            canvas.fill_rect(x1, y1, self.width, self.height, primary)


@dataclass
class Mouth(Drawable):
    """A bar mouth that grows taller and narrower as it opens."""

    min_width: int
    max_width: int
    min_height: int
    max_height: int

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        primary = ctx.primary_color()
        breath = min(1.0, ctx.breath)
        open_ratio = ctx.mouth_open_ratio
        h = math.trunc(self.min_height + (self.max_height - self.min_height) * open_ratio)
        w = math.trunc(self.min_width + (self.max_width - self.min_width) * (1 - open_ratio))
        x = rect.left - _div(w, 2)
        y = math.trunc(rect.top - _div(h, 2) + breath * 2)
        canvas.fill_rect(x, y, w, h, primary)