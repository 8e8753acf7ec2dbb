"""Eyebrow parts for the template faces."""

from __future__ import annotations

import math

from avatarface.canvas import Canvas, Drawable
from avatarface.context import DrawContext, Expression
from avatarface.drawing import fill_rotated_rect
from avatarface.geometry import BoundingRect


class BaseEyebrow(Drawable):
    """Common state of the template eyebrows, refreshed each frame."""

    def __init__(self, width: int = 30, height: int = 20, is_left: bool = False) -> None:
        self.width = int(width)
        self.height = int(height)
        self.is_left = is_left

        self.primary_color = 0
        self.secondary_color = 0
        self.background_color = 0
        self.center_x = 0
        self.center_y = 0
        self.expression = Expression.NEUTRAL

    def update(self, rect: BoundingRect, ctx: DrawContext) -> None:
        """Cache the drawing parameters for this frame."""
        self.primary_color = ctx.primary_color()
        self.secondary_color = ctx.secondary_color()
        self.background_color = ctx.background_color()
        self.center_x = rect.center_x()
        self.center_y = rect.center_y()
        self.expression = ctx.expression


class EllipseEyebrow(BaseEyebrow):
    """A round dot eyebrow; a zero width or height hides it."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        if self.width == 0 or self.height == 0:
            return
        canvas.fill_ellipse(
            self.center_x, self.center_y, self.width // 2, self.height // 2, self.primary_color
        )


class BowEyebrow(BaseEyebrow):
    """A thin arched eyebrow drawn as part of a ring."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        thickness = 4
        angle0 = 180.0 + 35.0 if self.is_left else 180.0 + 45.0
        stroke_angle = 100.0
        radius = self.width // 2
        canvas.fill_arc(
            self.center_x,
            self.center_y,
            radius,
            radius - thickness,
            angle0,
            angle0 + stroke_angle,
            self.primary_color,
        )


class RectEyebrow(BaseEyebrow):
    """A bar eyebrow that tilts when angry or sad."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        if self.width == 0 or self.height == 0:
            return
        angle = 0.0
        if self.expression is Expression.ANGRY:
            angle = -math.pi / 6.0 if self.is_left else math.pi / 6.0
        elif self.expression is Expression.SAD:
            angle = math.pi / 6.0 if self.is_left else -math.pi / 6.0
        fill_rotated_rect(
            canvas,
            self.center_x,
            self.center_y,
            self.width,
            self.height,
            angle,
            self.primary_color,
        )