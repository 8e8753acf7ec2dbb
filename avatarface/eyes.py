"""Eye parts for the template faces: ellipse, girly, pink demon and doggy eyes."""

from __future__ import annotations

import math

from avatarface.canvas import Canvas, Drawable
from avatarface.context import DrawContext, Expression, Gaze
from avatarface.drawing import fill_rect_rotated_around, rotate_point_around
from avatarface.geometry import BoundingRect
from avatarface.palette import TFT_WHITE, color565

_GIRLY_ACCENT = color565(0x01, 0x9E, 0x73)
_PINK_DEMON_ACCENT = color565(0x00, 0xA1, 0xFF)


class BaseEye(Drawable):
    """Common state of the template eyes, refreshed from the context each frame."""

    def __init__(self, width: int = 36, height: int = 70, is_left: bool = False) -> None:
        self.width = int(width)
        self.height = int(height)
        self.is_left = is_left

        self.center_x = 0
        self.center_y = 0
        self.gaze = Gaze()
        self.primary_color = 0
        self.secondary_color = 0
        self.background_color = 0
        self.shifted_x = 0
        self.shifted_y = 0
        self.open_ratio = 0.0
        self.expression = Expression.NEUTRAL

    def update(self, rect: BoundingRect, ctx: DrawContext) -> None:
        """Cache the drawing parameters for this frame."""
        self.center_x = rect.center_x()
        self.center_y = rect.center_y()
        self.gaze = ctx.left_gaze if self.is_left else ctx.right_gaze
        self.primary_color = ctx.primary_color()
        self.secondary_color = ctx.secondary_color()
        self.background_color = ctx.background_color()
        self.shifted_x = math.trunc(self.center_x + self.gaze.horizontal * 8)
        self.shifted_y = math.trunc(self.center_y + self.gaze.vertical * 5)
        self.open_ratio = ctx.left_eye_open_ratio if self.is_left else ctx.right_eye_open_ratio
        self.expression = ctx.expression

    def _eyelid_y(self) -> float:
        return (
            self.shifted_y
            - 0.8 * self.height / 2
            + (1.0 - self.open_ratio) * self.height * 0.6
        )

    def _tilt(self) -> float:
        ref_tilt = self.open_ratio * math.pi / 6.0
        if self.expression is Expression.ANGRY:
            return -ref_tilt if self.is_left else ref_tilt
        if self.expression is Expression.SAD:
            return ref_tilt if self.is_left else -ref_tilt
        return 0.0

    def _draw_mask_and_lid(
        self, canvas: Canvas, eyelid_y: float, tilt: float, bias: float
    ) -> None:
        half_w = self.width // 2
        pivot_y = math.trunc(eyelid_y)
        fill_rect_rotated_around(
            canvas,
            self.shifted_x - half_w,
            self.shifted_y - 0.75 * self.height,
            self.shifted_x + half_w,
            eyelid_y,
            tilt,
            self.shifted_x,
            pivot_y,
            self.background_color,
        )
        fill_rect_rotated_around(
            canvas,
            self.shifted_x - half_w + bias,
            eyelid_y - 4,
            self.shifted_x + half_w + bias,
            eyelid_y,
            tilt,
            self.shifted_x,
            pivot_y,
            self.primary_color,
        )

    def _overwrite_open_ratio(self) -> None:
        if self.expression is Expression.DOUBT:
            self.open_ratio = 0.6
        elif self.expression is Expression.SLEEPY:
            self.open_ratio = 0.0


class EllipseEye(BaseEye):
    """A solid elliptical eye, masked to show the expression."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        sx, sy = self.shifted_x, self.shifted_y
        w, h = self.width, self.height
        primary, background = self.primary_color, self.background_color
        exp = self.expression

        if self.open_ratio == 0 or exp is Expression.SLEEPY:
            # a closed eye sits below the centre of its box
            canvas.fill_rect(sx - w // 2, sy - 2 + h // 4, w, 4, primary)
            return
        if exp is Expression.HAPPY:
            wink_base_y = sy + h // 4
            thickness = 4
            canvas.fill_ellipse(sx, wink_base_y, w // 2, h // 4 + thickness, primary)
            canvas.fill_ellipse(
                sx, wink_base_y + thickness, w // 2 - thickness, h // 4 + thickness, background
            )
            canvas.fill_rect(
                sx - w // 2, wink_base_y + thickness // 2, w + 1, h // 4 + 1, background
            )
            return

        canvas.fill_ellipse(sx, sy, w // 2, h // 2, primary)

        x0 = sx - w // 2
        y0 = sy - h // 2
        x1 = sx + w // 2
        if exp is Expression.ANGRY:
            x2 = x0 if self.is_left else x1
            canvas.fill_triangle(x0, y0, x1, y0, x2, sy - h // 4, background)
        elif exp is Expression.SAD:
            x2 = x1 if self.is_left else x0
            canvas.fill_triangle(x0, y0, x1, y0, x2, sy - h // 4, background)
        elif exp is Expression.DOUBT:
            y1 = sy - h // 4
            canvas.fill_rect(x0, y0, x1 - x0, y1 - y0, background)


class GirlyEye(BaseEye):
    """A large coloured eye with a highlight, an eyelid and an eyelash."""

    def draw_eyelid(self, canvas: Canvas) -> None:
        eyelid_y = self._eyelid_y()
        sx = self.shifted_x
        side = 1 if self.is_left else -1
        lash = [
            (sx + side * 22, eyelid_y - 27),
            (sx + side * 26, eyelid_y),
            (sx - side * 10, eyelid_y),
        ]
        tilt = self._tilt()
        bias = 0.2 * self.width * tilt / (math.pi / 6.0)

        if self.open_ratio < 0.99 or abs(tilt) > 0.1:
            self._draw_mask_and_lid(canvas, eyelid_y, tilt, bias)
            lash = [(x + bias, y) for x, y in lash]

        (x0, y0), (x1, y1), (x2, y2) = (
            rotate_point_around(x, y, tilt, sx, eyelid_y) for x, y in lash
        )
        canvas.fill_triangle(x0, y0, x1, y1, x2, y2, self.primary_color)

    def overwrite_open_ratio(self) -> None:
        """Force the openness that the doubt and sleepy expressions imply."""
        self._overwrite_open_ratio()

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        self.overwrite_open_ratio()
        sx, sy = self.shifted_x, self.shifted_y
        w, h = self.width, self.height
        primary, background = self.primary_color, self.background_color
        thickness = 4

        if self.expression is Expression.HAPPY:
            wink_base_y = sy + (1.0 - self.open_ratio) * h / 4
            canvas.fill_ellipse(sx, wink_base_y, w // 2, h // 4 + thickness, primary)
            canvas.fill_ellipse(
                sx, wink_base_y + thickness, w // 2 - thickness, h // 4 + thickness, background
            )
            canvas.fill_rect(sx - w // 2, wink_base_y + thickness // 2, w, h // 4, background)
            return

        if self.open_ratio > 0.1:
            canvas.fill_ellipse(sx, sy, w // 2, h // 2, primary)
            canvas.fill_ellipse(sx, sy, w // 2 - thickness, h // 2 - thickness, _GIRLY_ACCENT)
            canvas.fill_arc(sx, sy, w // 2, 0, 180.0, 360.0, primary)
            canvas.fill_ellipse(sx, sy, w // 4, h // 4, primary)
            canvas.fill_ellipse(sx - w // 6, sy - h // 6, w // 8, h // 8, TFT_WHITE)
        self.draw_eyelid(canvas)


class PinkDemonEye(BaseEye):
    """A tall blue eye with a large highlight and a tilting eyelid."""

    def draw_eyelid(self, canvas: Canvas) -> None:
        eyelid_y = self._eyelid_y()
        tilt = self._tilt()
        if self.open_ratio < 0.99 or abs(tilt) > 0.1:
            self._draw_mask_and_lid(canvas, eyelid_y, tilt, 0.0)

    def overwrite_open_ratio(self) -> None:
        """Force the openness that the doubt and sleepy expressions imply."""
        self._overwrite_open_ratio()

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        self.overwrite_open_ratio()
        sx, sy = self.shifted_x, self.shifted_y
        w, h = self.width, self.height
        primary = self.primary_color
        thickness = 8

        if self.open_ratio > 0.1:
            canvas.fill_ellipse(sx, sy, w // 2, h // 2, primary)
            canvas.fill_ellipse(
                sx, sy, w // 2 - thickness, h // 2 - thickness, _PINK_DEMON_ACCENT
            )
            w1 = math.trunc(w * 0.92)
            h1 = math.trunc(h * 0.69)
            y1 = sy - h // 2 + h1 // 2
            canvas.fill_ellipse(sx, y1, w1 // 2, h1 // 2, primary)
            w2 = math.trunc(w * 0.577)
            h2 = math.trunc(h * 0.4)
            y2 = sy - h // 2 + thickness + h2 // 2
            canvas.fill_ellipse(sx, y2, w2 // 2, h2 // 2, TFT_WHITE)
        self.draw_eyelid(canvas)


class DoggyEye(BaseEye):
    """A round outlined eye with a pupil that follows the gaze."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        self.update(rect, ctx)
        cx, cy = self.center_x, self.center_y
        primary, background = self.primary_color, self.background_color

        if self.open_ratio == 0:
            canvas.fill_rect(cx - 15, cy - 2, 30, 4, primary)
            return
        canvas.fill_ellipse(cx, cy, 30, 25, primary)
        canvas.fill_ellipse(cx, cy, 28, 23, background)
        canvas.fill_ellipse(self.shifted_x, self.shifted_y, 18, 18, primary)
        canvas.fill_ellipse(self.shifted_x - 3, self.shifted_y - 3, 3, 3, background)