"""Decorations drawn over a face: speech balloon, mood marks, battery icon."""

from __future__ import annotations

import math

from avatarface.canvas import Canvas, Drawable
from avatarface.context import BatteryIconStatus, DrawContext, Expression
from avatarface.geometry import BoundingRect
from avatarface.palette import COLOR_BALLOON_BACKGROUND, COLOR_BALLOON_FOREGROUND

TEXT_HEIGHT = 8
TEXT_SIZE = 2
MIN_WIDTH = 40
BALLOON_X = 240
BALLOON_Y = 220

BATTERY_X = 285
BATTERY_Y = 5


class Balloon(Drawable):
    """A speech balloon in the lower right corner holding the speech text."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        text = ctx.speech_text
        if not text:
            return
        foreground = ctx.palette.get(COLOR_BALLOON_FOREGROUND)
        background = ctx.palette.get(COLOR_BALLOON_BACKGROUND)
        text_width = canvas.text_width(text, TEXT_SIZE)
        text_height = TEXT_HEIGHT * TEXT_SIZE
        cx, cy = BALLOON_X, BALLOON_Y
        canvas.fill_ellipse(cx - 20, cy, text_width + 2, text_height * 2 + 2, foreground)
        canvas.fill_triangle(cx - 62, cy - 42, cx - 8, cy - 10, cx - 41, cy - 8, foreground)
        canvas.fill_ellipse(cx - 20, cy, text_width, text_height * 2, background)
        canvas.fill_triangle(cx - 60, cy - 40, cx - 10, cy - 10, cx - 40, cy - 10, background)
        canvas.draw_string(text, cx - text_width // 6 - 15, cy, foreground, TEXT_SIZE)


class Effect(Drawable):
    """A mark next to the face that shows the expression, pulsing with breath."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        primary = ctx.primary_color()
        background = ctx.background_color()
        offset = ctx.breath
        exp = ctx.expression
        if exp is Expression.DOUBT:
            self._draw_sweat_mark(canvas, 290, 110, 7, primary, -offset)
        elif exp is Expression.ANGRY:
            self._draw_anger_mark(canvas, 280, 50, 12, primary, background, offset)
        elif exp is Expression.HAPPY:
            self._draw_heart_mark(canvas, 280, 50, 12, primary, offset)
        elif exp is Expression.SAD:
            self._draw_chill_mark(canvas, 270, 0, 30, primary, offset)
        elif exp is Expression.SLEEPY:
            self._draw_bubble_mark(canvas, 290, 40, 10, primary, offset)
            self._draw_bubble_mark(canvas, 270, 52, 6, primary, -offset)

    @staticmethod
    def _draw_bubble_mark(canvas: Canvas, x: int, y: int, r: int, color: int, offset: float = 0.0) -> None:
        r = int(r + math.floor(r * 0.2 * offset))
        canvas.draw_circle(x, y, r, color)
        canvas.draw_circle(x - r // 4, y - r // 4, r // 4, color)

    @staticmethod
    def _draw_sweat_mark(canvas: Canvas, x: int, y: int, r: int, color: int, offset: float = 0.0) -> None:
        y = int(y + math.floor(5 * offset))
        r = int(r + math.floor(r * 0.2 * offset))
        canvas.fill_circle(x, y, r, color)
        a = math.trunc(math.sqrt(3) * r / 2)
        canvas.fill_triangle(x, y - r * 2, x - a, y - r * 0.5, x + a, y - r * 0.5, color)

    @staticmethod
    def _draw_chill_mark(canvas: Canvas, x: int, y: int, r: int, color: int, offset: float = 0.0) -> None:
        h = math.trunc(r + abs(r * 0.2 * offset))
        canvas.fill_rect(x - r // 2, y, 3, h // 2, color)
        canvas.fill_rect(x, y, 3, h * 3 // 4, color)
        canvas.fill_rect(x + r // 2, y, 3, h, color)

    @staticmethod
    def _draw_anger_mark(
        canvas: Canvas, x: int, y: int, r: int, color: int, background: int, offset: float = 0.0
    ) -> None:
        r = math.trunc(r + abs(r * 0.4 * offset))
        third = r // 3
        bar = (r * 2) // 3
        canvas.fill_rect(x - third, y - r, bar, r * 2, color)
        canvas.fill_rect(x - r, y - third, r * 2, bar, color)
        canvas.fill_rect(x - third + 2, y - r, bar - 4, r * 2, background)
        canvas.fill_rect(x - r, y - third + 2, r * 2, bar - 4, background)

    @staticmethod
    def _draw_heart_mark(canvas: Canvas, x: int, y: int, r: int, color: int, offset: float = 0.0) -> None:
        r = int(r + math.floor(r * 0.4 * offset))
        half = r // 2
        canvas.fill_circle(x - half, y, half, color)
        canvas.fill_circle(x + half, y, half, color)
        a = math.sqrt(2) * r / 4.0
        canvas.fill_triangle(x, y, x - half - a, y + a, x + half + a, y + a, color)
        canvas.fill_triangle(x, y + half + 2 * a, x - half - a, y + a, x + half + a, y + a, color)


class BatteryIcon(Drawable):
    """A battery gauge in the top right corner, with a bolt while charging."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        status = ctx.battery_icon_status
        if status is BatteryIconStatus.INVISIBLE:
            return
        self._draw_icon(
            canvas,
            BATTERY_X,
            BATTERY_Y,
            ctx.primary_color(),
            ctx.background_color(),
            status,
            ctx.battery_level,
        )

    @staticmethod
    def _draw_icon(
        canvas: Canvas,
        x: int,
        y: int,
        fg: int,
        bg: int,
        status: BatteryIconStatus,
        level: int,
    ) -> None:
        canvas.draw_rect(x, y + 5, 5, 5, fg)
        canvas.draw_rect(x + 5, y, 30, 15, fg)
        bar_width = math.trunc(30 * (level / 100.0))
        canvas.fill_rect(x + 5 + 30 - bar_width, y, bar_width, 15, fg)
        if status is BatteryIconStatus.CHARGING:
            canvas.fill_triangle(x + 20, y, x + 15, y + 8, x + 20, y + 8, bg)
            canvas.fill_triangle(x + 18, y + 7, x + 18, y + 15, x + 23, y + 7, bg)
            canvas.draw_line(x + 20, y, x + 15, y + 8, fg)
            canvas.draw_line(x + 20, y, x + 20, y + 7, fg)
            canvas.draw_line(x + 18, y + 15, x + 23, y + 7, fg)
            canvas.draw_line(x + 18, y + 8, x + 18, y + 15, fg)