"""Geometry helpers for drawing rotated shapes."""

from __future__ import annotations

import math

from avatarface.canvas import Canvas


def rotate_point(x: float, y: float, angle: float) -> tuple[float, float]:
    """Rotate a point about the origin by ``angle`` radians.

    The y term is computed from the already-rotated x, which is how the
    faces are meant to look.
    """
    x = x * math.cos(angle) - y * math.sin(angle)
    y = x * math.sin(angle) + y * math.cos(angle)
    return x, y


def rotate_point_around(
    x: float, y: float, angle: float, cx: float, cy: float
) -> tuple[float, float]:
    """Rotate a point about (cx, cy) by ``angle`` radians."""
    rx, ry = rotate_point(x - cx, y - cy, angle)
    return rx + cx, ry + cy


def _fill_quad(canvas: Canvas, corners, color: int) -> None:
    (tlx, tly), (trx, try_), (blx, bly), (brx, bry) = corners
    canvas.fill_triangle(tlx, tly, trx, try_, brx, bry, color)
    canvas.fill_triangle(tlx, tly, brx, bry, blx, bly, color)


def fill_rotated_rect(
    canvas: Canvas, cx: int, cy: int, w: int, h: int, angle: float, color: int
) -> None:
    """Fill a w x h rectangle centred on (cx, cy), rotated by ``angle`` radians."""
    hw, hh = w // 2, h // 2
    corners = [
        (cx - hw, cy - hh),
        (cx + hw, cy - hh),
        (cx - hw, cy + hh),
        (cx + hw, cy + hh),
    ]
    rotated = [rotate_point_around(px, py, angle, cx, cy) for px, py in corners]
    _fill_quad(canvas, rotated, color)


def fill_rect_rotated_around(
    canvas: Canvas,
    top_left_x: float,
    top_left_y: float,
    bottom_right_x: float,
    bottom_right_y: float,
    angle: float,
    cx: float,
    cy: float,
    color: int,
) -> None:
    """Fill the given rectangle after rotating it about (cx, cy)."""
    corners = [
        (top_left_x, top_left_y),
        (bottom_right_x, top_left_y),
        (top_left_x, bottom_right_y),
        (bottom_right_x, bottom_right_y),
    ]
    rotated = [rotate_point_around(px, py, angle, cx, cy) for px, py in corners]
    _fill_quad(canvas, rotated, color)