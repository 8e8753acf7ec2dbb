"""Ready-made faces built from the template and classic parts."""

from __future__ import annotations

import math
from dataclasses import dataclass

from avatarface.canvas import Canvas, Drawable
from avatarface.classic import Eye, Eyeblow, Mouth
from avatarface.context import DrawContext
from avatarface.eyebrows import BowEyebrow, EllipseEyebrow, RectEyebrow
from avatarface.eyes import DoggyEye, EllipseEye, GirlyEye, PinkDemonEye
from avatarface.face import Face
from avatarface.geometry import BoundingRect
from avatarface.mouths import DoggyMouth, OmegaMouth, RectMouth, UShapeMouth
from avatarface.palette import TFT_RED


class SimpleFace(Face):
    """Small round eyes and a bar mouth: "o_o"."""

    def __init__(self) -> None:
        super().__init__(
            RectMouth(50, 90, 4, 60), BoundingRect(148, 163),
            EllipseEye(16, 16, False), BoundingRect(93, 90),
            EllipseEye(16, 16, True), BoundingRect(96, 230),
            # eyebrows of zero size are hidden
            EllipseEyebrow(0, 0, False), BoundingRect(67, 96),
            EllipseEyebrow(0, 0, True), BoundingRect(72, 230),
        )


class OmegaFace(Face):
    """Tall oval eyes and an omega mouth with cheeks: "OωO"."""

    def __init__(self) -> None:
        super().__init__(
            OmegaMouth(), BoundingRect(225, 160),
            EllipseEye(is_left=False), BoundingRect(165, 84),
            EllipseEye(is_left=True), BoundingRect(165, 84 + 154),
            EllipseEyebrow(0, 0, False), BoundingRect(67, 96),
            EllipseEyebrow(0, 0, True), BoundingRect(72, 230),
        )


class GirlyFace(Face):
    """Large coloured eyes with lashes, dot eyebrows and a U-shaped smile."""

    def __init__(self) -> None:
        super().__init__(
            UShapeMouth(44, 44, 0, 16), BoundingRect(222, 160),
            GirlyEye(84, 84, False), BoundingRect(163, 64),
            GirlyEye(84, 84, True), BoundingRect(163, 256),
            EllipseEyebrow(36, 20, False), BoundingRect(97 + 10, 84 + 18),
            EllipseEyebrow(36, 20, True), BoundingRect(107, 200 + 18),
        )


class GirlyFace2(Face):
    """The girly face with arched eyebrows around the eyes."""

    def __init__(self) -> None:
        super().__init__(
            UShapeMouth(44, 44, 0, 16), BoundingRect(222, 160),
            GirlyEye(84, 84, False), BoundingRect(163, 64),
            GirlyEye(84, 84, True), BoundingRect(163, 256),
            BowEyebrow(160, 160, False), BoundingRect(163, 64),
            BowEyebrow(160, 160, True), BoundingRect(163, 256),
        )


class PinkDemonFace(Face):
    """Tall blue eyes close together and a wide U-shaped smile."""

    def __init__(self) -> None:
        super().__init__(
            UShapeMouth(64, 64, 0, 16), BoundingRect(214, 160),
            PinkDemonEye(52, 134, False), BoundingRect(134, 106),
            PinkDemonEye(52, 134, True), BoundingRect(134, 218),
            EllipseEyebrow(15, 0, False), BoundingRect(67, 96),
            EllipseEyebrow(15, 0, True), BoundingRect(72, 230),
        )


class DoggyFace(Face):
    """A dog with outlined eyes, bar eyebrows and a snout."""

    def __init__(self) -> None:
        super().__init__(
            DoggyMouth(50, 90, 4, 60), BoundingRect(168, 163),
            DoggyEye(is_left=False), BoundingRect(103, 80),
            DoggyEye(is_left=True), BoundingRect(106, 240),
            RectEyebrow(15, 2, False), BoundingRect(67, 96),
            RectEyebrow(15, 2, True), BoundingRect(72, 230),
        )


class DogEye(Drawable):
    """An outlined dog eye whose pupil follows the left gaze."""

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        cx = rect.center_x()
        cy = rect.center_y()
        gaze = ctx.left_gaze
        primary = ctx.primary_color()
        background = ctx.background_color()
        offset_x = math.trunc(gaze.horizontal * 8)
        offset_y = math.trunc(gaze.vertical * 5)

        if ctx.left_eye_open_ratio == 0:
            canvas.fill_rect(cx - 15, cy - 2, 30, 4, primary)
            return
        canvas.fill_ellipse(cx, cy, 30, 25, primary)
        canvas.fill_ellipse(cx, cy, 28, 23, background)
        canvas.fill_ellipse(cx + offset_x, cy + offset_y, 18, 18, primary)
        canvas.fill_ellipse(cx + offset_x - 3, cy + offset_y - 3, 3, 3, background)


@dataclass
class DogMouth(Drawable):
    """A dog's snout with a red tongue that shows when the mouth opens."""

    min_width: int = 50
    max_width: int = 90
    min_height: int = 4
    max_height: int = 60

    def draw(self, canvas: Canvas, rect: BoundingRect, ctx: DrawContext) -> None:
        primary = ctx.primary_color()
        background = ctx.background_color()
        cx = rect.center_x()
        cy = rect.center_y()
        open_ratio = ctx.mouth_open_ratio
        h = math.trunc(self.min_height + (self.max_height - self.min_height) * open_ratio)
        w = math.trunc(self.min_width + (self.max_width - self.min_width) * (1 - open_ratio))
        if h > self.min_height:
            canvas.fill_ellipse(cx, cy, w // 2, h // 2, primary)
            canvas.fill_ellipse(cx, cy, w // 2 - 4, h // 2 - 4, TFT_RED)
            canvas.fill_rect(cx - w // 2, cy - h // 2, w, h // 2, background)
        canvas.fill_ellipse(cx, cy - 15, 10, 6, primary)
        canvas.fill_ellipse(cx - 28, cy, 30, 15, primary)
        canvas.fill_ellipse(cx + 28, cy, 30, 15, primary)
        canvas.fill_ellipse(cx - 29, cy - 4, 27, 15, background)
        canvas.fill_ellipse(cx + 29, cy - 4, 27, 15, background)


class DogFace(Face):
    """A dog face made of the dog eye and dog mouth with bar eyebrows."""

    def __init__(self) -> None:
        super().__init__(
            DogMouth(), BoundingRect(168, 163),
            DogEye(), BoundingRect(103, 80),
            DogEye(), BoundingRect(106, 240),
            Eyeblow(15, 2, False), BoundingRect(67, 96),
            Eyeblow(15, 2, True), BoundingRect(72, 230),
        )


class OledFace(Face):
    """The classic face laid out for small monochrome displays."""

    def __init__(self) -> None:
        super().__init__(
            Mouth(50, 90, 4, 60), BoundingRect(168, 163),
            Eye(8, False), BoundingRect(103, 80),
            Eye(8, True), BoundingRect(106, 240),
            Eyeblow(15, 2, False), BoundingRect(67, 96),
            Eyeblow(15, 2, True), BoundingRect(72, 230),
        )