"""A face: the parts, where they sit, and how a frame is composed."""

from __future__ import annotations

from avatarface.canvas import Canvas, Drawable
from avatarface.classic import Eye, Eyeblow, Mouth
from avatarface.context import DrawContext
from avatarface.geometry import BoundingRect
from avatarface.overlays import Balloon, BatteryIcon, Effect
from avatarface.palette import COLOR_BACKGROUND, COLOR_PRIMARY


class Face:
    """A set of face parts, each placed by its own rectangle.

    Parts or positions left out take the defaults of the classic face; the
    whole face occupies ``bounding_rect`` on the display.
    """

    def __init__(
        self,
        mouth: Drawable | None = None,
        mouth_pos: BoundingRect | None = None,
        eye_r: Drawable | None = None,
        eye_r_pos: BoundingRect | None = None,
        eye_l: Drawable | None = None,
        eye_l_pos: BoundingRect | None = None,
        eyeblow_r: Drawable | None = None,
        eyeblow_r_pos: BoundingRect | None = None,
        eyeblow_l: Drawable | None = None,
        eyeblow_l_pos: BoundingRect | None = None,
        bounding_rect: BoundingRect | None = None,
    ) -> None:
        self.mouth = mouth if mouth is not None else Mouth(50, 90, 4, 60)
        self.mouth_pos = mouth_pos if mouth_pos is not None else BoundingRect(148, 163)
        self.right_eye = eye_r if eye_r is not None else Eye(8, False)
        self.right_eye_pos = eye_r_pos if eye_r_pos is not None else BoundingRect(93, 90)
        self.left_eye = eye_l if eye_l is not None else Eye(8, True)
        self.left_eye_pos = eye_l_pos if eye_l_pos is not None else BoundingRect(96, 230)
        self.right_eyeblow = eyeblow_r if eyeblow_r is not None else Eyeblow(32, 0, False)
        self.right_eyeblow_pos = (
            eyeblow_r_pos if eyeblow_r_pos is not None else BoundingRect(67, 96)
        )
        self.left_eyeblow = eyeblow_l if eyeblow_l is not None else Eyeblow(32, 0, True)
        self.left_eyeblow_pos = (
            eyeblow_l_pos if eyeblow_l_pos is not None else BoundingRect(72, 230)
        )
        self.bounding_rect = (
            bounding_rect if bounding_rect is not None else BoundingRect(0, 0, 320, 240)
        )
        self.balloon = Balloon()
        self.effect = Effect()
        self.battery = BatteryIcon()

    def _parts(self) -> list[tuple[Drawable, BoundingRect]]:
        return [
            (self.mouth, self.mouth_pos),
            (self.right_eye, self.right_eye_pos),
            (self.left_eye, self.left_eye_pos),
            (self.right_eyeblow, self.right_eyeblow_pos),
            (self.left_eyeblow, self.left_eyeblow_pos),
        ]

    def compose(self, ctx: DrawContext) -> Canvas:
        """Draw every part and overlay onto a fresh, untransformed canvas."""
        palette = ctx.palette
        canvas = Canvas(
            self.bounding_rect.width,
            self.bounding_rect.height,
            ctx.color_depth,
            bitmap_foreground=palette.get(COLOR_PRIMARY),
            bitmap_background=palette.get(COLOR_BACKGROUND),
        )
        canvas.fill_sprite(0 if ctx.color_depth == 1 else palette.get(COLOR_BACKGROUND))

        breath = min(1.0, ctx.breath)
        for part, pos in self._parts():
            part.draw(canvas, pos.moved(pos.top + breath * 3, pos.left), ctx)

        for overlay in (self.balloon, self.effect, self.battery):
            overlay.draw(canvas, BoundingRect(), ctx)
        return canvas

    def draw(self, ctx: DrawContext) -> Canvas:
        """Compose a frame and apply the context's rotation and scale.

        The result is meant to be placed at the top-left of ``bounding_rect``.
        """
        return self.compose(ctx).rotate_zoom(ctx.rotation, ctx.scale, ctx.background_color())