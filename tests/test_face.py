import pytest

from avatarface.classic import Eye, Eyeblow, Mouth
from avatarface.context import DrawContext, Expression
from avatarface.face import Face
from avatarface.geometry import BoundingRect
from avatarface.mouths import RectMouth
from avatarface.palette import (
    COLOR_BACKGROUND,
    COLOR_PRIMARY,
    TFT_BLUE,
    TFT_WHITE,
    ColorPalette,
)

PRIMARY = TFT_WHITE
BACKGROUND = TFT_BLUE


def _ctx(**kwargs):
    kwargs.setdefault("color_depth", 16)
    kwargs.setdefault(
        "palette", ColorPalette({COLOR_PRIMARY: PRIMARY, COLOR_BACKGROUND: BACKGROUND})
    )
    return DrawContext(**kwargs)


def _pixels(canvas):
    return [
        canvas.get_pixel(x, y) for y in range(canvas.height) for x in range(canvas.width)
    ]


def test_default_face_parts():
    face = Face()
    assert isinstance(face.mouth, Mouth)
    assert isinstance(face.right_eye, Eye) and not face.right_eye.is_left
    assert isinstance(face.left_eye, Eye) and face.left_eye.is_left
    assert isinstance(face.right_eyeblow, Eyeblow)
    assert face.bounding_rect == BoundingRect(0, 0, 320, 240)
    assert face.mouth_pos == BoundingRect(148, 163)


def test_missing_positions_take_defaults():
    mouth = RectMouth()
    face = Face(mouth=mouth)
    assert face.mouth is mouth
    assert face.mouth_pos == Face().mouth_pos
    assert face.left_eye_pos == Face().left_eye_pos


def test_compose_canvas_size_and_background():
    face = Face()
    canvas = face.compose(_ctx())
    assert (canvas.width, canvas.height) == (320, 240)
    assert canvas.color_depth == 16
    assert canvas.get_pixel(0, 0) == BACKGROUND


def test_compose_draws_mouth():
    face = Face()
    canvas = face.compose(_ctx())
    assert canvas.get_pixel(face.mouth_pos.left, face.mouth_pos.top) == PRIMARY


def test_compose_does_not_move_part_positions():
    face = Face()
    before = [face.mouth_pos, face.right_eye_pos, face.left_eye_pos]
    snapshot = [BoundingRect(r.top, r.left, r.width, r.height) for r in before]
    face.compose(_ctx(breath=1.0))
    assert [face.mouth_pos, face.right_eye_pos, face.left_eye_pos] == snapshot


def test_breath_shifts_parts():
    face = Face()
    still = _pixels(face.compose(_ctx(breath=0.0)))
    breathing = _pixels(face.compose(_ctx(breath=1.0)))
    assert still != breathing


def test_one_bit_compose_uses_palette_for_bitmap():
    face = Face()
    canvas = face.compose(_ctx(color_depth=1))
    assert canvas.color_depth == 1
    assert canvas.get_pixel(0, 0) == 0
    assert canvas.bitmap_foreground == PRIMARY
    assert canvas.bitmap_background == BACKGROUND


def test_effect_drawn_for_expression():
    face = Face()
    neutral = _pixels(face.compose(_ctx(expression=Expression.NEUTRAL)))
    happy = face.compose(_ctx(expression=Expression.HAPPY))
    assert happy.get_pixel(280, 50) == PRIMARY
    assert _pixels(happy) != neutral


def test_speech_text_draws_balloon():
    face = Face()
    silent = _pixels(face.compose(_ctx()))
    speaking = _pixels(face.compose(_ctx(speech_text="hi")))
    assert silent != speaking


def test_draw_identity_transform_matches_compose():
    face = Face()
    ctx = _ctx(rotation=0.0, scale=1.0)
    assert _pixels(face.draw(ctx)) == _pixels(face.compose(ctx))


def test_draw_scaled_down_leaves_background_border():
    face = Face()
    frame = face.draw(_ctx(scale=0.5))
    assert frame.get_pixel(0, 0) == BACKGROUND
    assert (frame.width, frame.height) == (face.bounding_rect.width, face.bounding_rect.height)


def test_draw_zero_scale_raises():
    with pytest.raises(ValueError):
        Face().draw(_ctx(scale=0.0))