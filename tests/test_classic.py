import pytest

from avatarface.canvas import Canvas
from avatarface.classic import Eye, Eyeblow, Mouth
from avatarface.context import DrawContext, Expression, Gaze
from avatarface.geometry import BoundingRect
from avatarface.palette import TFT_BLACK, TFT_WHITE


def _ctx(**kwargs):
    kwargs.setdefault("color_depth", 16)
    return DrawContext(**kwargs)


def _bbox(canvas):
    return canvas.to_image().getbbox()


def _top_in_column(canvas, x):
    for y in range(canvas.height):
        if canvas.get_pixel(x, y) != TFT_BLACK:
            return y
    return None


# --- Mouth ---------------------------------------------------------------

def test_closed_mouth_has_max_width_and_min_height():
    canvas = Canvas(320, 240)
    rect = BoundingRect(148, 163)
    Mouth(50, 90, 4, 60).draw(canvas, rect, _ctx(mouth_open_ratio=0.0))
    left, top, right, bottom = _bbox(canvas)
    assert right - left == 90
    assert bottom - top == 4
    assert (left + right) // 2 == rect.left


def test_open_mouth_has_min_width_and_max_height():
    canvas = Canvas(320, 240)
    Mouth(50, 90, 4, 60).draw(canvas, BoundingRect(148, 163), _ctx(mouth_open_ratio=1.0))
    left, top, right, bottom = _bbox(canvas)
    assert right - left == 50
    assert bottom - top == 60


def test_mouth_breath_is_clamped_to_one():
    rest = Canvas(320, 240)
    Mouth(50, 90, 4, 60).draw(rest, BoundingRect(148, 163), _ctx(breath=0.0))
    full = Canvas(320, 240)
    Mouth(50, 90, 4, 60).draw(full, BoundingRect(148, 163), _ctx(breath=1.0))
    over = Canvas(320, 240)
    Mouth(50, 90, 4, 60).draw(over, BoundingRect(148, 163), _ctx(breath=5.0))
    rest_box = _bbox(rest)
    full_box = _bbox(full)
    over_box = _bbox(over)
    assert full_box == over_box
    assert full_box[1] > rest_box[1]


def test_mouth_in_one_bit_mode_sets_bit():
    canvas = Canvas(320, 240, color_depth=1)
    Mouth(50, 90, 4, 60).draw(canvas, BoundingRect(148, 163), DrawContext(color_depth=1))
    assert canvas.get_pixel(163, 147) == 1
    assert canvas.get_pixel(10, 10) == 0


# --- Eye -----------------------------------------------------------------

def test_open_eye_is_circle_of_radius():
    canvas = Canvas(100, 100)
    Eye(20, False).draw(canvas, BoundingRect(50, 50), _ctx())
    left, top, right, bottom = _bbox(canvas)
    assert right - left == 2 * 20 + 1
    assert bottom - top == 2 * 20 + 1
    assert canvas.get_pixel(50, 50) == TFT_WHITE


def test_closed_eye_is_thin_bar():
    canvas = Canvas(100, 100)
    Eye(20, True).draw(canvas, BoundingRect(50, 50), _ctx(left_eye_open_ratio=0.0))
    left, top, right, bottom = _bbox(canvas)
    assert right - left == 2 * 20
    assert bottom - top == 4


def test_eye_follows_horizontal_gaze():
    still = Canvas(100, 100)
    Eye(20, False).draw(still, BoundingRect(50, 50), _ctx())
    moved = Canvas(100, 100)
    Eye(20, False).draw(moved, BoundingRect(50, 50), _ctx(right_gaze=Gaze(0.0, 1.0)))
    assert _bbox(moved)[0] > _bbox(still)[0]
    assert _bbox(moved)[1] == _bbox(still)[1]


def test_left_eye_uses_left_gaze():
    still = Canvas(100, 100)
    Eye(20, True).draw(still, BoundingRect(50, 50), _ctx())
    moved = Canvas(100, 100)
    Eye(20, True).draw(moved, BoundingRect(50, 50), _ctx(right_gaze=Gaze(1.0, 1.0)))
    assert _bbox(moved) == _bbox(still)


@pytest.mark.parametrize(
    "is_left, expression, erased, kept",
    [
        (False, Expression.ANGRY, (62, 36), (38, 36)),
        (True, Expression.ANGRY, (38, 36), (62, 36)),
        (False, Expression.SAD, (38, 36), (62, 36)),
        (True, Expression.SAD, (62, 36), (38, 36)),
    ],
)
def test_angry_and_sad_eyes_cut_opposite_corners(is_left, expression, erased, kept):
    canvas = Canvas(100, 100)
    Eye(20, is_left).draw(canvas, BoundingRect(50, 50), _ctx(expression=expression))
    assert canvas.get_pixel(*erased) == TFT_BLACK
    assert canvas.get_pixel(*kept) == TFT_WHITE


def test_happy_eye_keeps_upper_arc_only():
    canvas = Canvas(100, 100)
    Eye(20, False).draw(canvas, BoundingRect(50, 50), _ctx(expression=Expression.HAPPY))
    assert canvas.get_pixel(50, 34) == TFT_WHITE
    assert canvas.get_pixel(50, 60) == TFT_BLACK


def test_sleepy_eye_keeps_lower_half_only():
    canvas = Canvas(100, 100)
    Eye(20, False).draw(canvas, BoundingRect(50, 50), _ctx(expression=Expression.SLEEPY))
    assert canvas.get_pixel(50, 40) == TFT_BLACK
    assert canvas.get_pixel(50, 60) == TFT_WHITE


# --- Eyeblow -------------------------------------------------------------

@pytest.mark.parametrize("width, height", [(0, 4), (20, 0)])
def test_eyeblow_with_zero_size_draws_nothing(width, height):
    canvas = Canvas(100, 100)
    Eyeblow(width, height, False).draw(canvas, BoundingRect(50, 50), _ctx())
    assert _bbox(canvas) is None


def test_neutral_eyeblow_is_bar_of_its_size():
    canvas = Canvas(100, 100)
    Eyeblow(20, 4, False).draw(canvas, BoundingRect(50, 50), _ctx())
    left, top, right, bottom = _bbox(canvas)
    assert right - left == 20
    assert bottom - top == 4
    assert (left + right) // 2 == 50


def test_happy_eyeblow_is_raised():
    neutral = Canvas(100, 100)
    Eyeblow(20, 4, True).draw(neutral, BoundingRect(50, 50), _ctx())
    happy = Canvas(100, 100)
    Eyeblow(20, 4, True).draw(happy, BoundingRect(50, 50), _ctx(expression=Expression.HAPPY))
    n, h = _bbox(neutral), _bbox(happy)
    assert h[1] < n[1]
    assert h[3] - h[1] == n[3] - n[1]


@pytest.mark.parametrize(
    "is_left, expression, left_higher",
    [
        (False, Expression.ANGRY, True),
        (True, Expression.ANGRY, False),
        (False, Expression.SAD, False),
        (True, Expression.SAD, True),
    ],
)
def test_slanted_eyeblows(is_left, expression, left_higher):
    canvas = Canvas(100, 100)
    Eyeblow(20, 4, is_left).draw(canvas, BoundingRect(50, 50), _ctx(expression=expression))
    top_left = _top_in_column(canvas, 41)
    top_right = _top_in_column(canvas, 59)
    assert (top_left < top_right) is left_higher