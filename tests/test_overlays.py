import pytest

from avatarface.canvas import Canvas
from avatarface.context import BatteryIconStatus, DrawContext, Expression
from avatarface.geometry import BoundingRect
from avatarface.overlays import Balloon, BatteryIcon, Effect
from avatarface.palette import (
    COLOR_BALLOON_BACKGROUND,
    COLOR_BALLOON_FOREGROUND,
    TFT_BLACK,
    TFT_BLUE,
    TFT_RED,
    TFT_WHITE,
    TFT_YELLOW,
    ColorPalette,
)

RECT = BoundingRect()


def _ctx(**kwargs):
    kwargs.setdefault("color_depth", 16)
    return DrawContext(**kwargs)


def _lit(canvas):
    return sum(1 for p in canvas.to_image().getdata() if p != (0, 0, 0))


# --- Balloon -------------------------------------------------------------

def test_balloon_without_text_draws_nothing():
    canvas = Canvas(320, 240)
    Balloon().draw(canvas, RECT, _ctx())
    assert canvas.to_image().getbbox() is None


def test_balloon_uses_default_balloon_colours():
    canvas = Canvas(320, 240)
    canvas.fill_sprite(TFT_RED)
    Balloon().draw(canvas, RECT, _ctx(speech_text="Hello"))
    assert canvas.get_pixel(220, 187) == TFT_BLACK
    assert canvas.get_pixel(220, 195) == TFT_WHITE
    assert canvas.get_pixel(0, 0) == TFT_RED


def test_balloon_uses_palette_colours():
    palette = ColorPalette(
        {COLOR_BALLOON_FOREGROUND: TFT_YELLOW, COLOR_BALLOON_BACKGROUND: TFT_BLUE}
    )
    canvas = Canvas(320, 240)
    Balloon().draw(canvas, RECT, _ctx(speech_text="Hello", palette=palette))
    assert canvas.get_pixel(220, 187) == TFT_YELLOW
    assert canvas.get_pixel(220, 195) == TFT_BLUE


# --- Effect --------------------------------------------------------------

def test_neutral_has_no_effect():
    canvas = Canvas(320, 240)
    Effect().draw(canvas, RECT, _ctx(expression=Expression.NEUTRAL))
    assert canvas.to_image().getbbox() is None


def test_happy_draws_heart():
    canvas = Canvas(320, 240)
    Effect().draw(canvas, RECT, _ctx(expression=Expression.HAPPY))
    assert canvas.get_pixel(274, 50) == TFT_WHITE
    assert canvas.get_pixel(286, 50) == TFT_WHITE
    assert canvas.get_pixel(10, 10) == TFT_BLACK


def test_heart_grows_with_breath():
    small = Canvas(320, 240)
    Effect().draw(small, RECT, _ctx(expression=Expression.HAPPY, breath=0.0))
    large = Canvas(320, 240)
    Effect().draw(large, RECT, _ctx(expression=Expression.HAPPY, breath=1.0))
    assert _lit(large) > _lit(small)


def test_sad_draws_three_bars_of_increasing_length():
    canvas = Canvas(320, 240)
    Effect().draw(canvas, RECT, _ctx(expression=Expression.SAD))
    assert canvas.get_pixel(256, 5) == TFT_WHITE
    assert canvas.get_pixel(256, 20) == TFT_BLACK
    assert canvas.get_pixel(271, 20) == TFT_WHITE
    assert canvas.get_pixel(271, 25) == TFT_BLACK
    assert canvas.get_pixel(286, 25) == TFT_WHITE


def test_angry_draws_hollow_cross():
    canvas = Canvas(320, 240)
    Effect().draw(canvas, RECT, _ctx(expression=Expression.ANGRY))
    assert canvas.get_pixel(276, 45) == TFT_WHITE
    assert canvas.get_pixel(280, 45) == TFT_BLACK
    assert canvas.get_pixel(270, 46) == TFT_WHITE
    assert canvas.get_pixel(280, 50) == TFT_BLACK


def test_sleepy_draws_bubble_outlines():
    canvas = Canvas(320, 240)
    Effect().draw(canvas, RECT, _ctx(expression=Expression.SLEEPY))
    assert canvas.get_pixel(290, 30) == TFT_WHITE
    assert canvas.get_pixel(290, 50) == TFT_WHITE
    assert canvas.get_pixel(295, 45) == TFT_BLACK


def test_doubt_draws_sweat_drop():
    canvas = Canvas(320, 240)
    Effect().draw(canvas, RECT, _ctx(expression=Expression.DOUBT))
    assert canvas.get_pixel(290, 110) == TFT_WHITE
    assert canvas.get_pixel(290, 100) == TFT_WHITE


def test_effect_in_one_bit_mode_sets_bit():
    canvas = Canvas(320, 240, color_depth=1)
    Effect().draw(canvas, RECT, DrawContext(expression=Expression.HAPPY, color_depth=1))
    assert canvas.get_pixel(274, 50) == 1
    assert canvas.get_pixel(10, 10) == 0


# --- BatteryIcon ---------------------------------------------------------

def test_invisible_battery_draws_nothing():
    canvas = Canvas(320, 240)
    BatteryIcon().draw(canvas, RECT, _ctx(battery_level=100))
    assert canvas.to_image().getbbox() is None


@pytest.mark.parametrize(
    "status", [BatteryIconStatus.DISCHARGING, BatteryIconStatus.UNKNOWN]
)
def test_full_battery_is_filled(status):
    canvas = Canvas(320, 240)
    BatteryIcon().draw(canvas, RECT, _ctx(battery_icon_status=status, battery_level=100))
    assert canvas.get_pixel(300, 10) == TFT_WHITE
    assert canvas.get_pixel(303, 10) == TFT_WHITE
    assert canvas.get_pixel(285, 10) == TFT_WHITE


def test_empty_battery_is_outline_only():
    canvas = Canvas(320, 240)
    BatteryIcon().draw(
        canvas,
        RECT,
        _ctx(battery_icon_status=BatteryIconStatus.DISCHARGING, battery_level=0),
    )
    assert canvas.get_pixel(290, 5) == TFT_WHITE
    assert canvas.get_pixel(300, 10) == TFT_BLACK


def test_charging_battery_shows_bolt():
    canvas = Canvas(320, 240)
    BatteryIcon().draw(
        canvas,
        RECT,
        _ctx(battery_icon_status=BatteryIconStatus.CHARGING, battery_level=100),
    )
    assert canvas.get_pixel(303, 10) == TFT_BLACK
    assert canvas.get_pixel(312, 10) == TFT_WHITE


def test_battery_fill_grows_with_level():
    low = Canvas(320, 240)
    BatteryIcon().draw(
        low, RECT, _ctx(battery_icon_status=BatteryIconStatus.DISCHARGING, battery_level=20)
    )
    high = Canvas(320, 240)
    BatteryIcon().draw(
        high, RECT, _ctx(battery_icon_status=BatteryIconStatus.DISCHARGING, battery_level=80)
    )
    assert _lit(high) > _lit(low)