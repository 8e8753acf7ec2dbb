"""A touch-driven avatar demo.

Touching for a moment cycles the expression. The face and palette are
periodically reset to their defaults, and the mouth moves at random as if
speaking.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from avatarface.avatar import Avatar
from avatarface.context import Expression
from avatarface.face import Face
from avatarface.faces import DoggyFace, GirlyFace, OmegaFace, PinkDemonFace
from avatarface.palette import (
    COLOR_BACKGROUND,
    COLOR_PRIMARY,
    COLOR_SECONDARY,
    TFT_DARKCYAN,
    TFT_PINK,
    TFT_YELLOW,
    ColorPalette,
    color24_to_16,
)

logger = logging.getLogger(__name__)

EXPRESSIONS: tuple[tuple[Expression, str], ...] = (
    (Expression.NEUTRAL, "Neutral"),
    (Expression.HAPPY, "Happy"),
    (Expression.SLEEPY, "Sleepy"),
    (Expression.SAD, "Sad"),
    (Expression.DOUBT, "Doubt"),
)
FACE_NAMES = ("Default", "Doggy", "Omega", "Girly", "PinkDemon")
PALETTE_NAMES = ("Default", "Pastel", "Vivid")

TOUCH_THRESHOLD = 83
TOUCH_DURATION_MS = 300
TOUCH_DEBUG_INTERVAL_MS = 500
INFO_INTERVAL_MS = 1000
FACE_INTERVAL_MS = 15000
PALETTE_INTERVAL_MS = 30000
LOOP_DELAY_MS = 50
COLOR_DEPTH = 8
UNTOUCHED_VALUE = 100


def _build_palettes() -> list[ColorPalette]:
    pastel = ColorPalette()
    pastel.set(COLOR_PRIMARY, color24_to_16(0x383838))
    pastel.set(COLOR_BACKGROUND, color24_to_16(0xFAC2A8))
    pastel.set(COLOR_SECONDARY, TFT_PINK)

    vivid = ColorPalette()
    vivid.set(COLOR_PRIMARY, TFT_YELLOW)
    vivid.set(COLOR_BACKGROUND, TFT_DARKCYAN)
    return [ColorPalette(), pastel, vivid]


class AvatarApp:
    """The demo's state: an avatar, its faces and palettes, touch and timers.

    :meth:`tick` is called every loop with the current time and the touch
    sensor reading; it returns the status lines it produced.
    """

    def __init__(
        self,
        avatar: Avatar | None = None,
        rng: random.Random | None = None,
        auto_start: bool = True,
    ) -> None:
        self.avatar = avatar if avatar is not None else Avatar()
        self.rng = rng if rng is not None else random.Random()
        self.auto_start = auto_start

        self.faces: list[Face] = []
        self.palettes: list[ColorPalette] = []
        self.expression_index = 0
        self.face_index = 0
        self.palette_index = 0

        self.touch_detected = False
        self.touch_start_ms = 0
        self.expression_changed = False

        self.last_touch_debug_ms = 0
        self.info_timer_ms = 0
        self.face_timer_ms = 0
        self.palette_timer_ms = 0

    @property
    def expression_name(self) -> str:
        return EXPRESSIONS[self.expression_index][1]

    def _emit(self, messages: list[str], message: str) -> None:
        logger.info(message)
        messages.append(message)

    def setup(self) -> list[str]:
        """Build faces and palettes and configure the avatar."""
        messages: list[str] = []
        self._emit(messages, "ESP32 GMT154-06 Avatar")
        self._emit(messages, "Touch sensor initialized: IO32")
        self._emit(messages, f"Touch threshold: {TOUCH_THRESHOLD}")

        avatar = self.avatar
        self.faces = [avatar.face, DoggyFace(), OmegaFace(), GirlyFace(), PinkDemonFace()]
        self.palettes = _build_palettes()

        if self.auto_start:
            avatar.init(COLOR_DEPTH)
        else:
            avatar.color_depth = COLOR_DEPTH

        # the panel is 240 wide against the face's 320, so shift it left
        avatar.set_position(0, -40)
        avatar.scale = 0.8
        avatar.expression = EXPRESSIONS[self.expression_index][0]
        avatar.face = self.faces[0]
        avatar.palette = self.palettes[0]
        avatar.mouth_open_ratio = 0.0

        self._emit(messages, "Avatar initialized")
        self._emit(messages, "Pin Configuration:")
        self._emit(messages, "RESET:IO4 D/C:IO2 DATA:IO23 CLK:IO18 BL:IO25")
        return messages

    def tick(self, now_ms: int, touch_value: int) -> list[str]:
        """Run one pass of the main loop and return the lines it reported."""
        messages: list[str] = []
        avatar = self.avatar

        if now_ms - self.last_touch_debug_ms >= TOUCH_DEBUG_INTERVAL_MS:
            self.last_touch_debug_ms = now_ms
            self._emit(messages, f"Touch value (IO32): {touch_value}")

        if touch_value < TOUCH_THRESHOLD and not self.touch_detected:
            self.touch_detected = True
            self.touch_start_ms = now_ms
            self.expression_changed = False
            self._emit(messages, "Touch detected!")

        if (
            self.touch_detected
            and not self.expression_changed
            and now_ms - self.touch_start_ms >= TOUCH_DURATION_MS
        ):
            self.expression_index = (self.expression_index + 1) % len(EXPRESSIONS)
            avatar.expression = EXPRESSIONS[self.expression_index][0]
            self._emit(messages, f"Expression changed to: {self.expression_name}")
            self.expression_changed = True

        if touch_value >= TOUCH_THRESHOLD and self.touch_detected:
            self.touch_detected = False
            self._emit(messages, "Touch released")

        if now_ms - self.face_timer_ms >= FACE_INTERVAL_MS:
            self.face_timer_ms = now_ms
            self.face_index = 0
            avatar.face = self.faces[self.face_index]
            self._emit(messages, f"Face: {FACE_NAMES[self.face_index]}")

        if now_ms - self.palette_timer_ms >= PALETTE_INTERVAL_MS:
            self.palette_timer_ms = now_ms
            self.palette_index = 0
            avatar.palette = self.palettes[self.palette_index]
            self._emit(messages, f"Color Palette: {PALETTE_NAMES[self.palette_index]}")

        if now_ms - self.info_timer_ms >= INFO_INTERVAL_MS:
            self.info_timer_ms = now_ms
            ratio = self.rng.randrange(0, 33) / 100.0
            avatar.mouth_open_ratio = ratio
            self._emit(messages, f"Mouth: {ratio:.2f}")

        return messages


def _touch_value(now_ms: int, presses: Sequence[int], hold_ms: int) -> int:
    if any(start <= now_ms < start + hold_ms for start in presses):
        return 0
    return UNTOUCHED_VALUE


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo on a simulated clock and print what it reports."""
    parser = argparse.ArgumentParser(prog="avatarface", description=__doc__)
    parser.add_argument("--seconds", type=float, default=5.0, help="time to run")
    parser.add_argument(
        "--press",
        type=int,
        action="append",
        default=[],
        metavar="MS",
        help="simulate a touch starting at this many milliseconds",
    )
    parser.add_argument("--hold", type=int, default=500, help="touch length in ms")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--frame", type=Path, default=None, help="save the last frame as PNG")
    parser.add_argument("--realtime", action="store_true", help="sleep between loop passes")
    args = parser.parse_args(argv)

    if args.seconds < 0:
        parser.error("--seconds must not be negative")

    app = AvatarApp(rng=random.Random(args.seed), auto_start=False)
    for line in app.setup():
        print(line)

    end_ms = int(args.seconds * 1000)
    for now_ms in range(0, end_ms + 1, LOOP_DELAY_MS):
        for line in app.tick(now_ms, _touch_value(now_ms, args.press, args.hold)):
            print(line)
        if args.realtime:
            time.sleep(LOOP_DELAY_MS / 1000.0)

    if args.frame is not None:
        app.avatar.draw().to_image().save(args.frame, format="PNG")
        print(f"Frame saved to {args.frame}")
    return 0


if __name__ == "__main__":
    sys.exit(main())