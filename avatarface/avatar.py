"""The avatar: face state, a draw loop and the facial animation driver."""

from __future__ import annotations

import math
import random
import threading
import time
from collections.abc import Callable
from typing import Any

from avatarface.canvas import Canvas
from avatarface.context import BatteryIconStatus, DrawContext, Expression, Gaze
from avatarface.face import Face
from avatarface.palette import ColorPalette

Display = Callable[[Canvas, int, int], Any]


class Avatar:
    """A face together with the expression, gaze, blink and mouth state.

    Once started, one thread draws frames continuously and another animates
    the gaze, blinking and breathing. Each frame is handed to ``display`` as
    ``display(frame, left, top)``.
    """

    def __init__(self, face: Face | None = None, display: Display | None = None) -> None:
        self.face = face if face is not None else Face()
        self.display = display
        self._is_drawing = False
        self._expression = Expression.NEUTRAL
        self.breath = 0.0
        self.right_eye_open_ratio = 1.0
        self.left_eye_open_ratio = 1.0
        self._right_gaze = Gaze(1.0, 1.0)
        self._left_gaze = Gaze(1.0, 1.0)
        self.is_auto_blink = True
        self.mouth_open_ratio = 0.0
        self.rotation = 0.0
        self.scale = 1.0
        self._palette = ColorPalette()
        self.speech_text = ""
        self.speech_font: Any = None
        self.color_depth = 1
        self.battery_icon_status = BatteryIconStatus.INVISIBLE
        self.battery_level = 0

        self._lock = threading.Lock()
        self._resumed = threading.Event()
        self._resumed.set()
        self._loops: list[threading.Thread] = []

    # lifecycle

    def start(self, color_depth: int = 1) -> None:
        """Start drawing and animating; does nothing if already started."""
        with self._lock:
            if self._is_drawing:
                return
            self._is_drawing = True
            self.color_depth = color_depth
            self._resumed.set()
            self._loops = [
                self._spawn(self._draw_loop, "drawLoop"),
                self._spawn(self._facial_loop, "facialLoop"),
            ]

    def init(self, color_depth: int = 1) -> None:
        """Same as :meth:`start`."""
        self.start(color_depth)

    def stop(self) -> None:
        self._is_drawing = False
        self._resumed.set()
        current = threading.current_thread()
        for thread in self._loops:
            if thread is not current:
                thread.join(timeout=2.0)
        self._loops = []

    def suspend(self) -> None:
        """Pause the draw loop until :meth:`resume`."""
        self._resumed.clear()

    def resume(self) -> None:
        self._resumed.set()

    @property
    def is_suspended(self) -> bool:
        return not self._resumed.is_set()

    def is_drawing(self) -> bool:
        return self._is_drawing

    def add_task(self, func: Callable[[Avatar], Any], name: str) -> threading.Thread:
        """Run ``func(avatar)`` in a new background thread and return it."""
        return self._spawn(lambda: func(self), name)

    @staticmethod
    def _spawn(target: Callable[[], Any], name: str) -> threading.Thread:
        thread = threading.Thread(target=target, name=name, daemon=True)
        thread.start()
        return thread

    def _draw_loop(self) -> None:
        while self._is_drawing:
            if self._resumed.wait(0.05) and self._is_drawing:
                self.draw()
            time.sleep(0.01)

    def _facial_loop(self) -> None:
        driver = FacialDriver(self)
        origin = time.monotonic()
        while self._is_drawing:
            driver.tick(int((time.monotonic() - origin) * 1000))
            time.sleep(0.033)

    # drawing

    def make_context(self) -> DrawContext:
        """Snapshot the current state for drawing one frame."""
        # the right eye's gaze takes its vertical value on both axes
        right = Gaze(self._right_gaze.vertical, self._right_gaze.vertical)
        left = Gaze(self._left_gaze.vertical, self._left_gaze.horizontal)
        return DrawContext(
            expression=self._expression,
            breath=self.breath,
            palette=self._palette.copy(),
            right_gaze=right,
            right_eye_open_ratio=self.right_eye_open_ratio,
            left_gaze=left,
            left_eye_open_ratio=self.left_eye_open_ratio,
            mouth_open_ratio=self.mouth_open_ratio,
            speech_text=self.speech_text,
            rotation=self.rotation,
            scale=self.scale,
            color_depth=self.color_depth,
            battery_icon_status=self.battery_icon_status,
            battery_level=self.battery_level,
            speech_font=self.speech_font,
        )

    def draw(self) -> Canvas:
        """Draw one frame, pass it to the display and return it."""
        frame = self.face.draw(self.make_context())
        if self.display is not None:
            rect = self.face.bounding_rect
            self.display(frame, rect.left, rect.top)
        return frame

    # state

    @property
    def expression(self) -> Expression:
        return self._expression

    @expression.setter
    def expression(self, expression: Expression) -> None:
        self.suspend()
        self._expression = expression
        self.resume()

    @property
    def palette(self) -> ColorPalette:
        return self._palette.copy()

    @palette.setter
    def palette(self, palette: ColorPalette) -> None:
        self._palette = palette.copy()

    def set_eye_open_ratio(self, ratio: float) -> None:
        self.right_eye_open_ratio = ratio
        self.left_eye_open_ratio = ratio

    def set_right_gaze(self, vertical: float, horizontal: float) -> None:
        self._right_gaze = Gaze(vertical, horizontal)

    def set_left_gaze(self, vertical: float, horizontal: float) -> None:
        self._left_gaze = Gaze(vertical, horizontal)

    def right_gaze(self) -> Gaze:
        return self._right_gaze

    def left_gaze(self) -> Gaze:
        return self._left_gaze

    def gaze(self) -> Gaze:
        """The mean of both eyes' gaze, not a direction of attention."""
        return Gaze(
            0.5 * self._left_gaze.vertical + 0.5 * self._right_gaze.vertical,
            0.5 * self._left_gaze.horizontal + 0.5 * self._right_gaze.horizontal,
        )

    def set_position(self, top: int, left: int) -> None:
        self.face.bounding_rect.set_position(top, left)

    def set_battery_icon(self, visible: bool) -> None:
        self.battery_icon_status = (
            BatteryIconStatus.UNKNOWN if visible else BatteryIconStatus.INVISIBLE
        )

    def set_battery_status(self, is_charging: bool, level: int) -> None:
        """Record the charge; ignored while the battery icon is hidden."""
        if self.battery_icon_status is BatteryIconStatus.INVISIBLE:
            return
        self.battery_icon_status = (
            BatteryIconStatus.CHARGING if is_charging else BatteryIconStatus.DISCHARGING
        )
        self.battery_level = level


class FacialDriver:
    """Moves the eyes, blinks and breathes; call :meth:`tick` about 30 times a second."""

    def __init__(self, avatar: Avatar, rng: random.Random | None = None) -> None:
        self.avatar = avatar
        self.rng = rng if rng is not None else random.Random()
        self.saccade_interval = 1000
        self.blink_interval = 1000
        self.last_saccade_ms = 0
        self.last_blink_ms = 0
        self.eye_open = True
        self.count = 0

    def tick(self, now_ms: int) -> None:
        avatar = self.avatar
        if now_ms - self.last_saccade_ms > self.saccade_interval:
            vertical = self.rng.random() * 2.0 - 1.0
            horizontal = self.rng.random() * 2.0 - 1.0
            avatar.set_right_gaze(vertical, horizontal)
            avatar.set_left_gaze(vertical, horizontal)
            self.saccade_interval = 500 + 100 * self.rng.randrange(20)
            self.last_saccade_ms = now_ms

        if avatar.is_auto_blink and now_ms - self.last_blink_ms > self.blink_interval:
            if self.eye_open:
                avatar.set_eye_open_ratio(1.0)
                self.blink_interval = 2500 + 100 * self.rng.randrange(20)
            else:
                avatar.set_eye_open_ratio(0.0)
                self.blink_interval = 300 + 10 * self.rng.randrange(20)
            self.eye_open = not self.eye_open
            self.last_blink_ms = now_ms

        self.count = (self.count + 1) % 100
        avatar.breath = math.sin(self.count * 2 * math.pi / 100.0)