"""Expressions, gaze and the per-frame drawing context."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from avatarface.palette import (
    COLOR_BACKGROUND,
    COLOR_PRIMARY,
    COLOR_SECONDARY,
    ColorPalette,
)

ERASER_COLOR = 0x0000


class Expression(enum.Enum):
    HAPPY = "Happy"
    ANGRY = "Angry"
    SAD = "Sad"
    DOUBT = "Doubt"
    SLEEPY = "Sleepy"
    NEUTRAL = "Neutral"


class BatteryIconStatus(enum.Enum):
    DISCHARGING = "discharging"
    CHARGING = "charging"
    INVISIBLE = "invisible"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Gaze:
    """Direction of an eye, each component roughly in [-1, 1]."""

    vertical: float = 0.0
    horizontal: float = 0.0


@dataclass(frozen=True)
class DrawContext:
    """Everything a face part needs to draw one frame."""

    expression: Expression = Expression.NEUTRAL
    breath: float = 0.0
    palette: ColorPalette = field(default_factory=ColorPalette)
    right_gaze: Gaze = field(default_factory=Gaze)
    right_eye_open_ratio: float = 1.0
    left_gaze: Gaze = field(default_factory=Gaze)
    left_eye_open_ratio: float = 1.0
    mouth_open_ratio: float = 0.0
    speech_text: str = ""
    rotation: float = 0.0
    scale: float = 1.0
    color_depth: int = 1
    battery_icon_status: BatteryIconStatus = BatteryIconStatus.INVISIBLE
    battery_level: int = 0
    speech_font: Any = None

    def primary_color(self) -> int:
        """Foreground colour; the set bit in 1-bit mode."""
        return 1 if self.color_depth == 1 else self.palette.get(COLOR_PRIMARY)

    def secondary_color(self) -> int:
        return 1 if self.color_depth == 1 else self.palette.get(COLOR_SECONDARY)

    def background_color(self) -> int:
        """Background colour; the cleared bit in 1-bit mode."""
        if self.color_depth == 1:
            return ERASER_COLOR
        return self.palette.get(COLOR_BACKGROUND)