"""Frame-driven animation system drawing onto a canvas."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from hashui.screens import Canvas

MAX_ANIMATIONS = 32


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class AnimationType(enum.Enum):
    FADE_IN = 0
    FADE_OUT = 1
    SLIDE_LEFT = 2
    SLIDE_RIGHT = 3
    SLIDE_UP = 4
    SLIDE_DOWN = 5
    SCALE = 6
    BOUNCE = 7
    PULSE = 8


@dataclass
class Animation:
    """State of one running animation."""

    type: AnimationType
    x: int
    y: int
    width: int
    height: int
    duration: int
    start_time: int = 0
    current_frame: int = 0
    total_frames: int = 0
    color: int = 0
    progress: float = 0.0
    active: bool = True


def ease_in_out(t: float) -> float:
    """Quadratic ease-in-out over [0, 1]."""
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


def ease_bounce(t: float) -> float:
    """Bounce easing over [0, 1]."""
    if t < 1.0 / 2.75:
        return 7.5625 * t * t
    if t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


class AnimationSystem:
    """Fixed pool of animations advanced one tick per update."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self._slots: list[Animation | None] = [None] * MAX_ANIMATIONS
        self.ticks = 0

    @property
    def animations(self) -> list[Animation]:
        """Active animations in slot order."""
        return [anim for anim in self._slots if anim is not None]

    @property
    def count(self) -> int:
        return len(self.animations)

    def reset(self) -> None:
        """Drop every animation and restart the tick counter."""
        self._slots = [None] * MAX_ANIMATIONS
        self.ticks = 0

    def create(
        self,
        type: AnimationType,
        x: int,
        y: int,
        width: int,
        height: int,
        duration: int,
        color: int = 0,
    ) -> Animation | None:
        """Start an animation in the first free slot; None when the pool is full."""
        try:
            slot = self._slots.index(None)
        except ValueError:
            return None
        anim = Animation(
            type=type,
            x=x,
            y=y,
            width=width,
            height=height,
            duration=duration,
            start_time=self.ticks,
            total_frames=duration,
            color=color,
        )
        self._slots[slot] = anim
        return anim

    def destroy(self, anim: Animation | None) -> None:
        """Stop an animation; stopping an inactive one does nothing."""
        if anim is None or not anim.active:
            return
        anim.active = False
        for index, held in enumerate(self._slots):
            if held is anim:
                self._slots[index] = None
                break

    def update(self) -> None:
        """Advance one tick, retiring finished animations and drawing the rest."""
        self.ticks += 1
        for anim in self.animations:
            elapsed = self.ticks - anim.start_time
            if elapsed >= anim.duration:
                self.destroy(anim)
                continue
            anim.progress = elapsed / anim.duration
            anim.current_frame = elapsed
            self._draw(anim)

    def _draw(self, anim: Animation) -> None:
        canvas = self.canvas
        if anim.type is AnimationType.FADE_IN:
            alpha = ease_in_out(anim.progress)
            color = ((anim.color & 0x00FFFFFF) | (int(alpha * 255) << 24)) & 0xFFFFFFFF
            canvas.draw_rect(anim.x, anim.y, anim.width, anim.height, color)
        elif anim.type is AnimationType.SCALE:
            scale = ease_in_out(anim.progress)
            scaled_width = int(anim.width * scale)
            scaled_height = int(anim.height * scale)
            offset_x = _cdiv(anim.width - scaled_width, 2)
            offset_y = _cdiv(anim.height - scaled_height, 2)
            canvas.draw_rect(
                anim.x + offset_x, anim.y + offset_y, scaled_width, scaled_height, anim.color
            )
        elif anim.type is AnimationType.BOUNCE:
            bounce = ease_bounce(anim.progress)
            offset_y = int(20 * (1.0 - bounce))
            canvas.draw_rect(anim.x, anim.y - offset_y, anim.width, anim.height, anim.color)
        elif anim.type is AnimationType.PULSE:
            pulse = (math.sin(anim.progress * 3.14159 * 4) + 1.0) / 2.0
            color = ((anim.color & 0x00FFFFFF) | (int(pulse * 255) << 24)) & 0xFFFFFFFF
            canvas.draw_circle(anim.x, anim.y, int(anim.width * pulse), color)

    def animate_icon_press(self, x: int, y: int, width: int, height: int) -> None:
        for step in range(5):
            self.canvas.draw_rounded_rect(
                x + step, y + step, width - 2 * step, height - 2 * step, 20, 0x999999
            )
        self.canvas.draw_rounded_rect(x + 2, y + 2, width - 4, height - 4, 18, 0x555555)
        self.create(AnimationType.BOUNCE, x, y, width, height, 15)

    def animate_window_open(self, x: int, y: int, width: int, height: int) -> None:
        self.create(AnimationType.SCALE, x, y, width, height, 20)
        self.create(AnimationType.FADE_IN, x, y, width, height, 20)

    def animate_window_close(self, x: int, y: int, width: int, height: int) -> None:
        anim = self.create(AnimationType.SCALE, x, y, width, height, 15)
        if anim is not None:
            anim.progress = 1.0

    def animate_bounce_icon(self, x: int, y: int, width: int, height: int) -> None:
        self.create(AnimationType.BOUNCE, x, y, width, height, 30)

    def animate_pulse_notification(self, x: int, y: int, radius: int) -> None:
        self.create(AnimationType.PULSE, x, y, radius, radius, 60)