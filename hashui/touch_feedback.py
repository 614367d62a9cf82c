"""Touch ripple effects with sound and haptic feedback."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator

from hashui.screens import Canvas

MAX_TOUCH_EFFECTS = 10
RIPPLE_DURATION = 30
FADE_DURATION = 20

COLOR_NORMAL = 0x00FFFF
COLOR_BUTTON = 0x00FF00
COLOR_LONG = 0xFFAA00
COLOR_DRAG = 0xFF00FF
COLOR_ERROR = 0xFF0000
COLOR_SUCCESS = 0x00FF00

_COS_TABLE = (256, 181, 0, -181, -256, -181, 0, 181)
_SIN_TABLE = (0, 181, 256, 181, 0, -181, -256, -181)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class FeedbackType(enum.Enum):
    NORMAL = 0
    BUTTON = 1
    LONG_PRESS = 2
    DRAG = 3
    ERROR = 4
    SUCCESS = 5


# max radius, duration, colour for each kind of effect
_PROFILES = {
    FeedbackType.NORMAL: (30, RIPPLE_DURATION, COLOR_NORMAL),
    FeedbackType.BUTTON: (25, RIPPLE_DURATION - 10, COLOR_BUTTON),
    FeedbackType.LONG_PRESS: (40, RIPPLE_DURATION + 10, COLOR_LONG),
    FeedbackType.DRAG: (20, RIPPLE_DURATION - 15, COLOR_DRAG),
    FeedbackType.ERROR: (35, RIPPLE_DURATION + 5, COLOR_ERROR),
    FeedbackType.SUCCESS: (40, RIPPLE_DURATION + 10, COLOR_SUCCESS),
}

_HAPTICS = {
    FeedbackType.NORMAL: "light_tap",
    FeedbackType.BUTTON: "light_tap",
    FeedbackType.LONG_PRESS: "medium_buzz",
    FeedbackType.ERROR: "double_tap",
    FeedbackType.SUCCESS: "success_pattern",
}


@dataclass
class TouchEffect:
    """One expanding ripple."""

    x: int = 0
    y: int = 0
    current_radius: int = 0
    max_radius: int = 0
    duration: int = 0
    color: int = 0
    type: FeedbackType = FeedbackType.NORMAL
    active: bool = False
    alpha: int = 0


@dataclass
class FeedbackDevice:
    """Sound and vibration output; records what it was asked to do."""

    events: list[tuple] = field(default_factory=list)

    def play_tone(self, frequency: int, duration_ms: int) -> None:
        self.events.append(("tone", frequency, duration_ms))

    def delay_ms(self, ms: int) -> None:
        self.events.append(("delay", ms))

    def haptic(self, pattern: str) -> None:
        self.events.append(("haptic", pattern))

    def touch_sound(self) -> None:
        self.events.append(("touch_sound",))


def apply_alpha(color: int, alpha: int) -> int:
    """Darken a colour when alpha is below half; otherwise return it unchanged."""
    if alpha < 128:
        red = ((color >> 16) & 0xFF) * alpha // 255
        green = ((color >> 8) & 0xFF) * alpha // 255
        blue = (color & 0xFF) * alpha // 255
        return (red << 16) | (green << 8) | blue
    return color


def _lookup(table: tuple[int, ...], angle: int) -> int:
    if angle < 0:
        raise ValueError(f"angle must not be negative: {angle}")
    return table[(angle // 45) % 8]


def cos_lookup(angle: int) -> int:
    """Cosine in 1/256 units for multiples of 45 degrees."""
    return _lookup(_COS_TABLE, angle)


def sin_lookup(angle: int) -> int:
    """Sine in 1/256 units for multiples of 45 degrees."""
    return _lookup(_SIN_TABLE, angle)


def circle_border_points(cx: int, cy: int, radius: int) -> Iterator[tuple[int, int]]:
    """Yield the outline points of a circle by the midpoint algorithm."""
    x, y = 0, radius
    d = 3 - 2 * radius
    while y >= x:
        yield cx + x, cy + y
        yield cx - x, cy + y
        yield cx + x, cy - y
        yield cx - x, cy - y
        yield cx + y, cy + x
        yield cx - y, cy + x
        yield cx + y, cy - x
        yield cx - y, cy - x
        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6


def draw_circle_outline(
    canvas: Canvas, cx: int, cy: int, radius: int, color: int, thickness: int
) -> None:
    """Draw concentric outlines inward from radius, thickness pixels deep."""
    for step in range(thickness):
        for px, py in circle_border_points(cx, cy, radius - step):
            canvas.draw_pixel(px, py, color)


def draw_sparkle_effect(canvas: Canvas, cx: int, cy: int, radius: int) -> None:
    """Draw eight small sparkles spaced evenly around a circle."""
    for angle in range(0, 360, 45):
        sx = cx + _cdiv(radius * cos_lookup(angle), 256)
        sy = cy + _cdiv(radius * sin_lookup(angle), 256)
        canvas.draw_pixel(sx, sy, COLOR_SUCCESS)
        canvas.draw_pixel(sx + 1, sy, COLOR_SUCCESS)
        canvas.draw_pixel(sx, sy + 1, COLOR_SUCCESS)


class TouchFeedback:
    """Pool of touch ripples plus the sounds and vibrations that go with them."""

    def __init__(self, canvas: Canvas, device: FeedbackDevice | None = None) -> None:
        self.canvas = canvas
        self.device = device if device is not None else FeedbackDevice()
        self.reset()

    def reset(self) -> None:
        """Clear all effects and restore default settings."""
        self.effects = [TouchEffect() for _ in range(MAX_TOUCH_EFFECTS)]
        self.feedback_enabled = True
        self.haptic_enabled = True
        self.sound_enabled = True

    def show_touch_feedback(self, x: int, y: int) -> None:
        """Draw the plain touch circle and play the touch sound."""
        self.canvas.draw_circle(x, y, 30, COLOR_NORMAL)
        self.device.touch_sound()

    def show(self, x: int, y: int, type: FeedbackType) -> TouchEffect | None:
        """Start a ripple of the given kind; None if disabled or no slot is free."""
        if not self.feedback_enabled:
            return None
        slot = self.find_available_slot()
        if slot is None:
            return None
        max_radius, duration, color = _PROFILES[type]
        effect = TouchEffect(
            x=x,
            y=y,
            current_radius=5,
            max_radius=max_radius,
            duration=duration,
            color=color,
            type=type,
            active=True,
            alpha=255,
        )
        self.effects[slot] = effect
        if self.sound_enabled:
            self._play_sound(type)
        if self.haptic_enabled:
            self._trigger_haptic(type)
        return effect

    def _play_sound(self, type: FeedbackType) -> None:
        device = self.device
        if type is FeedbackType.NORMAL:
            device.touch_sound()
        elif type is FeedbackType.BUTTON:
            device.play_tone(800, 50)
        elif type is FeedbackType.LONG_PRESS:
            device.play_tone(400, 200)
        elif type is FeedbackType.ERROR:
            device.play_tone(300, 100)
            device.delay_ms(50)
            device.play_tone(300, 100)
        elif type is FeedbackType.SUCCESS:
            device.play_tone(600, 100)
            device.delay_ms(50)
            device.play_tone(800, 100)

    def _trigger_haptic(self, type: FeedbackType) -> None:
        pattern = _HAPTICS.get(type)
        if pattern is not None:
            self.device.haptic(pattern)

    def update(self) -> None:
        """Advance and draw every active effect, retiring finished ones."""
        for effect in self.effects:
            if not effect.active:
                continue
            effect.duration -= 1
            effect.current_radius += 2
            if effect.duration < FADE_DURATION:
                effect.alpha = _cdiv(effect.duration * 255, FADE_DURATION)
            self.render_effect(effect)
            if effect.duration <= 0 or effect.current_radius > effect.max_radius:
                effect.active = False

    def render_effect(self, effect: TouchEffect) -> None:
        """Draw one effect in its current state."""
        if not effect.active:
            return
        canvas = self.canvas
        color = apply_alpha(effect.color, effect.alpha)
        radius = effect.current_radius
        if effect.type in (FeedbackType.NORMAL, FeedbackType.BUTTON):
            draw_circle_outline(canvas, effect.x, effect.y, radius, color, 3)
        elif effect.type is FeedbackType.LONG_PRESS:
            draw_circle_outline(canvas, effect.x, effect.y, radius, color, 2)
            draw_circle_outline(canvas, effect.x, effect.y, radius - 10, color, 2)
        elif effect.type is FeedbackType.DRAG:
            canvas.draw_circle(effect.x, effect.y, _cdiv(radius, 2), color)
        elif effect.type is FeedbackType.ERROR:
            pulse_radius = radius + (effect.duration % 6) - 3
            draw_circle_outline(canvas, effect.x, effect.y, pulse_radius, color, 4)
        elif effect.type is FeedbackType.SUCCESS:
            draw_circle_outline(canvas, effect.x, effect.y, radius, color, 3)
            draw_sparkle_effect(canvas, effect.x, effect.y, radius)

    def find_available_slot(self) -> int | None:
        """Index of the first inactive effect, or None when all are busy."""
        return next(
            (index for index, effect in enumerate(self.effects) if not effect.active), None
        )

    def show_button(self, x: int, y: int) -> TouchEffect | None:
        return self.show(x, y, FeedbackType.BUTTON)

    def show_error(self, x: int, y: int) -> TouchEffect | None:
        return self.show(x, y, FeedbackType.ERROR)

    def show_success(self, x: int, y: int) -> TouchEffect | None:
        return self.show(x, y, FeedbackType.SUCCESS)

    def show_drag(self, x: int, y: int) -> TouchEffect | None:
        return self.show(x, y, FeedbackType.DRAG)