"""Recording canvas and the simple static screens drawn on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

WALLPAPER_COLOR = 0x001122
SETTINGS_BACKGROUND = 0x000000
SETTINGS_TITLE_COLOR = 0xFFFF00
SETTINGS_ITEM_COLOR = 0xFFFFFF

SETTINGS_ITEMS = (
    (150, 200, "🔊 Sound Settings"),
    (150, 250, "🌐 Network Settings"),
    (150, 300, "🔋 Display Settings"),
)


@dataclass(frozen=True)
class DrawCall:
    """One drawing operation: its name and the arguments it was given."""

    op: str
    args: tuple[Any, ...]


class Canvas:
    """Display surface that records every drawing operation in order."""

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []

    def _record(self, op: str, *args: Any) -> None:
        self.calls.append(DrawCall(op, args))

    def clear_screen(self, color: int) -> None:
        self._record("clear_screen", color)

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        self._record("draw_rect", x, y, width, height, color)

    def draw_rounded_rect(
        self, x: int, y: int, width: int, height: int, radius: int, color: int
    ) -> None:
        self._record("draw_rounded_rect", x, y, width, height, radius, color)

    def draw_circle(self, cx: int, cy: int, radius: int, color: int) -> None:
        self._record("draw_circle", cx, cy, radius, color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        self._record("draw_line", x1, y1, x2, y2, color)

    def draw_string(self, x: int, y: int, text: str, color: int) -> None:
        self._record("draw_string", x, y, text, color)

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        self._record("draw_pixel", x, y, color)

    def calls_of(self, op: str) -> list[DrawCall]:
        """Return the recorded calls of one operation, in drawing order."""
        return [call for call in self.calls if call.op == op]

    def clear(self) -> None:
        """Forget every recorded call."""
        self.calls.clear()


def draw_wallpaper(canvas: Canvas) -> None:
    """Fill the screen with the wallpaper colour."""
    canvas.clear_screen(WALLPAPER_COLOR)


def render_settings(canvas: Canvas) -> None:
    """Draw the settings screen with its list of sections."""
    canvas.clear_screen(SETTINGS_BACKGROUND)
    canvas.draw_string(100, 100, "Settings Running", SETTINGS_TITLE_COLOR)
    for x, y, label in SETTINGS_ITEMS:
        canvas.draw_string(x, y, label, SETTINGS_ITEM_COLOR)