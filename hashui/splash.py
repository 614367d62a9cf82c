"""Boot splash screen with progress bar and loading animation."""

from __future__ import annotations

import time
from typing import Callable

from hashui.screens import Canvas

COLOR_BLACK = 0x000000
COLOR_WHITE = 0xFFFFFF
COLOR_BLUE = 0x0078D4
COLOR_GRAY = 0x808080

SCREEN_WIDTH = 3840
SCREEN_HEIGHT = 2160
CENTER_X = SCREEN_WIDTH // 2
CENTER_Y = SCREEN_HEIGHT // 2

BAR_WIDTH = 400
BAR_HEIGHT = 20
SPLASH_TIMEOUT_MS = 3000
FADE_IN_FRAMES = 30
FOOTER_TEXT = "HASH OS Team"


def _milliseconds() -> int:
    return int(time.monotonic() * 1000)


def loading_text(frame: int) -> str:
    """Loading text whose trailing dots change every 15 frames."""
    return "Loading" + "." * ((frame // 15) % 4)


class SplashScreen:
    """Splash screen state: animation frame, boot progress and start time."""

    def __init__(self, canvas: Canvas, clock: Callable[[], int] | None = None) -> None:
        self.canvas = canvas
        self.clock = clock if clock is not None else _milliseconds
        self.animation_frame = 0
        self.boot_progress = 0
        self.start_time = 0

    def start(self) -> None:
        """Reset the animation and progress and note the start time."""
        self.animation_frame = 0
        self.boot_progress = 0
        self.start_time = self.clock()

    def render_basic(self) -> None:
        self.canvas.clear_screen(COLOR_BLACK)
        self.canvas.draw_string(1200, 600, "HASH OS", COLOR_WHITE)
        self.canvas.draw_string(1200, 700, "Smartphone Edition", COLOR_WHITE)

    def render(self) -> None:
        """Draw one frame of the animated splash and advance the frame counter."""
        canvas = self.canvas
        canvas.clear_screen(COLOR_BLACK)
        title_color = COLOR_GRAY if self.animation_frame < FADE_IN_FRAMES else COLOR_WHITE
        canvas.draw_string(CENTER_X - 200, CENTER_Y - 100, "HASH OS", title_color)
        canvas.draw_string(CENTER_X - 300, CENTER_Y - 50, "Smartphone Edition", COLOR_BLUE)
        canvas.draw_string(CENTER_X - 100, CENTER_Y + 50, "Version 1.0", COLOR_GRAY)
        self.draw_boot_progress_bar()
        self.draw_loading_animation()
        self.animation_frame += 1

    def draw_boot_progress_bar(self) -> None:
        canvas = self.canvas
        bar_x = CENTER_X - BAR_WIDTH // 2
        bar_y = CENTER_Y + 150
        canvas.draw_rect(bar_x, bar_y, BAR_WIDTH, BAR_HEIGHT, COLOR_GRAY)
        fill = BAR_WIDTH * self.boot_progress // 100
        if fill > 0:
            canvas.draw_rect(bar_x, bar_y, fill, BAR_HEIGHT, COLOR_BLUE)
        canvas.draw_string(CENTER_X - 20, bar_y + 30, f"{self.boot_progress}%", COLOR_WHITE)

    def draw_loading_animation(self) -> None:
        self.canvas.draw_string(
            CENTER_X - 80, CENTER_Y + 200, loading_text(self.animation_frame), COLOR_WHITE
        )

    def draw_logo(self) -> None:
        """Draw a stylised H from three rectangles."""
        size = 100
        x = CENTER_X - size // 2
        y = CENTER_Y - 200
        self.canvas.draw_rect(x, y, 20, size, COLOR_BLUE)
        self.canvas.draw_rect(x + 80, y, 20, size, COLOR_BLUE)
        self.canvas.draw_rect(x + 20, y + 40, 60, 20, COLOR_BLUE)

    def render_with_logo(self) -> None:
        canvas = self.canvas
        canvas.clear_screen(COLOR_BLACK)
        self.draw_logo()
        canvas.draw_string(CENTER_X - 200, CENTER_Y - 50, "HASH OS", COLOR_WHITE)
        canvas.draw_string(CENTER_X - 300, CENTER_Y, "Smartphone Edition", COLOR_BLUE)
        canvas.draw_string(CENTER_X - 150, SCREEN_HEIGHT - 100, FOOTER_TEXT, COLOR_GRAY)

    def update_boot_progress(self, progress: int) -> None:
        """Set progress; values outside 0..100 are ignored."""
        if 0 <= progress <= 100:
            self.boot_progress = progress

    def timed_out(self) -> bool:
        """True once more than three seconds have passed since start."""
        elapsed = (self.clock() - self.start_time) & 0xFFFFFFFF
        return elapsed > SPLASH_TIMEOUT_MS

    def render_fade_out(self, fade_level: int) -> None:
        """Draw the title faded by fade_level (0 visible, 255 gone)."""
        alpha = 255 - fade_level
        faded_white = ((alpha << 24) | COLOR_WHITE) & 0xFFFFFFFF
        faded_blue = ((alpha << 24) | COLOR_BLUE) & 0xFFFFFFFF
        canvas = self.canvas
        canvas.clear_screen(COLOR_BLACK)
        canvas.draw_string(CENTER_X - 200, CENTER_Y - 50, "HASH OS", faded_white)
        canvas.draw_string(CENTER_X - 300, CENTER_Y, "Smartphone Edition", faded_blue)