"""Top-level UI state machine tying the home screen to touch and key input."""

from __future__ import annotations

import enum
import logging
from collections import deque
from typing import Iterable, Tuple, Union

from hashui.launcher import SCREEN_HEIGHT, SCREEN_WIDTH, Launcher, TouchEvent
from hashui.screens import Canvas

log = logging.getLogger(__name__)

COLOR_BLACK = 0x000000
COLOR_WHITE = 0xFFFFFF
COLOR_GREEN = 0x00FF00
COLOR_DARK_GRAY = 0x404040

STATUS_BAR_HEIGHT = 60
ESCAPE = "\x1b"

UIEvent = Union[Tuple[int, int], str]


class UIState(enum.Enum):
    HOME = enum.auto()
    APP_RUNNING = enum.auto()
    SETTINGS = enum.auto()
    SHUTDOWN = enum.auto()


class UIManager:
    """Owns the current UI state and routes input to the active screen."""

    def __init__(self, canvas: Canvas, launcher: Launcher | None = None) -> None:
        self.canvas = canvas
        self.launcher = launcher if launcher is not None else Launcher(canvas)
        self.initialized = False
        self.state = UIState.HOME
        self.last_touch = (-1, -1)
        self.frame_count = 0
        self.keyboard_visible = False
        self.keyboard_keys: deque[str] = deque()

    def init(self) -> None:
        """Bring the UI up in the home state and draw the first frame."""
        log.info("Initializing UI system")
        self.initialized = True
        self.state = UIState.HOME
        self.last_touch = (-1, -1)
        self.frame_count = 0
        self.render_home_screen()
        log.info("UI system initialized")

    def cleanup(self) -> None:
        """Shut the UI down; doing so twice does nothing."""
        if not self.initialized:
            return
        self.keyboard_visible = False
        self.keyboard_keys.clear()
        self.initialized = False
        log.info("UI system cleaned up")

    def _next_virtual_key(self) -> str | None:
        return self.keyboard_keys.popleft() if self.keyboard_keys else None

    def render_home_screen(self) -> None:
        """Draw the home screen and count the frame."""
        if not self.initialized:
            return
        canvas = self.canvas
        canvas.clear_screen(COLOR_DARK_GRAY)
        canvas.draw_rect(0, 0, SCREEN_WIDTH, STATUS_BAR_HEIGHT, COLOR_BLACK)
        canvas.draw_string(20, 20, "Home Screen", COLOR_WHITE)
        canvas.draw_string(SCREEN_WIDTH - 200, 20, f"Frame: {self.frame_count}", COLOR_GREEN)
        self.launcher.draw_grid()
        self.launcher.draw_dock()
        self.frame_count += 1

    def handle_touch_event(self, x: int, y: int) -> None:
        """Route a tap to the keyboard or the launcher; off-screen taps are ignored."""
        if not self.initialized:
            return
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            return
        self.last_touch = (x, y)
        if self.state is not UIState.HOME:
            return
        if self.keyboard_visible:
            key = self._next_virtual_key()
            if key:
                self.handle_keypress(key)
        else:
            self.launcher.handle_touch(x, y, TouchEvent.DOWN)
            self.launcher.handle_touch(x, y, TouchEvent.UP)

    def handle_keypress(self, key: str) -> None:
        """Show the key and act on escape and the keyboard toggle."""
        if not self.initialized or not key:
            return
        self.canvas.draw_string(300, 20, f"Key: {key}", COLOR_GREEN)
        if key == ESCAPE:
            if self.state is not UIState.HOME:
                self.set_state(UIState.HOME)
                self.render_home_screen()
        elif key in ("k", "K"):
            self.keyboard_visible = not self.keyboard_visible
            self.render_home_screen()

    def set_state(self, state: UIState) -> None:
        if self.state is not state:
            self.state = state
            log.info("UI state changed to: %s", state.name)

    def run(self, events: Iterable[UIEvent]) -> None:
        """Process input events, one frame each, until shutdown or the events end.

        A touch is an (x, y) pair; a key is a one-character string.
        """
        if not self.initialized:
            raise RuntimeError("UI not initialized")
        log.info("Starting UI main loop")
        for event in events:
            if self.state is UIState.SHUTDOWN:
                break
            if isinstance(event, str):
                self.handle_keypress(event)
            else:
                x, y = event
                self.handle_touch_event(x, y)
            key = self._next_virtual_key()
            if key:
                self.handle_keypress(key)
            if self.state is UIState.HOME:
                self.render_home_screen()
        log.info("UI main loop ended")