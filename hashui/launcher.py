"""Home-screen app launcher with paged icon grid, dock and search."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from hashui.animations import AnimationSystem
from hashui.screens import Canvas

SCREEN_WIDTH = 3840
SCREEN_HEIGHT = 2160

MAX_LAUNCHER_APPS = 32
MAX_APP_NAME_LENGTH = 64
MAX_PATH_LENGTH = 256
MAX_SEARCH_LENGTH = 128

ICON_SIZE = 80
ICON_SPACING = 20
GRID_COLS = 4
GRID_ROWS = 6
APPS_PER_PAGE = GRID_COLS * GRID_ROWS
DOCK_HEIGHT = 100
STATUS_BAR_HEIGHT = 30
SEARCH_HEIGHT = 50
PAGE_INDICATOR_HEIGHT = 20
DOCK_SLOTS = 4

TOUCH_THRESHOLD = 10
SWIPE_THRESHOLD = 100
LONG_PRESS_DURATION = 500

COLOR_BG_PRIMARY = 0x000000
COLOR_BG_SECONDARY = 0x1A1A1A
COLOR_ICON_SELECTED = 0x007AFF
COLOR_DOCK_BG = 0x1C1C1E
COLOR_TEXT_PRIMARY = 0xFFFFFF
COLOR_TEXT_SECONDARY = 0x8E8E93
COLOR_SEARCH_BG = 0x2C2C2E
COLOR_ACCENT = 0x007AFF
COLOR_SHADOW = 0x000000AA
COLOR_HIGHLIGHT = 0xFFFFFF40
COLOR_OVERLAY = 0x000000CC

ICON_COLORS = (0x007AFF, 0x34C759, 0xFF9500, 0xFF3B30, 0x5856D6, 0xFF2D92)

DEFAULT_APPS = (
    ("Phone", "/icons/phone.png", "/apps/phone"),
    ("Messages", "/icons/messages.png", "/apps/messages"),
    ("Mail", "/icons/mail.png", "/apps/mail"),
    ("Safari", "/icons/safari.png", "/apps/safari"),
    ("Camera", "/icons/camera.png", "/apps/camera"),
    ("Photos", "/icons/photos.png", "/apps/photos"),
    ("Maps", "/icons/maps.png", "/apps/maps"),
    ("Weather", "/icons/weather.png", "/apps/weather"),
    ("Clock", "/icons/clock.png", "/apps/clock"),
    ("Calculator", "/icons/calc.png", "/apps/calculator"),
    ("Settings", "/icons/settings.png", "/apps/settings"),
    ("Files", "/icons/files.png", "/apps/files"),
    ("Music", "/icons/music.png", "/apps/music"),
    ("Notes", "/icons/notes.png", "/apps/notes"),
    ("Contacts", "/icons/contacts.png", "/apps/contacts"),
    ("App Store", "/icons/appstore.png", "/apps/appstore"),
)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class TouchEvent(enum.Enum):
    DOWN = 0
    MOVE = 1
    UP = 2


class Gesture(enum.Enum):
    SWIPE_DOWN = 0
    SWIPE_UP = 1
    PINCH_OUT = 2
    PINCH_IN = 3


@dataclass
class LauncherApp:
    """One app shown on the home screen."""

    name: str
    icon_path: str
    executable_path: str
    icon_color: int
    x: int = 0
    y: int = 0
    width: int = ICON_SIZE
    height: int = ICON_SIZE
    visible: bool = True
    pinned: bool = False


class Launcher:
    """Home-screen state, its drawing and its touch handling."""

    def __init__(
        self,
        canvas: Canvas,
        animations: AnimationSystem | None = None,
        launch: Callable[[str], object] | None = None,
    ) -> None:
        self.canvas = canvas
        self.animations = animations if animations is not None else AnimationSystem(canvas)
        self.launch = launch
        self.apps: list[LauncherApp] = []
        self.selected_app = 0
        self.scroll_offset = 0
        self.search_mode = False
        self.search_query = ""
        self.edit_mode = False
        self.overview_mode = False
        self.grid_cols = GRID_COLS
        self.grid_rows = GRID_ROWS
        self.icon_size = ICON_SIZE
        self.current_page = 0
        self.drag_offset_x = 0
        self.is_dragging = False
        self.is_long_pressing = False
        self.long_press_timer = 0
        self.last_touch = (0, 0)
        for name, icon_path, executable_path in DEFAULT_APPS:
            self.add_app(name, icon_path, executable_path)

    def add_app(self, name: str, icon_path: str, executable_path: str) -> int:
        """Append an app and return its index; raises ValueError when full."""
        if len(self.apps) >= MAX_LAUNCHER_APPS:
            raise ValueError(f"launcher holds at most {MAX_LAUNCHER_APPS} apps")
        app = LauncherApp(
            name=name[: MAX_APP_NAME_LENGTH - 1],
            icon_path=icon_path[: MAX_PATH_LENGTH - 1],
            executable_path=executable_path[: MAX_PATH_LENGTH - 1],
            icon_color=ICON_COLORS[len(self.apps) % len(ICON_COLORS)],
        )
        self.apps.append(app)
        return len(self.apps) - 1

    def total_pages(self) -> int:
        """Number of grid pages needed for all apps."""
        return -(-len(self.apps) // APPS_PER_PAGE)

    def draw_status_bar(self) -> None:
        canvas = self.canvas
        canvas.draw_rect(0, 0, SCREEN_WIDTH, STATUS_BAR_HEIGHT, COLOR_BG_SECONDARY)
        canvas.draw_string(20, 8, "9:41", COLOR_TEXT_PRIMARY)
        canvas.draw_string(SCREEN_WIDTH - 80, 8, "100%", COLOR_TEXT_PRIMARY)
        canvas.draw_string(SCREEN_WIDTH - 40, 8, "📶", COLOR_TEXT_PRIMARY)

    def draw_app_icon(self, index: int, x: int, y: int, selected: bool, scale: float) -> None:
        """Draw one app icon with its label and remember where it was drawn."""
        if index >= len(self.apps):
            return
        canvas = self.canvas
        app = self.apps[index]
        size = int(ICON_SIZE * scale)
        icon_x = x + _cdiv(ICON_SIZE - size, 2)
        icon_y = y + _cdiv(ICON_SIZE - size, 2)
        corner = _cdiv(size, 4)
        canvas.draw_rounded_rect(icon_x + 2, icon_y + 2, size, size, corner, COLOR_SHADOW)
        background = COLOR_ICON_SELECTED if selected else app.icon_color
        canvas.draw_rounded_rect(icon_x, icon_y, size, size, corner, background)
        canvas.draw_rounded_rect(
            icon_x + 2, icon_y + 2, size - 4, _cdiv(size, 3), corner, COLOR_HIGHLIGHT
        )
        text_color = COLOR_ACCENT if selected else COLOR_TEXT_PRIMARY
        text_width = len(app.name) * 6
        text_x = x + _cdiv(ICON_SIZE - text_width, 2)
        canvas.draw_string(text_x, y + ICON_SIZE + 5, app.name, text_color)
        app.x = x
        app.y = y

    def draw_grid(self) -> None:
        start_x = _cdiv(SCREEN_WIDTH - (GRID_COLS * (ICON_SIZE + ICON_SPACING) - ICON_SPACING), 2)
        start_y = STATUS_BAR_HEIGHT + 40
        page_start = self.current_page * APPS_PER_PAGE
        page_apps = self.apps[page_start : page_start + APPS_PER_PAGE]
        for slot, app in enumerate(page_apps):
            if not app.visible:
                continue
            index = page_start + slot
            col, row = slot % GRID_COLS, slot // GRID_COLS
            x = start_x + col * (ICON_SIZE + ICON_SPACING) + self.drag_offset_x
            y = start_y + row * (ICON_SIZE + 30)
            if x < -ICON_SIZE or x > SCREEN_WIDTH:
                continue
            selected = index == self.selected_app
            scale = 1.1 if selected and self.is_long_pressing else 1.0
            self.draw_app_icon(index, x, y, selected, scale)

    def draw_page_indicators(self) -> None:
        pages = self.total_pages()
        if pages <= 1:
            return
        size = 6
        spacing = 12
        total_width = pages * size + (pages - 1) * (spacing - size)
        start_x = _cdiv(SCREEN_WIDTH - total_width, 2)
        y = SCREEN_HEIGHT - DOCK_HEIGHT - PAGE_INDICATOR_HEIGHT
        for page in range(pages):
            x = start_x + page * spacing
            color = COLOR_ACCENT if page == self.current_page else COLOR_TEXT_SECONDARY
            self.canvas.draw_circle(x + size // 2, y + size // 2, size // 2, color)

    def draw_dock(self) -> None:
        canvas = self.canvas
        dock_y = SCREEN_HEIGHT - DOCK_HEIGHT
        canvas.draw_rounded_rect(0, dock_y, SCREEN_WIDTH, DOCK_HEIGHT, 0, COLOR_DOCK_BG)
        canvas.draw_line(0, dock_y, SCREEN_WIDTH, dock_y, COLOR_TEXT_SECONDARY)
        dock_apps = min(DOCK_SLOTS, len(self.apps))
        start_x = _cdiv(SCREEN_WIDTH - (dock_apps * (ICON_SIZE + ICON_SPACING) - ICON_SPACING), 2)
        icon_y = dock_y + (DOCK_HEIGHT - ICON_SIZE) // 2
        for index in range(dock_apps):
            x = start_x + index * (ICON_SIZE + ICON_SPACING)
            selected = index == self.selected_app and self.current_page == 0
            self.draw_app_icon(index, x, icon_y, selected, 1.0)

    def draw_search_interface(self) -> None:
        if not self.search_mode:
            return
        canvas = self.canvas
        canvas.draw_rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, COLOR_OVERLAY)
        search_y = STATUS_BAR_HEIGHT + 20
        canvas.draw_rounded_rect(
            20, search_y, SCREEN_WIDTH - 40, SEARCH_HEIGHT, SEARCH_HEIGHT // 2, COLOR_SEARCH_BG
        )
        canvas.draw_string(40, search_y + 15, "🔍", COLOR_TEXT_PRIMARY)
        canvas.draw_string(70, search_y + 15, self.search_query, COLOR_TEXT_PRIMARY)

    def render(self) -> None:
        """Draw one frame of the home screen and advance timers."""
        self.canvas.clear_screen(COLOR_BG_PRIMARY)
        self.draw_status_bar()
        if self.search_mode:
            self.draw_search_interface()
            return
        self.draw_grid()
        self.draw_page_indicators()
        self.draw_dock()
        self.animations.update()
        if self.is_long_pressing:
            self.long_press_timer += 1
            if self.long_press_timer > LONG_PRESS_DURATION:
                self.edit_mode = True

    def handle_touch(self, x: int, y: int, event: TouchEvent) -> None:
        """React to a touch down, move or release."""
        if event is TouchEvent.DOWN:
            self.last_touch = (x, y)
            self.is_dragging = False
            self.is_long_pressing = True
            self.long_press_timer = 0
            for index, app in enumerate(self.apps):
                if app.x <= x <= app.x + ICON_SIZE and app.y <= y <= app.y + ICON_SIZE:
                    self.selected_app = index
                    break
        elif event is TouchEvent.MOVE:
            dx = x - self.last_touch[0]
            dy = y - self.last_touch[1]
            if abs(dx) > TOUCH_THRESHOLD or abs(dy) > TOUCH_THRESHOLD:
                self.is_long_pressing = False
                if abs(dx) > abs(dy):
                    self.is_dragging = True
                    limit = SCREEN_WIDTH // 2
                    self.drag_offset_x = max(-limit, min(limit, dx))
        elif event is TouchEvent.UP:
            self.is_long_pressing = False
            if self.is_dragging:
                if abs(self.drag_offset_x) > SWIPE_THRESHOLD:
                    if self.drag_offset_x > 0 and self.current_page > 0:
                        self.current_page -= 1
                    elif self.drag_offset_x < 0 and self.current_page < self.total_pages() - 1:
                        self.current_page += 1
                self.is_dragging = False
                self.drag_offset_x = 0
            elif 0 <= self.selected_app < len(self.apps):
                if self.launch is not None:
                    self.launch(self.apps[self.selected_app].executable_path)

    def handle_gesture(self, gesture: Gesture) -> None:
        """Show or hide search and the overview."""
        if gesture is Gesture.SWIPE_DOWN:
            self.search_mode = True
        elif gesture is Gesture.SWIPE_UP:
            if self.search_mode:
                self.search_mode = False
        elif gesture is Gesture.PINCH_OUT:
            self.overview_mode = True
        elif gesture is Gesture.PINCH_IN:
            self.overview_mode = False

    def update_search(self, query: str) -> None:
        """Set the search text and show only apps whose name contains it."""
        self.search_query = query[: MAX_SEARCH_LENGTH - 1]
        for app in self.apps:
            app.visible = not query or query in app.name