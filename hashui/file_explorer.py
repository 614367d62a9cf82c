"""File explorer screen with list and grid views."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from hashui.animations import AnimationSystem
from hashui.screens import Canvas

SCREEN_WIDTH = 3840
SCREEN_HEIGHT = 2160
MAX_PATH_LEN = 1024

BACKGROUND_COLOR = 0x111111
BAR_COLOR = 0x222222
SELECTED_COLOR = 0x0066CC
TEXT_COLOR = 0xCCCCCC
SELECTED_TEXT_COLOR = 0xFFFFFF
ACCENT_COLOR = 0x00AAFF
SIZE_COLOR = 0x888888

CONTEXT_MENU_ITEMS = ("Open", "Copy", "Cut", "Delete", "Properties")

_KIB = 1024
_MIB = 1024 * 1024


class FileType(enum.Enum):
    FOLDER = 0
    TEXT = 1
    IMAGE = 2
    VIDEO = 3
    AUDIO = 4
    EXECUTABLE = 5
    UNKNOWN = 6

    @property
    def icon(self) -> str:
        return _ICONS[self]


_ICONS = {
    FileType.FOLDER: "📁",
    FileType.TEXT: "📄",
    FileType.IMAGE: "🖼️",
    FileType.VIDEO: "🎬",
    FileType.AUDIO: "🎵",
    FileType.EXECUTABLE: "⚙️",
    FileType.UNKNOWN: "📋",
}


class ExplorerKey(enum.IntEnum):
    UP = 1
    DOWN = 2
    ENTER = 3
    TAB = 4
    RIGHT_CLICK = 5


@dataclass
class FileEntry:
    """One entry shown in the explorer."""

    name: str
    path: str
    type: FileType
    size: int = 0
    modified_time: int = 0
    permissions: int = 0
    selected: bool = False


def format_size(size: int) -> str:
    """Human-readable size as shown next to a file."""
    if size > _MIB:
        return f"{size / _MIB:.1f} MB"
    if size > _KIB:
        return f"{size / _KIB:.1f} KB"
    return f"{size} bytes"


def truncate_name(name: str) -> str:
    """Shorten a name to fit under a grid icon."""
    if len(name) > 15:
        return name[:12] + "..."
    return name


class FileExplorer:
    """Browsing state plus the drawing of the explorer screen."""

    def __init__(self, canvas: Canvas, animations: AnimationSystem | None = None) -> None:
        self.canvas = canvas
        self.animations = animations if animations is not None else AnimationSystem(canvas)
        self.current_path = "/"
        self.files: list[FileEntry] = []
        self.selected_file = 0
        self.scroll_offset = 0
        self.view_mode = 0  # 0 = list, 1 = grid
        self.sort_mode = 0  # 0 = name, 1 = size, 2 = date
        self.context_menu_open = False
        self.context_menu_x = 0
        self.context_menu_y = 0
        self.refresh()

    def refresh(self) -> None:
        """Reload the entries of the current directory."""
        self.files = [
            FileEntry("..", "/", FileType.FOLDER, 0),
            FileEntry("Documents", "/Documents", FileType.FOLDER, 0),
            FileEntry("Pictures", "/Pictures", FileType.FOLDER, 0),
            FileEntry("readme.txt", "/readme.txt", FileType.TEXT, 1024),
            FileEntry("wallpaper.png", "/wallpaper.png", FileType.IMAGE, 2048576),
        ]

    def navigate_to(self, path: str) -> None:
        """Change directory, resetting selection and scroll."""
        if len(path) >= MAX_PATH_LEN:
            raise ValueError(f"path longer than {MAX_PATH_LEN - 1} characters")
        self.current_path = path
        self.selected_file = 0
        self.scroll_offset = 0
        self.refresh()

    def open_file(self, index: int) -> FileEntry | None:
        """Enter a folder or press a file; returns the entry, or None if out of range."""
        if not 0 <= index < len(self.files):
            return None
        entry = self.files[index]
        if entry.type is FileType.FOLDER:
            self.navigate_to(entry.path)
        else:
            self.animations.animate_icon_press(60, 120 + index * 50, 30, 30)
        return entry

    def handle_input(self, key: int, x: int = 0, y: int = 0) -> None:
        """React to one key or click; unknown keys are ignored."""
        if key == ExplorerKey.UP:
            if self.selected_file > 0:
                self.selected_file -= 1
                self.animations.animate_bounce_icon(60, 120 + self.selected_file * 50, 30, 30)
        elif key == ExplorerKey.DOWN:
            if self.selected_file < len(self.files) - 1:
                self.selected_file += 1
                self.animations.animate_bounce_icon(60, 120 + self.selected_file * 50, 30, 30)
        elif key == ExplorerKey.ENTER:
            self.open_file(self.selected_file)
        elif key == ExplorerKey.TAB:
            self.view_mode = 0 if self.view_mode else 1
        elif key == ExplorerKey.RIGHT_CLICK:
            self.context_menu_open = True
            self.context_menu_x = x
            self.context_menu_y = y

    def render(self) -> None:
        """Draw one frame of the explorer and advance animations."""
        self.canvas.clear_screen(BACKGROUND_COLOR)
        self.draw_breadcrumb_nav()
        if self.view_mode == 0:
            self.draw_file_list()
        else:
            self.draw_file_grid()
        self.draw_status_bar()
        self.draw_context_menu(self.context_menu_x, self.context_menu_y)
        self.animations.update()

    def draw_file_list(self) -> None:
        canvas = self.canvas
        visible = (SCREEN_HEIGHT - 200) // 50
        shown = self.files[self.scroll_offset : self.scroll_offset + visible]
        for row, entry in enumerate(shown):
            index = self.scroll_offset + row
            y = 120 + row * 50
            selected = index == self.selected_file
            if selected:
                canvas.draw_rect(50, y - 5, SCREEN_WIDTH - 100, 40, SELECTED_COLOR)
                self.animations.animate_bounce_icon(60, y, 30, 30)
            self.draw_file_icon(60, y, entry.type, selected)
            text_color = SELECTED_TEXT_COLOR if selected else TEXT_COLOR
            canvas.draw_string(130, y + 15, entry.name, text_color)
            if entry.type is not FileType.FOLDER:
                canvas.draw_string(SCREEN_WIDTH - 200, y + 15, format_size(entry.size), SIZE_COLOR)

    def draw_file_grid(self) -> None:
        cols = (SCREEN_WIDTH - 100) // 120
        for offset, entry in enumerate(self.files[self.scroll_offset :]):
            index = self.scroll_offset + offset
            col, row = offset % cols, offset // cols
            x = 50 + col * 120
            y = 120 + row * 100
            if y > SCREEN_HEIGHT - 150:
                break
            selected = index == self.selected_file
            self.draw_file_icon(x, y, entry.type, selected)
            text_color = SELECTED_TEXT_COLOR if selected else TEXT_COLOR
            self.canvas.draw_string(x, y + 65, truncate_name(entry.name), text_color)

    def draw_file_icon(self, x: int, y: int, type: FileType, selected: bool) -> None:
        canvas = self.canvas
        if selected:
            canvas.draw_rounded_rect(x - 5, y - 5, 70, 70, 10, SELECTED_COLOR)
            self.animations.animate_pulse_notification(x + 30, y + 30, 35)
        canvas.draw_rounded_rect(x, y, 60, 60, 8, 0x0088FF if selected else 0x555555)
        text_color = SELECTED_TEXT_COLOR if selected else TEXT_COLOR
        canvas.draw_string(x + 20, y + 20, type.icon, text_color)

    def draw_breadcrumb_nav(self) -> None:
        canvas = self.canvas
        canvas.draw_rect(0, 0, SCREEN_WIDTH, 60, BAR_COLOR)
        canvas.draw_string(20, 20, "📍 Path:", 0xFFFFFF)
        canvas.draw_string(100, 20, self.current_path, ACCENT_COLOR)
        view_text = "Grid View" if self.view_mode else "List View"
        canvas.draw_string(SCREEN_WIDTH - 150, 20, view_text, 0xFFFFFF)

    def draw_status_bar(self) -> None:
        canvas = self.canvas
        canvas.draw_rect(0, SCREEN_HEIGHT - 40, SCREEN_WIDTH, 40, BAR_COLOR)
        canvas.draw_string(20, SCREEN_HEIGHT - 25, f"{len(self.files)} items", TEXT_COLOR)
        if 0 <= self.selected_file < len(self.files):
            name = self.files[self.selected_file].name
            canvas.draw_string(200, SCREEN_HEIGHT - 25, f"Selected: {name}", ACCENT_COLOR)

    def draw_context_menu(self, x: int, y: int) -> None:
        if not self.context_menu_open:
            return
        canvas = self.canvas
        width = 120
        height = len(CONTEXT_MENU_ITEMS) * 30
        self.animations.animate_window_open(x, y, width, height)
        canvas.draw_rounded_rect(x, y, width, height, 5, 0x333333)
        canvas.draw_rect(x + 1, y + 1, width - 2, height - 2, 0x444444)
        for row, label in enumerate(CONTEXT_MENU_ITEMS):
            canvas.draw_string(x + 10, y + row * 30 + 10, label, 0xFFFFFF)