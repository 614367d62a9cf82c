"""Top-of-screen status bar showing time, battery, connectivity and volume."""

from __future__ import annotations

from dataclasses import dataclass

from hashui.screens import Canvas

STATUS_BAR_HEIGHT = 100
STATUS_BAR_WIDTH = 3840
STATUS_BAR_COLOR = 0x333333
TEXT_COLOR = 0xFFFFFF
ICON_COLOR = 0x00AAFF
WARNING_COLOR = 0xFFAA00
CRITICAL_COLOR = 0xFF0000
INACTIVE_COLOR = 0x666666
EMPTY_BAR_COLOR = 0x444444
NOTIFICATION_COLOR = 0x222222

DEFAULT_DATE = "Jan 1, 2025"
_DATE_CAPACITY = 31


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class SystemStatus:
    """Everything the status bar shows."""

    battery_level: int = 80
    is_charging: bool = False
    wifi_connected: bool = True
    wifi_strength: int = 3
    bluetooth_enabled: bool = True
    hour: int = 10
    minute: int = 30
    date_string: str = DEFAULT_DATE
    airplane_mode: bool = False
    volume_level: int = 70
    silent_mode: bool = False
    cpu_usage: int = 25
    memory_usage: int = 60


class StatusBar:
    """Draws the status bar and its notification shade from a SystemStatus."""

    def __init__(self, canvas: Canvas, status: SystemStatus | None = None) -> None:
        self.canvas = canvas
        self.status = status if status is not None else SystemStatus()

    def reset(self) -> None:
        """Restore battery, connectivity, time and date to their defaults."""
        status = self.status
        status.battery_level = 80
        status.is_charging = False
        status.wifi_connected = True
        status.wifi_strength = 3
        status.bluetooth_enabled = True
        status.hour = 10
        status.minute = 30
        status.date_string = DEFAULT_DATE

    def render_basic(self) -> None:
        """Draw the fixed, static status bar."""
        canvas = self.canvas
        canvas.draw_rect(0, 0, 3840, 100, 0x333333)
        canvas.draw_string(100, 50, "HASH OS", 0xFFFFFF)
        canvas.draw_string(3000, 50, "Battery: 80%", 0xFFFFFF)
        canvas.draw_string(3400, 50, "Time: 10:30", 0xFFFFFF)

    def render(self) -> None:
        """Draw the status bar from the current system status."""
        canvas = self.canvas
        status = self.status
        canvas.draw_rect(0, 0, STATUS_BAR_WIDTH, STATUS_BAR_HEIGHT, STATUS_BAR_COLOR)
        canvas.draw_string(20, 35, "HASH OS", TEXT_COLOR)
        if status.cpu_usage > 80:
            canvas.draw_string(20, 65, "CPU High", WARNING_COLOR)
        canvas.draw_string(STATUS_BAR_WIDTH // 2 - 80, 50, status.date_string, TEXT_COLOR)

        right_x = STATUS_BAR_WIDTH - 50
        time_text = f"{status.hour:02d}:{status.minute:02d}"[:15]
        right_x -= 120
        canvas.draw_string(right_x, 35, time_text, TEXT_COLOR)

        right_x -= 150
        self.draw_battery_icon(right_x, 25)

        if status.wifi_connected:
            right_x -= 80
            self.draw_wifi_icon(right_x, 25)

        if status.bluetooth_enabled:
            right_x -= 60
            self.draw_bluetooth_icon(right_x, 30)

        right_x -= 80
        self.draw_volume_icon(right_x, 30)

    def draw_battery_icon(self, x: int, y: int) -> None:
        canvas = self.canvas
        level = self.status.battery_level
        if level < 20:
            color = CRITICAL_COLOR
        elif level < 40:
            color = WARNING_COLOR
        else:
            color = TEXT_COLOR
        canvas.draw_rect(x, y, 40, 20, color)
        canvas.draw_rect(x + 40, y + 6, 4, 8, color)
        fill_width = _cdiv(36 * level, 100)
        if fill_width > 0:
            canvas.draw_rect(x + 2, y + 2, fill_width, 16, color)
        if self.status.is_charging:
            canvas.draw_string(x - 20, y + 25, "CHG", ICON_COLOR)
        canvas.draw_string(x - 10, y + 25, f"{level}%"[:7], TEXT_COLOR)

    def draw_wifi_icon(self, x: int, y: int) -> None:
        status = self.status
        wifi_color = ICON_COLOR if status.wifi_connected else INACTIVE_COLOR
        for bar in range(4):
            bar_height = 8 + bar * 4
            color = wifi_color if bar < status.wifi_strength else EMPTY_BAR_COLOR
            self.canvas.draw_rect(x + bar * 8, y + (20 - bar_height), 6, bar_height, color)

    def draw_bluetooth_icon(self, x: int, y: int) -> None:
        color = ICON_COLOR if self.status.bluetooth_enabled else INACTIVE_COLOR
        self.canvas.draw_string(x, y, "BT", color)

    def draw_volume_icon(self, x: int, y: int) -> None:
        status = self.status
        if status.silent_mode:
            self.canvas.draw_string(x, y, "MUTE", WARNING_COLOR)
            return
        bars = _cdiv(status.volume_level * 3, 100)
        for bar in range(3):
            color = ICON_COLOR if bar < bars else EMPTY_BAR_COLOR
            self.canvas.draw_rect(x + bar * 6, y + (10 - bar * 2), 4, 8 + bar * 4, color)

    def render_notification_area(self) -> None:
        """Draw the expanded shade with quick toggles and system figures."""
        canvas = self.canvas
        status = self.status
        canvas.draw_rect(0, 0, STATUS_BAR_WIDTH, 300, NOTIFICATION_COLOR)
        toggle_y = 120
        self.draw_quick_toggle(200, toggle_y, "WiFi", status.wifi_connected)
        self.draw_quick_toggle(400, toggle_y, "Bluetooth", status.bluetooth_enabled)
        self.draw_quick_toggle(600, toggle_y, "Airplane", status.airplane_mode)
        canvas.draw_string(200, 220, "System Information:", TEXT_COLOR)
        info = f"CPU: {status.cpu_usage}% | Memory: {status.memory_usage}%"[:63]
        canvas.draw_string(200, 250, info, TEXT_COLOR)

    def draw_quick_toggle(self, x: int, y: int, label: str, enabled: bool) -> None:
        background = ICON_COLOR if enabled else EMPTY_BAR_COLOR
        text_color = 0x000000 if enabled else TEXT_COLOR
        self.canvas.draw_rect(x, y, 120, 60, background)
        self.canvas.draw_string(x + 10, y + 25, label, text_color)

    def update_battery(self, level: int, charging: bool) -> None:
        self.status.battery_level = level
        self.status.is_charging = charging

    def update_time(self, hour: int, minute: int) -> None:
        self.status.hour = hour
        self.status.minute = minute

    def update_wifi(self, connected: bool, strength: int) -> None:
        self.status.wifi_connected = connected
        self.status.wifi_strength = strength

    def update_volume(self, level: int, silent: bool) -> None:
        self.status.volume_level = level
        self.status.silent_mode = silent

    def set_date(self, date: str) -> None:
        """Set the date text, cut to the capacity of the date field."""
        self.status.date_string = date[:_DATE_CAPACITY]