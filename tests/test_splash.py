import pytest

from hashui.splash import (
    COLOR_BLUE,
    COLOR_GRAY,
    COLOR_WHITE,
    SplashScreen,
    loading_text,
)
from hashui.screens import Canvas


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(1000)


@pytest.fixture
def splash(clock):
    screen = SplashScreen(Canvas(), clock)
    screen.start()
    return screen


def test_loading_text_dots():
    assert loading_text(0) == "Loading"
    assert loading_text(15) == "Loading."
    assert loading_text(45) == "Loading..."


@pytest.mark.parametrize("frame", [0, 7, 20, 33, 59])
def test_loading_text_cycles(frame):
    assert loading_text(frame) == loading_text(frame + 60)


def test_update_boot_progress_ignores_out_of_range(splash):
    splash.update_boot_progress(40)
    splash.update_boot_progress(101)
    splash.update_boot_progress(-1)
    assert splash.boot_progress == 40


def test_timeout(splash, clock):
    clock.now += 3000
    assert not splash.timed_out()
    clock.now += 1
    assert splash.timed_out()


def test_render_advances_frame_and_title_fades_in(splash):
    splash.render()
    first_title = splash.canvas.calls_of("draw_string")[0]
    assert first_title.args[2] == "HASH OS"
    assert first_title.args[3] == COLOR_GRAY
    for _ in range(29):
        splash.render()
    assert splash.animation_frame == 30
    splash.canvas.clear()
    splash.render()
    assert splash.canvas.calls_of("draw_string")[0].args[3] == COLOR_WHITE


def test_progress_bar_fill_is_proportional(splash):
    splash.update_boot_progress(50)
    splash.draw_boot_progress_bar()
    background, fill = splash.canvas.calls_of("draw_rect")
    assert fill.args[2] * 2 == background.args[2]
    assert fill.args[4] == COLOR_BLUE
    assert splash.canvas.calls_of("draw_string")[0].args[2] == "50%"


def test_progress_bar_without_progress_has_no_fill(splash):
    splash.draw_boot_progress_bar()
    assert len(splash.canvas.calls_of("draw_rect")) == 1


@pytest.mark.parametrize("fade", [0, 100, 255])
def test_fade_out_alpha(splash, fade):
    splash.render_fade_out(fade)
    white, blue = splash.canvas.calls_of("draw_string")
    assert white.args[3] >> 24 == 255 - fade
    assert white.args[3] & 0xFFFFFF == COLOR_WHITE
    assert blue.args[3] & 0xFFFFFF == COLOR_BLUE


def test_logo_and_render_with_logo(splash):
    splash.render_with_logo()
    rects = splash.canvas.calls_of("draw_rect")
    assert len(rects) == 3
    assert all(call.args[4] == COLOR_BLUE for call in rects)
    assert splash.canvas.calls[0].op == "clear_screen"


def test_render_basic(splash):
    splash.render_basic()
    texts = [call.args[2] for call in splash.canvas.calls_of("draw_string")]
    assert texts == ["HASH OS", "Smartphone Edition"]


def test_start_resets_state(splash, clock):
    splash.update_boot_progress(70)
    splash.render()
    clock.now = 9000
    splash.start()
    assert (splash.animation_frame, splash.boot_progress, splash.start_time) == (0, 0, 9000)