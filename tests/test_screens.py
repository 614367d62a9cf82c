from hashui.screens import Canvas, DrawCall, draw_wallpaper, render_settings


def test_draw_rect_is_recorded_with_arguments():
    canvas = Canvas()
    canvas.draw_rect(1, 2, 3, 4, 0xFF)
    assert canvas.calls_of("draw_rect") == [DrawCall("draw_rect", (1, 2, 3, 4, 0xFF))]


def test_calls_keep_drawing_order():
    canvas = Canvas()
    canvas.draw_pixel(5, 6, 7)
    canvas.draw_line(1, 1, 9, 9, 3)
    canvas.draw_pixel(8, 9, 7)
    assert [c.op for c in canvas.calls] == ["draw_pixel", "draw_line", "draw_pixel"]
    assert [c.args for c in canvas.calls_of("draw_pixel")] == [(5, 6, 7), (8, 9, 7)]


def test_every_operation_is_recorded():
    canvas = Canvas()
    canvas.clear_screen(1)
    canvas.draw_rounded_rect(0, 0, 10, 10, 2, 3)
    canvas.draw_circle(4, 4, 2, 5)
    canvas.draw_string(0, 0, "hi", 6)
    assert canvas.calls_of("draw_rounded_rect")[0].args == (0, 0, 10, 10, 2, 3)
    assert canvas.calls_of("draw_circle")[0].args == (4, 4, 2, 5)
    assert canvas.calls_of("draw_string")[0].args == (0, 0, "hi", 6)
    assert canvas.calls_of("clear_screen")[0].args == (1,)


def test_clear_forgets_calls():
    canvas = Canvas()
    canvas.draw_pixel(1, 1, 1)
    canvas.clear()
    assert canvas.calls == []


def test_wallpaper_fills_screen():
    canvas = Canvas()
    draw_wallpaper(canvas)
    assert canvas.calls == [DrawCall("clear_screen", (0x001122,))]


def test_settings_screen_contents():
    canvas = Canvas()
    render_settings(canvas)
    assert canvas.calls[0] == DrawCall("clear_screen", (0x000000,))
    texts = [call.args[2] for call in canvas.calls_of("draw_string")]
    assert texts == [
        "Settings Running",
        "🔊 Sound Settings",
        "🌐 Network Settings",
        "🔋 Display Settings",
    ]
    assert canvas.calls_of("draw_string")[0].args == (100, 100, "Settings Running", 0xFFFF00)