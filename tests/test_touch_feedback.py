import math

import pytest

from hashui.screens import Canvas
from hashui.touch_feedback import (
    FeedbackDevice,
    FeedbackType,
    TouchFeedback,
    apply_alpha,
    circle_border_points,
    cos_lookup,
    draw_circle_outline,
    draw_sparkle_effect,
    sin_lookup,
)


@pytest.fixture
def feedback():
    return TouchFeedback(Canvas(), FeedbackDevice())


def test_apply_alpha_high_alpha_unchanged():
    assert apply_alpha(0x123456, 255) == 0x123456
    assert apply_alpha(0x123456, 128) == 0x123456


def test_apply_alpha_zero_is_black():
    assert apply_alpha(0xFFFFFF, 0) == 0


def test_apply_alpha_low_alpha_darkens_each_channel():
    color = 0x80C0FF
    result = apply_alpha(color, 100)
    for shift in (16, 8, 0):
        assert (result >> shift) & 0xFF <= (color >> shift) & 0xFF
    assert result < color


def test_lookup_table_values():
    assert cos_lookup(0) == 256
    assert sin_lookup(90) == 256
    assert cos_lookup(180) == -256
    assert cos_lookup(360) == cos_lookup(0)


def test_lookup_is_near_unit_circle():
    for angle in range(0, 360, 45):
        assert abs(math.hypot(cos_lookup(angle), sin_lookup(angle)) - 256) < 1


def test_lookup_rejects_negative_angle():
    with pytest.raises(ValueError):
        cos_lookup(-45)
    with pytest.raises(ValueError):
        sin_lookup(-1)


def test_circle_points_lie_near_radius():
    points = list(circle_border_points(10, 20, 15))
    assert points
    for px, py in points:
        assert abs(math.hypot(px - 10, py - 20) - 15) <= 1.5


def test_circle_points_are_symmetric():
    points = set(circle_border_points(0, 0, 9))
    assert all((-x, y) in points and (x, -y) in points and (y, x) in points for x, y in points)


def test_circle_degenerate_radii():
    assert set(circle_border_points(3, 4, 0)) == {(3, 4)}
    assert list(circle_border_points(3, 4, -2)) == []


def test_outline_uses_color_and_thickness():
    canvas = Canvas()
    draw_circle_outline(canvas, 0, 0, 10, 0xABCDEF, 0)
    assert canvas.calls == []
    draw_circle_outline(canvas, 0, 0, 10, 0xABCDEF, 3)
    pixels = canvas.calls_of("draw_pixel")
    assert pixels
    assert all(call.args[2] == 0xABCDEF for call in pixels)
    assert min(math.hypot(c.args[0], c.args[1]) for c in pixels) < 9


def test_sparkle_points():
    canvas = Canvas()
    draw_sparkle_effect(canvas, 100, 100, 256)
    pixels = canvas.calls_of("draw_pixel")
    assert len(pixels) == 24
    assert all(call.args[2] == 0x00FF00 for call in pixels)
    assert (356, 100, 0x00FF00) in [call.args for call in pixels]


def test_show_touch_feedback(feedback):
    feedback.show_touch_feedback(5, 6)
    assert feedback.canvas.calls_of("draw_circle")[0].args == (5, 6, 30, 0x00FFFF)
    assert feedback.device.events == [("touch_sound",)]


def test_show_normal_effect(feedback):
    effect = feedback.show(10, 20, FeedbackType.NORMAL)
    assert effect.active
    assert effect.max_radius == 30
    assert effect.color == 0x00FFFF
    assert effect.current_radius == 5
    assert effect.alpha == 255
    assert feedback.device.events == [("touch_sound",), ("haptic", "light_tap")]


def test_button_plays_tone(feedback):
    feedback.show_button(0, 0)
    assert ("tone", 800, 50) in feedback.device.events


def test_error_plays_double_beep(feedback):
    feedback.show_error(0, 0)
    assert feedback.device.events == [
        ("tone", 300, 100),
        ("delay", 50),
        ("tone", 300, 100),
        ("haptic", "double_tap"),
    ]


def test_success_sound_ascends(feedback):
    feedback.show_success(0, 0)
    tones = [e for e in feedback.device.events if e[0] == "tone"]
    assert tones == [("tone", 600, 100), ("tone", 800, 100)]


def test_drag_is_silent(feedback):
    effect = feedback.show_drag(0, 0)
    assert effect.type is FeedbackType.DRAG
    assert feedback.device.events == []


def test_disabled_feedback_does_nothing(feedback):
    feedback.feedback_enabled = False
    assert feedback.show(0, 0, FeedbackType.NORMAL) is None
    assert feedback.find_available_slot() == 0
    assert feedback.device.events == []


def test_sound_disabled_keeps_haptics(feedback):
    feedback.sound_enabled = False
    feedback.show(0, 0, FeedbackType.LONG_PRESS)
    assert feedback.device.events == [("haptic", "medium_buzz")]


def test_slots_run_out(feedback):
    effects = [feedback.show(0, 0, FeedbackType.DRAG) for _ in range(10)]
    assert all(e is not None for e in effects)
    assert feedback.find_available_slot() is None
    assert feedback.show(0, 0, FeedbackType.DRAG) is None


def test_update_grows_and_retires(feedback):
    effect = feedback.show(50, 50, FeedbackType.NORMAL)
    start_radius, start_duration = effect.current_radius, effect.duration
    feedback.update()
    assert effect.current_radius == start_radius + 2
    assert effect.duration == start_duration - 1
    assert feedback.canvas.calls_of("draw_pixel")
    frames = 1
    while effect.active:
        feedback.update()
        frames += 1
        assert frames <= start_duration
    assert effect.current_radius > effect.max_radius or effect.duration <= 0


def test_drag_fades_from_first_update(feedback):
    effect = feedback.show_drag(0, 0)
    feedback.update()
    assert 0 <= effect.alpha < 255
    assert feedback.canvas.calls_of("draw_circle")


def test_render_inactive_effect_draws_nothing(feedback):
    effect = feedback.show(0, 0, FeedbackType.SUCCESS)
    effect.active = False
    feedback.render_effect(effect)
    assert feedback.canvas.calls == []


def test_reset_clears_effects(feedback):
    feedback.show(0, 0, FeedbackType.NORMAL)
    feedback.haptic_enabled = False
    feedback.reset()
    assert feedback.find_available_slot() == 0
    assert all(not e.active for e in feedback.effects)
    assert feedback.haptic_enabled