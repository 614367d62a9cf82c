# hashui

`hashui` is a headless toolkit for a smartphone-style user interface. It has
a home-screen launcher, a file explorer, a status bar, a boot splash screen,
a settings screen, a wallpaper, animations and touch-feedback ripples.

None of these components draws pixels. Each one issues drawing operations to
a `Canvas`. The canvas records every call as a `DrawCall` (an operation name
and its arguments) in drawing order. You can inspect the recorded screens,
test them, or replay them on a real renderer. `Canvas.calls_of(op)` returns
the calls of one operation. `Canvas.clear()` forgets all recorded calls.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Components

| Module | What it provides |
| --- | --- |
| `hashui.screens` | `Canvas`, `DrawCall`, `draw_wallpaper`, `render_settings` |
| `hashui.animations` | `AnimationSystem`, `AnimationType`, `Animation`, `ease_in_out`, `ease_bounce` |
| `hashui.touch_feedback` | `TouchFeedback`, `FeedbackType`, `TouchEffect`, `FeedbackDevice`, `apply_alpha`, `cos_lookup`, `sin_lookup`, `circle_border_points`, `draw_circle_outline`, `draw_sparkle_effect` |
| `hashui.status_bar` | `StatusBar`, `SystemStatus` |
| `hashui.file_explorer` | `FileExplorer`, `FileEntry`, `FileType`, `ExplorerKey`, `format_size`, `truncate_name` |
| `hashui.launcher` | `Launcher`, `LauncherApp`, `TouchEvent`, `Gesture` |
| `hashui.splash` | `SplashScreen`, `loading_text` |
| `hashui.ui_manager` | `UIManager`, `UIState` |

## Example

```python
from hashui.screens import Canvas
from hashui.animations import AnimationSystem
from hashui.launcher import Launcher, TouchEvent
from hashui.ui_manager import UIManager

canvas = Canvas()
animations = AnimationSystem(canvas)
launched = []
launcher = Launcher(canvas, animations, launched.append)

ui = UIManager(canvas, launcher)
ui.init()  # draws the first home-screen frame

print(len(canvas.calls_of("draw_string")))

# Touch an icon where it was last drawn, then release it to launch the app.
app = launcher.apps[0]
launcher.handle_touch(app.x + 10, app.y + 10, TouchEvent.DOWN)
launcher.handle_touch(app.x + 10, app.y + 10, TouchEvent.UP)
print(launched)  # ['/apps/phone']
```

`UIManager.run(events)` handles a sequence of events, one frame per event.
A touch is an `(x, y)` pair and a key is a one-character string. Escape
returns to the home state. `k` or `K` toggles the virtual keyboard. The loop
stops when the events run out or when the state becomes `UIState.SHUTDOWN`.

A status bar works the same way:

```python
from hashui.screens import Canvas
from hashui.status_bar import StatusBar

bar = StatusBar(Canvas())
bar.update_battery(15, charging=True)
bar.update_time(9, 5)
bar.render()
bar.render_notification_area()
```

`SplashScreen` takes a clock callable that returns milliseconds. It uses the
clock to decide when the splash has timed out:

```python
from hashui.screens import Canvas
from hashui.splash import SplashScreen

now = [0]
splash = SplashScreen(Canvas(), clock=lambda: now[0])
splash.start()
splash.update_boot_progress(40)
splash.render()
now[0] = 3500
assert splash.timed_out()
```

Touch ripples go through `TouchFeedback`. Each ripple type plays tones and
triggers a haptic pattern on a `FeedbackDevice`. The default device only
records what it was asked to do, in its `events` list. Sound, haptics and
feedback as a whole can each be switched off with the `sound_enabled`,
`haptic_enabled` and `feedback_enabled` attributes. Call `update()` once per
frame to advance the ripples and redraw them. `AnimationSystem.update()`
advances animations the same way.

## What the package does not do

- It does not render anything. All output is the list of recorded calls
  on a `Canvas`.
- `FileExplorer` does not read a filesystem. `refresh()` always lists the
  same five sample entries, whatever the current path is.
- `Launcher` does not start programs. On release it passes the app's
  executable path to the `launch` callable you supply.
- `UIManager` draws only the home screen. The app-running and settings
  states receive no input and draw nothing. It has no real keyboard or
  touch device. Virtual-keyboard keys come from its `keyboard_keys` queue.
- `render_settings` draws a static screen that has no working options.