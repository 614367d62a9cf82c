import pytest

from hashui.animations import AnimationSystem, AnimationType
from hashui.file_explorer import (
    CONTEXT_MENU_ITEMS,
    SELECTED_COLOR,
    ExplorerKey,
    FileExplorer,
    FileType,
    format_size,
    truncate_name,
)
from hashui.screens import Canvas


@pytest.fixture
def canvas():
    return Canvas()


@pytest.fixture
def explorer(canvas):
    return FileExplorer(canvas, AnimationSystem(canvas))


def strings(canvas):
    return [call.args[2] for call in canvas.calls_of("draw_string")]


def test_initial_state(explorer):
    assert explorer.current_path == "/"
    assert [f.name for f in explorer.files] == [
        "..",
        "Documents",
        "Pictures",
        "readme.txt",
        "wallpaper.png",
    ]
    assert explorer.view_mode == 0
    assert explorer.selected_file == 0


def test_format_size_units():
    assert format_size(1024) == "1024 bytes"
    assert format_size(2048).endswith(" KB")
    assert format_size(2048576).endswith(" MB")


def test_truncate_name():
    assert truncate_name("Documents") == "Documents"
    long_name = "a_very_long_file_name.txt"
    short = truncate_name(long_name)
    assert len(short) == 15
    assert short.endswith("...")
    assert short.startswith(long_name[:12])


def test_file_type_icons_distinct(explorer, canvas):
    drawn = []
    for file_type in FileType:
        canvas.clear()
        explorer.draw_file_icon(60, 120, file_type, False)
        icon_calls = [
            c for c in canvas.calls_of("draw_string") if (c.args[0], c.args[1]) == (80, 140)
        ]
        assert len(icon_calls) == 1
        drawn.append(icon_calls[0].args[2])
    assert len(set(drawn)) == len(FileType)
    assert drawn[list(FileType).index(FileType.FOLDER)] == "📁"


def test_down_and_up_keys(explorer):
    explorer.handle_input(ExplorerKey.DOWN)
    explorer.handle_input(ExplorerKey.DOWN)
    assert explorer.selected_file == 2
    explorer.handle_input(ExplorerKey.UP)
    assert explorer.selected_file == 1


def test_selection_stays_in_bounds(explorer):
    explorer.handle_input(ExplorerKey.UP)
    assert explorer.selected_file == 0
    for _ in range(len(explorer.files) + 3):
        explorer.handle_input(ExplorerKey.DOWN)
    assert explorer.selected_file == len(explorer.files) - 1


def test_tab_toggles_view(explorer):
    explorer.handle_input(ExplorerKey.TAB)
    assert explorer.view_mode == 1
    explorer.handle_input(ExplorerKey.TAB)
    assert explorer.view_mode == 0


def test_unknown_key_ignored(explorer):
    explorer.handle_input(99)
    assert explorer.selected_file == 0
    assert explorer.view_mode == 0
    assert explorer.context_menu_open is False


def test_open_folder_navigates(explorer):
    explorer.selected_file = 2
    entry = explorer.open_file(1)
    assert entry.name == "Documents"
    assert explorer.current_path == "/Documents"
    assert explorer.selected_file == 0


def test_enter_opens_selected(explorer):
    explorer.handle_input(ExplorerKey.DOWN)
    explorer.handle_input(ExplorerKey.DOWN)
    explorer.handle_input(ExplorerKey.ENTER)
    assert explorer.current_path == "/Pictures"


def test_open_file_presses_icon(explorer):
    before = explorer.animations.count
    entry = explorer.open_file(3)
    assert entry.type is FileType.TEXT
    assert explorer.current_path == "/"
    assert explorer.animations.count == before + 1
    assert explorer.animations.animations[-1].type is AnimationType.BOUNCE


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_open_out_of_range(explorer, index):
    assert explorer.open_file(index) is None
    assert explorer.current_path == "/"


def test_navigate_to_too_long_raises(explorer):
    with pytest.raises(ValueError):
        explorer.navigate_to("/" + "a" * 2000)
    assert explorer.current_path == "/"


def test_render_list_view(explorer, canvas):
    explorer.render()
    texts = strings(canvas)
    for entry in explorer.files:
        assert entry.name in texts
    assert "List View" in texts
    assert "5 items" in texts
    assert "Selected: .." in texts
    assert format_size(1024) in texts
    selected_rows = [c for c in canvas.calls_of("draw_rect") if c.args[4] == SELECTED_COLOR]
    assert len(selected_rows) == 1


def test_render_grid_view(explorer, canvas):
    explorer.handle_input(ExplorerKey.TAB)
    explorer.render()
    texts = strings(canvas)
    assert "Grid View" in texts
    for entry in explorer.files:
        assert truncate_name(entry.name) in texts
    assert format_size(1024) not in texts


def test_selected_icon_pulses(explorer, canvas):
    explorer.draw_file_icon(60, 120, FileType.FOLDER, True)
    rounded = canvas.calls_of("draw_rounded_rect")
    assert rounded[-1].args[5] == 0x0088FF
    assert explorer.animations.animations[-1].type is AnimationType.PULSE


def test_context_menu(explorer, canvas):
    explorer.render()
    assert "Properties" not in strings(canvas)
    canvas.clear()
    explorer.handle_input(ExplorerKey.RIGHT_CLICK, 300, 400)
    assert (explorer.context_menu_x, explorer.context_menu_y) == (300, 400)
    explorer.render()
    texts = strings(canvas)
    assert all(item in texts for item in CONTEXT_MENU_ITEMS)
    menu = [c for c in canvas.calls_of("draw_string") if c.args[2] == "Open"]
    assert menu[0].args[0] == 300 + 10