from baize import gui_defs
from baize.gui_defs import Margins, push_button_style


def test_margins_default_to_zero():
    assert Margins() == gui_defs.ZERO_MARGINS
    assert tuple(gui_defs.ZERO_MARGINS) == (0, 0, 0, 0)


def test_margins_fields():
    built = Margins(left=8, top=20, right=2, bottom=20)
    assert built == gui_defs.SIDEBAR_MARGINS
    assert (built.left, built.top, built.right, built.bottom) == (8, 20, 2, 20)


def test_window_defaults():
    assert gui_defs.MAIN_WINDOW_DEFAULT_WIDTH == 1440
    assert gui_defs.MAIN_WINDOW_DEFAULT_HEIGHT == 960
    assert gui_defs.MAIN_WINDOW_TITLE.startswith(gui_defs.APP_NAME)


def test_folder_select_formats_path():
    text = gui_defs.FOLDER_SELECT.format("/tmp/notes")
    assert text.endswith("/tmp/notes")
    assert "{}" not in text


def test_push_button_style_substitutes_arguments():
    style = push_button_style("left", 6, 4)
    assert "text-align: left;" in style
    assert "padding: 6px 1px;" in style
    assert "border-radius: 4px;" in style
    assert style.startswith("QPushButton {")
    assert style.endswith("}")


def test_push_button_style_states():
    style = push_button_style("center", 1, 2)
    assert "QPushButton:hover {" in style
    assert "QPushButton:pressed {" in style
    assert style.count("{") == style.count("}")