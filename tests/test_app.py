import pytest

from baize import gui_defs
from baize.app import (
    CentralLayout,
    MainWindowConfig,
    PanelSize,
    Workbench,
    line_number_area_width,
)
from baize.latex import render
from baize.logger import Logger


@pytest.fixture
def quiet_logger():
    logger = Logger()
    logger.console_output = False
    return logger


def test_gutter_padding_only_with_zero_digit_width():
    assert line_number_area_width(1, 0) == 6


@pytest.mark.parametrize("digit_width", [1, 7, 12])
def test_gutter_grows_by_one_digit_at_ten(digit_width):
    assert line_number_area_width(10, digit_width) - line_number_area_width(9, digit_width) == digit_width


@pytest.mark.parametrize("digit_width", [3, 8])
def test_gutter_same_within_digit_count(digit_width):
    assert line_number_area_width(1, digit_width) == line_number_area_width(9, digit_width)
    assert line_number_area_width(100, digit_width) == line_number_area_width(999, digit_width)


def test_gutter_zero_blocks_counts_as_one():
    assert line_number_area_width(0, 9) == line_number_area_width(1, 9)


def test_config_defaults():
    config = MainWindowConfig()
    assert config.title == gui_defs.MAIN_WINDOW_TITLE
    assert config.obj_name == gui_defs.MAIN_WINDOW_OBJ_NAME
    assert (config.default_width, config.default_height) == (1440, 960)


def test_config_empty_values_fall_back():
    config = MainWindowConfig(title="", obj_name="", default_width=0, default_height=0)
    assert config == MainWindowConfig()


def test_config_keeps_given_values():
    config = MainWindowConfig(title="Notes", obj_name="Win", default_width=800, default_height=600)
    assert (config.title, config.obj_name) == ("Notes", "Win")
    assert (config.default_width, config.default_height) == (800, 600)


def test_layout_initial_sizes_default():
    layout = CentralLayout()
    assert layout.initial_sizes() == (
        gui_defs.SIDEBAR_WIDTH_MIN,
        gui_defs.EXPLORER_WIDTH_MIN,
        gui_defs.WORKBENCH_WIDTH_MAX,
    )


def test_layout_initial_sizes_custom():
    layout = CentralLayout(PanelSize(10, 20), PanelSize(30, 40), PanelSize(50, 60))
    assert layout.initial_sizes() == (10, 30, 60)


def test_layout_panels_independent():
    first = CentralLayout()
    second = CentralLayout()
    first.sidebar.min_width = 99
    assert second.sidebar.min_width == gui_defs.SIDEBAR_WIDTH_MIN


def test_workbench_set_text_renders_and_notifies(quiet_logger):
    bench = Workbench(quiet_logger)
    received = []
    bench.subscribe(received.append)
    text = "x = \\frac{a}{b} + \\alpha"
    result = bench.set_text(text)
    assert result == render(text)
    assert received == [result]
    assert bench.text == text
    assert bench.preview == result


def test_workbench_greek_letter(quiet_logger):
    bench = Workbench(quiet_logger)
    assert bench.set_text("$\\alpha$") == "$α$"


def test_workbench_subscribe_returns_callback_and_all_called(quiet_logger):
    bench = Workbench(quiet_logger)
    first, second = [], []
    callback = first.append
    assert bench.subscribe(callback) is callback
    bench.subscribe(second.append)
    bench.set_text("one")
    bench.set_text("two")
    assert first == ["one", "two"]
    assert second == first


def test_workbench_initially_empty(quiet_logger):
    bench = Workbench(quiet_logger)
    assert (bench.text, bench.preview) == ("", "")