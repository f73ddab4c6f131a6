"""Main window settings, central panel layout and the editing workbench."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from baize import gui_defs
from baize.latex import render
from baize.logger import Logger, get_logger

RenderCallback = Callable[[str], object]


def line_number_area_width(block_count: int, digit_width: int) -> int:
    """Return the pixel width of the line-number gutter.

    The gutter holds as many digits as the largest line number (at least
    one), each ``digit_width`` wide, plus six pixels of padding.
    """
    digits = len(str(max(1, block_count)))
    return 6 + digit_width * digits


@dataclass
class MainWindowConfig:
    """Title, object name and default size of the main window.

    An empty title or name and a zero width or height fall back to the
    application defaults.
    """

    title: str = gui_defs.MAIN_WINDOW_TITLE
    obj_name: str = gui_defs.MAIN_WINDOW_OBJ_NAME
    default_width: int = gui_defs.MAIN_WINDOW_DEFAULT_WIDTH
    default_height: int = gui_defs.MAIN_WINDOW_DEFAULT_HEIGHT

    def __post_init__(self) -> None:
        if not self.title:
            self.title = gui_defs.MAIN_WINDOW_TITLE
        if not self.obj_name:
            self.obj_name = gui_defs.MAIN_WINDOW_OBJ_NAME
        if self.default_width == 0:
            self.default_width = gui_defs.MAIN_WINDOW_DEFAULT_WIDTH
        if self.default_height == 0:
            self.default_height = gui_defs.MAIN_WINDOW_DEFAULT_HEIGHT


@dataclass
class PanelSize:
    """Size limits of one panel of the central area."""

    min_width: int = 0
    max_width: int = 0
    min_height: int = 0
    max_height: int = 0


@dataclass
class CentralLayout:
    """Width limits of the sidebar, explorer and workbench panels."""

    sidebar: PanelSize = field(
        default_factory=lambda: PanelSize(gui_defs.SIDEBAR_WIDTH_MIN, gui_defs.SIDEBAR_WIDTH_MAX)
    )
    explorer: PanelSize = field(
        default_factory=lambda: PanelSize(gui_defs.EXPLORER_WIDTH_MIN, gui_defs.EXPLORER_WIDTH_MAX)
    )
    workbench: PanelSize = field(
        default_factory=lambda: PanelSize(
            gui_defs.WORKBENCH_WIDTH_MIN, gui_defs.WORKBENCH_WIDTH_MAX
        )
    )

    def initial_sizes(self) -> tuple[int, int, int]:
        """Return the starting widths: narrowest sidebar and explorer, widest workbench."""
        return (self.sidebar.min_width, self.explorer.min_width, self.workbench.max_width)


class Workbench:
    """Editor text and its rendered preview; subscribers get each new rendering."""

    def __init__(self, logger: Logger | None = None) -> None:
        self.text = ""
        self.preview = ""
        self._subscribers: list[RenderCallback] = []
        self._logger = logger if logger is not None else get_logger()

    def subscribe(self, callback: RenderCallback) -> RenderCallback:
        """Call ``callback`` with the rendered text after every change; return it."""
        self._subscribers.append(callback)
        return callback

    def set_text(self, text: str) -> str:
        """Replace the editor text, render it, notify subscribers and return the result."""
        self.text = text
        self._logger.info("plain_text", text)
        result = render(text)
        self._logger.info("plain_text", result)
        self.preview = result
        for callback in list(self._subscribers):
            callback(result)
        return result