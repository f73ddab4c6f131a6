"""Shared user-interface constants, dialog texts and style helpers."""

from __future__ import annotations

from typing import NamedTuple


class Margins(NamedTuple):
    """Content margins in pixels."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


APP_NAME = "白泽笔记"
MAIN_WINDOW_TITLE = "白泽笔记 -- Markdown Editor Powered By Qt Widgets"
MAIN_WINDOW_OBJ_NAME = "HMainWindow"
MAIN_WINDOW_DEFAULT_WIDTH = 1440
MAIN_WINDOW_DEFAULT_HEIGHT = 960

ZERO_SPLITTER_WIDTH = 0
MAIN_SPLITTER_WIDTH = 3
WORKBENCH_SPLITTER_WIDTH = 1
EDITOR_PREVIEW_SPLITTER_WIDTH = 1

ZERO_SPACING = 0
ZERO_MARGINS = Margins(0, 0, 0, 0)

SIDEBAR_WIDTH_MIN = 50
SIDEBAR_WIDTH_MAX = 50
SIDEBAR_SPACING = 10
SIDEBAR_MARGINS = Margins(8, 20, 2, 20)

EXPLORER_WIDTH_MIN = 250
EXPLORER_WIDTH_MAX = 900
EXPLORER_MARGINS = Margins(10, 20, 10, 20)

WORKBENCH_WIDTH_MIN = 500
WORKBENCH_WIDTH_MAX = 1200
WORKBENCH_SPACING = 2
WORKBENCH_MARGINS = Margins(5, 2, 5, 2)

WORKBENCH_MENU_HEIGHT = 50

EDITOR_PREVIEW_MARGINS = Margins(0, 0, 0, 0)

MSG_TYPE_SUCCESS = "成功"
MSG_TYPE_ERROR = "错误"
MSG_TYPE_WARNING = "警告"

# File dialog texts.
FILE_TITLE = "新建文件"
FILE_NAME = "文件名"
FILE_ALREADY_EXIST = "文件已经存在!"
FILE_CREATE_SUCCESS = "文件创建成功!"
FILE_CREATE_FAILED = "文件创建失败!"
FILE_OPEN = "打开文件/文件列表"
FILE_ALL_FILES = "所有文件(*)"
FILE_SELECT = "选中文件：\n"
FILE_SELECTED = "选定的文件"

# Folder dialog texts; FOLDER_SELECT takes the folder path via str.format.
FOLDER_TITLE = "新建文件夹"
FOLDER_NAME = "文件夹名称"
FOLDER_ALREADY_EXIST = "文件夹已经存在!"
FOLDER_CREATE_SUCCESS = "文件夹创建成功!"
FOLDER_CREATE_FAILED = "文件夹创建失败!"
FOLDER_SELECT = "选中文件夹：\n{}"
FOLDER_SELECTED = "选定的文件夹"

# Error message texts.
ERR_FILE_ALREADY_EXIST = "文件已经存在!"
ERR_FILE_CREATE_SUCCESS = "文件创建成功!"
ERR_FILE_CREATE_FAILED = "文件创建失败!"
ERR_FILE_NAME_EMPTY = "文件名为空!"
ERR_FOLDER_ALREADY_EXIST = "文件夹已经存在!"
ERR_FOLDER_CREATE_SUCCESS = "文件夹创建成功!"
ERR_FOLDER_CREATE_FAILED = "文件夹创建失败!"
ERR_FOLDER_NAME_EMPTY = "文件夹名称为空!"


def push_button_style(align: str, padding: int, radius: int) -> str:
    """Return the push-button style sheet for the given alignment, padding and radius."""
    return (
        "QPushButton {"
        "  background-color: #3498db;"
        f"  text-align: {align};"
        f"  padding: {padding}px 1px;"
        "  color: #ecf0f1;"
        f"  border-radius: {radius}px;"
        "  font-weight: bold;"
        "  border: 2px solid #2980b9;"
        "}"
        "QPushButton:hover {"
        "  background-color: #34495e;"
        "}"
        "QPushButton:pressed {"
        "  background-color: #1abc9c;"
        "}"
    )