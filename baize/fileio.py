"""Reading documents and creating new files and folders."""

from __future__ import annotations

import os
from pathlib import Path

from baize import gui_defs
from baize.errors import (
    FileAlreadyExistsError,
    NewFileError,
    NewFolderError,
    OpenFileError,
)

MAX_FILE_SIZE = 10 * 1024 * 1024
"""Largest file, in bytes, that :func:`read_file` will load."""


class FileReadError(OpenFileError):
    """A file could not be read; ``title`` is the message-box title to show."""

    def __init__(self, message: str = "", *, title: str = gui_defs.MSG_TYPE_ERROR) -> None:
        super().__init__(message)
        self.title = title


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the UTF-8 text of ``path`` with line endings normalised to ``\\n``.

    Raises FileReadError if the file is missing, larger than
    :data:`MAX_FILE_SIZE`, cannot be opened or cannot be read.
    """
    name = os.fspath(path)
    file_path = Path(name)
    if not name or not file_path.exists():
        raise FileReadError(f"文件不存在:{name}")

    size = file_path.stat().st_size
    if size > MAX_FILE_SIZE:
        raise FileReadError(f"文件过大，无法读取:{name}大小:{size}字节")

    try:
        handle = file_path.open("r", encoding="utf-8", errors="replace", newline=None)
    except OSError as exc:
        raise FileReadError(f"无法打开文件:{name}错误:{exc.strerror or exc}") from exc

    with handle:
        try:
            return handle.read()
        except OSError as exc:
            raise FileReadError(f"读取文件时发生错误:{name}") from exc


def create_file(path: str | os.PathLike[str]) -> Path:
    """Create an empty file at ``path`` and return its path.

    Raises NewFileError if the name is empty or the file cannot be created,
    and FileAlreadyExistsError if something already exists there.
    """
    name = os.fspath(path)
    if not name:
        raise NewFileError(gui_defs.ERR_FILE_NAME_EMPTY)

    file_path = Path(name)
    if file_path.exists():
        raise FileAlreadyExistsError(gui_defs.ERR_FILE_ALREADY_EXIST)

    try:
        with file_path.open("wb"):
            pass
    except OSError as exc:
        raise NewFileError(gui_defs.ERR_FILE_CREATE_FAILED) from exc
    return file_path


def create_folder(parent: str | os.PathLike[str], name: str) -> Path:
    """Create the folder ``name`` directly inside ``parent`` and return its path.

    Raises NewFolderError if either part is empty or the folder cannot be
    made (it exists already, or ``parent`` does not).
    """
    parent_name = os.fspath(parent)
    if not parent_name:
        raise NewFolderError(gui_defs.ERR_FOLDER_CREATE_FAILED)
    if not name:
        raise NewFolderError(gui_defs.ERR_FOLDER_NAME_EMPTY)

    folder = Path(parent_name) / name
    try:
        folder.mkdir()
    except OSError as exc:
        raise NewFolderError(gui_defs.ERR_FOLDER_CREATE_FAILED) from exc
    return folder