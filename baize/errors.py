"""Error codes and the exceptions that carry them."""

from __future__ import annotations

from enum import IntEnum


class ErrCode(IntEnum):
    """Numeric result codes used across the editor."""

    OK = 0
    FAILURE = 1
    NEW_FILE_FAILED = 2
    NEW_FILE_EXIST = 3
    NEW_FOLDER_FAILED = 4
    OPEN_FILE_FAILED = 5
    OPEN_FOLDER_FAILED = 6
    SAVE_FILE_FAILED = 7
    SAVE_FOLDER_FAILED = 8
    CLOSE_FILE_FAILED = 9
    CLOSE_FOLDER_FAILED = 10


class HemyError(Exception):
    """Base class for editor errors; ``code`` names the failure."""

    code: ErrCode = ErrCode.FAILURE

    def __init__(self, message: str = "", *, code: ErrCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class NewFileError(HemyError):
    """A new file could not be created."""

    code = ErrCode.NEW_FILE_FAILED


class FileAlreadyExistsError(HemyError):
    """A new file was requested where one already exists."""

    code = ErrCode.NEW_FILE_EXIST


class NewFolderError(HemyError):
    """A new folder could not be created."""

    code = ErrCode.NEW_FOLDER_FAILED


class OpenFileError(HemyError):
    """A file could not be opened."""

    code = ErrCode.OPEN_FILE_FAILED


class OpenFolderError(HemyError):
    """A folder could not be opened."""

    code = ErrCode.OPEN_FOLDER_FAILED