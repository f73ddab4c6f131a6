"""A small file-and-console logger with a shared default instance."""

from __future__ import annotations

import sys
import threading
import time
from enum import IntEnum
from pathlib import Path
from typing import TextIO


class LogLevel(IntEnum):
    """Severity of a log entry, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


def _to_text(value: object) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _level_name(level: object) -> str:
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


class Logger:
    """Writes formatted entries to the console and, once initialised, a file."""

    def __init__(self) -> None:
        self.level = LogLevel.INFO
        self.console_output = True
        self.path: Path | None = None
        self._file: TextIO | None = None
        self._lock = threading.Lock()

    def initialize(
        self,
        filename: str = "",
        level: LogLevel = LogLevel.INFO,
        console_output: bool = True,
    ) -> None:
        """Set the level and console flag and open ``filename`` for appending.

        An empty name means ``logs/YYYY-MM-DD.log``.  Raises OSError if the
        file cannot be opened.
        """
        with self._lock:
            self.level = level
            self.console_output = console_output
            self._close_file()

            if filename:
                path = Path(filename)
            else:
                path = Path("logs") / f"{time.strftime('%Y-%m-%d')}.log"
            self.path = path

            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                self._file = path.open("a", encoding="utf-8")
            except OSError as exc:
                raise OSError(f"无法打开日志文件: {path}") from exc

    def format_entry(
        self, level: LogLevel, file: str, func: str, line: int, message: str
    ) -> str:
        """Return one formatted log line, with only the base name of ``file``."""
        filename = file.replace("\\", "/").rsplit("/", 1)[-1]
        stamp = time.strftime("%Y-%m-%d %H:%M:%S")
        return f"[{_level_name(level)}] [{stamp}] [{filename}: {line}: {func}] {message}"

    def log(self, level: LogLevel, file: str, func: str, line: int, *args: object) -> None:
        """Join ``args`` into a message and write it if ``level`` is enabled."""
        if int(level) < int(self.level):
            return
        message = "".join(_to_text(arg) for arg in args)
        with self._lock:
            entry = self.format_entry(level, file, func, line, message)
            if self.console_output:
                print(entry, file=sys.stdout)
            if self._file is not None:
                self._file.write(entry + "\n")
                self._file.flush()

    def _log_here(self, level: LogLevel, args: tuple[object, ...]) -> None:
        frame = sys._getframe(2)
        code = frame.f_code
        self.log(level, code.co_filename, code.co_name, frame.f_lineno, *args)

    def debug(self, *args: object) -> None:
        """Log at DEBUG level, tagged with the caller's location."""
        self._log_here(LogLevel.DEBUG, args)

    def info(self, *args: object) -> None:
        """Log at INFO level, tagged with the caller's location."""
        self._log_here(LogLevel.INFO, args)

    def warning(self, *args: object) -> None:
        """Log at WARNING level, tagged with the caller's location."""
        self._log_here(LogLevel.WARNING, args)

    def error(self, *args: object) -> None:
        """Log at ERROR level, tagged with the caller's location."""
        self._log_here(LogLevel.ERROR, args)

    def critical(self, *args: object) -> None:
        """Log at CRITICAL level, tagged with the caller's location."""
        self._log_here(LogLevel.CRITICAL, args)

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def close(self) -> None:
        """Close the log file, if one is open."""
        with self._lock:
            self._close_file()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_default_logger: Logger | None = None
_default_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = Logger()
        return _default_logger