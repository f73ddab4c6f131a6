import re
import time

import pytest

from baize.logger import Logger, LogLevel, get_logger

ENTRY = re.compile(
    r"^\[(?P<level>[A-Z]+)\] \[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] "
    r"\[(?P<file>[^:]+): (?P<line>\d+): (?P<func>[^\]]+)\] (?P<msg>.*)$"
)


@pytest.fixture
def logger(tmp_path):
    log = Logger()
    log.initialize(str(tmp_path / "run.log"), LogLevel.DEBUG, False)
    yield log
    log.close()


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_level_ordering():
    formatter = Logger()
    names = [
        ENTRY.match(formatter.format_entry(level, "f.py", "g", 1, "m"))["level"]
        for level in sorted(LogLevel)
    ]
    assert names == ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def test_format_entry_strips_directories():
    entry = Logger().format_entry(LogLevel.ERROR, "C:\\src\\dir/main.cpp", "main", 42, "boom")
    match = ENTRY.match(entry)
    assert match is not None
    assert match["level"] == "ERROR"
    assert match["file"] == "main.cpp"
    assert match["line"] == "42"
    assert match["func"] == "main"
    assert match["msg"] == "boom"


def test_log_joins_arguments_into_file(logger):
    logger.log(LogLevel.INFO, "/a/b/render.cpp", "RenderText", 7, "value=", 3, b"!")
    lines = read_lines(logger.path)
    assert len(lines) == 1
    match = ENTRY.match(lines[0])
    assert match["level"] == "INFO"
    assert match["file"] == "render.cpp"
    assert match["msg"] == "value=3!"


def test_entries_below_level_are_dropped(tmp_path):
    log = Logger()
    log.initialize(str(tmp_path / "w.log"), LogLevel.WARNING, False)
    log.log(LogLevel.INFO, "f.py", "f", 1, "hidden")
    log.log(LogLevel.ERROR, "f.py", "f", 2, "shown")
    log.close()
    lines = read_lines(tmp_path / "w.log")
    assert len(lines) == 1
    assert lines[0].endswith("shown")


def test_convenience_methods_record_caller(logger):
    logger.warning("careful")
    lines = read_lines(logger.path)
    match = ENTRY.match(lines[0])
    assert match["level"] == "WARNING"
    assert match["file"] == "test_logger.py"
    assert match["func"] == "test_convenience_methods_record_caller"
    assert match["msg"] == "careful"


def test_all_levels_written_in_order(logger):
    logger.debug("d")
    logger.info("i")
    logger.warning("w")
    logger.error("e")
    logger.critical("c")
    lines = read_lines(logger.path)
    levels = [ENTRY.match(line)["level"] for line in lines]
    assert levels == ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    assert [ENTRY.match(line)["msg"] for line in lines] == ["d", "i", "w", "e", "c"]


def test_file_is_appended(tmp_path):
    path = tmp_path / "append.log"
    for text in ("first", "second"):
        log = Logger()
        log.initialize(str(path), LogLevel.DEBUG, False)
        log.error(text)
        log.close()
    assert [line.split("] ")[-1] for line in read_lines(path)] == ["first", "second"]


def test_console_output(capsys, tmp_path):
    log = Logger()
    log.initialize(str(tmp_path / "c.log"), LogLevel.DEBUG, True)
    log.info("to console")
    log.close()
    out = capsys.readouterr().out
    assert out.rstrip("\n").endswith("to console")


def test_console_disabled(capsys, logger):
    logger.info("quiet")
    assert capsys.readouterr().out == ""


def test_default_file_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log = Logger()
    log.initialize("", LogLevel.INFO, False)
    log.info("x")
    log.close()
    expected = tmp_path / "logs" / f"{time.strftime('%Y-%m-%d')}.log"
    assert expected.exists()
    assert log.path.name == expected.name


def test_creates_missing_directories(tmp_path):
    path = tmp_path / "deep" / "er" / "run.log"
    log = Logger()
    log.initialize(str(path), LogLevel.INFO, False)
    log.info("hello")
    log.close()
    assert read_lines(path)[0].endswith("hello")


def test_unopenable_file_raises(tmp_path):
    log = Logger()
    with pytest.raises(OSError):
        log.initialize(str(tmp_path), LogLevel.INFO, False)


def test_after_close_nothing_is_written(logger):
    logger.info("kept")
    logger.close()
    logger.error("lost")
    lines = read_lines(logger.path)
    assert len(lines) == 1
    assert ENTRY.match(lines[0])["msg"] == "kept"


def test_get_logger_is_shared():
    first = get_logger()
    assert get_logger() is first
    entry = first.format_entry(LogLevel.INFO, "a/b.py", "f", 3, "m")
    assert ENTRY.match(entry)["file"] == "b.py"