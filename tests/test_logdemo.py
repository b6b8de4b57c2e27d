import logging
import queue
import re

import pytest

from gamedemos.logdemo import FileLogger, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    quiet = logging.getLogger("gfx_device_gl")
    saved_quiet = quiet.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
    root.setLevel(saved_level)
    quiet.setLevel(saved_quiet)


def _drain(channel):
    items = []
    while True:
        try:
            items.append(channel.get_nowait())
        except queue.Empty:
            return items


def test_setup_logging_sends_formatted_lines(restore_logging):
    channel = queue.Queue()
    setup_logging(channel)
    logging.getLogger("demo").info("hello")
    lines = _drain(channel)
    assert len(lines) == 1
    assert re.fullmatch(
        r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\]\[INFO \]\[demo\] hello\n", lines[0]
    )


def test_setup_logging_installs_two_handlers(restore_logging):
    channel = queue.Queue()
    before = len(logging.getLogger().handlers)
    handlers = setup_logging(channel)
    assert len(handlers) == 2
    assert len(logging.getLogger().handlers) == before + 2


def test_debug_messages_are_kept(restore_logging):
    channel = queue.Queue()
    setup_logging(channel)
    logging.getLogger("demo").debug("I am logged!")
    lines = _drain(channel)
    assert len(lines) == 1
    assert lines[0].endswith("[DEBUG][demo] I am logged!\n")


def test_chatty_logger_is_filtered(restore_logging):
    channel = queue.Queue()
    setup_logging(channel)
    chatty = logging.getLogger("gfx_device_gl")
    chatty.info("noise")
    assert _drain(channel) == []
    chatty.warning("important")
    lines = _drain(channel)
    assert len(lines) == 1
    assert lines[0].endswith("[gfx_device_gl] important\n")


def test_file_logger_writes_queued_messages(tmp_path):
    channel = queue.Queue()
    path = tmp_path / "out.log"
    logger = FileLogger(path, channel)
    channel.put("first\n")
    channel.put("second\n")
    assert logger.update() == 2
    logger.close()
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"


def test_file_logger_update_with_nothing_pending(tmp_path):
    channel = queue.Queue()
    path = tmp_path / "out.log"
    with FileLogger(path, channel) as logger:
        assert logger.update() == 0
    assert path.read_text(encoding="utf-8") == ""


def test_file_logger_truncates_existing_file(tmp_path):
    path = tmp_path / "out.log"
    path.write_text("stale content\n", encoding="utf-8")
    channel = queue.Queue()
    with FileLogger(path, channel) as logger:
        channel.put("fresh\n")
        logger.update()
    assert path.read_text(encoding="utf-8") == "fresh\n"


def test_file_logger_accumulates_across_updates(tmp_path):
    path = tmp_path / "out.log"
    channel = queue.Queue()
    with FileLogger(path, channel) as logger:
        channel.put("a\n")
        logger.update()
        channel.put("b\n")
        logger.update()
    assert path.read_text(encoding="utf-8").splitlines() == ["a", "b"]


def test_context_manager_closes_file(tmp_path):
    channel = queue.Queue()
    with FileLogger(tmp_path / "out.log", channel) as logger:
        assert logger.closed is False
    assert logger.closed is True


def test_end_to_end_logging_into_file(tmp_path, restore_logging):
    channel = queue.Queue()
    setup_logging(channel)
    path = tmp_path / "out.log"
    with FileLogger(path, channel) as logger:
        logging.getLogger("demo").info("Key down event")
        logger.update()
    content = path.read_text(encoding="utf-8")
    assert "[INFO ][demo] Key down event\n" in content
    assert "Created log file" in content