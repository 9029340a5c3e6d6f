import logging

import pytest

import logger_setup
from config import LOG_FILENAME


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_logger_writes_to_file(tmp_path, restore_root_logger):
    logger = logger_setup.setup_global_logger(tmp_path)
    logging.info("hello from the test")
    for handler in logger.handlers:
        handler.flush()

    text = (tmp_path / LOG_FILENAME).read_text(encoding="utf-8")
    assert "Logger initialized." in text
    assert "hello from the test" in text
    assert "INFO" in text


def test_large_log_file_is_rotated(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setattr(logger_setup, "LOG_MAX_BYTES", 10)
    (tmp_path / LOG_FILENAME).write_text("x" * 100, encoding="utf-8")

    logger_setup.setup_global_logger(tmp_path)

    old_log = tmp_path / LOG_FILENAME.replace(".log", ".log.old")
    assert old_log.read_text(encoding="utf-8") == "x" * 100
    assert "x" * 100 not in (tmp_path / LOG_FILENAME).read_text(encoding="utf-8")


def test_setup_twice_does_not_duplicate_handlers(tmp_path, restore_root_logger):
    logger_setup.setup_global_logger(tmp_path)
    logger = logger_setup.setup_global_logger(tmp_path)
    assert len(logger.handlers) == 2
