import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from backend.config.logging_config import configure_logging
from backend.config.settings import Settings


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_console_logging(restore_root_logger):
    configure_logging(Settings(_env_file=None, log_format="json", log_level="WARNING"))

    root = restore_root_logger
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_text_logging_with_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "community.log"
    configure_logging(Settings(_env_file=None, log_format="text", log_file=str(log_file)))

    root = restore_root_logger
    assert {type(h) for h in root.handlers} == {logging.StreamHandler, logging.FileHandler}
    assert not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    logging.getLogger("backend.test").info("board created")
    for handler in root.handlers:
        handler.flush()
    assert "board created" in log_file.read_text()
    for handler in root.handlers:
        handler.close()
