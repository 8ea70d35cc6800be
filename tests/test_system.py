import logging

import pytest

from portions.system import init_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(level, msg):
    return logging.LogRecord("portions.portion", level, __file__, 1, msg, None, None)


def test_init_logging_installs_handler(root_logger):
    handler = init_logging()

    assert handler in root_logger.handlers
    assert root_logger.level == logging.INFO


def test_init_logging_level(root_logger):
    init_logging(logging.DEBUG)
    assert root_logger.level == logging.DEBUG


def test_init_logging_format(root_logger):
    handler = init_logging()

    assert handler.format(make_record(logging.INFO, "hello")) == "[portion] hello"
    assert handler.format(make_record(logging.DEBUG, "hi")) == "[portion] hi"
    assert (
        handler.format(make_record(logging.WARNING, "careful"))
        == "[portion:warning] careful"
    )
