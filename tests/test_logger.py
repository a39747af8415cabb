"""Tests for the logging bridge."""

import io
import logging

import pytest

from prettylog.colors import PlainStyler
from prettylog.levels import INDENT_UNIT as INDENT, LogLevel
from prettylog.logger import (
    TRACE_LEVEL, LoggerManager, PrefixFormatter, current_group_depth, to_log_level,
)


@pytest.fixture
def stream():
    return io.StringIO()


def make_logger(name, stream, level=LogLevel.DEBUG):
    return LoggerManager.get_logger(name, level=level, colors=False, stream=stream)


@pytest.mark.parametrize("levelno,expected", [
    (logging.DEBUG, LogLevel.DEBUG),
    (TRACE_LEVEL, LogLevel.TRACE),
    (logging.INFO, LogLevel.INFO),
    (logging.WARNING, LogLevel.WARN),
    (logging.ERROR, LogLevel.ERROR),
    (logging.CRITICAL, LogLevel.ERROR),
    (12, LogLevel.TRACE),
])
def test_to_log_level(levelno, expected):
    assert to_log_level(levelno) is expected


def test_each_level_gets_its_prefix(stream):
    logger = make_logger("test.levels", stream)
    logger.debug("a")
    logger.trace("b")
    logger.info("c")
    logger.warning("d")
    logger.error("e")
    assert stream.getvalue().splitlines() == ["[debug] a", "[trace] b", "[info]  c", "[warn]  d", "[error] e"]


def test_level_filtering(stream):
    logger = make_logger("test.filter", stream, level=LogLevel.WARN)
    logger.info("hidden")
    logger.trace("hidden")
    logger.warning("shown")
    assert stream.getvalue() == "[warn]  shown\n"


def test_group_depth_from_extra(stream):
    logger = make_logger("test.extra", stream)
    logger.info("nested", extra={"group_depth": 2})
    assert stream.getvalue() == "[info] " + " " * 8 + " nested\n"


def test_group_context_manager(stream):
    logger = make_logger("test.group", stream)
    logger.info("top")
    with LoggerManager.group() as depth:
        assert depth == 1
        logger.info("one")
        with LoggerManager.group():
            logger.error("two")
        logger.info("one again")
    logger.info("top again")
    assert current_group_depth() == 0
    assert stream.getvalue().splitlines() == [
        "[info]  top",
        "[info] " + INDENT + " one",
        "[error]" + INDENT * 2 + " two",
        "[info] " + INDENT + " one again",
        "[info]  top again",
    ]


def test_formatter_with_message_args():
    formatter = PrefixFormatter(PlainStyler())
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "value=%s", ("7",), None)
    assert formatter.format(record) == "[warn]  value=7"


def test_get_logger_is_cached(stream):
    first = make_logger("test.cache", stream)
    assert LoggerManager.get_logger("test.cache") is first
    assert len(first.handlers) == 1


def test_message_separated_from_unpadded_labels(stream):
    logger = make_logger("test.separator", stream)
    logger.error("boom")
    logger.debug("x=%d", 1)
    assert stream.getvalue().splitlines() == ["[error] boom", "[debug] x=1"]


def test_configure_logger_replaces_cached_logger():
    first, second = io.StringIO(), io.StringIO()
    LoggerManager.configure_logger("test.reconfigure", colors=True, stream=first)
    logger = LoggerManager.configure_logger("test.reconfigure", colors=False, stream=second)
    assert LoggerManager.get_logger("test.reconfigure") is logger
    assert len(logger.handlers) == 1
    logger.info("plain")
    assert first.getvalue() == ""
    assert second.getvalue() == "[info]  plain\n"
