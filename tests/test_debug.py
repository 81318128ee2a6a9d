"""
Tests for the logging facade.
"""

import logging

import pytest

from four_in_a_row.debug import (DebugLevel, DebugManager, LOGGER_NAME, console_handler,
                                 parse_level)


@pytest.fixture
def manager():
    return DebugManager(DebugLevel.DEBUG)


@pytest.mark.parametrize("text, expected", [
    ("debug", DebugLevel.DEBUG),
    (" TRACE ", DebugLevel.TRACE),
    ("none", DebugLevel.NONE),
    ("loud", None),
    ("", None),
])
def test_parse_level(text, expected):
    assert parse_level(text) is expected


def test_level_filtering(manager):
    assert manager.should_log(DebugLevel.ERROR)
    assert manager.should_log(DebugLevel.DEBUG)
    assert not manager.should_log(DebugLevel.TRACE)
    assert not manager.should_log(DebugLevel.NONE)


def test_component_filtering(manager):
    manager.configure(components=["engine"])

    assert manager.should_log(DebugLevel.INFO, "engine")
    assert not manager.should_log(DebugLevel.INFO, "env")
    assert manager.should_log(DebugLevel.INFO)


def test_disabled(manager):
    manager.configure(enabled=False)
    assert not manager.should_log(DebugLevel.ERROR)


def test_messages_reach_logger(manager, caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.info("game started", "engine")

    assert "[engine] game started" in caplog.text


def test_set_from_string(manager):
    assert manager.set_from_string("warning")
    assert manager.level == DebugLevel.WARNING
    assert not manager.set_from_string("shouting")
    assert manager.level == DebugLevel.WARNING


def test_timer(manager):
    manager.start_timer("probe")
    elapsed = manager.end_timer("probe")

    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("probe") is None


def test_log_file(manager, tmp_path):
    log_file = tmp_path / "engine.log"
    manager.configure(log_file=str(log_file))
    manager.warning("written to file", "cli")
    manager.configure(log_file="")

    assert "[cli] written to file" in log_file.read_text()


def test_console_handler_added_once():
    DebugManager()
    DebugManager(DebugLevel.ERROR)

    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert handlers.count(console_handler) == 1
