"""
Logger output format tests
"""

import io

import pytest

from utils.logger import Logger, LogCategory, LogLevel, configure_logger, get_logger


@pytest.fixture
def logger():
    return Logger(min_level=LogLevel.DEBUG, use_colors=False)


def test_message_and_details(logger, capsys):
    logger.log(LogCategory.TRANSMIT, "Matrix send failed", LogLevel.WARN, error="ConnectError", path="/matrix.cgi")

    lines = capsys.readouterr().out.splitlines()
    assert "TRANSMIT" in lines[0]
    assert "Matrix send failed" in lines[0]
    assert lines[1].strip() == "├─ error: ConnectError"
    assert lines[2].strip() == "└─ path: /matrix.cgi"


def test_min_level_filters(capsys):
    logger = Logger(min_level=LogLevel.WARN, use_colors=False)
    logger.info(LogCategory.POLLER, "hidden")
    logger.error(LogCategory.POLLER, "shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_no_ansi_codes_without_colors(logger, capsys):
    logger.info(LogCategory.DEVICE, "plain")
    assert "\033[" not in capsys.readouterr().out


def test_bound_logger_uses_its_category(logger, capsys):
    log = logger.for_category(LogCategory.ANIMATION)
    log.info("Started effect", effect="FIRE")
    log.with_category(LogCategory.MATRIX).info("Preset HEART")

    out = capsys.readouterr().out
    assert "ANIMATION" in out
    assert "effect: FIRE" in out
    assert "MATRIX" in out


def test_configure_logger_updates_singleton(capsys):
    bound = get_logger().for_category(LogCategory.CONFIG)
    try:
        configure_logger(LogLevel.ERROR, use_colors=False)
        bound.warn("suppressed")
        assert capsys.readouterr().out == ""
    finally:
        configure_logger(LogLevel.INFO, use_colors=True)


def test_writes_to_given_stream():
    out = io.StringIO()
    Logger(use_colors=False, stream=out).info(LogCategory.SYSTEM, "to buffer", detail="x")

    lines = out.getvalue().splitlines()
    assert "SYSTEM" in lines[0] and "to buffer" in lines[0]
    assert lines[1].strip() == "└─ detail: x"


def test_detail_keys_may_share_parameter_names(logger, capsys):
    log = logger.for_category(LogCategory.CONFIG)
    log.warn("Unknown log level", level="LOUD", message="m", category="c")
    logger.log(LogCategory.CONFIG, "direct", LogLevel.INFO, None, level="x", details="y")

    out = capsys.readouterr().out
    assert "level: LOUD" in out
    assert "message: m" in out
    assert "category: c" in out
    assert "level: x" in out
    assert "details: y" in out
