# tests/test_logger.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Test suite for logging configuration

"""Test suite for the shared formula logger."""

import logging
import pytest

from formula import UnknownOperatorError, parse_operator
from golospec_utils.logger import FormulaFormatter, LogLevel, configure_logging, get_logger, set_log_level


class ListHandler(logging.Handler):
    """Keeps formatted records in memory."""

    def __init__(self):
        super().__init__(logging.DEBUG)
        self.setFormatter(FormulaFormatter())
        self.lines = []

    def emit(self, record):
        self.lines.append(self.format(record))


@pytest.fixture
def recorded():
    logger = get_logger()
    previous = logger.level
    handler = ListHandler()
    logger.logger.addHandler(handler)
    yield handler.lines
    logger.logger.removeHandler(handler)
    logger.logger.setLevel(previous)
    for existing in logger.logger.handlers:
        existing.setLevel(previous)


class TestLogger:
    def test_global_instance(self):
        assert get_logger() is get_logger()

    def test_does_not_propagate(self):
        assert get_logger().logger.propagate is False

    @pytest.mark.parametrize("verbose, debug, expected", [
        (False, False, logging.WARNING),
        (True, False, logging.INFO),
        (True, True, logging.DEBUG),
        (False, True, logging.DEBUG),
    ])
    def test_configure_logging(self, recorded, verbose, debug, expected):
        configure_logging(verbose=verbose, debug=debug)

        assert get_logger().level == expected

    def test_info_is_plain(self, recorded):
        set_log_level(LogLevel.INFO)
        get_logger().info("(x + y)")
        get_logger().debug("hidden")

        assert recorded == ["(x + y)"]

    def test_failed_lookup_logged_at_debug(self, recorded):
        set_log_level(LogLevel.DEBUG)

        with pytest.raises(UnknownOperatorError):
            parse_operator("&&")

        assert recorded == ["[DEBUG] Operator lookup failed for '&&' (14 symbols known)"]

    def test_errors_are_labelled(self, recorded):
        set_log_level(LogLevel.WARNING)
        get_logger().warning("odd formula")
        get_logger().error("bad formula")

        assert recorded == ["[WARNING] odd formula", "[ERROR] bad formula"]

    def test_logging_package_is_project_scoped(self):
        import golospec_utils

        assert get_logger().__class__.__module__ == "golospec_utils.logger"
        assert golospec_utils.get_logger is get_logger
