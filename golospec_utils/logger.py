# golospec_utils/logger.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Logging utility for formula construction and analysis with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class FormulaLogger:
    """Centralized logger for formula reading and analysis with structured output."""

    def __init__(self, name: str = "golo_spec", level: LogLevel = LogLevel.INFO):
        """Initialize the formula logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(FormulaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> int:
        return self.logger.level

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula events
    def unknown_operator(self, symbol: str, known: int):
        """Log a failed operator lookup."""
        self.debug(f"Operator lookup failed for {symbol!r} ({known} symbols known)")

    def formula_read(self, text: str, tree):
        """Log a successful canonical-form read.

        The tree is rendered only when debug output is enabled.
        """
        if self.logger.isEnabledFor(logging.DEBUG):
            self.debug(f"Read {text!r} as {tree.render()}")

    def analysis_result(self, analysis: str, tree, result):
        """Log the outcome of an external analysis.

        Trees (the input, and the result when it is one) are rendered only
        when debug output is enabled.
        """
        if self.logger.isEnabledFor(logging.DEBUG):
            shown = result.render() if hasattr(result, "render") else result
            self.debug(f"{analysis}({tree.render()}) -> {shown}")


class FormulaFormatter(logging.Formatter):
    """Custom formatter with clean output for user-facing levels."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[FormulaLogger] = None


def get_logger(name: str = "golo_spec") -> FormulaLogger:
    """Get or create the global formula logger instance.

    Args:
        name: Logger name (default: "golo_spec")

    Returns:
        FormulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FormulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
