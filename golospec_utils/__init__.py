# golospec_utils/__init__.py
# This file is part of GoloSpec - binary formula core for specification logic
#
# Utility module exports

from .logger import (
    FormulaLogger,
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "FormulaLogger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
