"""Utilities package for shift visits."""
from .logging_setup import (
    TRACE,
    get_logger,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "TRACE",
]
