"""Utility functions."""

from .helpers import chunk, get_error_message, get_path, last, take
from .verbose import is_verbose, reset_counters, verbose_count, verbose_log
from .wait import throttle_delay

__all__ = [
    "chunk",
    "take",
    "last",
    "get_path",
    "get_error_message",
    "throttle_delay",
    "is_verbose",
    "verbose_log",
    "verbose_count",
    "reset_counters",
]
