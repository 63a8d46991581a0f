"""Progress output gated behind the ``verbose`` setting."""

from __future__ import annotations

import logging
from collections import Counter

from ..core.settings import get_settings

logger = logging.getLogger("typed_firestore.server")

_counters: Counter[str] = Counter()


def is_verbose() -> bool:
    return get_settings().verbose


def verbose_log(message: str, *args: object) -> None:
    """Log at INFO level when verbose output is enabled."""
    if is_verbose():
        logger.info(message, *args)


def verbose_count(label: str, counters: Counter[str] | None = None) -> int:
    """Increment the counter for ``label`` and report it when verbose.

    Args:
        label: Progress label, also used as the counter key
        counters: Counter owned by the caller; defaults to the process-wide one

    Returns:
        The updated count, tracked even when verbose output is disabled
    """
    counters = _counters if counters is None else counters
    counters[label] += 1
    count = counters[label]
    if is_verbose():
        logger.info("%s: %d", label, count)
    return count


def reset_counters() -> None:
    _counters.clear()
