"""Small sequence and mapping helpers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive lists of ``size``; the last may be shorter."""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def take(items: Sequence[T], count: int) -> list[T]:
    return list(items[:count])


def last(items: Sequence[T]) -> T | None:
    return items[-1] if items else None


def get_path(data: Mapping[str, Any] | None, path: str, default: Any = None) -> Any:
    """Read a dotted field path such as ``"address.city"`` from nested mappings."""
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


def get_error_message(error: BaseException) -> str:
    """Render an exception for error reports.

    Exceptions raised without a message fall back to their class name.
    """
    message = str(error)
    return message if message else type(error).__name__
