"""Normalization of store read results.

Store clients disagree on what a read returns. A plain query ``get`` yields a
list of snapshots, a single reference yields one snapshot, and the async
Firestore transaction returns a coroutine resolving to an async generator.
These helpers turn any of those into snapshots.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterable, Iterable
from typing import Any

from ..core.protocols import DocumentSnapshot


async def read_snapshots(result: Any) -> list[DocumentSnapshot]:
    """Resolve a read result into a list of snapshots.

    Args:
        result: A snapshot, an iterable or async iterable of snapshots, or an
            awaitable resolving to any of those

    Returns:
        Snapshots in the order the store returned them
    """
    while inspect.isawaitable(result):
        result = await result

    if isinstance(result, AsyncIterable):
        return [snapshot async for snapshot in result]

    if isinstance(result, Iterable) and not isinstance(result, (str, bytes)):
        return list(result)

    return [result]


async def read_snapshot(result: Any) -> DocumentSnapshot | None:
    """Resolve a single-document read result; None if nothing was returned."""
    snapshots = await read_snapshots(result)
    return snapshots[0] if snapshots else None
