"""Throttle delay used alongside chunk and page work."""

from __future__ import annotations

import asyncio


async def throttle_delay(seconds: float) -> None:
    """Sleep for ``seconds``; return immediately when zero.

    Gathered together with the real work, so a chunk takes at least this
    long but the delay never adds to work that is already slower.
    """
    if seconds > 0:
        await asyncio.sleep(seconds)
