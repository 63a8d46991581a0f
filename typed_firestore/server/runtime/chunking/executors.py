"""Chunk execution over in-memory collections.

This module provides the ChunkExecutor class, which runs an async callback
over the chunks produced by ChunkPlanner. Chunks run one after the other;
work inside a chunk runs concurrently, so at most ``chunk_size`` calls are in
flight at any time.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, TypeVar

from ...core.exceptions import ChunkProcessingError
from ...utils.helpers import get_error_message
from ...utils.wait import throttle_delay
from .definitions import ChunkingOptions, ItemOutcome, ProcessingError, resolve_options
from .planners import ChunkPlanner
from .telemetry import log_chunk_error, log_chunk_started, log_processing_errors

T = TypeVar("T")
R = TypeVar("R")


async def capture(
    fn: Callable[[T], Awaitable[R]], arg: T, *, identifier: str | int | None
) -> ItemOutcome[R]:
    """Run ``fn(arg)`` and tag the outcome instead of raising.

    Args:
        fn: Async callback
        arg: Argument for the callback
        identifier: Recorded with the error if the callback fails

    Returns:
        ItemOutcome holding either the value or a ProcessingError
    """
    try:
        return ItemOutcome(value=await fn(arg))
    except Exception as e:
        return ItemOutcome(error=ProcessingError(identifier, get_error_message(e)))


class ChunkExecutor:
    """Executes a callback over a collection in chunks.

    Two modes are supported: ``map_items`` calls the callback once per item,
    ``map_chunks`` once per chunk with the whole chunk.
    """

    def __init__(self, options: ChunkingOptions | None = None) -> None:
        """Initialize chunk executor.

        Args:
            options: Chunk size and throttle; defaults to ChunkingOptions()
        """
        self._options = options or ChunkingOptions()
        self._planner = ChunkPlanner(self._options.chunk_size)

    async def map_items(
        self, items: Sequence[T], process_fn: Callable[[T], Awaitable[R]]
    ) -> list[R | None]:
        """Apply ``process_fn`` to every item, concurrently within each chunk.

        A failing item does not affect its siblings or later chunks. Its slot
        in the result holds None, and the failure is logged with the item's
        index once all chunks are done.

        Args:
            items: Items to process
            process_fn: Async callback for a single item

        Returns:
            One result per item, in input order
        """
        results: list[R | None] = []
        errors: list[ProcessingError] = []

        for plan in self._planner.plan(items):
            log_chunk_started(plan)

            outcomes, _ = await asyncio.gather(
                asyncio.gather(
                    *(
                        capture(process_fn, item, identifier=plan.offset + position)
                        for position, item in enumerate(plan.items)
                    )
                ),
                throttle_delay(self._options.throttle_secs),
            )

            for outcome in outcomes:
                results.append(outcome.value)
                if not outcome.ok:
                    errors.append(outcome.error)

        log_processing_errors(errors)

        return results

    async def map_chunks(
        self, items: Sequence[T], process_fn: Callable[[list[T]], Awaitable[Sequence[R]]]
    ) -> list[R]:
        """Apply ``process_fn`` to each chunk in turn.

        Every chunk is attempted even if an earlier one failed. The call only
        succeeds if all chunks did.

        Args:
            items: Items to process
            process_fn: Async callback receiving a whole chunk and returning
                its results

        Returns:
            Results of all chunks, concatenated in chunk order

        Raises:
            ChunkProcessingError: If any chunk failed. Results of the chunks
                that succeeded are available as ``partial_results``.
        """
        results: list[R] = []
        messages: list[str] = []

        for plan in self._planner.plan(items):
            log_chunk_started(plan)

            outcome, _ = await asyncio.gather(
                capture(process_fn, plan.items, identifier=None),
                throttle_delay(self._options.throttle_secs),
            )

            if outcome.ok:
                results.extend(outcome.value or [])
            else:
                log_chunk_error(chunk_index=plan.chunk_index, error_message=outcome.error.message)
                messages.append(outcome.error.message)

        if messages:
            raise ChunkProcessingError(messages, partial_results=results)

        return results


async def process_in_chunks(
    all_items: Sequence[T],
    process_fn: Callable[[T], Awaitable[R]],
    options: ChunkingOptions | Mapping[str, Any] | None = None,
) -> list[R | None]:
    """Iterate over a potentially large set of items and process them in chunks.

    Values returned by ``process_fn`` are aggregated in input order. Progress
    is logged per chunk when verbose output is enabled.
    """
    executor = ChunkExecutor(resolve_options(options, ChunkingOptions))
    return await executor.map_items(all_items, process_fn)


async def process_in_chunks_by_chunk(
    all_items: Sequence[T],
    process_fn: Callable[[list[T]], Awaitable[Sequence[R]]],
    options: ChunkingOptions | Mapping[str, Any] | None = None,
) -> list[R]:
    """Same as process_in_chunks, but passing the whole chunk to the callback."""
    executor = ChunkExecutor(resolve_options(options, ChunkingOptions))
    return await executor.map_chunks(all_items, process_fn)
