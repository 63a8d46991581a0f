"""Structured logging for batched reads and chunk processing.

Plan and per-chunk events are emitted at DEBUG with structured ``extra``
fields. Progress lines go through the verbose channel, and failures are
always logged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ...utils.verbose import verbose_log
from .definitions import ChunkPlan, ProcessingError

logger = logging.getLogger(__name__)


def log_chunk_plan(*, total_items: int, chunk_size: int, total_chunks: int) -> None:
    """Log chunk plan creation.

    Args:
        total_items: Number of items to process
        chunk_size: Maximum items per chunk
        total_chunks: Number of chunks planned
    """
    logger.debug(
        "chunk_plan_created",
        extra={
            "total_items": total_items,
            "chunk_size": chunk_size,
            "total_chunks": total_chunks,
        },
    )


def log_chunk_started(plan: ChunkPlan[Any]) -> None:
    verbose_log(f"Processing chunk {plan.label}")


def log_chunk_error(*, chunk_index: int, error_message: str) -> None:
    """Log a failed chunk; processing continues with the next one.

    Args:
        chunk_index: Zero-based index of the chunk that failed
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={"chunk_index": chunk_index, "error_message": error_message},
    )


def log_batch_read(*, count: int, until: Any) -> None:
    """Log one page read of a batched query.

    Args:
        count: Documents in the page
        until: Order-by value or id of the last document in the page
    """
    verbose_log(f"Read {count} records, until {until}")


def log_first_batch_only() -> None:
    logger.warning("Returning only the first batch of documents (limit_to_first_batch = True)")


def log_processing_complete(*, count: int) -> None:
    verbose_log(f"Processed {count} documents")


def log_processing_errors(errors: Iterable[ProcessingError]) -> None:
    """Report every recorded failure on the error channel."""
    for error in errors:
        logger.error(str(error))
