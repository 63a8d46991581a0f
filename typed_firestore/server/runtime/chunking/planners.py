"""Chunk planning for in-memory collections.

This module provides the ChunkPlanner class that splits an input sequence
into fixed-size chunks, keeping track of where each chunk sits in the input.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from ...core.constants import DEFAULT_CHUNK_SIZE
from ...utils.helpers import chunk
from .definitions import ChunkPlan
from .telemetry import log_chunk_plan

T = TypeVar("T")


class ChunkPlanner:
    """Plans consecutive chunks over a sequence.

    Concatenating the items of all planned chunks reproduces the input
    exactly, and the number of chunks is ``ceil(len(items) / chunk_size)``.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Initialize chunk planner.

        Args:
            chunk_size: Maximum number of items per chunk

        Raises:
            ValueError: If chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size

    def plan(self, items: Sequence[T]) -> list[ChunkPlan[T]]:
        """Plan chunks for a sequence.

        Args:
            items: Items to split; an empty sequence yields no chunks

        Returns:
            List of chunk plans in input order
        """
        chunks = chunk(items, self._chunk_size)
        plans = [
            ChunkPlan(
                items=chunk_items,
                chunk_index=index,
                total_chunks=len(chunks),
                offset=index * self._chunk_size,
            )
            for index, chunk_items in enumerate(chunks)
        ]

        log_chunk_plan(
            total_items=len(items),
            chunk_size=self._chunk_size,
            total_chunks=len(plans),
        )

        return plans
