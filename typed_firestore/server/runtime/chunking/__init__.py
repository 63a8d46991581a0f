"""Chunking layer for pagination options and bulk processing.

Architecture:
    The chunking layer consists of:
    - definitions.py: Option models and result records (QueryOptions,
      ChunkingOptions, ProcessOptions, ChunkPlan, ProcessingError, ...)
    - planners.py: Splits in-memory collections into chunks
    - executors.py: Runs callbacks over chunks with bounded concurrency
    - telemetry.py: Structured logging and progress output
"""

from __future__ import annotations

from .definitions import (
    ChunkingOptions,
    ChunkPlan,
    DocumentPage,
    ItemOutcome,
    ProcessingError,
    ProcessingReport,
    ProcessOptions,
    QueryOptions,
    resolve_options,
)
from .executors import ChunkExecutor, capture, process_in_chunks, process_in_chunks_by_chunk
from .planners import ChunkPlanner

__all__ = [
    "QueryOptions",
    "ChunkingOptions",
    "ProcessOptions",
    "resolve_options",
    "ChunkPlan",
    "DocumentPage",
    "ItemOutcome",
    "ProcessingError",
    "ProcessingReport",
    "ChunkPlanner",
    "ChunkExecutor",
    "capture",
    "process_in_chunks",
    "process_in_chunks_by_chunk",
]
