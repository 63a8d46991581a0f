"""Runtime orchestration components.

Query-driven processing lives in ``runtime.processing``; it depends on the
query helpers, which in turn use the chunking definitions exported here.
"""

from .chunking import (
    ChunkExecutor,
    ChunkingOptions,
    ChunkPlan,
    ChunkPlanner,
    ProcessingError,
    ProcessingReport,
    ProcessOptions,
    QueryOptions,
    process_in_chunks,
    process_in_chunks_by_chunk,
)

__all__ = [
    "ChunkExecutor",
    "ChunkPlanner",
    "ChunkPlan",
    "ChunkingOptions",
    "ProcessOptions",
    "QueryOptions",
    "ProcessingError",
    "ProcessingReport",
    "process_in_chunks",
    "process_in_chunks_by_chunk",
]
