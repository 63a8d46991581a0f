"""Option models and result structures for paging and chunking.

This module defines the per-call configuration accepted by the read and
processing helpers, along with the records they produce: chunk plans, pages,
tagged item outcomes, and error reports.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, NamedTuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ...core.constants import DEFAULT_CHUNK_SIZE, MAX_BATCH_SIZE
from ...core.protocols import DocumentSnapshot
from ...models import FsDocument

T = TypeVar("T")
OptionsT = TypeVar("OptionsT", bound=BaseModel)


class QueryOptions(BaseModel):
    """Options for reading documents from a query.

    Attributes:
        disable_batching: Run the query once as-is, keeping any limit already
            set on it. The caller is responsible for bounding the result size.
        batch_size: Documents per read when batching
        limit_to_first_batch: Stop after the first batch. Meant for test runs
            of backend scripts, never for production reads.
    """

    disable_batching: bool = False
    batch_size: int = Field(default=MAX_BATCH_SIZE, gt=0)
    limit_to_first_batch: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


class ChunkingOptions(BaseModel):
    """Options for processing an in-memory collection in chunks.

    Attributes:
        chunk_size: Items per chunk; also the maximum number of concurrent calls
        throttle_secs: Minimum duration of each chunk, in seconds
    """

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    throttle_secs: float = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")


class ProcessOptions(BaseModel):
    """Options for processing the documents of a query page by page."""

    batch_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    limit_to_first_batch: bool = False
    throttle_secs: float = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_query_options(self) -> QueryOptions:
        return QueryOptions(
            batch_size=self.batch_size,
            limit_to_first_batch=self.limit_to_first_batch,
        )


def resolve_options(
    options: OptionsT | Mapping[str, Any] | None, model: type[OptionsT]
) -> OptionsT:
    """Merge caller options over the model defaults.

    Args:
        options: An options instance, a mapping of overrides, or None
        model: Option model supplying the defaults

    Returns:
        A validated options instance

    Raises:
        pydantic.ValidationError: If an override is unknown or out of range
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, Mapping):
        return model.model_validate(dict(options))
    raise TypeError(f"Expected {model.__name__} or a mapping, got {type(options).__name__}")


@dataclass(frozen=True)
class ChunkPlan(Generic[T]):
    """A single chunk of an input sequence.

    Attributes:
        items: Items in this chunk, in input order
        chunk_index: Zero-based index of this chunk
        total_chunks: Number of chunks in the plan
        offset: Position of the first item of this chunk in the input
    """

    items: list[T]
    chunk_index: int
    total_chunks: int
    offset: int = 0

    @property
    def label(self) -> str:
        return f"{self.chunk_index + 1}/{self.total_chunks}"


@dataclass(frozen=True)
class ProcessingError:
    """A failure recorded during a processing run.

    Attributes:
        identifier: Document id, item index, or None for chunk-level failures
        message: Rendered error message
    """

    identifier: str | int | None
    message: str

    def __str__(self) -> str:
        if self.identifier is None:
            return self.message
        return f"{self.identifier}: {self.message}"


@dataclass(frozen=True)
class ItemOutcome(Generic[T]):
    """Tagged result of one unit of work: either a value or an error."""

    value: T | None = None
    error: ProcessingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ProcessingReport:
    """Summary of a processing run over a query.

    Attributes:
        count: Number of documents handed to the callback
        errors: Failures recorded during the run
    """

    count: int = 0
    errors: list[ProcessingError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class DocumentPage(NamedTuple):
    """One page of documents and the cursor for the next page.

    ``next_cursor`` is None when no further page exists.
    """

    documents: list[FsDocument[Any]]
    next_cursor: DocumentSnapshot | None
