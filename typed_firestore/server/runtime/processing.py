"""Page-by-page processing of the documents matched by a query.

Architecture:
    Each run loops over pages read with get_some_documents:
    1. Fetch a page starting after the current cursor
    2. Run the callback over the page, gathered with the throttle delay
    3. Advance the cursor; stop when there is none or after the first
       page when ``limit_to_first_batch`` is set

Design Decisions:
    - Callback failures are recorded and reported, never raised. A run is a
      best-effort sweep, so one bad document must not stop the rest.
    - Read failures are not caught. A failing query ends the run, since
      silently skipping pages would hide missing data.
    - Concurrency is bounded by the page size; pages run one at a time.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from ..core.protocols import DocumentSnapshot, Query
from ..models import FsDocument
from ..queries.documents import get_some_documents
from ..utils.verbose import verbose_count
from ..utils.wait import throttle_delay
from .chunking.definitions import ProcessingReport, ProcessOptions, resolve_options
from .chunking.executors import capture
from .chunking.telemetry import log_processing_complete, log_processing_errors


async def query_and_process(
    query: Query,
    callback: Callable[[FsDocument[Any]], Awaitable[Any]],
    options: ProcessOptions | Mapping[str, Any] | None = None,
) -> ProcessingReport:
    """Run ``callback`` on every document of a query, a page at a time.

    Documents within a page are processed concurrently. A failing callback
    is recorded with the document id and its siblings carry on.

    Returns:
        ProcessingReport with the number of documents processed and the
        recorded failures, which are also logged at the end of the run
    """
    opts = resolve_options(options, ProcessOptions)
    query_options = opts.to_query_options()
    report = ProcessingReport()
    cursor: DocumentSnapshot | None = None
    progress: Counter[str] = Counter()

    while True:
        verbose_count("Processing chunk", progress)

        documents, cursor = await get_some_documents(query, cursor, query_options)

        outcomes, _ = await asyncio.gather(
            asyncio.gather(*(capture(callback, doc, identifier=doc.id) for doc in documents)),
            throttle_delay(opts.throttle_secs),
        )

        report.errors.extend(outcome.error for outcome in outcomes if not outcome.ok)
        report.count += len(documents)

        if cursor is None or opts.limit_to_first_batch:
            break

    log_processing_complete(count=report.count)
    log_processing_errors(report.errors)

    return report


async def query_and_process_by_chunk(
    query: Query,
    callback: Callable[[list[FsDocument[Any]]], Awaitable[Any]],
    options: ProcessOptions | Mapping[str, Any] | None = None,
) -> ProcessingReport:
    """Run ``callback`` once per page with all documents of that page.

    A failing page is recorded as one error without a document id and the
    next page is still processed. Empty pages are not passed to the callback.
    """
    opts = resolve_options(options, ProcessOptions)
    query_options = opts.to_query_options()
    report = ProcessingReport()
    cursor: DocumentSnapshot | None = None
    progress: Counter[str] = Counter()

    while True:
        verbose_count("Processing chunk", progress)

        documents, cursor = await get_some_documents(query, cursor, query_options)

        if not documents:
            break

        outcome, _ = await asyncio.gather(
            capture(callback, documents, identifier=None),
            throttle_delay(opts.throttle_secs),
        )

        if not outcome.ok:
            report.errors.append(outcome.error)
        report.count += len(documents)

        if cursor is None or opts.limit_to_first_batch:
            break

    log_processing_complete(count=report.count)
    log_processing_errors(report.errors)

    return report
