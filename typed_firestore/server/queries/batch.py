"""Batched retrieval of every document matched by a capped query."""

from __future__ import annotations

from typing import Any

from ..core.constants import MAX_BATCH_SIZE
from ..core.protocols import Query
from ..models import FsDocument, make_fs_document
from ..runtime.chunking.telemetry import log_batch_read, log_first_batch_only
from ..utils.helpers import get_path


async def get_documents_batch(
    query: Query,
    *,
    batch_size: int = MAX_BATCH_SIZE,
    order_by_field: str | None = None,
    limit_to_first_batch: bool = False,
) -> list[FsDocument[Any]]:
    """Read all documents of a query, one capped batch at a time.

    The query must already be limited to ``batch_size``. Each full batch is
    followed by a read that starts after its last document, until a batch
    comes back short or empty. The store never returns more than
    ``MAX_BATCH_SIZE`` documents per read, so a batch is only short when it
    holds fewer than the smaller of the two.

    Args:
        query: Query with its limit applied
        batch_size: The limit applied to the query
        order_by_field: Dotted field path reported in progress output instead
            of the document id
        limit_to_first_batch: Return after the first batch

    Returns:
        Documents of all batches in query order
    """
    # For easy testing an algorithm sometimes only needs part of a collection.
    # This should never be used in production, hence the warning.
    if limit_to_first_batch:
        log_first_batch_only()

    full_batch = min(batch_size, MAX_BATCH_SIZE)
    results: list[FsDocument[Any]] = []

    while True:
        snapshots = list(await query.get())

        if not snapshots:
            return results

        last_snapshot = snapshots[-1]
        results.extend(make_fs_document(snapshot) for snapshot in snapshots)

        until = get_path(last_snapshot.to_dict(), order_by_field) if order_by_field else None
        log_batch_read(count=len(snapshots), until=until if until is not None else last_snapshot.id)

        if len(snapshots) < full_batch or limit_to_first_batch:
            return results

        query = query.start_after(last_snapshot)
