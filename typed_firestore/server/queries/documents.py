"""Multi-document reads: full result sets, single pages, and first matches."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.constants import MAX_BATCH_SIZE
from ..core.protocols import DocumentSnapshot, Query, Transaction
from ..io.snapshots import read_snapshots
from ..models import FsDocument, make_fs_document
from ..runtime.chunking.definitions import DocumentPage, QueryOptions, resolve_options
from ..runtime.chunking.telemetry import log_first_batch_only
from .batch import get_documents_batch


async def get_documents(
    query: Query, options: QueryOptions | Mapping[str, Any] | None = None
) -> list[FsDocument[Any]]:
    """Read all documents matched by a query.

    Reading a whole collection in one request becomes a problem once it grows
    past a few hundred documents: requests time out, and the store returns an
    incomplete snapshot instead of an error when asked for too much. Batching
    is therefore enabled by default; any limit set on the query is replaced by
    ``batch_size``.

    With ``disable_batching`` the query runs once exactly as given, which
    preserves its own limit.

    ``limit_to_first_batch`` is for test runs of backend scripts, to validate
    logic without waiting for a whole collection to be read.
    """
    opts = resolve_options(options, QueryOptions)

    if opts.disable_batching:
        return [make_fs_document(snapshot) for snapshot in await query.get()]

    return await get_documents_batch(
        query.limit(opts.batch_size),
        batch_size=opts.batch_size,
        limit_to_first_batch=opts.limit_to_first_batch,
    )


async def get_some_documents(
    query: Query,
    start_after_snapshot: DocumentSnapshot | None = None,
    options: QueryOptions | Mapping[str, Any] | None = None,
) -> DocumentPage:
    """Read a single page of a query.

    Returns:
        DocumentPage of ``(documents, next_cursor)``. Pass ``next_cursor`` back
        in as ``start_after_snapshot`` to read the following page. It is None
        once the last page has been read, and always None with
        ``limit_to_first_batch``.
    """
    opts = resolve_options(options, QueryOptions)

    if opts.limit_to_first_batch:
        log_first_batch_only()

    paged_query = query.limit(opts.batch_size)
    if start_after_snapshot is not None:
        paged_query = paged_query.start_after(start_after_snapshot)

    snapshots = list(await paged_query.get())

    if not snapshots:
        return DocumentPage([], None)

    documents = [make_fs_document(snapshot) for snapshot in snapshots]

    # A short page is the last page; reads are capped at MAX_BATCH_SIZE by the store
    full_page = min(opts.batch_size, MAX_BATCH_SIZE)
    next_cursor = snapshots[-1] if len(documents) >= full_page else None

    return DocumentPage(documents, None if opts.limit_to_first_batch else next_cursor)


async def get_documents_from_transaction(
    transaction: Transaction, query: Query
) -> list[FsDocument[Any]]:
    """Read all documents of a query within a transaction."""
    snapshots = await read_snapshots(transaction.get(query))
    return [make_fs_document(snapshot) for snapshot in snapshots]


async def get_first_document(query: Query) -> FsDocument[Any] | None:
    """Read the first document of a (typically sorted) query.

    get_documents replaces any query limit with its batch size, so this is
    the way to read just the top result. Alternatively use get_documents
    with ``disable_batching=True``, which keeps the limit set on the query.
    """
    snapshots = list(await query.limit(1).get())

    if not snapshots:
        return None

    return make_fs_document(snapshots[0])
