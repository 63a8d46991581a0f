"""Single-document lookups by id."""

from __future__ import annotations

from typing import Any

from ..core.exceptions import DocumentNotFoundError
from ..core.protocols import CollectionReference, Transaction
from ..io.snapshots import read_snapshot
from ..models import FsDocument, make_fs_document


async def get_document(collection_ref: CollectionReference, document_id: str) -> FsDocument[Any]:
    """Read a document that is expected to exist.

    Raises:
        DocumentNotFoundError: If there is no document with this id
    """
    ref = collection_ref.document(document_id)
    doc = await ref.get()

    if not doc.exists:
        raise DocumentNotFoundError(ref.path)

    return make_fs_document(doc)


async def get_document_maybe(
    collection_ref: CollectionReference, document_id: str | None = None
) -> FsDocument[Any] | None:
    """Read a document if both the id and the document exist."""
    if not document_id:
        return None

    doc = await collection_ref.document(document_id).get()

    if not doc.exists:
        return None

    return make_fs_document(doc)


async def get_document_from_transaction(
    transaction: Transaction, collection_ref: CollectionReference, document_id: str
) -> FsDocument[Any]:
    """Read a document that is expected to exist, within a transaction.

    Raises:
        DocumentNotFoundError: If there is no document with this id
    """
    ref = collection_ref.document(document_id)
    doc = await read_snapshot(transaction.get(ref))

    if doc is None or not doc.exists:
        raise DocumentNotFoundError(ref.path)

    return make_fs_document(doc)


async def get_document_from_transaction_maybe(
    transaction: Transaction,
    collection_ref: CollectionReference,
    document_id: str | None = None,
) -> FsDocument[Any] | None:
    if not document_id:
        return None

    doc = await read_snapshot(transaction.get(collection_ref.document(document_id)))

    if doc is None or not doc.exists:
        return None

    return make_fs_document(doc)
