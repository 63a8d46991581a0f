"""Structural interfaces for the document store.

Architecture:
    The helpers never construct store objects themselves. They only call the
    handful of methods below, so any client with the same shape works: the
    async Firestore client (``google.cloud.firestore.AsyncClient``) as well as
    the in-memory fakes used by the test suite.

Design Decision:
    Protocols instead of a base class, so store clients are used as-is
    without wrapping or inheritance.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class DocumentReference(Protocol):
    """Stable handle to a single document."""

    @property
    def id(self) -> str: ...

    @property
    def path(self) -> str: ...

    async def get(self) -> DocumentSnapshot: ...


class DocumentSnapshot(Protocol):
    """Point-in-time read of a single document.

    The last snapshot of a page also serves as the resume cursor for the
    next page.
    """

    @property
    def exists(self) -> bool: ...

    @property
    def id(self) -> str: ...

    @property
    def reference(self) -> DocumentReference: ...

    def to_dict(self) -> dict[str, Any] | None: ...


class Query(Protocol):
    """Immutable query; every modifier returns a new query."""

    def limit(self, count: int) -> Query: ...

    def start_after(self, document_fields_or_snapshot: DocumentSnapshot) -> Query: ...

    async def get(self) -> Sequence[DocumentSnapshot]: ...


class CollectionReference(Protocol):
    """Collection that hands out document references by id."""

    def document(self, document_id: str) -> DocumentReference: ...


class Transaction(Protocol):
    """Transactional reader.

    ``get`` may return snapshots directly, an awaitable, or an async
    iterator of snapshots. Results are normalized by ``io.snapshots``.
    """

    def get(self, ref_or_query: DocumentReference | Query) -> Any: ...
