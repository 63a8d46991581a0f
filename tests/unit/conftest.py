"""Shared fixtures and in-memory store fakes for unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from typed_firestore.server.core.settings import reset_settings
from typed_firestore.server.utils.verbose import reset_counters


class FakeReference:
    """Document reference backed by a FakeStore."""

    def __init__(self, store: FakeStore, collection: str, document_id: str) -> None:
        self._store = store
        self.id = document_id
        self.path = f"{collection}/{document_id}"

    async def get(self) -> FakeSnapshot:
        return self._store.snapshot(self)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FakeReference) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)


class FakeSnapshot:
    """Snapshot of a document; ``exists`` is False when data is None."""

    def __init__(self, reference: FakeReference, data: dict[str, Any] | None) -> None:
        self.id = reference.id
        self.reference = reference
        self.exists = data is not None
        self._data = data

    def to_dict(self) -> dict[str, Any] | None:
        return dict(self._data) if self._data is not None else None


class FakeQuery:
    """Immutable query over one collection, in insertion order."""

    def __init__(
        self,
        store: FakeStore,
        collection: str,
        *,
        limit: int | None = None,
        start_after: str | None = None,
    ) -> None:
        self._store = store
        self._collection = collection
        self.limit_value = limit
        self.start_after_id = start_after

    def limit(self, count: int) -> FakeQuery:
        return FakeQuery(
            self._store, self._collection, limit=count, start_after=self.start_after_id
        )

    def start_after(self, snapshot: FakeSnapshot) -> FakeQuery:
        return FakeQuery(self._store, self._collection, limit=self.limit_value, start_after=snapshot.id)

    async def get(self) -> list[FakeSnapshot]:
        self._store.reads.append(self)
        if self._store.fail_reads:
            raise ConnectionError("store unavailable")

        snapshots = self._store.snapshots(self._collection)
        if self.start_after_id is not None:
            ids = [snapshot.id for snapshot in snapshots]
            snapshots = snapshots[ids.index(self.start_after_id) + 1 :]

        caps = [cap for cap in (self.limit_value, self._store.max_results) if cap is not None]
        return snapshots[: min(caps)] if caps else snapshots


class FakeCollection(FakeQuery):
    def __init__(self, store: FakeStore, name: str) -> None:
        super().__init__(store, name)
        self.name = name

    def document(self, document_id: str) -> FakeReference:
        return FakeReference(self._store, self.name, document_id)


class FakeTransaction:
    """Reads like the async Firestore transaction: awaiting ``get`` yields an
    async generator of snapshots."""

    def __init__(self) -> None:
        self.reads: list[Any] = []

    async def get(self, ref_or_query: Any) -> Any:
        self.reads.append(ref_or_query)
        if isinstance(ref_or_query, FakeReference):
            snapshots = [await ref_or_query.get()]
        else:
            snapshots = await ref_or_query.get()

        async def stream():
            for snapshot in snapshots:
                yield snapshot

        return stream()


class FakeStore:
    """In-memory document store.

    Args:
        max_results: Silently cap every read at this many documents, like
            the real store does for oversized reads
    """

    def __init__(self, max_results: int | None = None) -> None:
        self.max_results = max_results
        self.fail_reads = False
        self.reads: list[FakeQuery] = []
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def add(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        self._collections.setdefault(collection, {})[document_id] = data

    def seed(self, collection: str, count: int) -> FakeCollection:
        for index in range(count):
            self.add(collection, f"doc-{index:04d}", {"index": index, "name": f"item {index}"})
        return self.collection(collection)

    def collection(self, name: str) -> FakeCollection:
        self._collections.setdefault(name, {})
        return FakeCollection(self, name)

    def snapshots(self, collection: str) -> list[FakeSnapshot]:
        documents = self._collections.get(collection, {})
        return [
            FakeSnapshot(FakeReference(self, collection, document_id), data)
            for document_id, data in documents.items()
        ]

    def snapshot(self, reference: FakeReference) -> FakeSnapshot:
        collection, document_id = reference.path.split("/", 1)
        data = self._collections.get(collection, {}).get(document_id)
        return FakeSnapshot(reference, data)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """Start every test with verbose output off and fresh counters."""
    monkeypatch.delenv("VERBOSE", raising=False)
    reset_settings()
    reset_counters()
    yield
    reset_settings()
    reset_counters()


@pytest.fixture
def verbose(monkeypatch):
    """Enable verbose progress output."""
    monkeypatch.setenv("VERBOSE", "1")
    reset_settings()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def capped_store() -> FakeStore:
    """Store that silently returns at most 500 documents per read."""
    return FakeStore(max_results=500)


@pytest.fixture
def transaction() -> FakeTransaction:
    return FakeTransaction()
