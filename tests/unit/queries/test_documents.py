"""Unit tests for multi-document query helpers."""

from __future__ import annotations

import logging
import math

import pytest

from typed_firestore.server.core import MAX_BATCH_SIZE
from typed_firestore.server.queries import (
    get_documents,
    get_documents_from_transaction,
    get_first_document,
    get_some_documents,
)
from typed_firestore.server.runtime.chunking import QueryOptions


class TestGetDocuments:
    """Test the batching facade."""

    @pytest.mark.asyncio
    async def test_batches_by_default(self, store):
        collection = store.seed("items", 1100)

        documents = await get_documents(collection)

        assert len(documents) == 1100
        assert all(read.limit_value == MAX_BATCH_SIZE for read in store.reads)

    @pytest.mark.asyncio
    async def test_batching_reads_past_store_cap(self, capped_store):
        """Test batching returns everything even when the store caps each read."""
        collection = capped_store.seed("items", 600)

        documents = await get_documents(collection)

        assert len(documents) == 600

    @pytest.mark.asyncio
    async def test_disable_batching_returns_bare_query_result(self, capped_store):
        """Test no cap is imposed; the store's own silent cap shows through."""
        collection = capped_store.seed("items", 600)

        documents = await get_documents(collection, {"disable_batching": True})

        assert len(documents) == 500
        assert len(capped_store.reads) == 1
        assert capped_store.reads[0].limit_value is None

    @pytest.mark.asyncio
    async def test_batch_size_above_store_cap_reads_everything(self, capped_store):
        """Test a batch size above the store cap does not end after one capped read."""
        collection = capped_store.seed("items", 600)

        documents = await get_documents(collection, {"batch_size": 1000})

        assert len(documents) == 600
        assert len(capped_store.reads) == 2
        assert capped_store.reads[1].start_after_id == "doc-0499"

    @pytest.mark.asyncio
    async def test_disable_batching_keeps_query_limit(self, store):
        collection = store.seed("items", 50)

        documents = await get_documents(collection.limit(7), QueryOptions(disable_batching=True))

        assert len(documents) == 7

    @pytest.mark.asyncio
    async def test_batch_size_replaces_query_limit(self, store):
        collection = store.seed("items", 25)

        documents = await get_documents(collection.limit(3), {"batch_size": 10})

        assert len(documents) == 25
        assert len(store.reads) == 3

    @pytest.mark.asyncio
    async def test_limit_to_first_batch(self, store, caplog):
        caplog.set_level(logging.WARNING)
        collection = store.seed("items", 25)

        documents = await get_documents(collection, {"batch_size": 10, "limit_to_first_batch": True})

        assert len(documents) == 10
        assert len(store.reads) == 1
        assert "limit_to_first_batch" in caplog.text


class TestGetSomeDocuments:
    """Test single-page reads with resume cursors."""

    @pytest.mark.asyncio
    async def test_pages_through_five_items(self, store):
        """Test batch size 2 over 5 items gives pages of 2, 2 and 1."""
        collection = store.seed("items", 5)
        options = {"batch_size": 2}

        documents, cursor = await get_some_documents(collection, None, options)
        assert [doc.id for doc in documents] == ["doc-0000", "doc-0001"]
        assert cursor is not None

        documents, cursor = await get_some_documents(collection, cursor, options)
        assert [doc.id for doc in documents] == ["doc-0002", "doc-0003"]
        assert cursor is not None

        documents, cursor = await get_some_documents(collection, cursor, options)
        assert [doc.id for doc in documents] == ["doc-0004"]
        assert cursor is None

    @pytest.mark.parametrize("count", [1, 9, 10, 35, 40])
    @pytest.mark.asyncio
    async def test_page_count_and_order(self, store, count):
        """Test ceil(N/10) reads cover the whole collection in order."""
        collection = store.seed("items", count)
        options = QueryOptions(batch_size=10)

        collected = []
        cursor = None
        fetches = 0
        while True:
            page = await get_some_documents(collection, cursor, options)
            fetches += 1
            collected.extend(page.documents)
            cursor = page.next_cursor
            if cursor is None:
                break

        expected_fetches = math.ceil(count / 10) + (1 if count % 10 == 0 else 0)
        assert fetches == expected_fetches
        assert [doc.id for doc in collected] == [f"doc-{i:04d}" for i in range(count)]

    @pytest.mark.asyncio
    async def test_cursor_kept_when_store_caps_page(self, capped_store):
        """Test a page cut short by the store cap still yields a cursor."""
        collection = capped_store.seed("items", 600)
        options = {"batch_size": 1000}

        documents, cursor = await get_some_documents(collection, None, options)
        assert len(documents) == 500
        assert cursor is not None

        documents, cursor = await get_some_documents(collection, cursor, options)
        assert len(documents) == 100
        assert cursor is None

    @pytest.mark.asyncio
    async def test_empty_result(self, store):
        page = await get_some_documents(store.collection("empty"))

        assert page.documents == []
        assert page.next_cursor is None

    @pytest.mark.asyncio
    async def test_limit_to_first_batch_drops_cursor(self, store, caplog):
        caplog.set_level(logging.WARNING)
        collection = store.seed("items", 30)

        documents, cursor = await get_some_documents(
            collection, None, {"batch_size": 10, "limit_to_first_batch": True}
        )

        assert len(documents) == 10
        assert cursor is None
        assert len(store.reads) == 1
        assert "Returning only the first batch of documents" in caplog.text


@pytest.mark.asyncio
async def test_get_documents_from_transaction(store, transaction):
    collection = store.seed("items", 4)

    documents = await get_documents_from_transaction(transaction, collection)

    assert [doc.id for doc in documents] == ["doc-0000", "doc-0001", "doc-0002", "doc-0003"]
    assert transaction.reads == [collection]


@pytest.mark.asyncio
async def test_get_documents_from_transaction_empty(store, transaction):
    assert await get_documents_from_transaction(transaction, store.collection("empty")) == []


@pytest.mark.asyncio
async def test_get_first_document(store):
    collection = store.seed("items", 3)

    doc = await get_first_document(collection)

    assert doc is not None
    assert doc.id == "doc-0000"
    assert store.reads[0].limit_value == 1


@pytest.mark.asyncio
async def test_get_first_document_empty(store):
    assert await get_first_document(store.collection("empty")) is None
