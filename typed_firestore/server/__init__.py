"""Typed Firestore server helpers - batched reads and chunked processing."""

from .core import (
    DEFAULT_CHUNK_SIZE,
    MAX_BATCH_SIZE,
    ChunkProcessingError,
    CollectionReference,
    DocumentNotFoundError,
    DocumentReference,
    DocumentSnapshot,
    FirestoreHelperError,
    Query,
    Settings,
    Transaction,
    get_settings,
)
from .documents import (
    get_document,
    get_document_from_transaction,
    get_document_from_transaction_maybe,
    get_document_maybe,
)
from .models import FsDocument, PlainDocument, make_fs_document
from .queries import (
    get_documents,
    get_documents_batch,
    get_documents_from_transaction,
    get_first_document,
    get_some_documents,
)
from .runtime.chunking import (
    ChunkingOptions,
    DocumentPage,
    ProcessingError,
    ProcessingReport,
    ProcessOptions,
    QueryOptions,
    process_in_chunks,
    process_in_chunks_by_chunk,
)
from .runtime.processing import query_and_process, query_and_process_by_chunk

__version__ = "0.1.0"

__all__ = [
    # Constants
    "MAX_BATCH_SIZE",
    "DEFAULT_CHUNK_SIZE",
    # Models
    "FsDocument",
    "PlainDocument",
    "make_fs_document",
    # Single documents
    "get_document",
    "get_document_maybe",
    "get_document_from_transaction",
    "get_document_from_transaction_maybe",
    # Queries
    "get_documents",
    "get_documents_batch",
    "get_some_documents",
    "get_documents_from_transaction",
    "get_first_document",
    "DocumentPage",
    # Processing
    "process_in_chunks",
    "process_in_chunks_by_chunk",
    "query_and_process",
    "query_and_process_by_chunk",
    "ProcessingError",
    "ProcessingReport",
    # Options and settings
    "QueryOptions",
    "ChunkingOptions",
    "ProcessOptions",
    "Settings",
    "get_settings",
    # Store interfaces
    "CollectionReference",
    "DocumentReference",
    "DocumentSnapshot",
    "Query",
    "Transaction",
    # Exceptions
    "FirestoreHelperError",
    "DocumentNotFoundError",
    "ChunkProcessingError",
]
