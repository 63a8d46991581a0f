"""Core components."""

from .constants import DEFAULT_CHUNK_SIZE, MAX_BATCH_SIZE
from .exceptions import ChunkProcessingError, DocumentNotFoundError, FirestoreHelperError
from .protocols import (
    CollectionReference,
    DocumentReference,
    DocumentSnapshot,
    Query,
    Transaction,
)
from .settings import Settings, get_settings, reset_settings

__all__ = [
    "MAX_BATCH_SIZE",
    "DEFAULT_CHUNK_SIZE",
    # Exceptions
    "FirestoreHelperError",
    "DocumentNotFoundError",
    "ChunkProcessingError",
    # Store interfaces
    "CollectionReference",
    "DocumentReference",
    "DocumentSnapshot",
    "Query",
    "Transaction",
    # Settings
    "Settings",
    "get_settings",
    "reset_settings",
]
