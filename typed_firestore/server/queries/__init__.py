"""Query helpers for reading many documents."""

from .batch import get_documents_batch
from .documents import (
    get_documents,
    get_documents_from_transaction,
    get_first_document,
    get_some_documents,
)

__all__ = [
    "get_documents",
    "get_documents_batch",
    "get_some_documents",
    "get_documents_from_transaction",
    "get_first_document",
]
