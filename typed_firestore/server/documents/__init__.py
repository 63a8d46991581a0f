"""Single-document read helpers."""

from .get_document import (
    get_document,
    get_document_from_transaction,
    get_document_from_transaction_maybe,
    get_document_maybe,
)

__all__ = [
    "get_document",
    "get_document_maybe",
    "get_document_from_transaction",
    "get_document_from_transaction_maybe",
]
