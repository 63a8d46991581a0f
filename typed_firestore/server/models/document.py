"""Document records returned by every read helper."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.protocols import DocumentSnapshot

T = TypeVar("T")


class PlainDocument(BaseModel, Generic[T]):
    """Serializable document without a store reference.

    All read helpers return an FsDocument, but sometimes a document has to be
    built from an API payload or serialized. PlainDocument covers those cases
    as the subset of FsDocument without ``ref``.
    """

    id: str = Field(..., min_length=1)
    data: T

    model_config = ConfigDict(frozen=True)


class FsDocument(PlainDocument[T], Generic[T]):
    """Document record carrying the reference it was read from."""

    ref: Any = Field(..., exclude=True, repr=False)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def to_plain(self) -> PlainDocument[T]:
        """Drop the reference."""
        return PlainDocument.model_construct(id=self.id, data=self.data)


def make_fs_document(doc: DocumentSnapshot) -> FsDocument[Any]:
    """Build a document record from an existing snapshot.

    The payload is taken as-is. Its shape is owned by whoever wrote it to the
    store, so no validation happens here.
    """
    return FsDocument.model_construct(id=doc.id, data=doc.to_dict(), ref=doc.reference)
