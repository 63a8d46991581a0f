"""Document models.

All models are immutable (frozen=True). Records read from the store are
constructed without validation; PlainDocument validates when built from
external payloads.
"""

from .document import FsDocument, PlainDocument, make_fs_document

__all__ = [
    "FsDocument",
    "PlainDocument",
    "make_fs_document",
]
