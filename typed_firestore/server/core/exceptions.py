"""Custom exception hierarchy."""

from __future__ import annotations

import json
from typing import Any

ERROR_MESSAGE_LIMIT = 10


class FirestoreHelperError(Exception):
    """Base exception for all library errors."""

    pass


class DocumentNotFoundError(FirestoreHelperError):
    """A document that was expected to exist is missing.

    Raised by the single-document lookups. The ``*_maybe`` variants return
    ``None`` instead.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"No document available at {path}")
        self.path = path


class ChunkProcessingError(FirestoreHelperError):
    """One or more chunks failed during chunk-wise processing.

    The message lists at most the first ``ERROR_MESSAGE_LIMIT`` failures,
    rendered as JSON. All messages and the results of the chunks that did
    succeed are kept on the exception.
    """

    def __init__(self, messages: list[str], partial_results: list[Any] | None = None) -> None:
        super().__init__(
            "Failed to process all chunks successfully. "
            f"Error messages (limited to {ERROR_MESSAGE_LIMIT}): "
            f"{json.dumps(messages[:ERROR_MESSAGE_LIMIT])}"
        )
        self.messages = list(messages)
        self.partial_results = partial_results or []
