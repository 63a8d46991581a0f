"""Shared limits for batched reads and chunked processing."""

# Firestore returns an incomplete snapshot, without an error, when a single
# read asks for too many documents. Reads are capped at this size.
MAX_BATCH_SIZE = 500

DEFAULT_CHUNK_SIZE = 500
