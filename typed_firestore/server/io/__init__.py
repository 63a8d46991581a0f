"""I/O layer helpers for store read results."""

from .snapshots import read_snapshot, read_snapshots

__all__ = ["read_snapshot", "read_snapshots"]
