"""Compression of consecutive job ids into runs."""

from .service import compress_runs, is_consecutive

__all__ = ["compress_runs", "is_consecutive"]
