"""Normalization of extracted job collections (sort and deduplicate)."""

from .service import normalize_jobs

__all__ = ["normalize_jobs"]
