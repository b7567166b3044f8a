"""Test helper utilities for the job filter tests."""

from .jobs import clone_line, opensuse, suse

__all__ = ["clone_line", "opensuse", "suse"]
