"""Rendering of compressed jobs into the openqa-mon command line."""

from .formatter import (
    COMMAND_PREFIX,
    Encoding,
    all_same_domain,
    format_compact,
    format_jobs,
    format_output,
    format_verbose,
    select_encoding,
)

__all__ = [
    "COMMAND_PREFIX",
    "Encoding",
    "all_same_domain",
    "format_compact",
    "format_jobs",
    "format_output",
    "format_verbose",
    "select_encoding",
]
