"""Pipeline orchestration for job extraction, compression and output."""

from .models import PipelineRunResult
from .runner import process_input, process_lines, read_lines

__all__ = [
    "PipelineRunResult",
    "process_input",
    "process_lines",
    "read_lines",
]
