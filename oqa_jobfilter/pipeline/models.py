"""Data models for pipeline execution tracking and reporting."""

from dataclasses import dataclass
from datetime import datetime

from oqa_jobfilter.formatting.formatter import Encoding


@dataclass
class PipelineRunResult:
    """
    Outcome of one pipeline run.

    Attributes:
        output: The openqa-mon command line (without trailing newline)
        encoding: Encoding chosen for the body
        run_started_at: UTC timestamp when the run began
        run_finished_at: UTC timestamp when the run completed
        lines_read: Lines decoded from the input
        lines_skipped: Lines dropped because they could not be decoded
        jobs_extracted: Job references found, duplicates included
        jobs_unique: Jobs left after deduplication
        jobs_emitted: Entries in the output after run compression
        duration_seconds: Wall time of the run
    """

    output: str
    encoding: Encoding
    run_started_at: datetime
    run_finished_at: datetime
    lines_read: int = 0
    lines_skipped: int = 0
    jobs_extracted: int = 0
    jobs_unique: int = 0
    jobs_emitted: int = 0
    duration_seconds: float = 0.0

    def __post_init__(self):
        """Compute duration if not set."""
        if self.duration_seconds == 0.0:
            delta = self.run_finished_at - self.run_started_at
            self.duration_seconds = delta.total_seconds()

    @property
    def duplicates_dropped(self) -> int:
        return self.jobs_extracted - self.jobs_unique
