"""Run compression.

Folds jobs with strictly sequential ids on the same domain into one job
whose run_length counts the folded successors. Expects normalized input
(sorted, no duplicates).
"""

from dataclasses import replace
from typing import List, Sequence

from oqa_jobfilter.domain.models import Job
from oqa_jobfilter.logging import get_logger

logger = get_logger(__name__, component="compression")


def is_consecutive(first: Job, second: Job) -> bool:
    """Whether second starts right after the last id covered by first."""
    return first.domain == second.domain and first.last_id + 1 == second.id


def compress_runs(jobs: Sequence[Job]) -> List[Job]:
    """
    Merge runs of consecutive jobs.

    Single forward pass: each job either extends the last emitted job or is
    emitted as is. Jobs in the input are never mutated; merged jobs are
    copies.

    Args:
        jobs: Normalized jobs

    Returns:
        New list in which no adjacent pair is consecutive
    """
    compressed: List[Job] = []
    for job in jobs:
        if compressed and is_consecutive(compressed[-1], job):
            last = compressed[-1]
            compressed[-1] = replace(last, run_length=last.run_length + job.run_length + 1)
        else:
            compressed.append(replace(job))

    logger.debug(
        f"Compressed {len(jobs)} jobs into {len(compressed)} entries",
        extra={
            "event": "compression.completed",
            "input_count": len(jobs),
            "output_count": len(compressed),
        },
    )
    return compressed
