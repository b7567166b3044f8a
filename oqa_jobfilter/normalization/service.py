"""Sorting and deduplication of job collections."""

from typing import Iterable, List

from oqa_jobfilter.domain.models import Job
from oqa_jobfilter.logging import get_logger

logger = get_logger(__name__, component="normalization")


def normalize_jobs(jobs: Iterable[Job]) -> List[Job]:
    """
    Sort jobs by (domain, id, run_length) and drop duplicates.

    Duplicates are jobs equal in domain, id and run_length. Freshly
    extracted jobs all have run_length 0, so this deduplicates by
    (domain, id). The input is left untouched.

    Args:
        jobs: Jobs in encounter order

    Returns:
        New list, ascending and free of duplicates
    """
    ordered = sorted(jobs)

    unique: List[Job] = []
    for job in ordered:
        if unique and unique[-1] == job:
            continue
        unique.append(job)

    logger.debug(
        f"Normalized {len(ordered)} jobs into {len(unique)} unique jobs",
        extra={
            "event": "normalization.completed",
            "input_count": len(ordered),
            "unique_count": len(unique),
        },
    )
    return unique
