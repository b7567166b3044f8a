"""Output formatting.

Two encodings exist and downstream consumers parse both, so each must be
reproduced literally:

- verbose: full job URLs joined by spaces, used for zero or several domains
- compact: one domain, either
    '<base_url><id>[+N] <id>[+N] ...' when any job holds a run, or
    '<short_url> <id>,<id>,...' otherwise
"""

from enum import Enum
from typing import Sequence

from oqa_jobfilter.domain.models import Job
from oqa_jobfilter.logging import get_logger

logger = get_logger(__name__, component="formatting")

COMMAND_PREFIX = "openqa-mon"


class Encoding(str, Enum):
    """Output encodings."""

    VERBOSE = "verbose"
    COMPACT_RUNS = "compact-runs"
    COMPACT_IDS = "compact-ids"


def all_same_domain(jobs: Sequence[Job]) -> bool:
    """True when jobs is non-empty and every job shares one domain."""
    if not jobs:
        return False
    first_domain = jobs[0].domain
    return all(job.domain == first_domain for job in jobs)


def has_runs(jobs: Sequence[Job]) -> bool:
    return any(job.run_length > 0 for job in jobs)


def select_encoding(jobs: Sequence[Job]) -> Encoding:
    """Pick the encoding for a compressed job sequence."""
    if not all_same_domain(jobs):
        return Encoding.VERBOSE
    if has_runs(jobs):
        return Encoding.COMPACT_RUNS
    return Encoding.COMPACT_IDS


def format_verbose(jobs: Sequence[Job]) -> str:
    """Render every job as its full URL, space-separated."""
    return " ".join(str(job) for job in jobs)


def format_compact(jobs: Sequence[Job]) -> str:
    """
    Render jobs of a single domain compactly.

    Args:
        jobs: Non-empty, single-domain job sequence

    Returns:
        Compact body, or '' for an empty sequence

    Raises:
        ValueError: If jobs span more than one domain
    """
    if not jobs:
        return ""
    if not all_same_domain(jobs):
        raise ValueError("Compact encoding requires jobs from a single domain")

    domain = jobs[0].domain
    if has_runs(jobs):
        # No space between the base URL and the first token
        return domain.base_url + " ".join(job.token() for job in jobs)
    return f"{domain.short_url} {','.join(str(job.id) for job in jobs)}"


def format_jobs(jobs: Sequence[Job]) -> str:
    """Render the body of the output line, choosing the encoding."""
    encoding = select_encoding(jobs)
    logger.debug(
        f"Selected {encoding.value} encoding",
        extra={
            "event": "formatting.encoding.selected",
            "encoding": encoding.value,
            "job_count": len(jobs),
        },
    )
    if encoding is Encoding.VERBOSE:
        return format_verbose(jobs)
    return format_compact(jobs)


def format_output(jobs: Sequence[Job]) -> str:
    """Render the complete openqa-mon command line (without newline)."""
    return f"{COMMAND_PREFIX} {format_jobs(jobs)}"
