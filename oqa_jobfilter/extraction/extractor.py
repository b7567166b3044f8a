"""Job extraction from raw log lines.

openqa-clone-job prints one line per created job, e.g.

    - sle-15-SP2-Server-DVD-Updates-x86_64-selinux@64bit -> https://openqa.suse.de/tests/16418917

The URL sits after the '->' delimiter. Everything else in the input is noise.
"""

import re
from typing import Iterable, List, Optional

from oqa_jobfilter.domain.models import MAX_JOB_ID, Job
from oqa_jobfilter.domain.registry import match_domain
from oqa_jobfilter.logging import get_logger

logger = get_logger(__name__, component="extraction")

JOB_DELIMITER = "->"

# Unicode White_Space characters. str.strip() with no argument also removes
# the ASCII separators U+001C..U+001F, which are not whitespace.
WHITESPACE = "\t\n\x0b\x0c\r \x85\xa0" + "".join(
    map(chr, (0x1680, *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000))
)

_JOB_ID_RE = re.compile(r"\+?[0-9]+")


def parse_job_id(text: str) -> Optional[int]:
    """
    Parse an unsigned decimal job id.

    Accepts ASCII digits with an optional leading '+'. Values beyond the
    32-bit unsigned range are rejected.

    Args:
        text: Candidate id (already stripped)

    Returns:
        The id, or None if text is not a valid id
    """
    if not _JOB_ID_RE.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_JOB_ID:
        return None
    return value


def extract_job(line: str) -> Optional[Job]:
    """
    Extract a job reference from a single line.

    Only the segment right after the first '->' is considered; later
    segments are ignored. Never raises: lines that don't reference a job on
    a known domain yield None.

    Args:
        line: One line of input text

    Returns:
        A Job with run_length 0, or None
    """
    segments = line.split(JOB_DELIMITER)
    if len(segments) < 2:
        return None

    url = segments[1].strip(WHITESPACE)
    domain = match_domain(url)
    if domain is None:
        return None

    job_id = parse_job_id(url[len(domain.base_url):].strip(WHITESPACE))
    if job_id is None:
        return None

    return Job(domain=domain, id=job_id)


def extract_jobs(lines: Iterable[str]) -> List[Job]:
    """Extract jobs from every line, keeping encounter order."""
    jobs = []
    for line_number, line in enumerate(lines, 1):
        job = extract_job(line)
        if job is None:
            logger.debug(
                "Line holds no job reference",
                extra={"event": "extraction.line.no_job", "line_number": line_number},
            )
            continue
        jobs.append(job)
    return jobs
