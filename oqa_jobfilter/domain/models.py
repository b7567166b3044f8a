"""Core domain models for openQA domains and jobs.

This module defines the data structures used throughout the application:
- Domain: an immutable, ordered openQA instance (base URL plus short form)
- Job: one job reference, optionally standing for a run of consecutive ids
"""

from dataclasses import dataclass, field

# Largest job id accepted from the input (32-bit unsigned range)
MAX_JOB_ID = 2**32 - 1


@dataclass(frozen=True, order=True)
class Domain:
    """A known openQA instance.

    Domains sort by their registry position (rank), so jobs group by instance
    in the same order the registry lists them.

    Attributes:
        rank: Position in the domain registry (primary sort key)
        name: Symbolic name, e.g. 'suse_de'
        base_url: Prefix of every job URL on this instance (ends with '/tests/')
        short_url: Host-only form used by the compact id-list encoding
    """

    rank: int
    name: str = field(compare=False)
    base_url: str = field(compare=False)
    short_url: str = field(compare=False)

    def __str__(self) -> str:
        return self.base_url


@dataclass(order=True)
class Job:
    """A job reference found in the input.

    Jobs order by (domain, id, run_length). A job with run_length N > 0
    represents the ids id, id+1, ..., id+N.

    Attributes:
        domain: openQA instance the job lives on
        id: Numeric job id
        run_length: Number of additional consecutive ids folded into this job
    """

    domain: Domain
    id: int
    run_length: int = 0

    def __post_init__(self):
        """Reject ids and run lengths outside the unsigned range."""
        if self.id < 0 or self.id > MAX_JOB_ID:
            raise ValueError(f"Job id out of range: {self.id}")
        if self.run_length < 0:
            raise ValueError(f"run_length cannot be negative: {self.run_length}")

    @property
    def last_id(self) -> int:
        """Highest id covered by this job."""
        return self.id + self.run_length

    def token(self) -> str:
        """Render the id part: '<id>' or '<id>+<run_length>'."""
        if self.run_length > 0:
            return f"{self.id}+{self.run_length}"
        return str(self.id)

    def __str__(self) -> str:
        return f"{self.domain.base_url}{self.token()}"
