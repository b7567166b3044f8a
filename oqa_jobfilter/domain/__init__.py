"""Domain models and the openQA instance registry."""

from .models import MAX_JOB_ID, Domain, Job
from .registry import DOMAINS, OPENSUSE_ORG, SUSE_DE, match_domain

__all__ = [
    "Domain",
    "Job",
    "MAX_JOB_ID",
    "DOMAINS",
    "SUSE_DE",
    "OPENSUSE_ORG",
    "match_domain",
]
