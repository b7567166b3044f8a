"""Registry of the openQA instances the filter recognizes.

The registry is fixed at import time. Order matters: it is the primary sort
key for jobs and the order in which URL prefixes are tried.
"""

from typing import Optional, Tuple

from .models import Domain

SUSE_DE = Domain(
    rank=0,
    name="suse_de",
    base_url="https://openqa.suse.de/tests/",
    short_url="https://openqa.suse.de",
)

OPENSUSE_ORG = Domain(
    rank=1,
    name="opensuse_org",
    base_url="https://openqa.opensuse.org/tests/",
    short_url="https://openqa.opensuse.org",
)

DOMAINS: Tuple[Domain, ...] = (SUSE_DE, OPENSUSE_ORG)


def match_domain(url: str) -> Optional[Domain]:
    """
    Find the registered domain whose base URL prefixes the given URL.

    Args:
        url: Candidate job URL

    Returns:
        The first matching Domain in registry order, or None
    """
    for domain in DOMAINS:
        if url.startswith(domain.base_url):
            return domain
    return None
