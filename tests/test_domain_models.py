"""Unit tests for Domain, Job and the domain registry."""

import pytest

from oqa_jobfilter.domain import (
    DOMAINS,
    MAX_JOB_ID,
    OPENSUSE_ORG,
    SUSE_DE,
    Job,
    match_domain,
)


class TestDomainRegistry:
    """Tests for the fixed domain registry."""

    def test_registry_order(self):
        assert DOMAINS == (SUSE_DE, OPENSUSE_ORG)
        assert SUSE_DE < OPENSUSE_ORG

    def test_base_urls(self):
        assert SUSE_DE.base_url == "https://openqa.suse.de/tests/"
        assert OPENSUSE_ORG.base_url == "https://openqa.opensuse.org/tests/"

    def test_short_urls(self):
        assert SUSE_DE.short_url == "https://openqa.suse.de"
        assert OPENSUSE_ORG.short_url == "https://openqa.opensuse.org"

    def test_prefixes_do_not_overlap(self):
        for domain in DOMAINS:
            others = [d for d in DOMAINS if d is not domain]
            assert not any(domain.base_url.startswith(o.base_url) for o in others)

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://openqa.suse.de/tests/123", SUSE_DE),
            ("https://openqa.opensuse.org/tests/456", OPENSUSE_ORG),
            ("https://openqa.suse.de/tests/", SUSE_DE),
            ("https://openqa.suse.de/tests/abc", SUSE_DE),
        ],
    )
    def test_match_domain(self, url, expected):
        assert match_domain(url) is expected

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "http://openqa.suse.de/tests/123",
            "https://openqa.suse.de/t/123",
            "https://openqa.example.com/tests/123",
            " https://openqa.suse.de/tests/123",
        ],
    )
    def test_match_domain_no_match(self, url):
        assert match_domain(url) is None

    def test_domains_are_immutable(self):
        with pytest.raises(AttributeError):
            SUSE_DE.base_url = "https://example.com/tests/"

    def test_domain_str(self):
        assert str(OPENSUSE_ORG) == "https://openqa.opensuse.org/tests/"


class TestJob:
    """Tests for the Job model."""

    def test_defaults(self):
        job = Job(domain=SUSE_DE, id=123)
        assert job.run_length == 0
        assert job.last_id == 123

    def test_ordering_domain_first(self):
        assert Job(SUSE_DE, 999) < Job(OPENSUSE_ORG, 1)

    def test_ordering_id_then_run_length(self):
        assert Job(SUSE_DE, 1) < Job(SUSE_DE, 2)
        assert Job(SUSE_DE, 1, 0) < Job(SUSE_DE, 1, 3)

    def test_equality(self):
        assert Job(SUSE_DE, 5) == Job(SUSE_DE, 5)
        assert Job(SUSE_DE, 5) != Job(OPENSUSE_ORG, 5)
        assert Job(SUSE_DE, 5) != Job(SUSE_DE, 5, 1)

    def test_last_id(self):
        assert Job(SUSE_DE, 10, run_length=3).last_id == 13
        assert Job(SUSE_DE, MAX_JOB_ID).last_id == MAX_JOB_ID

    def test_str(self):
        assert str(Job(SUSE_DE, 123)) == "https://openqa.suse.de/tests/123"
        assert str(Job(OPENSUSE_ORG, 7, 2)) == "https://openqa.opensuse.org/tests/7+2"

    def test_token(self):
        assert Job(SUSE_DE, 123).token() == "123"
        assert Job(SUSE_DE, 123, 4).token() == "123+4"

    def test_rejects_negative_id(self):
        with pytest.raises(ValueError, match="out of range"):
            Job(SUSE_DE, -1)

    def test_rejects_id_above_range(self):
        Job(SUSE_DE, MAX_JOB_ID)
        with pytest.raises(ValueError, match="out of range"):
            Job(SUSE_DE, MAX_JOB_ID + 1)

    def test_rejects_negative_run_length(self):
        with pytest.raises(ValueError, match="run_length"):
            Job(SUSE_DE, 1, run_length=-1)
