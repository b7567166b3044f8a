"""Unit tests for sorting and deduplication of job collections."""

import random

from oqa_jobfilter.normalization import normalize_jobs

from tests.helpers import opensuse, suse


class TestNormalizeJobs:
    """Tests for normalize_jobs."""

    def test_sorts_by_domain_then_id(self):
        jobs = [opensuse(1), suse(20), opensuse(0), suse(3)]
        assert normalize_jobs(jobs) == [suse(3), suse(20), opensuse(0), opensuse(1)]

    def test_removes_duplicates(self):
        jobs = [suse(123), opensuse(456), suse(123)]
        assert normalize_jobs(jobs) == [suse(123), opensuse(456)]

    def test_same_id_on_different_domains_kept(self):
        jobs = [opensuse(5), suse(5)]
        assert normalize_jobs(jobs) == [suse(5), opensuse(5)]

    def test_run_length_is_part_of_identity(self):
        jobs = [suse(5, 2), suse(5), suse(5, 2)]
        assert normalize_jobs(jobs) == [suse(5), suse(5, 2)]

    def test_empty(self):
        assert normalize_jobs([]) == []

    def test_does_not_mutate_input(self):
        jobs = [suse(3), suse(1), suse(3)]
        normalize_jobs(jobs)
        assert jobs == [suse(3), suse(1), suse(3)]

    def test_accepts_iterables(self):
        assert normalize_jobs(iter([suse(2), suse(1)])) == [suse(1), suse(2)]

    def test_idempotent(self):
        rng = random.Random(1234)
        for _ in range(50):
            jobs = [
                rng.choice([suse, opensuse])(rng.randint(0, 30))
                for _ in range(rng.randint(0, 40))
            ]
            once = normalize_jobs(jobs)
            assert normalize_jobs(once) == once

    def test_output_unique_and_ascending(self):
        rng = random.Random(99)
        for _ in range(50):
            jobs = [
                rng.choice([suse, opensuse])(rng.randint(0, 30))
                for _ in range(rng.randint(0, 40))
            ]
            result = normalize_jobs(jobs)
            keys = [(job.domain, job.id) for job in result]
            assert len(keys) == len(set(keys))
            assert all(a < b for a, b in zip(result, result[1:]))
            assert set(keys) == {(job.domain, job.id) for job in jobs}
