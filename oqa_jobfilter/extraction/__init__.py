"""Extraction of openQA job references from raw log lines."""

from .extractor import JOB_DELIMITER, extract_job, extract_jobs, parse_job_id

__all__ = ["JOB_DELIMITER", "extract_job", "extract_jobs", "parse_job_id"]
