"""openQA job filter.

Turns log output that mentions openQA job URLs into a single openqa-mon
command line:

    openqa-clone-job ... | oqa-jobfilter
"""

from oqa_jobfilter.domain import DOMAINS, OPENSUSE_ORG, SUSE_DE, Domain, Job
from oqa_jobfilter.pipeline import PipelineRunResult, process_input, process_lines

__version__ = "0.1.0"

__all__ = [
    "Domain",
    "Job",
    "DOMAINS",
    "SUSE_DE",
    "OPENSUSE_ORG",
    "PipelineRunResult",
    "process_input",
    "process_lines",
]
