"""Integration tests feeding realistic openqa-clone-job output through the CLI pipeline."""

import io

from oqa_jobfilter.formatting import Encoding
from oqa_jobfilter.pipeline import process_input

from tests.helpers import clone_line

NOISY_CLONE_OUTPUT = """\
Cloning parents of sle-12-SP5-Server-DVD-Updates-x86_64-Build20250108-1-selinux@64bit

    1 job has been created:

     - sle-12-SP5-Server-DVD-Updates-x86_64-Build20250108-1-selinux@64bit -> https://openqa.suse.de/tests/16418915

    Cloning parents of sle-15-SP2-Server-DVD-Updates-x86_64-Build20250108-1-selinux@64bit

    1 job has been created:

     - sle-15-SP2-Server-DVD-Updates-x86_64-Build20250108-1-selinux@64bit -> https://openqa.suse.de/tests/16418917

    Cloning parents of sle-15-SP3-Server-DVD-Updates-x86_64-Build20250108-1-selinux@64bit

    Cloning parents of sle-15-SP7-Online-x86_64-Build51.1-selinux@64bit

    1 job has been created:

     - sle-15-SP7-Online-x86_64-Build51.1-selinux@64bit -> https://openqa.opensuse.org/tests/16418919"""


def run(text: str):
    output = io.StringIO()
    result = process_input(io.BytesIO(text.encode("utf-8")), output)
    return output.getvalue(), result


class TestCloneJobOutput:
    """End-to-end runs over multi-line clone-job logs."""

    def test_noisy_mixed_domain_output(self):
        output, result = run(NOISY_CLONE_OUTPUT)

        assert output == (
            "openqa-mon https://openqa.suse.de/tests/16418915 "
            "https://openqa.suse.de/tests/16418917 "
            "https://openqa.opensuse.org/tests/16418919\n"
        )
        assert result.encoding is Encoding.VERBOSE
        assert result.jobs_extracted == 3

    def test_batch_of_consecutive_clones(self):
        lines = [
            "Cloning parents of sle-15-SP6-Online-x86_64-Build1.1-selinux@64bit",
            "4 jobs have been created:",
        ]
        lines += [
            clone_line(f"https://openqa.suse.de/tests/{job_id}", name=f"job-{job_id}")
            for job_id in (16418930, 16418931, 16418932, 16418933, 16418940)
        ]
        output, result = run("\n".join(lines) + "\n")

        assert output == "openqa-mon https://openqa.suse.de/tests/16418930+3 16418940\n"
        assert result.encoding is Encoding.COMPACT_RUNS

    def test_repeated_paste_is_deduplicated(self):
        block = "\n".join(
            clone_line(f"https://openqa.opensuse.org/tests/{job_id}") for job_id in (5, 3, 9)
        )
        output, result = run(block + "\n" + block + "\n")

        assert output == "openqa-mon https://openqa.opensuse.org 3,5,9\n"
        assert result.jobs_extracted == 6
        assert result.jobs_unique == 3
