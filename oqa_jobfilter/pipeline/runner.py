"""Pipeline orchestration: read lines, extract, normalize, compress, format, write."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import BinaryIO, Iterable, List, Optional, TextIO, Tuple
from uuid import uuid4

from oqa_jobfilter.compression.service import compress_runs
from oqa_jobfilter.extraction.extractor import extract_jobs
from oqa_jobfilter.formatting.formatter import format_output, select_encoding
from oqa_jobfilter.logging import get_logger
from oqa_jobfilter.logging.context import log_context
from oqa_jobfilter.normalization.service import normalize_jobs

from .models import PipelineRunResult

logger = get_logger(__name__, component="pipeline")

INPUT_ENCODING = "utf-8"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def read_lines(stream: BinaryIO) -> Tuple[List[str], int]:
    """
    Read and decode every line of a binary stream.

    Lines that are not valid UTF-8 are skipped. Line terminators ('\\n' or
    '\\r\\n') are removed.

    Args:
        stream: Binary input stream

    Returns:
        Tuple of (decoded lines, number of skipped lines)

    Raises:
        OSError: If reading from the stream fails
    """
    lines: List[str] = []
    skipped = 0
    for line_number, raw in enumerate(stream, 1):
        try:
            line = raw.decode(INPUT_ENCODING)
        except UnicodeDecodeError:
            skipped += 1
            logger.debug(
                "Skipping undecodable line",
                extra={"event": "pipeline.line.skipped", "line_number": line_number},
            )
            continue
        lines.append(line.rstrip("\r\n"))
    return lines, skipped


def process_lines(lines: Iterable[str], run_id: Optional[str] = None) -> PipelineRunResult:
    """
    Turn decoded input lines into the openqa-mon command line.

    Args:
        lines: Decoded input lines
        run_id: Identifier attached to every log record of this run

    Returns:
        PipelineRunResult carrying the output line and run statistics
    """
    run_started_at = _utc_now()
    lines = list(lines)

    with log_context(run_id=run_id or uuid4().hex):
        logger.info(
            "Pipeline run started",
            extra={"event": "pipeline.run.started", "line_count": len(lines)},
        )

        extracted = extract_jobs(lines)
        unique = normalize_jobs(extracted)
        compressed = compress_runs(unique)
        output = format_output(compressed)

        result = PipelineRunResult(
            output=output,
            encoding=select_encoding(compressed),
            run_started_at=run_started_at,
            run_finished_at=_utc_now(),
            lines_read=len(lines),
            jobs_extracted=len(extracted),
            jobs_unique=len(unique),
            jobs_emitted=len(compressed),
        )

        logger.info(
            f"Pipeline run completed: "
            f"{result.jobs_extracted} extracted, "
            f"{result.jobs_unique} unique, "
            f"{result.jobs_emitted} emitted",
            extra={
                "event": "pipeline.run.completed",
                "encoding": result.encoding.value,
                "jobs_extracted": result.jobs_extracted,
                "jobs_unique": result.jobs_unique,
                "jobs_emitted": result.jobs_emitted,
                "duration_seconds": result.duration_seconds,
            },
        )

    return result


def process_input(input_stream: BinaryIO, output_stream: TextIO) -> PipelineRunResult:
    """
    Read all input, process it, and write the single result line.

    Nothing is written before the whole input has been read and processed.

    Args:
        input_stream: Binary input stream (e.g. sys.stdin.buffer)
        output_stream: Text output stream (e.g. sys.stdout)

    Returns:
        PipelineRunResult for the run

    Raises:
        OSError: If reading or writing fails
    """
    run_id = uuid4().hex
    with log_context(run_id=run_id):
        lines, skipped = read_lines(input_stream)
        if skipped:
            logger.warning(
                f"Skipped {skipped} undecodable input lines",
                extra={"event": "pipeline.input.lines_skipped", "lines_skipped": skipped},
            )

        result = process_lines(lines, run_id=run_id)
        result = replace(result, lines_skipped=skipped)

        output_stream.write(result.output + "\n")
        output_stream.flush()

    return result
