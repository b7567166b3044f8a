"""Main entry point for the openQA job filter.

Reads openqa-clone-job (or any other) log output on standard input and
prints one openqa-mon command line covering every job it references.
"""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from oqa_jobfilter.config.environment import EnvironmentConfig
from oqa_jobfilter.config.exceptions import ConfigurationError
from oqa_jobfilter.config.loader import load_config
from oqa_jobfilter.config.models import AppConfig, LogFormat, LogLevel
from oqa_jobfilter.logging import get_logger
from oqa_jobfilter.logging.config import configure_logging
from oqa_jobfilter.pipeline import process_input

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str] = None,
    log_format_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log settings.

    Priority for log level and format: CLI > environment > config file.
    The resolved values are stored on the returned EnvironmentConfig.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if log_format_override:
        env_config.log_format = log_format_override
    elif not env_config.log_format:
        env_config.log_format = app_config.logging.format

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oqa-jobfilter",
        description=(
            "Collect openQA job URLs from log text on stdin and print a single "
            "openqa-mon command line"
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: oqa-jobfilter.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=[level.value for level in LogLevel],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=[fmt.value for fmt in LogFormat],
        help="Log format (overrides config and environment)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the job filter.

    Returns:
        Exit code (0 on success, 1 on any failure, 130 on interrupt)
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(
            args.config, args.log_level, args.log_format
        )
        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
        )

        logger.info(
            "Job filter starting",
            extra={
                "event": "service.starting",
                "config_path": str(args.config) if args.config else None,
                "log_level": env_config.log_level,
            },
        )

        result = process_input(sys.stdin.buffer, sys.stdout)

        logger.info(
            "Job filter finished",
            extra={
                "event": "service.stopping",
                "encoding": result.encoding.value,
                "lines_read": result.lines_read,
                "lines_skipped": result.lines_skipped,
                "jobs_emitted": result.jobs_emitted,
            },
        )
        return EXIT_OK

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_INTERRUPTED
    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        logger.error(
            "I/O failure while processing input",
            extra={
                "event": "service.io.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return EXIT_FAILURE
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Fatal error while processing input",
            extra={
                "event": "service.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
