"""Command-line entry point for civjobs.

Subcommands:
- normalize: run the bronze -> silver -> gold ETL
- search: parse a free-text query and list matching jobs
- ask: answer a free-text question with the LLM (optionally about one job)
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from civjobs.chat import ChatService
from civjobs.chat.prompts import salary_range
from civjobs.config.environment import EnvironmentConfig
from civjobs.config.exceptions import ConfigurationError
from civjobs.config.loader import load_config
from civjobs.config.models import AppConfig
from civjobs.etl import EtlInputError, EtlPipeline
from civjobs.logging import get_logger
from civjobs.logging.config import configure_logging
from civjobs.matching import JobDataset, JobMatcher
from civjobs.query import parse_job_query

logger = get_logger(__name__, component="cli")

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and settle the effective log level.

    Log level priority: CLI > LOG_LEVEL environment variable > config file.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="civjobs",
        description="Civil-service job search: normalize the job catalog and answer free-text queries",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml, then config/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVEL_CHOICES,
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("normalize", help="Build silver and gold datasets from the bronze files")

    search = subparsers.add_parser("search", help="List jobs matching a free-text query")
    search.add_argument("query", help='e.g. "assistant sheriff jobs in san diego over $70k"')
    search.add_argument("--json", action="store_true", help="Print matches as JSON records")

    ask = subparsers.add_parser("ask", help="Answer a free-text question with the LLM")
    ask.add_argument("query", help="Question to answer")
    ask.add_argument("--job", metavar="JURISDICTION|CODE", help="Ask about a single job id")

    return parser


def run_normalize(app_config: AppConfig) -> int:
    try:
        result = EtlPipeline(app_config.data).run()
    except EtlInputError as e:
        print(f"ETL input error: {e}", file=sys.stderr)
        logger.error(str(e), extra={"event": "etl.run.failed", "path": str(e.path)})
        return 1

    print(result.summary())
    if result.unseen_jurisdictions:
        print(f"Unmapped jurisdictions: {', '.join(result.unseen_jurisdictions)}", file=sys.stderr)
    return 0


def run_search(app_config: AppConfig, query: str, as_json: bool = False) -> int:
    matcher = JobMatcher(JobDataset.from_gold_dir(app_config.data.gold_path))
    jobs = matcher.search(parse_job_query(query))

    if as_json:
        print(json.dumps([job.to_record() for job in jobs], indent=2, ensure_ascii=False))
        return 0

    if not jobs:
        print("No jobs found for these parameters.")
        return 0

    print(f"Found {len(jobs)} job(s):")
    for position, job in enumerate(jobs, 1):
        print(f"  [{position}] {job.title} ({job.jurisdiction_display}, {job.code}) - {salary_range(job)}")
    return 0


def run_ask(
    app_config: AppConfig, env_config: EnvironmentConfig, query: str, job_id: Optional[str] = None
) -> int:
    service = ChatService.from_config(app_config, env_config)
    if job_id:
        print(service.answer_about_job(job_id, query))
    else:
        print(service.handle_message(query))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for civjobs.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        logger.debug(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "command": args.command,
                "data_root": str(app_config.data.root),
                "log_level": env_config.log_level,
            },
        )

        if args.command == "normalize":
            return run_normalize(app_config)
        if args.command == "search":
            return run_search(app_config, args.query, as_json=args.json)
        return run_ask(app_config, env_config, args.query, job_id=args.job)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
