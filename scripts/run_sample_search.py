#!/usr/bin/env python3
"""Sample search harness for end-to-end validation.

Runs the ETL over a bronze directory into a scratch data directory, then
runs a handful of free-text queries against the result and prints what
matched. No network access and no API key are needed.

Usage:
    # Use the bundled test fixtures
    python scripts/run_sample_search.py

    # Use your own bronze files and queries
    python scripts/run_sample_search.py --bronze data/bronze --query "sheriff jobs in kern"
"""

import argparse
import shutil
import sys
import tempfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from civjobs.chat.prompts import salary_range
from civjobs.config.models import DataConfig
from civjobs.etl import EtlInputError, EtlPipeline
from civjobs.logging.config import configure_logging
from civjobs.matching import JobDataset, JobMatcher
from civjobs.query import parse_job_query

DEFAULT_QUERIES = [
    "assistant sheriff jobs in san diego",
    "meteorology related jobs",
    "probation officer over $30 hourly",
    "jobs in ventura county paying above $70k per year",
]


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def main():
    """Main entry point for the sample search harness."""
    parser = argparse.ArgumentParser(
        description="Normalize sample data and run sample searches",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--bronze",
        type=Path,
        default=Path("tests/fixtures/bronze"),
        help="Directory with job_descriptions.raw.json and salaries.raw.json",
    )
    parser.add_argument(
        "--query",
        action="append",
        dest="queries",
        help="Query to run (repeatable; defaults to a built-in set)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()
    configure_logging(level=args.log_level, format_type="key-value", environment="validation")

    scratch = Path(tempfile.mkdtemp(prefix="civjobs-sample-"))
    try:
        data_config = DataConfig(root=scratch, bronze_dir=args.bronze)

        print_header("ETL")
        try:
            result = EtlPipeline(data_config).run()
        except EtlInputError as e:
            print(f"❌ {e}")
            return 1

        print(result.summary())
        if result.unseen_jurisdictions:
            print(f"Unmapped jurisdictions: {', '.join(result.unseen_jurisdictions)}")

        matcher = JobMatcher(JobDataset.from_gold_dir(data_config.gold_path))

        for query in args.queries or DEFAULT_QUERIES:
            print_header(f"Query: {query}")
            parsed = parse_job_query(query)
            print(f"Parsed: {parsed.to_record()}")

            jobs = matcher.search(parsed)
            if not jobs:
                print("No jobs found for these parameters.")
                continue
            for position, job in enumerate(jobs, 1):
                print(f"  [{position}] {job.title} ({job.jurisdiction_display}, {job.code}) - {salary_range(job)}")

        return 0
    finally:
        shutil.rmtree(scratch, ignore_errors=True)


if __name__ == "__main__":
    sys.exit(main())
