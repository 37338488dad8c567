"""ETL orchestration: read bronze, normalize, write silver and gold."""

import json
from pathlib import Path
from typing import Any, List
from uuid import uuid4

from civjobs.config.models import DataConfig
from civjobs.logging import get_logger
from civjobs.logging.context import log_context
from civjobs.utils.timestamps import elapsed_seconds, utc_now

from .exceptions import EtlInputError
from .models import EtlRunResult
from .service import EtlNormalizer

logger = get_logger(__name__, component="etl")

RAW_JOBS_FILENAME = "job_descriptions.raw.json"
RAW_SALARIES_FILENAME = "salaries.raw.json"
SILVER_SALARIES_FILENAME = "salaries.normalized.json"
SILVER_JOBS_FILENAME = "job_descriptions.normalized.json"
GOLD_JOBS_FILENAME = "jobs_with_salary.json"
SEARCH_INDEX_FILENAME = "search_index.json"


def read_json_array(path: Path) -> List[Any]:
    """Load a bronze file that must hold a JSON array.

    Raises:
        EtlInputError: If the file is missing, unreadable, or not an array
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise EtlInputError(path, "file not found", e) from e
    except json.JSONDecodeError as e:
        raise EtlInputError(path, f"invalid JSON at line {e.lineno} column {e.colno}", e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise EtlInputError(path, str(e), e) from e

    if not isinstance(data, list):
        raise EtlInputError(path, f"expected a JSON array, got {type(data).__name__}")
    return data


def write_json(path: Path, data: Any) -> Path:
    """Write ``data`` as 2-space indented UTF-8 JSON with a trailing newline.

    Output depends only on ``data``, so identical input yields identical bytes.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(json.dumps(data, indent=2, ensure_ascii=False))
        f.write("\n")
    return path


class EtlPipeline:
    """
    Runs the bronze -> silver -> gold normalization once.

    Every stage is fully materialized before the next one starts, and all
    four output files are rewritten wholesale on each run.
    """

    def __init__(self, data_config: DataConfig):
        """
        Initialize the ETL pipeline.

        Args:
            data_config: Locations of the bronze, silver, and gold layers
        """
        self.data_config = data_config

    def run(self) -> EtlRunResult:
        """
        Execute a complete normalization run.

        Returns:
            EtlRunResult with counts, diagnostics, and output paths

        Raises:
            EtlInputError: If a bronze input file is missing or unparsable.
                Nothing is written in that case.
        """
        run_id = uuid4().hex
        result = EtlRunResult(run_id=run_id, run_started_at=utc_now())

        with log_context(run_id=run_id):
            bronze = self.data_config.bronze_path
            logger.info(
                "ETL run started",
                extra={"event": "etl.run.started", "bronze_dir": str(bronze)},
            )

            raw_jobs = read_json_array(bronze / RAW_JOBS_FILENAME)
            raw_salaries = read_json_array(bronze / RAW_SALARIES_FILENAME)
            result.raw_job_count = len(raw_jobs)
            result.raw_salary_row_count = len(raw_salaries)

            normalizer = EtlNormalizer()
            salary_table = normalizer.normalize_salaries(raw_salaries)
            jobs = normalizer.normalize_jobs(raw_jobs)
            gold = normalizer.join(jobs, salary_table)
            search_index = normalizer.build_search_index(gold)

            silver_dir = self.data_config.silver_path
            gold_dir = self.data_config.gold_path
            result.output_paths = {
                "silver_salaries": write_json(
                    silver_dir / SILVER_SALARIES_FILENAME,
                    {
                        key: [grade.model_dump(mode="json") for grade in grades]
                        for key, grades in salary_table.items()
                    },
                ),
                "silver_jobs": write_json(
                    silver_dir / SILVER_JOBS_FILENAME, [job.to_record() for job in jobs]
                ),
                "gold_jobs": write_json(
                    gold_dir / GOLD_JOBS_FILENAME, [job.to_record() for job in gold]
                ),
                "search_index": write_json(
                    gold_dir / SEARCH_INDEX_FILENAME, [entry.to_record() for entry in search_index]
                ),
            }

            result.skipped_job_count = normalizer.skipped_jobs
            result.skipped_salary_row_count = normalizer.skipped_salary_rows
            result.salary_entry_count = len(salary_table)
            result.job_count = len(gold)
            result.jobs_with_salary_count = sum(1 for job in gold if job.has_salary)
            result.unseen_jurisdictions = sorted(normalizer.unseen_jurisdictions)

            if result.unseen_jurisdictions:
                logger.warning(
                    f"Unmapped jurisdictions detected: {result.unseen_jurisdictions}",
                    extra={
                        "event": "etl.jurisdictions.unmapped",
                        "unseen_jurisdictions": result.unseen_jurisdictions,
                    },
                )

            result.run_finished_at = utc_now()
            result.duration_seconds = elapsed_seconds(result.run_started_at, result.run_finished_at)

            logger.info(
                result.summary(),
                extra={
                    "event": "etl.run.completed",
                    "job_count": result.job_count,
                    "salary_entry_count": result.salary_entry_count,
                    "skipped_job_count": result.skipped_job_count,
                    "duration_seconds": result.duration_seconds,
                },
            )

        return result
