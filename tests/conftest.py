"""Shared fixtures for the civjobs test suite."""

import logging
import shutil
from pathlib import Path

import pytest

from civjobs.config.models import DataConfig
from civjobs.domain.models import JobWithSalary, SalaryGrade
from civjobs.domain.salary import infer_cadence
from civjobs.jurisdictions import jurisdiction_display_name
from civjobs.logging.context import clear_log_context
from civjobs.matching import JobDataset

FIXTURES_DIR = Path(__file__).parent / "fixtures"
BRONZE_FIXTURES = FIXTURES_DIR / "bronze"

ENV_VARS = ("OPENAI_API_KEY", "LOG_LEVEL", "CIVJOBS_DATA_DIR", "ENVIRONMENT")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's shell and log context out of every test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """A data root whose bronze/ layer holds the fixture files."""
    root = tmp_path / "data"
    shutil.copytree(BRONZE_FIXTURES, root / "bronze")
    return root


@pytest.fixture
def data_config(data_dir) -> DataConfig:
    return DataConfig(root=data_dir)


def _make_job(title, jurisdiction="san_diego", code="00001", description="", amounts=()):
    return JobWithSalary(
        jurisdiction=jurisdiction,
        jurisdiction_display=jurisdiction_display_name(jurisdiction),
        code=code,
        title=title,
        description=description,
        keywords=[],
        salary_grades=[
            SalaryGrade(grade=index, amount=amount, cadence=infer_cadence(amount))
            for index, amount in enumerate(amounts, 1)
        ],
    )


@pytest.fixture
def make_job():
    """Factory for canonical jobs; cadence follows the ETL's amount rule."""
    return _make_job


@pytest.fixture
def sample_jobs():
    """Five canonical jobs covering each matching path.

    Order matters: matcher results are asserted in dataset order.
    """
    return [
        _make_job(
            "Assistant Sheriff",
            "san_diego",
            "00123",
            "Directs law enforcement operations and corrections.",
            (70.38, 75.0),
        ),
        _make_job(
            "Air Pollution Meteorologist",
            "ventura",
            "04501",
            "Performs meteorology analysis for air quality programs.",
            (6000.0, 6250.0),
        ),
        _make_job(
            "Assistant Chief Probation Officer",
            "kern",
            "07712",
            "Manages probation services and community corrections.",
        ),
        _make_job(
            "Public Information Officer",
            "san_bernardino",
            "00310",
            "Coordinates communications and public relations.",
            (40.10, 55.25),
        ),
        _make_job(
            "Deputy Sheriff",
            "san_diego",
            "00200",
            "Patrols unincorporated areas.",
            (45.0,),
        ),
    ]


@pytest.fixture
def sample_dataset(sample_jobs) -> JobDataset:
    return JobDataset.from_jobs(sample_jobs)
