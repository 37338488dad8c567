"""Tests for the job matching engine."""

import logging

import pytest

from civjobs.domain.models import SalaryCadence
from civjobs.matching import (
    MATCH_STRATEGIES,
    FullTextMatchStrategy,
    JobMatcher,
    TitleMatchStrategy,
    filter_by_jurisdiction,
    filter_by_keywords,
    filter_jobs,
    meets_min_salary,
)
from civjobs.query import JobQuery, parse_job_query


def titles(jobs):
    return [job.title for job in jobs]


class TestJurisdictionFilter:
    def test_exact_key(self, sample_jobs):
        assert titles(filter_by_jurisdiction(sample_jobs, "san_diego")) == [
            "Assistant Sheriff",
            "Deputy Sheriff",
        ]

    def test_substring_match(self, sample_jobs):
        """A partial key matches every jurisdiction containing it."""
        assert titles(filter_by_jurisdiction(sample_jobs, "san")) == [
            "Assistant Sheriff",
            "Public Information Officer",
            "Deputy Sheriff",
        ]

    def test_case_and_separator_insensitive(self, sample_jobs):
        assert len(filter_by_jurisdiction(sample_jobs, "San Bernardino")) == 1


class TestTitleMatchStrategy:
    strategy = TitleMatchStrategy()

    def test_composite_title(self, make_job):
        job = make_job("Assistant Sheriff")
        assert self.strategy.matches(job, ["assistant", "sheriff"])

    def test_two_title_parts(self, make_job):
        job = make_job("Probation Officer II")
        assert self.strategy.matches(job, ["probation", "officer"])

    def test_single_part_is_not_enough(self, make_job):
        assert not self.strategy.matches(make_job("Deputy Sheriff"), ["assistant", "sheriff"])

    def test_title_side_is_substring(self, make_job):
        assert self.strategy.matches(make_job("Probation Officers"), ["probation", "officer"])

    def test_keyword_side_is_exact(self, make_job):
        assert not self.strategy.matches(make_job("Probation Officers"), ["probation", "officers"])


class TestFullTextMatchStrategy:
    strategy = FullTextMatchStrategy()

    def test_single_keyword_needs_one_hit(self, make_job):
        job = make_job("Clerk", description="Handles weather reports.")
        assert self.strategy.matches(job, ["meteorology"])

    def test_multiple_keywords_need_two_hits(self, make_job):
        job = make_job("Probation Aide", description="Supports probation staff.")

        assert not self.strategy.matches(job, ["probation", "zoning"])
        assert self.strategy.matches(job, ["probation", "zoning", "aide"])

    def test_no_keywords(self, make_job):
        assert self.strategy.matches(make_job("Clerk"), [])


class TestFilterByKeywords:
    def test_title_strategy_wins_first(self, sample_jobs):
        selected, name = filter_by_keywords(sample_jobs, ["assistant", "sheriff"])

        assert titles(selected) == ["Assistant Sheriff"]
        assert name == "title"

    def test_full_text_fallback(self, sample_jobs):
        selected, name = filter_by_keywords(sample_jobs, ["meteorology"])

        assert titles(selected) == ["Air Pollution Meteorologist"]
        assert name == "full_text"

    def test_nothing_selected(self, sample_jobs):
        assert filter_by_keywords(sample_jobs, ["zoning"]) == ([], "full_text")

    def test_strategy_order_is_fixed(self):
        assert [strategy.name for strategy in MATCH_STRATEGIES] == ["title", "full_text"]


class TestMeetsMinSalary:
    def test_monthly_grade_against_hourly_threshold(self, make_job):
        job = make_job("Analyst", amounts=(6000.0,))

        assert meets_min_salary(job, 34, SalaryCadence.HOURLY)
        assert not meets_min_salary(job, 35, SalaryCadence.HOURLY)

    def test_default_cadence_is_hourly(self, make_job):
        job = make_job("Analyst", amounts=(45.0,))

        assert meets_min_salary(job, 45)
        assert not meets_min_salary(job, 46)

    def test_job_without_grades_never_qualifies(self, make_job):
        assert not meets_min_salary(make_job("Analyst"), 1, SalaryCadence.HOURLY)


class TestFilterJobs:
    def test_empty_query_keeps_everything(self, sample_jobs):
        outcome = filter_jobs(sample_jobs, JobQuery())

        assert outcome.jobs == sample_jobs
        assert outcome.strategy is None

    def test_title_and_jurisdiction(self, sample_jobs):
        query = JobQuery(keywords=["assistant", "sheriff"], jurisdiction="san_diego")
        outcome = filter_jobs(sample_jobs, query)

        assert titles(outcome.jobs) == ["Assistant Sheriff"]
        assert outcome.jurisdiction_candidates == 2
        assert outcome.keyword_candidates == 1

    def test_title_match_excludes_full_text_matches(self, sample_jobs):
        """Deputy Sheriff would pass full text, but the title strategy already selected a job."""
        outcome = filter_jobs(sample_jobs, JobQuery(keywords=["assistant", "sheriff"]))
        assert titles(outcome.jobs) == ["Assistant Sheriff"]

    def test_composite_probation_title(self, sample_jobs):
        query = JobQuery(keywords=["assistant", "chief", "probation", "officer"])
        assert titles(filter_jobs(sample_jobs, query).jobs) == ["Assistant Chief Probation Officer"]

    def test_related_suffix(self, sample_jobs):
        outcome = filter_jobs(sample_jobs, JobQuery(keywords=["weatherrelated"]))
        assert titles(outcome.jobs) == ["Air Pollution Meteorologist"]

    def test_synonym_hit(self, sample_jobs):
        outcome = filter_jobs(sample_jobs, JobQuery(keywords=["probation"]))
        assert titles(outcome.jobs) == ["Assistant Chief Probation Officer"]

    def test_two_keywords_need_two_hits(self, sample_jobs):
        outcome = filter_jobs(sample_jobs, JobQuery(keywords=["probation", "zoning"]))

        assert outcome.is_empty
        assert outcome.strategy == "full_text"

    def test_hourly_threshold_without_cadence(self, sample_jobs):
        outcome = filter_jobs(sample_jobs, JobQuery(min_salary=70))
        assert titles(outcome.jobs) == ["Assistant Sheriff"]

    def test_annual_threshold(self, sample_jobs):
        query = JobQuery(min_salary=70000, salary_cadence=SalaryCadence.ANNUAL)
        assert titles(filter_jobs(sample_jobs, query).jobs) == [
            "Assistant Sheriff",
            "Air Pollution Meteorologist",
            "Public Information Officer",
            "Deputy Sheriff",
        ]

    def test_monthly_threshold_compares_annual_equivalents(self, sample_jobs):
        query = JobQuery(min_salary=80000, salary_cadence=SalaryCadence.MONTHLY)
        assert titles(filter_jobs(sample_jobs, query).jobs) == [
            "Assistant Sheriff",
            "Public Information Officer",
            "Deputy Sheriff",
        ]

    def test_input_is_not_mutated(self, sample_jobs):
        original = list(sample_jobs)
        filter_jobs(sample_jobs, JobQuery(jurisdiction="kern"))
        assert sample_jobs == original


class TestJobMatcher:
    @pytest.fixture
    def matcher(self, sample_dataset):
        return JobMatcher(sample_dataset)

    def test_search_parsed_query(self, matcher):
        results = matcher.search(parse_job_query("assistant sheriff jobs in san diego"))
        assert [job.job_id for job in results] == ["san_diego|00123"]

    def test_filter_explicit_jobs(self, matcher, make_job):
        jobs = [make_job("Senior Meteorologist", "ventura"), make_job("Clerk", "kern")]
        assert matcher.filter_jobs(jobs, JobQuery(jurisdiction="kern")) == [jobs[1]]

    def test_no_results(self, matcher):
        assert matcher.search(JobQuery(keywords=["zoning"])) == []

    def test_evaluate_logs_summary(self, matcher, caplog):
        with caplog.at_level(logging.INFO, logger="civjobs.matching.engine"):
            outcome = matcher.evaluate(JobQuery(jurisdiction="san_diego"))

        assert len(outcome) == 2
        record = next(r for r in caplog.records if getattr(r, "event", None) == "matching.search.completed")
        assert record.result_count == 2
        assert record.dataset_size == 5
        assert record.component == "matching"

    def test_repeated_searches_are_independent(self, matcher):
        first = matcher.search(JobQuery(keywords=["meteorology"]))
        matcher.search(JobQuery(jurisdiction="kern"))
        assert matcher.search(JobQuery(keywords=["meteorology"])) == first
