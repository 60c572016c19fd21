"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("RANKER_LOG_FILE", "0")

import pytest

from ranker.models import ApplicantData, Eligibility, JobRequirements


@pytest.fixture
def it_job() -> JobRequirements:
    """Job used by the strong-match and no-overlap scenarios."""
    return JobRequirements(
        degree_requirement="Bachelor of Science in Information Technology",
        eligibilities=("Civil Service Professional",),
        skills=("Programming", "Database Management"),
        years_of_experience=2,
    )


@pytest.fixture
def strong_applicant() -> ApplicantData:
    """Applicant matching every requirement of it_job."""
    return ApplicantData(
        highest_educational_attainment="Bachelor of Science in Information Technology",
        eligibilities=(Eligibility("Civil Service Professional"),),
        skills=("Programming", "Database Management"),
        total_years_experience=3,
    )


@pytest.fixture
def unrelated_applicant() -> ApplicantData:
    """Applicant sharing nothing with it_job."""
    return ApplicantData(
        highest_educational_attainment="High School Diploma",
        eligibilities=(),
        skills=("Gardening",),
        total_years_experience=0,
    )


@pytest.fixture
def open_job() -> JobRequirements:
    """Job with no skill, eligibility or experience requirements."""
    return JobRequirements(
        degree_requirement="Bachelor of Science in Information Technology",
        eligibilities=(),
        skills=(),
        years_of_experience=0,
    )
