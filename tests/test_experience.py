"""
Tests for experience scoring.
"""

import pytest

from ranker.experience import (
    NEUTRAL_RELEVANCE, relevance_score, required_years, score_experience, years_score,
)
from ranker.models import ApplicantData, JobRequirements
from ranker.similarity import similarity


def _job(years, title=None):
    return JobRequirements(degree_requirement="", years_of_experience=years, title=title)


def _applicant(years, titles=()):
    return ApplicantData(
        highest_educational_attainment="", total_years_experience=years,
        work_experience_titles=tuple(titles),
    )


class TestYearsScore:
    """Test the years-of-experience component."""

    @pytest.mark.parametrize("required,held,expected", [
        (4, 2, 50),
        (10, 8, 80),
        (2, 2, 100),
        (2, 3, 100),
        (0, 0, 0),
        (0, 0.5, 50),
    ])
    def test_ratio(self, required, held, expected):
        """Held over required years, capped at 100."""
        assert years_score(_job(required), _applicant(held)) == pytest.approx(expected)

    def test_zero_required_treated_as_one(self):
        """Zero required years never divides by zero."""
        assert required_years(_job(0)) == 1


class TestRelevanceScore:
    """Test job-title relevance."""

    def test_missing_titles_are_neutral(self):
        """No title on either side gives 50."""
        assert relevance_score(None, ["IT Officer"]) == NEUTRAL_RELEVANCE
        assert relevance_score("IT Officer", []) == NEUTRAL_RELEVANCE
        assert relevance_score("  ", ["IT Officer"]) == NEUTRAL_RELEVANCE

    def test_identical_title(self):
        """A matching past title is fully relevant."""
        assert relevance_score("Administrative Officer II", ["Clerk", "administrative officer ii"]) == 100

    def test_token_overlap_credit(self):
        """Shared title words count when direct similarity is weaker."""
        job_title, past = "Administrative Officer II", "Senior Administrative Assistant"
        expected = max(similarity(job_title, past), 40)
        assert relevance_score(job_title, [past]) == pytest.approx(expected)


class TestScoreExperience:
    """Test the combined experience score."""

    def test_seventy_thirty_blend(self):
        """Years weigh 70% and relevance 30%."""
        assert score_experience(_job(2), _applicant(1)) == pytest.approx(0.7 * 50 + 0.3 * 50)

    def test_relevant_history_raises_score(self):
        """Matching past titles lift the score above the neutral default."""
        job = _job(2, title="IT Officer")
        assert score_experience(job, _applicant(2, ["IT Officer"])) == pytest.approx(100)
        assert score_experience(job, _applicant(2)) == pytest.approx(85)
