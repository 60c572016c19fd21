"""
Tests for the ensemble coordinator.
"""

import random
from dataclasses import replace

import pytest

from ranker.algorithms import skill_experience_composite, weighted_sum
from ranker.ensemble import BLENDED_LABEL, TIE_BREAKER_LABEL, score, summarize
from ranker.models import ApplicantData, Eligibility


class TestPathSelection:
    """Test blended vs tie-breaker path choice."""

    def test_far_apart_totals_are_blended(self, it_job, strong_applicant):
        """Totals more than 5 apart are blended 60/40."""
        applicant = replace(strong_applicant, total_years_experience=2)
        first = weighted_sum(it_job, applicant).total_score
        second = skill_experience_composite(it_job, applicant).total_score
        assert abs(first - second) > 5

        result = score(it_job, applicant)
        assert result.algorithm_used == BLENDED_LABEL == "Multi-Factor Assessment"
        assert result.total_score == pytest.approx(0.6 * first + 0.4 * second, abs=0.01)

    def test_near_totals_use_tiebreaker(self, it_job, unrelated_applicant):
        """Totals within 5 defer to the tie-breaker."""
        first = weighted_sum(it_job, unrelated_applicant).total_score
        second = skill_experience_composite(it_job, unrelated_applicant).total_score
        assert abs(first - second) <= 5

        result = score(it_job, unrelated_applicant)
        assert result.algorithm_used == TIE_BREAKER_LABEL == "Ensemble (Tie-breaker)"
        assert result.reasoning.startswith("Algorithms 1 & 2 within 5 points (")
        assert "Tie-breaker: " in result.reasoning

    def test_blended_counts_come_from_weighted_sum(self, it_job, strong_applicant):
        """Matched counts follow Algorithm 1."""
        applicant = replace(strong_applicant, total_years_experience=2)
        result = score(it_job, applicant)
        assert result.matched_skills_count == weighted_sum(it_job, applicant).matched_skills_count


class TestScenarios:
    """End-to-end scenarios."""

    def test_strong_match(self, it_job, strong_applicant):
        """Scenario A: everything matches."""
        result = score(it_job, strong_applicant)
        assert result.education_score >= 90
        assert result.matched_skills_count == 2
        assert result.matched_eligibilities_count == 1
        assert weighted_sum(it_job, strong_applicant).total_score > 85

    def test_no_overlap(self, it_job, unrelated_applicant):
        """Scenario B: nothing matches."""
        result = score(it_job, unrelated_applicant)
        for value in (result.education_score, result.experience_score,
                      result.skills_score, result.eligibility_score):
            assert value < 40
        assert result.total_score < 40
        assert result.matched_skills_count == 0
        assert result.matched_eligibilities_count == 0

    def test_no_requirements(self, open_job, strong_applicant):
        """Scenario C: empty requirement lists are neutral."""
        result = score(open_job, strong_applicant)
        assert result.skills_score == 50
        assert result.eligibility_score == 50
        assert result.experience_score == pytest.approx(85)

    def test_deterministic(self, it_job, strong_applicant):
        """Identical inputs give identical outputs."""
        assert score(it_job, strong_applicant) == score(it_job, strong_applicant)

    def test_order_independent(self, it_job):
        """Shuffling skills and eligibilities changes nothing."""
        job = replace(
            it_job,
            skills=("Programming", "Database Management", "Networking", "Records Management"),
            eligibilities=("Civil Service Professional", "Registered Electrical Engineer"),
        )
        applicant = ApplicantData(
            highest_educational_attainment="Bachelor of Science in Computer Science",
            eligibilities=(Eligibility("Civil Service Sub-Professional"), Eligibility("First Aid")),
            skills=("Programing", "Data Management", "Warehouse management", "Typing", "Excel"),
            total_years_experience=1.5,
        )
        baseline = score(job, applicant)
        rng = random.Random(7)
        for _ in range(5):
            shuffled_job = replace(
                job,
                skills=tuple(rng.sample(job.skills, len(job.skills))),
                eligibilities=tuple(rng.sample(job.eligibilities, len(job.eligibilities))),
            )
            shuffled_applicant = replace(
                applicant,
                skills=tuple(rng.sample(applicant.skills, len(applicant.skills))),
                eligibilities=tuple(rng.sample(applicant.eligibilities, len(applicant.eligibilities))),
            )
            assert score(shuffled_job, shuffled_applicant) == baseline


class TestSummarize:
    """Test the blended-path reasoning text."""

    def test_all_strengths(self):
        """High scores are all listed as strengths."""
        assert summarize(100, 85, 100, 100) == (
            "Candidate demonstrates strong educational background, solid work experience, "
            "good technical skills, appropriate certifications."
        )

    def test_excellent_experience_at_hundred(self):
        """Perfect experience reads as excellent."""
        assert "excellent relevant experience" in summarize(70, 100, 50, 70)

    def test_mixed(self):
        """Strengths followed by areas for development."""
        assert summarize(90, 50, 30, 70) == (
            "Candidate demonstrates strong educational background. "
            "Areas for development include years of experience, required skills."
        )

    def test_gaps_only(self):
        """Only gaps reads as needing improvement."""
        assert summarize(30, 20, 10, 0) == (
            "Needs improvement in education level, years of experience, required skills, certifications."
        )

    def test_middle_of_the_road(self):
        """No strengths or gaps falls back to a generic sentence."""
        assert summarize(70, 70, 50, 70) == "Candidate evaluated across multiple qualification criteria."
