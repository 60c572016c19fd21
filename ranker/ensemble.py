"""Combine the scoring algorithms into one explainable result.

Algorithms 1 and 2 always run. When their totals land within
``TIE_MARGIN`` points of each other the ranking signal is weak, so the
priority-ordered tie-breaker decides; otherwise the two are blended 60/40.
"""
from __future__ import annotations

from ranker.algorithms import (
    eligibility_education_tiebreaker, skill_experience_composite, weighted_sum,
)
from ranker.dimensions import evaluate_dimensions
from ranker.log import get_logger
from ranker.models import ApplicantData, JobRequirements, ScoreBreakdown, ScoringPolicy

log = get_logger(__name__)

TIE_MARGIN = 5.0
PRIMARY_WEIGHT = 0.6
SECONDARY_WEIGHT = 0.4

TIE_BREAKER_LABEL = "Ensemble (Tie-breaker)"
BLENDED_LABEL = "Multi-Factor Assessment"


def _blend(primary: float, secondary: float) -> float:
    return round(primary * PRIMARY_WEIGHT + secondary * SECONDARY_WEIGHT, 2)


def summarize(education: float, experience: float, skills: float, eligibility: float) -> str:
    """Plain-language strengths and gaps from per-dimension thresholds."""
    strengths: list[str] = []
    gaps: list[str] = []

    if education >= 80:
        strengths.append("strong educational background")
    elif education < 60:
        gaps.append("education level")

    if experience >= 80:
        strengths.append(
            "excellent relevant experience" if experience == 100 else "solid work experience"
        )
    elif experience < 60:
        gaps.append("years of experience")

    if skills >= 60:
        strengths.append("good technical skills")
    elif skills < 40:
        gaps.append("required skills")

    if eligibility >= 80:
        strengths.append("appropriate certifications")
    elif eligibility < 60:
        gaps.append("certifications")

    sentences: list[str] = []
    if strengths:
        sentences.append(f"Candidate demonstrates {', '.join(strengths)}.")
    if gaps:
        lead = "Areas for development include" if strengths else "Needs improvement in"
        sentences.append(f"{lead} {', '.join(gaps)}.")
    if not sentences:
        return "Candidate evaluated across multiple qualification criteria."
    return " ".join(sentences)


def score(
    job: JobRequirements,
    applicant: ApplicantData,
    policy: ScoringPolicy | None = None,
) -> ScoreBreakdown:
    """Score one applicant against one job."""
    dims = evaluate_dimensions(job, applicant, policy)
    first = weighted_sum(job, applicant, dims=dims)
    second = skill_experience_composite(job, applicant, dims=dims)

    if abs(first.total_score - second.total_score) <= TIE_MARGIN:
        third = eligibility_education_tiebreaker(job, applicant, dims=dims)
        log.debug(
            "Near-tie %.2f vs %.2f → tie-breaker %.2f",
            first.total_score, second.total_score, third.total_score,
        )
        return ScoreBreakdown(
            education_score=third.education_score,
            experience_score=third.experience_score,
            skills_score=third.skills_score,
            eligibility_score=third.eligibility_score,
            total_score=third.total_score,
            algorithm_used=TIE_BREAKER_LABEL,
            reasoning=(
                f"Algorithms 1 & 2 within {TIE_MARGIN:.0f} points "
                f"({first.total_score:.1f} vs {second.total_score:.1f}). "
                f"Tie-breaker: {third.reasoning}"
            ),
            matched_skills_count=third.matched_skills_count,
            matched_eligibilities_count=third.matched_eligibilities_count,
        )

    education = _blend(first.education_score, second.education_score)
    experience = _blend(first.experience_score, second.experience_score)
    skills = _blend(first.skills_score, second.skills_score)
    eligibility = _blend(first.eligibility_score, second.eligibility_score)
    total = _blend(first.total_score, second.total_score)
    log.debug("Blended %.2f / %.2f → %.2f", first.total_score, second.total_score, total)

    return ScoreBreakdown(
        education_score=education,
        experience_score=experience,
        skills_score=skills,
        eligibility_score=eligibility,
        total_score=total,
        algorithm_used=BLENDED_LABEL,
        reasoning=summarize(education, experience, skills, eligibility),
        matched_skills_count=first.matched_skills_count,
        matched_eligibilities_count=first.matched_eligibilities_count,
    )
