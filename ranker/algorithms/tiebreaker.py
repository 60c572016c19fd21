"""Algorithm 3: additive, priority-ordered score used to break near-ties.

Priority: licence (40) > degree (30) > tenure (20) > skill breadth (2).
"""
from __future__ import annotations

from ranker.dimensions import evaluate_dimensions
from ranker.models import (
    ApplicantData, DimensionScores, JobRequirements, ScoreBreakdown, ScoringPolicy,
)

LABEL = "Eligibility-Education Tie-breaker"

ELIGIBILITY_POINTS = 40.0
NO_ELIGIBILITY_POINTS = 20.0
DEGREE_POINTS = 30.0
EXPERIENCE_POINTS = 20.0

_POINTS_PER_SKILL = 10
_MAX_SKILL_POINTS = 20
_SKILL_WEIGHT = 0.10


def eligibility_education_tiebreaker(
    job: JobRequirements,
    applicant: ApplicantData,
    policy: ScoringPolicy | None = None,
    dims: DimensionScores | None = None,
) -> ScoreBreakdown:
    dims = dims or evaluate_dimensions(job, applicant, policy)
    steps: list[str] = []
    total = 0.0

    if dims.eligibility_required:
        points = dims.eligibility / 100 * ELIGIBILITY_POINTS
        steps.append(
            f"Eligibility match {dims.eligibility:.1f}% "
            f"({dims.matched_eligibilities_count} held) (+{points:.1f})"
        )
    else:
        points = NO_ELIGIBILITY_POINTS
        steps.append(f"No eligibility required (+{points:.1f})")
    total += points

    points = dims.education / 100 * DEGREE_POINTS
    steps.append(f"Degree match {dims.education:.1f}% (+{points:.1f})")
    total += points

    points = dims.experience / 100 * EXPERIENCE_POINTS
    steps.append(f"Experience {dims.experience:.1f}% (+{points:.1f})")
    total += points

    points = min(dims.matched_skills_count * _POINTS_PER_SKILL, _MAX_SKILL_POINTS) * _SKILL_WEIGHT
    steps.append(f"{dims.matched_skills_count} matched skills (+{points:.1f})")
    total += points

    return ScoreBreakdown(
        education_score=dims.education,
        experience_score=dims.experience,
        skills_score=dims.skills,
        eligibility_score=dims.eligibility,
        total_score=round(total, 2),
        algorithm_used=LABEL,
        reasoning="; ".join(steps),
        matched_skills_count=dims.matched_skills_count,
        matched_eligibilities_count=dims.matched_eligibilities_count,
    )
