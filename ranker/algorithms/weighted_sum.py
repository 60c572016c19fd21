"""Algorithm 1: linear blend of the four dimension scores.

    total = 0.30·education + 0.25·experience + 0.25·skills + 0.20·eligibility

Weights sum to 1.0, so the total stays on the 0–100 scale of its inputs.
"""
from __future__ import annotations

from ranker.dimensions import evaluate_dimensions
from ranker.models import (
    ApplicantData, DimensionScores, JobRequirements, ScoreBreakdown, ScoringPolicy,
)

LABEL = "Weighted Sum Model"

WEIGHTS: dict[str, float] = {
    "education": 0.30,
    "experience": 0.25,
    "skills": 0.25,
    "eligibility": 0.20,
}


def weighted_sum(
    job: JobRequirements,
    applicant: ApplicantData,
    policy: ScoringPolicy | None = None,
    dims: DimensionScores | None = None,
) -> ScoreBreakdown:
    dims = dims or evaluate_dimensions(job, applicant, policy)
    scores = {
        "education": dims.education,
        "experience": dims.experience,
        "skills": dims.skills,
        "eligibility": dims.eligibility,
    }
    parts: list[str] = []
    total = 0.0
    for name, weight in WEIGHTS.items():
        contribution = weight * scores[name]
        total += contribution
        parts.append(
            f"{name.capitalize()} ({weight:.0%}): {scores[name]:.1f} → {contribution:.1f}"
        )

    return ScoreBreakdown(
        education_score=dims.education,
        experience_score=dims.experience,
        skills_score=dims.skills,
        eligibility_score=dims.eligibility,
        total_score=round(total, 2),
        algorithm_used=LABEL,
        reasoning=", ".join(parts),
        matched_skills_count=dims.matched_skills_count,
        matched_eligibilities_count=dims.matched_eligibilities_count,
    )
