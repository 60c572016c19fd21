"""Algorithm 2: skills and experience folded into one exponential composite.

    composite = skills · exp(β·min(r, 2)) / exp(β·2),   r = years / required
    total     = 0.40·composite + 0.35·education + 0.25·eligibility

Experience enters only through the composite; there is no separately
weighted experience term. A candidate with no experience keeps
exp(0)/exp(1) ≈ 37% of their skill score inside the composite.
"""
from __future__ import annotations

import math

from ranker.dimensions import evaluate_dimensions
from ranker.experience import experience_ratio
from ranker.models import (
    ApplicantData, DimensionScores, JobRequirements, ScoreBreakdown, ScoringPolicy,
)

LABEL = "Skill-Experience Composite"

BETA = 0.5
MAX_RATIO = 2.0

COMPOSITE_WEIGHT = 0.40
EDUCATION_WEIGHT = 0.35
ELIGIBILITY_WEIGHT = 0.25


def composite_score(skills: float, ratio: float) -> float:
    capped = min(ratio, MAX_RATIO)
    return skills * math.exp(BETA * capped) / math.exp(BETA * MAX_RATIO)


def skill_experience_composite(
    job: JobRequirements,
    applicant: ApplicantData,
    policy: ScoringPolicy | None = None,
    dims: DimensionScores | None = None,
) -> ScoreBreakdown:
    dims = dims or evaluate_dimensions(job, applicant, policy)
    ratio = experience_ratio(job, applicant)
    composite = composite_score(dims.skills, ratio)
    total = (
        COMPOSITE_WEIGHT * composite
        + EDUCATION_WEIGHT * dims.education
        + ELIGIBILITY_WEIGHT * dims.eligibility
    )
    reasoning = (
        f"Skill-Experience Composite (40%): {composite:.1f} "
        f"[skills {dims.skills:.1f}, experience ratio {min(ratio, MAX_RATIO):.2f}], "
        f"Education (35%): {dims.education:.1f}, "
        f"Eligibility (25%): {dims.eligibility:.1f}"
    )
    return ScoreBreakdown(
        education_score=dims.education,
        experience_score=dims.experience,
        skills_score=dims.skills,
        eligibility_score=dims.eligibility,
        total_score=round(total, 2),
        algorithm_used=LABEL,
        reasoning=reasoning,
        matched_skills_count=dims.matched_skills_count,
        matched_eligibilities_count=dims.matched_eligibilities_count,
    )
