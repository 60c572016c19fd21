"""Compute the four per-dimension scores shared by every algorithm."""
from __future__ import annotations

from ranker.education import score_education
from ranker.experience import score_experience
from ranker.matcher import eligibility_required, match_eligibilities, match_skills
from ranker.models import ApplicantData, DimensionScores, JobRequirements, ScoringPolicy


def evaluate_dimensions(
    job: JobRequirements,
    applicant: ApplicantData,
    policy: ScoringPolicy | None = None,
) -> DimensionScores:
    policy = policy or ScoringPolicy()
    skills = match_skills(job.skills, applicant.skills, policy)
    eligibilities = match_eligibilities(job.eligibilities, applicant.eligibility_titles, policy)
    return DimensionScores(
        education=score_education(job.degree_requirement, applicant.highest_educational_attainment, policy),
        experience=score_experience(job, applicant, policy),
        skills=skills.score,
        eligibility=eligibilities.score,
        matched_skills_count=skills.matched_count,
        matched_eligibilities_count=eligibilities.matched_count,
        eligibility_required=eligibility_required(job.eligibilities, policy.eligibility_sentinels),
    )
