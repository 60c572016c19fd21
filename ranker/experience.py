"""Score years of experience and job-title relevance."""
from __future__ import annotations

from ranker.log import get_logger
from ranker.models import ApplicantData, JobRequirements, ScoringPolicy
from ranker.similarity import similarity
from ranker.text import token_overlap

log = get_logger(__name__)

YEARS_WEIGHT = 0.7
RELEVANCE_WEIGHT = 0.3
NEUTRAL_RELEVANCE = 50.0

_EXCEEDS_BONUS = 10.0
_TITLE_OVERLAP_WEIGHT = 80.0


def required_years(job: JobRequirements) -> float:
    """Required years, with zero treated as one so ratios stay finite."""
    return max(job.years_of_experience or 0.0, 1.0)


def experience_ratio(job: JobRequirements, applicant: ApplicantData) -> float:
    return (applicant.total_years_experience or 0.0) / required_years(job)


def years_score(job: JobRequirements, applicant: ApplicantData) -> float:
    score = min(experience_ratio(job, applicant) * 100, 100.0)
    if (applicant.total_years_experience or 0.0) > required_years(job):
        score = min(score + _EXCEEDS_BONUS, 100.0)
    return score


def relevance_score(
    job_title: str | None,
    past_titles: tuple[str, ...] | list[str],
    policy: ScoringPolicy | None = None,
) -> float:
    """Best match between the job title and any past title.

    Each past title scores the higher of direct similarity and token
    overlap (scaled to 80). Missing titles on either side are neutral.
    """
    policy = policy or ScoringPolicy()
    titles = [t for t in past_titles if t and t.strip()]
    if not job_title or not job_title.strip() or not titles:
        return NEUTRAL_RELEVANCE

    best = 0.0
    for title in titles:
        direct = similarity(job_title, title)
        overlap = token_overlap(job_title, title, policy.stopwords) * _TITLE_OVERLAP_WEIGHT
        best = max(best, direct, overlap)
    return best


def score_experience(
    job: JobRequirements,
    applicant: ApplicantData,
    policy: ScoringPolicy | None = None,
) -> float:
    years = years_score(job, applicant)
    relevance = relevance_score(job.title, applicant.work_experience_titles, policy)
    score = YEARS_WEIGHT * years + RELEVANCE_WEIGHT * relevance
    log.debug("Experience years=%.1f relevance=%.1f → %.1f", years, relevance, score)
    return score
