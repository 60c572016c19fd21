"""Score an applicant's attainment against a job's degree requirement."""
from __future__ import annotations

from collections.abc import Sequence

from ranker.log import get_logger
from ranker.models import ScoringPolicy
from ranker.similarity import similarity

log = get_logger(__name__)

# Any stated education earns at least this much credit.
MIN_EDUCATION_SCORE = 30.0

_SAME_LEVEL_FLOOR = 75.0
_HIGHER_LEVEL_BONUS = 15.0
_LOWER_LEVEL_PENALTY = 20.0
_RELATED_FIELD_FLOOR = 85.0


def _normalize(s: str | None) -> str:
    return (s or "").lower().strip()


def education_level(text: str, levels: Sequence[tuple[str, Sequence[str]]]) -> int | None:
    """Index of the highest level whose keywords appear in *text*, or None."""
    found = None
    for index, (_name, keywords) in enumerate(levels):
        if any(k in text for k in keywords):
            found = index
    return found


def _adjust_for_level(score: float, required: str, attainment: str, policy: ScoringPolicy) -> float:
    required_level = education_level(required, policy.education_levels)
    applicant_level = education_level(attainment, policy.education_levels)
    if required_level is None or applicant_level is None:
        return score
    if applicant_level == required_level:
        return max(score, _SAME_LEVEL_FLOOR)
    if applicant_level > required_level:
        return min(score + _HIGHER_LEVEL_BONUS, 100.0)
    return max(score - _LOWER_LEVEL_PENALTY, MIN_EDUCATION_SCORE)


def _in_related_field(required: str, attainment: str, policy: ScoringPolicy) -> bool:
    for field_name, related in policy.related_fields.items():
        if field_name in required and any(term in attainment for term in related):
            return True
    return False


def score_education(
    degree_requirement: str | None,
    attainment: str | None,
    policy: ScoringPolicy | None = None,
) -> float:
    policy = policy or ScoringPolicy()
    required = _normalize(degree_requirement)
    applicant = _normalize(attainment)

    score = similarity(required, applicant)
    score = _adjust_for_level(score, required, applicant, policy)
    if _in_related_field(required, applicant, policy):
        score = max(score, _RELATED_FIELD_FLOOR)

    score = max(score, MIN_EDUCATION_SCORE)
    log.debug("Education %r vs %r → %.1f", required, applicant, score)
    return score
