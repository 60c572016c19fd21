from .composite import skill_experience_composite
from .tiebreaker import eligibility_education_tiebreaker
from .weighted_sum import weighted_sum

from ranker.log import get_logger

log = get_logger(__name__)

__all__ = [
    "weighted_sum", "skill_experience_composite",
    "eligibility_education_tiebreaker", "get_algorithm", "ALGORITHMS",
]

ALGORITHMS = {
    "weighted_sum": weighted_sum,
    "composite": skill_experience_composite,
    "tiebreaker": eligibility_education_tiebreaker,
}


def get_algorithm(name: str):
    """Look up a single scoring algorithm by its short name."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        log.error("Unknown algorithm %r (expected one of %s)", name, ", ".join(ALGORITHMS))
        raise
