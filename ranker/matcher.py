"""Match a list of required items against a candidate's items."""
from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from ranker.log import get_logger
from ranker.models import DEFAULT_ELIGIBILITY_SENTINELS, MatchResult, ScoringPolicy
from ranker.similarity import similarity
from ranker.text import token_overlap

log = get_logger(__name__)

NEUTRAL_SCORE = 50.0

# A required item counts as matched once its best strength reaches this.
MATCH_THRESHOLD = 30.0

# Token overlap is a weak signal; full overlap is worth at most this much.
_OVERLAP_WEIGHT = 30.0
_EXCESS_BONUS_PER_ITEM = 2.0


def _best_match(required: str, candidates: Sequence[str], stopwords: Iterable[str] | None) -> float:
    """Strongest tiered match for one required item.

    Tiers, highest first:
      - identical after normalization  → 100 (stop scanning)
      - similarity >= 80               → 80
      - similarity >= 50               → 50
      - token overlap                  → overlap * 30
    """
    best = 0.0
    for candidate in candidates:
        sim = similarity(required, candidate)
        if sim == 100:
            return 100.0
        if sim >= 80:
            strength = 80.0
        elif sim >= 50:
            strength = 50.0
        else:
            strength = token_overlap(required, candidate, stopwords) * _OVERLAP_WEIGHT
        best = max(best, strength)
    return best


def match_requirements(
    required: Sequence[str],
    candidates: Sequence[str],
    *,
    bonus_cap: float,
    stopwords: Iterable[str] | None = None,
) -> MatchResult:
    """Score how well *candidates* cover *required* on a 0–100 scale.

    No requirement carries no information, so it scores a neutral 50.
    Candidates beyond the number required earn a small capped bonus.
    """
    if not required:
        return MatchResult(score=NEUTRAL_SCORE, matched_count=0)
    if not candidates:
        return MatchResult(score=0.0, matched_count=0)

    stopwords = tuple(stopwords) if stopwords is not None else None
    bests = [_best_match(item, candidates, stopwords) for item in required]
    matched = sum(1 for b in bests if b >= MATCH_THRESHOLD)
    # fsum keeps the total independent of list order.
    total = math.fsum(bests)

    excess = max(0, len(candidates) - len(required))
    bonus = min(_EXCESS_BONUS_PER_ITEM * excess, bonus_cap)
    score = min(total / (len(required) * 100) * 100 + bonus, 100.0)
    log.debug("Matched %d/%d required items → %.1f", matched, len(required), score)
    return MatchResult(score=score, matched_count=matched)


def eligibility_required(
    required: Sequence[str],
    sentinels: Iterable[str] = DEFAULT_ELIGIBILITY_SENTINELS,
) -> bool:
    """False when the list is empty or every entry is a "none"-style placeholder."""
    if not required:
        return False
    phrases = [s.lower() for s in sentinels]
    return not all(any(p in item.lower() for p in phrases) for item in required)


def match_skills(
    required: Sequence[str],
    candidates: Sequence[str],
    policy: ScoringPolicy | None = None,
) -> MatchResult:
    policy = policy or ScoringPolicy()
    return match_requirements(
        required, candidates,
        bonus_cap=policy.skill_bonus_cap,
        stopwords=policy.stopwords,
    )


def match_eligibilities(
    required: Sequence[str],
    candidates: Sequence[str],
    policy: ScoringPolicy | None = None,
) -> MatchResult:
    policy = policy or ScoringPolicy()
    if not eligibility_required(required, policy.eligibility_sentinels):
        return MatchResult(score=NEUTRAL_SCORE, matched_count=0)
    return match_requirements(
        required, candidates,
        bonus_cap=policy.eligibility_bonus_cap,
        stopwords=policy.stopwords,
    )
