"""Rank a pool of applicants for one job and summarize the pool."""
from __future__ import annotations

import bisect
import statistics
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from ranker.ensemble import score
from ranker.log import get_logger
from ranker.models import (
    ApplicantData, JobRequirements, PoolStatistics, RankedApplicant, ScoreBreakdown, ScoringPolicy,
)

log = get_logger(__name__)


def rank_applicants(
    job: JobRequirements,
    applicants: Sequence[ApplicantData],
    policy: ScoringPolicy | None = None,
    *,
    workers: int = 1,
    scorer: Callable[..., ScoreBreakdown] = score,
) -> list[RankedApplicant]:
    """Score every applicant and assign ranks 1..N by total, highest first.

    Applicants with equal totals keep their input order. *scorer* defaults
    to the ensemble; any single algorithm with the same signature works.
    """
    if workers > 1 and len(applicants) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            breakdowns = list(pool.map(lambda a: scorer(job, a, policy), applicants))
    else:
        breakdowns = [scorer(job, a, policy) for a in applicants]

    order = sorted(range(len(applicants)), key=lambda i: -breakdowns[i].total_score)
    ranked = [
        RankedApplicant(rank=position, applicant=applicants[i], breakdown=breakdowns[i])
        for position, i in enumerate(order, 1)
    ]
    log.info("Ranked %d applicant(s) for %s", len(ranked), job.title or "untitled job")
    return ranked


def _totals(breakdowns: Iterable[ScoreBreakdown]) -> list[float]:
    return [b.total_score for b in breakdowns]


def pool_statistics(breakdowns: Iterable[ScoreBreakdown]) -> PoolStatistics:
    totals = _totals(breakdowns)
    if not totals:
        return PoolStatistics(count=0, minimum=0.0, maximum=0.0, mean=0.0, median=0.0)
    return PoolStatistics(
        count=len(totals),
        minimum=min(totals),
        maximum=max(totals),
        mean=round(statistics.fmean(totals), 2),
        median=round(statistics.median(totals), 2),
    )


def percentile_rank(total: float, totals: Iterable[float]) -> float:
    """Share of the pool (0–100) scoring at or below *total*."""
    ordered = sorted(totals)
    if not ordered:
        return 0.0
    return round(bisect.bisect_right(ordered, total) / len(ordered) * 100, 2)
