"""Rank the applicants in an input file against its job."""
from __future__ import annotations

import argparse
import sys

from ranker.algorithms import ALGORITHMS, get_algorithm
from ranker.config import ConfigError, load_policy, load_ranking_input
from ranker.ensemble import score
from ranker.log import get_logger, set_level
from ranker.ranking import pool_statistics, rank_applicants
from ranker.report import build_ranking_report, write_ranking_report

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ranker", description="Rank job applicants with the matching engine",
    )
    parser.add_argument("input", help="YAML or JSON file with a 'job' and its 'applicants'")
    parser.add_argument("--policy", help="Scoring policy YAML (default: config/scoring.yaml or $RANKER_POLICY)")
    parser.add_argument(
        "--algorithm", choices=["ensemble", *ALGORITHMS], default="ensemble",
        help="Score with the ensemble (default) or a single algorithm",
    )
    parser.add_argument("--workers", type=int, default=1, help="Parallel scoring threads (default 1)")
    parser.add_argument("--report", action="store_true", help="Write a Markdown report under reports/")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-applicant scoring detail")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level("DEBUG")
    try:
        policy = load_policy(args.policy)
        job, applicants = load_ranking_input(args.input)
    except ConfigError as exc:
        log.error("%s", exc)
        return 1

    if not applicants:
        log.info("No applicants to rank for %s", job.title or "untitled job")
        return 0

    scorer = score if args.algorithm == "ensemble" else get_algorithm(args.algorithm)
    ranked = rank_applicants(job, applicants, policy, workers=args.workers, scorer=scorer)

    for r in ranked:
        name = r.applicant.name or r.applicant.applicant_id or "—"
        log.info(
            "  #%d  %-28s  %6.2f  %s",
            r.rank, name[:28], r.breakdown.total_score, r.breakdown.algorithm_used,
        )
    stats = pool_statistics(r.breakdown for r in ranked)
    log.info(
        "Pool: min %.2f | max %.2f | mean %.2f | median %.2f",
        stats.minimum, stats.maximum, stats.mean, stats.median,
    )

    if args.report:
        path = write_ranking_report(build_ranking_report(job, ranked), job.title)
        log.info("  Report: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
