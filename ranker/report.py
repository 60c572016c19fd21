"""Generate a Markdown ranking report for one job."""
from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

from ranker.config import REPORTS_DIR
from ranker.log import get_logger
from ranker.models import JobRequirements, RankedApplicant
from ranker.ranking import percentile_rank, pool_statistics

log = get_logger(__name__)

_TOP_DETAILED = 15


def _truncate(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def _display_name(ranked: RankedApplicant) -> str:
    a = ranked.applicant
    return a.name or a.applicant_id or f"Applicant #{ranked.rank}"


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-") or "job"


def build_ranking_report(job: JobRequirements, ranked: list[RankedApplicant]) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    title = job.title or "Untitled position"
    lines: list[str] = [f"# Applicant Ranking — {title} — {date}", ""]

    breakdowns = [r.breakdown for r in ranked]
    totals = [b.total_score for b in breakdowns]
    tie_breaks = sum(1 for b in breakdowns if "Tie-breaker" in b.algorithm_used)
    lines.append(
        f"**{len(ranked)}** applicants ranked | **{tie_breaks}** decided by tie-breaker"
    )
    lines.append("")

    lines.append("## Requirements")
    lines.append("")
    lines.append(f"- **Degree:** {job.degree_requirement or '—'}")
    lines.append(f"- **Experience:** {job.years_of_experience:g} year(s)")
    lines.append(f"- **Skills:** {', '.join(job.skills) or '—'}")
    lines.append(f"- **Eligibilities:** {', '.join(job.eligibilities) or '—'}")
    lines.append("")

    top = ranked[:_TOP_DETAILED]
    if top:
        lines.append("## Top Applicants")
        lines.append("")
        for r in top:
            b = r.breakdown
            lines.append(f"### {r.rank}. {_display_name(r)}")
            lines.append(
                f"- **Score:** {b.total_score:.2f} "
                f"(percentile {percentile_rank(b.total_score, totals):.0f}) — {b.algorithm_used}"
            )
            lines.append(
                f"- **Education:** {b.education_score:.1f} | **Experience:** {b.experience_score:.1f}"
                f" | **Skills:** {b.skills_score:.1f} | **Eligibility:** {b.eligibility_score:.1f}"
            )
            lines.append(
                f"- **Matched:** {b.matched_skills_count}/{len(job.skills)} skills, "
                f"{b.matched_eligibilities_count}/{len(job.eligibilities)} eligibilities"
            )
            lines.append(f"- **Why:** {b.reasoning}")
            lines.append("")

        lines.append("---")
        lines.append("")
        lines.append("## Quick Reference")
        lines.append("")
        lines.append("| # | Applicant | Score | Edu | Exp | Skills | Elig | Algorithm |")
        lines.append("|--:|-----------|------:|----:|----:|-------:|-----:|-----------|")
        for r in ranked:
            b = r.breakdown
            lines.append(
                f"| {r.rank} | {_truncate(_display_name(r), 28)} | {b.total_score:.2f} "
                f"| {b.education_score:.0f} | {b.experience_score:.0f} | {b.skills_score:.0f} "
                f"| {b.eligibility_score:.0f} | {b.algorithm_used} |"
            )
        lines.append("")

        stats = pool_statistics(breakdowns)
        lines.append("---")
        lines.append("")
        lines.append("## Pool Statistics")
        lines.append("")
        lines.append(f"- **Highest:** {stats.maximum:.2f}")
        lines.append(f"- **Lowest:** {stats.minimum:.2f}")
        lines.append(f"- **Mean:** {stats.mean:.2f}")
        lines.append(f"- **Median:** {stats.median:.2f}")
        lines.append("")
    else:
        lines.append("_No applicants to rank._")
        lines.append("")

    log.info("Built ranking report: %d applicants, %d tie-breaks", len(ranked), tie_breaks)
    return "\n".join(lines)


def write_ranking_report(content: str, job_title: str | None, reports_dir: Path | None = None) -> Path:
    target = reports_dir or REPORTS_DIR
    target.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = target / f"ranking_{_slug(job_title or '')}_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
