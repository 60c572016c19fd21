"""Data models for job requirements, applicants and score breakdowns."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_STOPWORDS: tuple[str, ...] = ("the", "and", "for", "with", "from", "into")

# Ordered lowest → highest; each level is matched by any of its keywords.
DEFAULT_EDUCATION_LEVELS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("elementary", ("elementary", "primary school")),
    ("secondary", ("secondary", "high school")),
    ("vocational", ("vocational", "technical-vocational", "tesda")),
    ("bachelor", ("bachelor", "baccalaureate")),
    ("master", ("master",)),
    ("doctoral", ("doctoral", "doctorate", "phd", "ph.d")),
    ("graduate studies", ("graduate studies",)),
)

DEFAULT_RELATED_FIELDS: dict[str, tuple[str, ...]] = {
    "information technology": (
        "computer science", "software engineering", "information systems",
        "computer engineering",
    ),
    "computer science": (
        "information technology", "software engineering", "information systems",
    ),
    "civil engineering": (
        "structural engineering", "construction engineering", "geodetic engineering",
    ),
    "nursing": ("midwifery", "health sciences", "public health"),
}

DEFAULT_ELIGIBILITY_SENTINELS: tuple[str, ...] = ("none", "not required", "n/a")


@dataclass(frozen=True)
class ScoringPolicy:
    """Tunable lookup tables consulted by the dimension scorers."""

    stopwords: tuple[str, ...] = DEFAULT_STOPWORDS
    education_levels: tuple[tuple[str, tuple[str, ...]], ...] = DEFAULT_EDUCATION_LEVELS
    related_fields: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_RELATED_FIELDS)
    )
    eligibility_sentinels: tuple[str, ...] = DEFAULT_ELIGIBILITY_SENTINELS
    skill_bonus_cap: float = 10.0
    eligibility_bonus_cap: float = 15.0


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def _years(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Years of experience must be numeric, got {value!r}") from None


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _strings(values: Any) -> tuple[str, ...]:
    return tuple(str(v) for v in (values or []) if v is not None)


@dataclass(frozen=True)
class JobRequirements:
    degree_requirement: str
    eligibilities: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    years_of_experience: float = 0.0
    title: str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JobRequirements:
        """Build from a storage row (camelCase or snake_case keys)."""
        return cls(
            degree_requirement=str(_pick(data, "degreeRequirement", "degree_requirement", default="")),
            eligibilities=_strings(_pick(data, "eligibilities")),
            skills=_strings(_pick(data, "skills")),
            years_of_experience=_years(_pick(data, "yearsOfExperience", "years_of_experience")),
            title=_optional_str(_pick(data, "title")),
            description=_optional_str(_pick(data, "description")),
        )


@dataclass(frozen=True)
class Eligibility:
    title: str

    @classmethod
    def from_value(cls, value: Any) -> Eligibility:
        if isinstance(value, Mapping):
            return cls(title=str(_pick(value, "eligibilityTitle", "eligibility_title", "title", default="")))
        return cls(title=str(value))


@dataclass(frozen=True)
class ApplicantData:
    highest_educational_attainment: str
    eligibilities: tuple[Eligibility, ...] = ()
    skills: tuple[str, ...] = ()
    total_years_experience: float = 0.0
    work_experience_titles: tuple[str, ...] = ()
    # Identity only; never read by the scorers.
    applicant_id: str | None = None
    name: str | None = None

    @property
    def eligibility_titles(self) -> list[str]:
        return [e.title for e in self.eligibilities]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApplicantData:
        """Build from a storage row (camelCase or snake_case keys)."""
        return cls(
            highest_educational_attainment=str(_pick(
                data, "highestEducationalAttainment", "highest_educational_attainment",
                default="Not specified",
            )),
            eligibilities=tuple(Eligibility.from_value(e) for e in (_pick(data, "eligibilities") or [])),
            skills=_strings(_pick(data, "skills")),
            total_years_experience=_years(_pick(data, "totalYearsExperience", "total_years_experience")),
            work_experience_titles=_strings(_pick(data, "workExperienceTitles", "work_experience_titles")),
            applicant_id=_optional_str(_pick(data, "applicantId", "applicant_id", "id")),
            name=_optional_str(_pick(data, "applicantName", "applicant_name", "name")),
        )


@dataclass(frozen=True)
class MatchResult:
    score: float
    matched_count: int


@dataclass(frozen=True)
class DimensionScores:
    education: float
    experience: float
    skills: float
    eligibility: float
    matched_skills_count: int
    matched_eligibilities_count: int
    eligibility_required: bool


@dataclass(frozen=True)
class ScoreBreakdown:
    education_score: float
    experience_score: float
    skills_score: float
    eligibility_score: float
    total_score: float
    algorithm_used: str
    reasoning: str
    matched_skills_count: int = 0
    matched_eligibilities_count: int = 0


@dataclass(frozen=True)
class RankedApplicant:
    rank: int
    applicant: ApplicantData
    breakdown: ScoreBreakdown


@dataclass(frozen=True)
class PoolStatistics:
    count: int
    minimum: float
    maximum: float
    mean: float
    median: float
