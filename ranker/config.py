"""Load scoring policy, ranking input and env configuration."""
from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from ranker.log import get_logger
from ranker.models import ApplicantData, JobRequirements, ScoringPolicy

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
POLICY_PATH: Path = CONFIG_DIR / "scoring.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"


class ConfigError(ValueError):
    """A configuration or input file could not be read or understood."""


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _read_yaml(path: Path) -> Any:
    # JSON is a subset of YAML, so .json input files load the same way.
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def _string_tuple(value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list")
    return tuple(str(v).lower().strip() for v in value)


def _parse_levels(value: Any) -> tuple[tuple[str, tuple[str, ...]], ...]:
    if not isinstance(value, list):
        raise ConfigError("'education_levels' must be a list ordered lowest → highest")
    levels = []
    for entry in value:
        if not isinstance(entry, dict) or "name" not in entry:
            raise ConfigError("each education level needs a 'name'")
        name = str(entry["name"]).lower().strip()
        keywords = _string_tuple(entry.get("keywords", [name]), f"education_levels.{name}.keywords")
        levels.append((name, keywords))
    return tuple(levels)


def _parse_related(value: Any) -> dict[str, tuple[str, ...]]:
    if not isinstance(value, dict):
        raise ConfigError("'related_fields' must be a mapping of field → related fields")
    return {
        str(k).lower().strip(): _string_tuple(v, f"related_fields.{k}")
        for k, v in value.items()
    }


def parse_policy(data: dict[str, Any] | None) -> ScoringPolicy:
    """Overlay a policy mapping onto the built-in defaults."""
    policy = ScoringPolicy()
    if not data:
        return policy
    if not isinstance(data, dict):
        raise ConfigError("scoring policy must be a mapping")

    changes: dict[str, Any] = {}
    if "stopwords" in data:
        changes["stopwords"] = _string_tuple(data["stopwords"], "stopwords")
    if "education_levels" in data:
        changes["education_levels"] = _parse_levels(data["education_levels"])
    if "related_fields" in data:
        changes["related_fields"] = _parse_related(data["related_fields"])
    if "eligibility_sentinels" in data:
        changes["eligibility_sentinels"] = _string_tuple(
            data["eligibility_sentinels"], "eligibility_sentinels"
        )
    for key in ("skill_bonus_cap", "eligibility_bonus_cap"):
        if key in data:
            try:
                changes[key] = float(data[key])
            except (TypeError, ValueError):
                raise ConfigError(f"'{key}' must be a number") from None

    unknown = set(data) - set(changes)
    if unknown:
        log.warning("Ignoring unknown scoring policy keys: %s", ", ".join(sorted(unknown)))
    return replace(policy, **changes)


def load_policy(path: str | Path | None = None) -> ScoringPolicy:
    """Load the scoring policy.

    Lookup order: explicit *path*, then ``RANKER_POLICY``, then
    ``config/scoring.yaml``. Only a missing default file falls back to
    the built-in defaults; an explicitly named file must exist.
    """
    explicit = path or get_env("RANKER_POLICY")
    policy_path = Path(explicit) if explicit else POLICY_PATH
    if not explicit and not policy_path.exists():
        log.warning("No scoring policy at %s — using built-in defaults", policy_path)
        return ScoringPolicy()
    policy = parse_policy(_read_yaml(policy_path))
    log.info("Loaded scoring policy from %s", policy_path)
    return policy


def load_ranking_input(path: str | Path) -> tuple[JobRequirements, list[ApplicantData]]:
    """Read a ``job`` mapping and an ``applicants`` list from YAML or JSON."""
    data = _read_yaml(Path(path))
    if not isinstance(data, dict) or not isinstance(data.get("job"), dict):
        raise ConfigError(f"{path} must contain a 'job' mapping")
    rows = data.get("applicants") or []
    if not isinstance(rows, list):
        raise ConfigError(f"'applicants' in {path} must be a list")
    try:
        job = JobRequirements.from_dict(data["job"])
        applicants = [ApplicantData.from_dict(row) for row in rows]
    except (ValueError, AttributeError) as exc:
        raise ConfigError(f"Invalid ranking input in {path}: {exc}") from exc
    return job, applicants
