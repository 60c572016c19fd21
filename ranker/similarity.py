"""Edit-distance string similarity on a 0–100 scale."""
from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def _normalize(s: str | None) -> str:
    return (s or "").lower().strip()


def edit_distance(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance (insert, delete, substitute)."""
    return Levenshtein.distance(a, b)


def similarity(a: str | None, b: str | None) -> float:
    """Symmetric, case-insensitive similarity percentage in [0, 100].

    Identical strings (after trimming) score exactly 100; an empty side
    scores 0.
    """
    left, right = _normalize(a), _normalize(b)
    if not left or not right:
        return 0.0
    if left == right:
        return 100.0
    max_len = max(len(left), len(right))
    return max(0.0, (max_len - edit_distance(left, right)) / max_len * 100)
