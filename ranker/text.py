"""Tokenize free-text skills and titles for coarse overlap matching."""
from __future__ import annotations

import re
from collections.abc import Iterable

from ranker.models import DEFAULT_STOPWORDS

_NON_WORD = re.compile(r"[^a-z0-9\s]+")

# Shorter tokens ("it", "hr", "of") match too much to be a useful signal.
_MIN_TOKEN_LEN = 3


def _normalize(s: str | None) -> str:
    return (s or "").lower().strip()


def tokenize(text: str | None, stopwords: Iterable[str] | None = None) -> list[str]:
    """Lowercase word tokens with punctuation, short words and stopwords removed."""
    stop = set(DEFAULT_STOPWORDS if stopwords is None else stopwords)
    cleaned = _NON_WORD.sub(" ", _normalize(text))
    return [t for t in cleaned.split() if len(t) >= _MIN_TOKEN_LEN and t not in stop]


def token_overlap(
    required: str | None,
    candidate: str | None,
    stopwords: Iterable[str] | None = None,
) -> float:
    """Fraction of *required*'s distinct tokens that also appear in *candidate*."""
    required_tokens = set(tokenize(required, stopwords))
    if not required_tokens:
        return 0.0
    candidate_tokens = set(tokenize(candidate, stopwords))
    return len(required_tokens & candidate_tokens) / len(required_tokens)
