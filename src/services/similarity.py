from typing import Iterable

from rapidfuzz.distance import Levenshtein

from config import settings


def similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity in [0, 1]."""
    a, b = a or "", b or ""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(a, b) / longest


def token_score(description_tokens: Iterable[str], pattern_tokens: Iterable[str]) -> float:
    """Overlap score of two token sets, weighted toward pattern coverage.

    A token counts fully when present on the other side and partially when a
    near-identical token (typo, plural) is.
    """
    description = _unique(description_tokens)
    pattern = _unique(pattern_tokens)
    if not description or not pattern:
        return 0.0
    pattern_coverage = _coverage(pattern, description)
    description_coverage = _coverage(description, pattern)
    weight = settings.pattern_coverage_weight
    return weight * pattern_coverage + (1.0 - weight) * description_coverage


def matched_tokens(description_tokens: Iterable[str], pattern_tokens: Iterable[str]) -> list[str]:
    present = set(_unique(description_tokens))
    return [t for t in _unique(pattern_tokens) if t in present]


def _coverage(tokens: list[str], against: list[str]) -> float:
    return sum(_credit(t, against) for t in tokens) / len(tokens)


def _credit(token: str, against: list[str]) -> float:
    if token in against:
        return 1.0
    threshold = settings.fuzzy_token_threshold
    if any(similarity(token, other) >= threshold for other in against):
        return settings.fuzzy_token_credit
    return 0.0


def _unique(tokens: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(t.casefold() for t in tokens if t))
