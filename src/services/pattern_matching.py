import logging
from typing import Iterable, Optional

from config import settings
from models.domain import LearnedPattern, PatternMatch, ScoreBreakdown, TokenSet
from services.match_scoring import (
    blended_score,
    check_max_results,
    check_min_confidence,
    finalize_score,
    weight_multiplier,
)
from services.similarity import matched_tokens, similarity, token_score
from services.text_normalization import normalize, normalize_and_expand
from services.tokenization import tokenize

logger = logging.getLogger(__name__)


def find_pattern_matches(
    text: str,
    patterns: Iterable[LearnedPattern],
    min_confidence: Optional[float] = None,
    max_results: Optional[int] = None,
) -> list[PatternMatch]:
    """Rank learned patterns against an invoice description.

    Scores below ``min_confidence`` are dropped. Results are ordered by
    score, then pattern weight, then most recent ``learned_at``.
    """
    floor = check_min_confidence(
        settings.default_pattern_min_confidence if min_confidence is None else min_confidence
    )
    limit = check_max_results(settings.default_max_results if max_results is None else max_results)
    description_tokens = tokenize(text)
    if not description_tokens:
        return []
    description_text = normalize_and_expand(text)
    scored = [_score_pattern(description_tokens, description_text, p) for p in patterns]
    kept = [m for m in scored if m is not None and m.score >= floor]
    logger.debug(f"[PatternMatch] scored {len(scored)} patterns, kept {len(kept)} at floor {floor}")
    return _rank(kept)[:limit]


def _score_pattern(
    description_tokens: TokenSet, description_text: str, pattern: LearnedPattern
) -> Optional[PatternMatch]:
    overlap = token_score(description_tokens, pattern.tokens)
    if overlap <= 0.0:
        return None
    string_sim = similarity(description_text, normalize(" ".join(pattern.tokens)))
    multiplier = weight_multiplier(pattern.weight)
    return PatternMatch(
        pattern=pattern,
        score=finalize_score(blended_score(overlap, string_sim) * multiplier),
        reason=_reason(description_tokens, pattern.tokens),
        breakdown=ScoreBreakdown(
            token_score=round(overlap, 4),
            string_similarity=round(string_sim, 4),
            weight_multiplier=multiplier,
        ),
    )


def _reason(description_tokens: TokenSet, pattern_tokens: TokenSet) -> str:
    matched = matched_tokens(description_tokens, pattern_tokens)
    if not matched:
        return "Fuzzy token match"
    return f"Matched: {', '.join(matched)}"


def _rank(matches: list[PatternMatch]) -> list[PatternMatch]:
    ranked = sorted(matches, key=lambda m: normalize(m.pattern.ingredient_name))
    ranked.sort(key=_recency_key, reverse=True)
    ranked.sort(key=lambda m: (m.score, m.pattern.weight), reverse=True)
    return ranked


def _recency_key(match: PatternMatch) -> tuple[int, float]:
    learned_at = match.pattern.learned_at
    return (1, learned_at.timestamp()) if learned_at else (0, 0.0)
