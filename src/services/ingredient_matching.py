import logging
from typing import Iterable, Optional

from config import settings
from models.domain import IngredientInfo, IngredientMatch, MatchSource, ScoreBreakdown, TokenSet
from services.match_scoring import (
    blended_score,
    check_max_results,
    check_min_confidence,
    finalize_score,
    percent,
)
from services.similarity import similarity, token_score
from services.text_normalization import normalize, normalize_and_expand
from services.tokenization import tokenize

logger = logging.getLogger(__name__)

_REASON_LABELS = {
    MatchSource.NAME: "Name match",
    MatchSource.ALIAS: "Alias match",
    MatchSource.SKU: "SKU match",
}


def find_ingredient_matches(
    text: str,
    candidates: Iterable[IngredientInfo],
    min_confidence: Optional[float] = None,
    max_results: Optional[int] = None,
) -> list[IngredientMatch]:
    """Rank catalog ingredients against an invoice description.

    Each candidate scores the best of its name, its aliases and its SKU.
    """
    floor = check_min_confidence(
        settings.default_ingredient_min_confidence if min_confidence is None else min_confidence
    )
    limit = check_max_results(settings.default_max_results if max_results is None else max_results)
    description_tokens = tokenize(text)
    if not description_tokens:
        return []
    description_text = normalize_and_expand(text)
    scored = [_score_candidate(description_tokens, description_text, c) for c in candidates]
    kept = [m for m in scored if m is not None and m.score >= floor]
    logger.debug(f"[IngredientMatch] scored {len(scored)} candidates, kept {len(kept)} at floor {floor}")
    return sorted(kept, key=_rank_key)[:limit]


def _score_candidate(
    description_tokens: TokenSet, description_text: str, ingredient: IngredientInfo
) -> Optional[IngredientMatch]:
    matches = [
        _score_variant(description_tokens, description_text, ingredient, source, variant)
        for source, variant in _variants(ingredient)
    ]
    if ingredient.sku:
        matches.append(_score_sku(description_text, ingredient))
    found = [m for m in matches if m is not None]
    return max(found, key=lambda m: m.score) if found else None


def _variants(ingredient: IngredientInfo) -> list[tuple[MatchSource, str]]:
    variants = [(MatchSource.NAME, ingredient.name)]
    variants.extend((MatchSource.ALIAS, alias) for alias in ingredient.aliases or () if alias)
    return variants


def _score_variant(
    description_tokens: TokenSet,
    description_text: str,
    ingredient: IngredientInfo,
    source: MatchSource,
    variant: str,
) -> Optional[IngredientMatch]:
    overlap = token_score(description_tokens, tokenize(variant))
    if overlap <= 0.0:
        return None
    string_sim = similarity(description_text, normalize_and_expand(variant))
    score = finalize_score(blended_score(overlap, string_sim))
    return IngredientMatch(
        ingredient=ingredient,
        score=score,
        reason=f"{_REASON_LABELS[source]}: {percent(score)}",
        breakdown=ScoreBreakdown(token_score=round(overlap, 4), string_similarity=round(string_sim, 4)),
        source=source,
        matched_text=variant,
    )


def _score_sku(description_text: str, ingredient: IngredientInfo) -> Optional[IngredientMatch]:
    string_sim = similarity(description_text, normalize_and_expand(ingredient.sku))
    factor = settings.sku_similarity_factor
    score = finalize_score(string_sim * factor)
    if score <= 0.0:
        return None
    return IngredientMatch(
        ingredient=ingredient,
        score=score,
        reason=f"{_REASON_LABELS[MatchSource.SKU]}: {percent(score)}",
        breakdown=ScoreBreakdown(token_score=0.0, string_similarity=round(string_sim, 4), weight_multiplier=factor),
        source=MatchSource.SKU,
        matched_text=ingredient.sku,
    )


def _rank_key(match: IngredientMatch) -> tuple[float, str, str]:
    return (-match.score, normalize(match.ingredient.name), str(match.ingredient.ingredient_id))
