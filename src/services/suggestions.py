import logging
from typing import Hashable, Iterable, Optional

from config import settings
from models.domain import IngredientInfo, LearnedPattern, MappingMatchType, MappingSuggestion
from services.ingredient_matching import find_ingredient_matches
from services.match_scoring import check_max_results
from services.pattern_matching import find_pattern_matches

logger = logging.getLogger(__name__)


def suggest_mappings(
    text: str,
    patterns: Iterable[LearnedPattern],
    candidates: Iterable[IngredientInfo] = (),
    min_confidence: Optional[float] = None,
    max_results: Optional[int] = None,
) -> list[MappingSuggestion]:
    """Merge learned-pattern and catalog matches into one suggestion per ingredient.

    Learned patterns win over catalog matches for the same ingredient. When
    ``min_confidence`` is omitted each matcher applies its own default floor.
    """
    limit = check_max_results(settings.default_max_results if max_results is None else max_results)
    pattern_matches = find_pattern_matches(text, patterns, min_confidence, limit)
    ingredient_matches = find_ingredient_matches(text, candidates, min_confidence, limit)

    by_ingredient: dict[Hashable, MappingSuggestion] = {}
    for m in pattern_matches:
        _keep(by_ingredient, MappingSuggestion(
            ingredient_id=m.pattern.ingredient_id,
            ingredient_name=m.pattern.ingredient_name,
            ingredient_sku=m.pattern.ingredient_sku,
            confidence=m.score,
            reason=m.reason,
            match_type=MappingMatchType.FUZZY_PATTERN,
        ))
    for m in ingredient_matches:
        if m.ingredient.ingredient_id in by_ingredient:
            continue
        _keep(by_ingredient, MappingSuggestion(
            ingredient_id=m.ingredient.ingredient_id,
            ingredient_name=m.ingredient.name,
            ingredient_sku=m.ingredient.sku,
            confidence=m.score,
            reason=m.reason,
            match_type=MappingMatchType.FUZZY_INGREDIENT,
        ))

    ranked = sorted(by_ingredient.values(), key=_rank_key)
    logger.debug(
        f"[Suggestions] {len(pattern_matches)} pattern and {len(ingredient_matches)} catalog matches "
        f"merged into {len(ranked)} suggestions"
    )
    return ranked[:limit]


def _keep(by_ingredient: dict[Hashable, MappingSuggestion], suggestion: MappingSuggestion) -> None:
    current = by_ingredient.get(suggestion.ingredient_id)
    if current is None or suggestion.confidence > current.confidence:
        by_ingredient[suggestion.ingredient_id] = suggestion


def _rank_key(suggestion: MappingSuggestion) -> tuple[float, int, str]:
    pattern_first = 0 if suggestion.match_type is MappingMatchType.FUZZY_PATTERN else 1
    return (-suggestion.confidence, pattern_first, suggestion.ingredient_name.casefold())
