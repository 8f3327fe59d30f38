from models.domain import (
    IngredientInfo,
    IngredientMatch,
    LearnedPattern,
    MappingMatchType,
    MappingSuggestion,
    MatchResult,
    MatchSource,
    PatternMatch,
    ScoreBreakdown,
    TokenSet,
)
from models.schemas import (
    IngredientPayload,
    LearnedPatternPayload,
    MatchResultResponse,
    ScoreBreakdownResponse,
)

__all__ = [
    "TokenSet",
    "LearnedPattern",
    "IngredientInfo",
    "ScoreBreakdown",
    "PatternMatch",
    "IngredientMatch",
    "MatchResult",
    "MatchSource",
    "MappingMatchType",
    "MappingSuggestion",
    "LearnedPatternPayload",
    "IngredientPayload",
    "MatchResultResponse",
    "ScoreBreakdownResponse",
]
