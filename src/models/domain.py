import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Hashable, Optional, Union

TokenSet = tuple[str, ...]


class MatchSource(str, enum.Enum):
    PATTERN = "pattern"
    NAME = "name"
    ALIAS = "alias"
    SKU = "sku"


class MappingMatchType(str, enum.Enum):
    FUZZY_PATTERN = "fuzzy_pattern"
    FUZZY_INGREDIENT = "fuzzy_ingredient"


@dataclass(frozen=True)
class LearnedPattern:
    """A confirmed mapping from invoice tokens to an ingredient.

    Owned by the caller. ``weight`` counts confirmations and is only ever
    changed by producing a new instance.
    """
    tokens: TokenSet
    ingredient_id: Hashable
    ingredient_name: str
    ingredient_sku: str
    weight: int = 1
    learned_at: Optional[datetime] = None


@dataclass(frozen=True)
class IngredientInfo:
    ingredient_id: Hashable
    name: str
    sku: str = ""
    category: str = ""
    aliases: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Components that produced a final score."""
    token_score: float
    string_similarity: float
    weight_multiplier: float = 1.0


@dataclass(frozen=True)
class PatternMatch:
    pattern: LearnedPattern
    score: float
    reason: str
    breakdown: ScoreBreakdown
    source: MatchSource = MatchSource.PATTERN


@dataclass(frozen=True)
class IngredientMatch:
    ingredient: IngredientInfo
    score: float
    reason: str
    breakdown: ScoreBreakdown
    source: MatchSource = MatchSource.NAME
    matched_text: str = ""


MatchResult = Union[PatternMatch, IngredientMatch]


@dataclass(frozen=True)
class MappingSuggestion:
    ingredient_id: Hashable
    ingredient_name: str
    ingredient_sku: str
    confidence: float
    reason: str
    match_type: MappingMatchType
