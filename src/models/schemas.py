from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from models.domain import IngredientInfo, IngredientMatch, LearnedPattern, MatchResult, PatternMatch

IngredientKey = Union[UUID, int, str]


class LearnedPatternPayload(BaseModel):
    tokens: List[str] = Field(default_factory=list)
    ingredient_id: IngredientKey
    ingredient_name: str = Field(..., min_length=1)
    ingredient_sku: str = ""
    weight: int = Field(1, ge=0)
    learned_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("tokens")
    @classmethod
    def _clean_tokens(cls, value: List[str]) -> List[str]:
        cleaned = [t.strip().casefold() for t in value if t and t.strip()]
        return list(dict.fromkeys(cleaned))

    def to_domain(self) -> LearnedPattern:
        return LearnedPattern(
            tokens=tuple(self.tokens),
            ingredient_id=self.ingredient_id,
            ingredient_name=self.ingredient_name,
            ingredient_sku=self.ingredient_sku,
            weight=self.weight,
            learned_at=self.learned_at,
        )


class IngredientPayload(BaseModel):
    ingredient_id: IngredientKey
    name: str = Field(..., min_length=1)
    sku: str = ""
    category: str = ""
    aliases: List[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}

    def to_domain(self) -> IngredientInfo:
        return IngredientInfo(
            ingredient_id=self.ingredient_id,
            name=self.name,
            sku=self.sku,
            category=self.category,
            aliases=tuple(a for a in self.aliases if a and a.strip()),
        )


class ScoreBreakdownResponse(BaseModel):
    token_score: float
    string_similarity: float
    weight_multiplier: float


class MatchResultResponse(BaseModel):
    ingredient_id: IngredientKey
    ingredient_name: str
    ingredient_sku: str
    score: float = Field(..., ge=0.0, le=1.0)
    source: str
    reason: str
    breakdown: ScoreBreakdownResponse

    @classmethod
    def from_match(cls, match: MatchResult) -> "MatchResultResponse":
        if isinstance(match, PatternMatch):
            subject_id = match.pattern.ingredient_id
            name, sku = match.pattern.ingredient_name, match.pattern.ingredient_sku
        elif isinstance(match, IngredientMatch):
            subject_id = match.ingredient.ingredient_id
            name, sku = match.ingredient.name, match.ingredient.sku
        else:
            raise TypeError(f"Unsupported match type: {type(match).__name__}")
        return cls(
            ingredient_id=subject_id,
            ingredient_name=name,
            ingredient_sku=sku,
            score=match.score,
            source=match.source.value,
            reason=match.reason,
            breakdown=ScoreBreakdownResponse(
                token_score=match.breakdown.token_score,
                string_similarity=match.breakdown.string_similarity,
                weight_multiplier=match.breakdown.weight_multiplier,
            ),
        )
