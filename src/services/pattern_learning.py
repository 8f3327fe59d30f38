from dataclasses import replace
from datetime import datetime, timezone
from typing import Hashable, Optional

from models.domain import LearnedPattern
from services.tokenization import tokenize


def build_learned_pattern(
    description: str,
    ingredient_id: Hashable,
    ingredient_name: str,
    ingredient_sku: str,
    learned_at: Optional[datetime] = None,
) -> LearnedPattern:
    """Turn a confirmed invoice description into a new pattern with weight 1."""
    tokens = tokenize(description)
    if not tokens:
        raise ValueError(f"Description has no significant tokens: {description!r}")
    return LearnedPattern(
        tokens=tokens,
        ingredient_id=ingredient_id,
        ingredient_name=ingredient_name,
        ingredient_sku=ingredient_sku,
        weight=1,
        learned_at=learned_at or datetime.now(timezone.utc),
    )


def reinforce_pattern(pattern: LearnedPattern, learned_at: Optional[datetime] = None) -> LearnedPattern:
    return replace(pattern, weight=pattern.weight + 1, learned_at=learned_at or datetime.now(timezone.utc))
