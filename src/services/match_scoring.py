import logging
import math
from decimal import Decimal

from config import settings

logger = logging.getLogger(__name__)

SCORE_PRECISION = 4


def blended_score(token_overlap: float, string_similarity: float) -> float:
    weight = settings.string_similarity_weight
    return (1.0 - weight) * token_overlap + weight * string_similarity


def weight_multiplier(weight: int) -> float:
    confirmations = min(max(weight - 1, 0), settings.max_boosted_confirmations)
    return 1.0 + confirmations * settings.weight_boost_step


def finalize_score(raw: float) -> float:
    return round(min(1.0, max(0.0, raw)), SCORE_PRECISION)


def check_min_confidence(min_confidence: float) -> float:
    if isinstance(min_confidence, bool) or not isinstance(min_confidence, (int, float, Decimal)):
        raise ValueError(f"min_confidence must be a number, got {min_confidence!r}")
    value = float(min_confidence)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        logger.warning(f"Rejected min_confidence={min_confidence!r}")
        raise ValueError(f"min_confidence must be within [0, 1], got {min_confidence!r}")
    return value


def check_max_results(max_results: int) -> int:
    if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
        logger.warning(f"Rejected max_results={max_results!r}")
        raise ValueError(f"max_results must be a positive integer, got {max_results!r}")
    return max_results


def percent(score: float) -> str:
    return f"{round(score * 100)}%"
