from .ingredient_matching import find_ingredient_matches
from .pattern_learning import build_learned_pattern, reinforce_pattern
from .pattern_matching import find_pattern_matches
from .similarity import similarity, token_score
from .suggestions import suggest_mappings
from .text_normalization import expand_abbreviations, normalize, normalize_and_expand
from .tokenization import is_quantity_token, tokenize

__all__ = [
    "build_learned_pattern",
    "expand_abbreviations",
    "find_ingredient_matches",
    "find_pattern_matches",
    "is_quantity_token",
    "normalize",
    "normalize_and_expand",
    "reinforce_pattern",
    "similarity",
    "suggest_mappings",
    "token_score",
    "tokenize",
]
