from constants.abbreviations import ABBREVIATIONS
from constants.stop_words import STOP_WORDS
from constants.text_patterns import (
    APOSTROPHES,
    COMPILED_QUANTITY_PATTERNS,
    NON_WORD_CHARS,
    QUANTITY_PATTERNS,
    WHITESPACE_RUN,
    WORD,
)

__all__ = [
    "ABBREVIATIONS",
    "STOP_WORDS",
    "QUANTITY_PATTERNS",
    "COMPILED_QUANTITY_PATTERNS",
    "NON_WORD_CHARS",
    "APOSTROPHES",
    "WHITESPACE_RUN",
    "WORD",
]
