"""
Receipt text cleanup.

Supplier invoice lines arrive with arbitrary casing, punctuation and
shorthand ("CHKN BRST BNLS 5LB"). These helpers bring them into a single
lowercase, space separated form and spell out known abbreviations.
"""

import re
import unicodedata

from constants import ABBREVIATIONS, APOSTROPHES, NON_WORD_CHARS, WHITESPACE_RUN, WORD


def normalize(text: str) -> str:
    """Lowercase, strip punctuation (except ``/``) and collapse whitespace.

    Text is brought to NFKC first so decomposed accents stay in their word.
    """
    if not text:
        return ""
    cleaned = APOSTROPHES.sub("", unicodedata.normalize("NFKC", text).casefold())
    cleaned = NON_WORD_CHARS.sub(" ", cleaned)
    cleaned = WHITESPACE_RUN.sub(" ", cleaned).strip()
    return unicodedata.normalize("NFKC", cleaned)


def expand_abbreviations(text: str) -> str:
    if not text:
        return ""
    return WORD.sub(_expand_word, text)


def normalize_and_expand(text: str) -> str:
    return normalize(expand_abbreviations(normalize(text)))


def _expand_word(match: re.Match) -> str:
    word = match.group(0)
    return ABBREVIATIONS.get(word.upper(), word)
