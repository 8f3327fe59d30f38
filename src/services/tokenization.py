from constants import COMPILED_QUANTITY_PATTERNS, STOP_WORDS
from models.domain import TokenSet
from services.text_normalization import normalize_and_expand


def tokenize(text: str) -> TokenSet:
    """Split an invoice description into unique significant tokens.

    Stop words are dropped, quantity tokens such as ``24ct`` or ``80/20``
    are kept. Other slash-joined words ("w/skin", "beef/pork") are split.
    First-seen order is preserved.
    """
    expanded = normalize_and_expand(text)
    if not expanded:
        return ()
    words = [part for word in expanded.split(" ") for part in _split_slashes(word)]
    kept = [word for word in words if _is_significant(word)]
    return tuple(dict.fromkeys(kept))


def is_quantity_token(token: str) -> bool:
    return any(p.match(token) for p in COMPILED_QUANTITY_PATTERNS)


def _split_slashes(word: str) -> list[str]:
    if "/" not in word or is_quantity_token(word):
        return [word]
    return [part for part in word.split("/") if part]


def _is_significant(word: str) -> bool:
    if is_quantity_token(word):
        return True
    if word in STOP_WORDS:
        return False
    return len(word) > 1
