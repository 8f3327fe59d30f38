import re

# "12", "24ct", "5lb", "80/20", "1/2gal"
QUANTITY_PATTERNS = [
    r"^\d+[a-z]*$",
    r"^\d+/\d+[a-z]*$",
]

COMPILED_QUANTITY_PATTERNS = [re.compile(p) for p in QUANTITY_PATTERNS]

# Combining diacritics stay part of the word they decorate.
COMBINING_MARKS = r"\u0300-\u036f"

NON_WORD_CHARS = re.compile(rf"[^\w\s/{COMBINING_MARKS}]|_")

APOSTROPHES = re.compile(r"['’`]")

WHITESPACE_RUN = re.compile(r"\s+")

WORD = re.compile(rf"(?:[^\W_]|[{COMBINING_MARKS}])+")
