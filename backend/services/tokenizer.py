"""Text normalization and tokenization for term-frequency scoring."""

import re

# Conjunctions, articles and common prepositions
STOP_WORDS: frozenset[str] = frozenset({
    "a", "an", "the",
    "and", "or", "but", "so", "for",
    "as", "at", "by", "in", "of", "on", "to", "up",
    "from", "into", "onto", "with", "within", "without",
    "about", "above", "across", "after", "against", "around",
    "before", "below", "between", "during", "over", "through", "under",
})

MIN_TOKEN_LENGTH = 3

# Anything that is not a letter, digit or whitespace. Underscore is part of
# \w in Python, so it is matched explicitly.
_NON_WORD_RE = re.compile(r"[^\w\s]|_")


def tokenize(text: str) -> list[str]:
    """Lowercase, strip punctuation, split and filter short and stop words."""
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [
        token
        for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]
