"""Keyword extraction shared by titles and image filenames."""

import re
from typing import Optional

STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "any", "can",
    "had", "her", "was", "one", "our", "out", "has", "him", "his", "how",
    "its", "may", "new", "now", "old", "see", "two", "way", "who", "did",
    "get", "got", "let", "put", "say", "she", "too", "use", "via", "yet",
    "this", "that", "with", "from", "have", "they", "will", "what", "when",
    "your", "than", "then", "them", "been", "were", "said", "each", "which",
    "their", "there", "about", "would", "these", "other", "into", "more",
    "some", "could", "also", "just", "over", "only", "very", "after",
    "before", "most", "such", "here", "where", "while", "being", "does",
    "make", "like", "even", "much", "many", "should", "because", "through",
    "between", "against", "under", "again", "why", "off", "own", "same",
})

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")
_EXTENSIONS = re.compile(r"(\.[a-z0-9]+)+$", re.IGNORECASE)


def extract_keywords(text: Optional[str]) -> set[str]:
    """
    Extract significant lower-case tokens from free text.

    Everything except letters, digits, whitespace and hyphens is removed,
    the rest is split on whitespace and hyphens, and tokens of two characters
    or fewer or listed in STOP_WORDS are dropped.

    Args:
        text: Arbitrary text, may be None

    Returns:
        Set of keywords (empty for empty input)
    """
    if not text:
        return set()

    cleaned = _DISALLOWED_CHARS.sub("", text.lower())
    return {
        token
        for token in _SEPARATORS.split(cleaned)
        if len(token) > 2 and token not in STOP_WORDS
    }


def strip_extension(filename: str) -> str:
    """Remove every trailing extension ("a.jpg.svg" -> "a")."""
    return _EXTENSIONS.sub("", filename)


def filename_keywords(filename: str) -> set[str]:
    """Keywords of an image filename, ignoring its extension."""
    return extract_keywords(strip_extension(filename).replace("_", "-"))
