"""Explicit brand matching between article titles and image filenames.

Matching is strict on purpose: a brand image is used only when the brand
token from its filename appears verbatim (case-insensitive) in the title.
No fuzzy matching, no stemming, no synonyms.
"""

import re
from typing import Optional

from news_imagery.core.classifier import is_generic_image
from news_imagery.core.hashing import HashFn, deterministic_pick, simple_hash
from news_imagery.core.keywords import strip_extension

GENERIC_WORDS = frozenset({
    # reserved filename markers and category prefixes
    "brand", "generic", "ai", "gen", "creative", "economy", "toolbox", "breaking",
    # generic nouns
    "logo", "logos", "image", "images", "photo", "photos", "picture", "pictures",
    "on", "with", "and", "the", "a", "an", "in", "at", "for", "from", "to",
    "mobile", "mobiles", "phone", "phones", "bag", "bags", "building", "buildings",
    "office", "offices", "store", "stores", "company", "companies", "front",
    "outdoor", "indoor", "neon", "red", "blue", "green", "gray", "grey",
    "3d", "2d", "icon", "icons", "app", "apps", "page", "pages", "tv", "television",
    "laptop", "laptops", "cell", "cells", "device", "devices", "table", "tables",
    "card", "cards", "credit", "branch", "branches", "address", "top", "view",
    "man", "woman", "person", "people", "holding", "sitting", "looking",
    "article", "articles", "floating", "gear", "items", "atlas", "feature",
    "features", "screen", "onscreen", "open", "closed", "vintage", "head",
    "brick", "wall", "glow", "remote", "web", "browser", "film", "camera",
    # camera angles
    "closeup", "close", "up", "aerial", "side", "wide", "macro",
})

_SPLIT = re.compile(r"[-_]")


def extract_brand_from_filename(filename: str) -> Optional[str]:
    """
    Extract the brand token of a filename.

    Examples:
        "brand-openai-logo.jpg" -> "openai"
        "doordash-logo-on-bag.jpg" -> "doordash"
        "logo-on-wall.jpg" -> None

    Returns:
        First token longer than one character that is not a generic word,
        or None
    """
    if not filename:
        return None

    for part in _SPLIT.split(strip_extension(filename)):
        token = part.strip().lower()
        if len(token) > 1 and token not in GENERIC_WORDS:
            return token
    return None


def brand_matches_text(brand: Optional[str], text: Optional[str]) -> bool:
    if not brand or not text:
        return False
    return brand.lower() in text.lower()


def find_brand_matches(title: str, library: list[str]) -> list[str]:
    """All library images whose brand token occurs in the title, in library order."""
    if not title or not library:
        return []

    matches = []
    for filename in library:
        if is_generic_image(filename):
            continue
        brand = extract_brand_from_filename(filename)
        if brand and brand_matches_text(brand, title):
            matches.append(filename)
    return matches


def select_brand_image(
    title: str, matches: list[str], hash_fn: HashFn = simple_hash
) -> Optional[str]:
    """Choose among brand matches; the same title always gets the same image."""
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    return deterministic_pick(title, matches, hash_fn)
