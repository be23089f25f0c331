"""Filename-based image classification.

Filenames are the source of truth for safety classification:

- brand images start with ``brand-`` and are only ever used for articles
  that name a brand
- generic images carry a ``-generic-`` segment and are free of logos
- category-prefixed images (``economy-``, ``creative-``...) are tagged to a
  topic bucket
- everything else is a plain subject image

Optional metadata (the image master table) may add restrictions on top of the
filename, never remove them.
"""

import re
from typing import Mapping, Optional

from news_imagery.core.entities import ImageMetadata

BRAND_PREFIX = "brand-"

CATEGORY_PREFIXES = (
    "creative-",
    "ai-",
    "gen-ai-",
    "economy-",
    "toolbox-",
    "breaking-",
)

# Prefixes tied to one site category. "ai-" fits every category and is bound
# to none.
PREFIX_CATEGORIES = {
    "creative-": "creative tech",
    "gen-ai-": "gen ai",
    "economy-": "ai economy",
    "toolbox-": "toolbox",
    "breaking-": "breaking ai",
}

_GENERIC_MARKER = re.compile(r"-generic[-.]", re.IGNORECASE)

MetadataTable = Mapping[str, ImageMetadata]


def is_brand_by_filename(filename: str) -> bool:
    if not filename:
        return False
    return filename.lower().startswith(BRAND_PREFIX)


def is_generic_image(filename: str) -> bool:
    if not filename:
        return False
    return bool(_GENERIC_MARKER.search(filename))


def category_prefix_of(filename: str) -> Optional[str]:
    """Return the category prefix a filename starts with, longest first."""
    if not filename:
        return None
    lower = filename.lower()
    for prefix in sorted(CATEGORY_PREFIXES, key=len, reverse=True):
        if lower.startswith(prefix):
            return prefix
    return None


def has_category_prefix(filename: str) -> bool:
    return category_prefix_of(filename) is not None


def category_prefix_matches(filename: str, category: Optional[str]) -> bool:
    """True when the filename's prefix is the one bound to ``category``."""
    if not category:
        return False
    prefix = category_prefix_of(filename)
    if prefix is None:
        return False
    return PREFIX_CATEGORIES.get(prefix) == category.strip().lower()


def should_exclude_from_keyword_matching(filename: str) -> bool:
    """Generic and category-prefixed images stay out of keyword scoring."""
    return is_generic_image(filename) or has_category_prefix(filename)


def filter_subject_images(library: list[str], category: Optional[str] = None) -> list[str]:
    """
    Restrict the library to images eligible for keyword scoring.

    Removes generic images, brand images and category-prefixed images.
    Category-prefixed images whose prefix belongs to ``category`` are kept:
    they describe the article's own topic bucket.
    """
    subjects = []
    for filename in library:
        if is_brand_by_filename(filename):
            continue
        if should_exclude_from_keyword_matching(filename):
            if is_generic_image(filename) or not category_prefix_matches(filename, category):
                continue
        subjects.append(filename)
    return subjects


def filter_generic_images(library: list[str]) -> list[str]:
    return [filename for filename in library if is_generic_image(filename)]


def is_brand_safe(filename: str, metadata: Optional[MetadataTable] = None) -> bool:
    """
    Check whether an image may be shown next to an article that names no brand.

    The ``brand-`` filename marker always wins. A metadata row can only make
    an image unsafe.
    """
    if is_brand_by_filename(filename):
        return False
    if metadata:
        row = metadata.get(filename)
        if row is not None and row.restricts_brand_use:
            return False
    return True


def filter_brand_safe(library: list[str], metadata: Optional[MetadataTable] = None) -> list[str]:
    return [filename for filename in library if is_brand_safe(filename, metadata)]
