"""Rules a persisted decision must pass before it is trusted."""

from typing import Optional

from news_imagery.core.classifier import is_brand_by_filename
from news_imagery.core.entities import ImageDecision
from news_imagery.core.policy import POLICY_VERSION


def normalize_cache_key(title: str) -> str:
    return (title or "").lower().strip()


def is_valid_cached_decision(
    cached: Optional[ImageDecision],
    article_is_generic: bool,
    policy_version: int = POLICY_VERSION,
) -> bool:
    """
    A cached decision is a hit only under the current policy version, and,
    for articles naming no brand, only if it does not point at a brand image.
    """
    if cached is None:
        return False
    if cached.policy_version != policy_version:
        return False
    if article_is_generic and is_brand_by_filename(cached.filename):
        return False
    return True
