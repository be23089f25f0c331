"""Core domain layer."""

from news_imagery.core.entities import (
    Article,
    DecisionTier,
    ImageDecision,
    ImageMetadata,
    SelectionContext,
)
from news_imagery.core.errors import CuratorError, EmptyImageLibraryError, NewsImageryError
from news_imagery.core.interfaces import DecisionCache, ImageCurator, ImageLibrary
from news_imagery.core.policy import POLICY_VERSION

__all__ = [
    "Article",
    "DecisionTier",
    "ImageDecision",
    "ImageMetadata",
    "SelectionContext",
    "NewsImageryError",
    "EmptyImageLibraryError",
    "CuratorError",
    "ImageLibrary",
    "ImageCurator",
    "DecisionCache",
    "POLICY_VERSION",
]
