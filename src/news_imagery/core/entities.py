"""Core domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from news_imagery.core.policy import (
    PLACEHOLDER_FILENAME,
    PLACEHOLDER_IMAGE,
    POLICY_VERSION,
    with_public_path,
)


class DecisionTier(str, Enum):
    """Tier of the selection procedure that produced a decision."""

    SEMANTIC = "semantic"
    BRAND = "brand"
    KEYWORD = "keyword"
    GENERIC = "generic"
    HARD_FALLBACK = "hard_fallback"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class Article:
    """Article metadata as delivered by feed ingestion."""

    title: str
    description: str = ""
    category: str = ""


@dataclass
class ImageDecision:
    """Outcome of image selection for one article."""

    image: str
    filename: str
    tier: DecisionTier
    reason: str
    score: float = 0.0
    policy_version: int = POLICY_VERSION

    @classmethod
    def for_filename(
        cls, filename: str, tier: DecisionTier, reason: str, score: float = 0.0
    ) -> "ImageDecision":
        return cls(
            image=with_public_path(filename),
            filename=filename,
            tier=tier,
            reason=reason,
            score=score,
        )

    @classmethod
    def placeholder(cls, reason: str) -> "ImageDecision":
        return cls(
            image=PLACEHOLDER_IMAGE,
            filename=PLACEHOLDER_FILENAME,
            tier=DecisionTier.PLACEHOLDER,
            reason=reason,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "image": self.image,
            "filename": self.filename,
            "tier": self.tier.value,
            "reason": self.reason,
            "score": self.score,
            "policy_version": self.policy_version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageDecision":
        """Rebuild a decision from its serialized form.

        Raises:
            KeyError: A required field is missing.
            ValueError: The tier is unknown.
        """
        return cls(
            image=data["image"],
            filename=data["filename"],
            tier=DecisionTier(data["tier"]),
            reason=data.get("reason", ""),
            score=float(data.get("score", 0.0)),
            # Entries written before versioning existed must never validate
            policy_version=int(data.get("policy_version", 0)),
        )


@dataclass
class SelectionContext:
    """Filenames already chosen during one page render.

    Create one per render and drop it afterwards; never share it between
    concurrent renders.
    """

    used_filenames: set[str] = field(default_factory=set)

    def mark_used(self, filename: str) -> None:
        self.used_filenames.add(filename)

    def is_used(self, filename: str) -> bool:
        return filename in self.used_filenames


@dataclass
class ImageMetadata:
    """One row of the optional image master table."""

    filename: str
    logo_visible: Optional[bool] = None
    trademark_present: Optional[bool] = None
    primary_category: str = ""
    brand_name: str = ""
    source: str = ""
    license: str = ""

    @property
    def restricts_brand_use(self) -> bool:
        """True when the row marks the image as carrying a logo or trademark."""
        return (
            self.logo_visible is True
            or self.trademark_present is True
            or self.primary_category.strip().lower() == "brand"
        )
