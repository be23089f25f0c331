"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from news_imagery.core.entities import ImageDecision


class ImageLibrary(ABC):
    """Interface for discovering the candidate image filenames."""

    @abstractmethod
    def list_images(self) -> list[str]:
        """Return all candidate filenames, sorted alphabetically."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget any memoized listing."""
        pass


class ImageCurator(ABC):
    """Interface for an external semantic image matcher."""

    @abstractmethod
    async def curate(self, title: str, category: str, candidates: list[str]) -> Optional[str]:
        """Pick one of ``candidates`` for the article, or None for no opinion."""
        pass


class DecisionCache(ABC):
    """Interface for persisting decisions across requests."""

    @abstractmethod
    def get(self, key: str) -> Optional[ImageDecision]:
        """Return the stored decision for a normalized title, if any."""
        pass

    @abstractmethod
    def set(self, key: str, decision: ImageDecision) -> None:
        """Store (or overwrite) the decision for a normalized title."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every stored decision."""
        pass
