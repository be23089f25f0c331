"""Process-local decision cache."""

from typing import Optional

from news_imagery.core import DecisionCache, ImageDecision


class InMemoryDecisionCache(DecisionCache):
    """Dictionary-backed cache, lost on restart."""

    def __init__(self) -> None:
        self._entries: dict[str, ImageDecision] = {}

    def get(self, key: str) -> Optional[ImageDecision]:
        return self._entries.get(key)

    def set(self, key: str, decision: ImageDecision) -> None:
        self._entries[key] = decision

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
