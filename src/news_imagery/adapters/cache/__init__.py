"""Decision cache adapters."""

from news_imagery.adapters.cache.memory_cache import InMemoryDecisionCache
from news_imagery.adapters.cache.yaml_cache import YamlDecisionCache

__all__ = ["InMemoryDecisionCache", "YamlDecisionCache"]
