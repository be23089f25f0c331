"""LLM-backed semantic curation."""

from news_imagery.adapters.llm.claude_curator import ClaudeCurator

__all__ = ["ClaudeCurator"]
