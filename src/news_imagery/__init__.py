"""Deterministic image selection for news articles."""

__version__ = "0.3.0"
