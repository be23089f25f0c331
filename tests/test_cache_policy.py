"""Tests for cached decision validation."""

from news_imagery.core import POLICY_VERSION, DecisionTier, ImageDecision
from news_imagery.core.cache_policy import is_valid_cached_decision, normalize_cache_key


def test_normalize_cache_key() -> None:
    assert normalize_cache_key("  OpenAI Releases GPT-5 ") == "openai releases gpt-5"
    assert normalize_cache_key("") == ""


def test_current_version_is_valid() -> None:
    decision = ImageDecision.for_filename("mountain-lake-sunset.jpg", DecisionTier.KEYWORD, "r")
    assert is_valid_cached_decision(decision, article_is_generic=True)


def test_version_mismatch_is_miss() -> None:
    decision = ImageDecision.for_filename("mountain-lake-sunset.jpg", DecisionTier.KEYWORD, "r")
    decision.policy_version = POLICY_VERSION - 1
    assert not is_valid_cached_decision(decision, article_is_generic=False)


def test_brand_image_for_generic_article_is_miss() -> None:
    decision = ImageDecision.for_filename("brand-openai-logo.jpg", DecisionTier.BRAND, "r")
    assert not is_valid_cached_decision(decision, article_is_generic=True)
    assert is_valid_cached_decision(decision, article_is_generic=False)


def test_missing_decision_is_miss() -> None:
    assert not is_valid_cached_decision(None, article_is_generic=False)
