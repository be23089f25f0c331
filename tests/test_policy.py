"""Tests for article classification and public paths."""

from news_imagery.core.policy import (
    PUBLIC_PREFIX,
    is_generic_article,
    is_local_image,
    with_public_path,
)


def test_brand_articles() -> None:
    assert not is_generic_article("OpenAI Releases GPT-5")
    assert not is_generic_article("Meta launches new model")
    assert not is_generic_article("Ethereum ETF approved")
    assert not is_generic_article("Hugging Face releases a dataset")


def test_brand_in_description() -> None:
    assert not is_generic_article("New model launched", "Built by Anthropic")


def test_generic_articles() -> None:
    assert is_generic_article("Stock Markets Rally on Tech News")
    assert is_generic_article("Untitled Placeholder Test")
    assert is_generic_article("", "")


def test_brand_keywords_match_whole_words_only() -> None:
    assert is_generic_article("The metadata revolution")
    assert is_generic_article("A new method for reasoning")


def test_brand_keywords_with_version_numbers() -> None:
    assert not is_generic_article("GPT4 tops benchmark")
    assert not is_generic_article("Llama3 released")
    assert not is_generic_article("Claude3.5 is out")


def test_with_public_path() -> None:
    assert with_public_path("robot.jpg") == f"{PUBLIC_PREFIX}/robot.jpg"
    assert with_public_path("robot.jpg") == "/assets/images/all/robot.jpg"


def test_is_local_image() -> None:
    assert is_local_image("/assets/images/all/robot.jpg")
    assert not is_local_image("https://images.unsplash.com/photo.jpg")
    assert not is_local_image("//cdn.example.com/photo.jpg")
    assert not is_local_image("")
