"""Tests for filename classification."""

from news_imagery.core import ImageMetadata
from news_imagery.core.classifier import (
    category_prefix_matches,
    category_prefix_of,
    filter_brand_safe,
    filter_generic_images,
    filter_subject_images,
    has_category_prefix,
    is_brand_by_filename,
    is_brand_safe,
    is_generic_image,
    should_exclude_from_keyword_matching,
)

LIBRARY = [
    "ai-generic-robot.jpg",
    "brand-openai-logo.jpg",
    "creative-paint-brushes.jpg",
    "economy-stock-chart.jpg",
    "laptop-coding-on-ide.jpg",
    "mountain-lake-sunset.jpg",
    "server-room-generic.png",
]


def test_is_brand_by_filename() -> None:
    assert is_brand_by_filename("brand-openai-logo.jpg")
    assert is_brand_by_filename("BRAND-Nvidia.png")
    assert not is_brand_by_filename("openai-brand-logo.jpg")
    assert not is_brand_by_filename("")


def test_is_generic_image() -> None:
    assert is_generic_image("ai-generic-robot.jpg")
    assert is_generic_image("server-room-generic.png")
    assert is_generic_image("ai-GENERIC-robot.jpg")
    assert not is_generic_image("generic-robot.jpg")
    assert not is_generic_image("genericized-robot.jpg")
    assert not is_generic_image("")


def test_category_prefix() -> None:
    assert has_category_prefix("economy-stock-chart.jpg")
    assert has_category_prefix("ai-generic-robot.jpg")
    assert not has_category_prefix("mountain-lake-sunset.jpg")
    assert category_prefix_of("gen-ai-model.jpg") == "gen-ai-"
    assert category_prefix_of("mountain-lake-sunset.jpg") is None


def test_category_prefix_matches() -> None:
    assert category_prefix_matches("economy-stock-chart.jpg", "AI Economy")
    assert category_prefix_matches("creative-paint-brushes.jpg", " creative tech ")
    assert not category_prefix_matches("economy-stock-chart.jpg", "Toolbox")
    # "ai-" belongs to no single category
    assert not category_prefix_matches("ai-robot.jpg", "Gen AI")
    assert not category_prefix_matches("economy-stock-chart.jpg", "")


def test_should_exclude_from_keyword_matching() -> None:
    assert should_exclude_from_keyword_matching("ai-generic-robot.jpg")
    assert should_exclude_from_keyword_matching("creative-paint-brushes.jpg")
    assert not should_exclude_from_keyword_matching("mountain-lake-sunset.jpg")


def test_filter_subject_images_without_category() -> None:
    assert filter_subject_images(LIBRARY) == [
        "laptop-coding-on-ide.jpg",
        "mountain-lake-sunset.jpg",
    ]


def test_filter_subject_images_keeps_own_category_prefix() -> None:
    assert filter_subject_images(LIBRARY, "AI Economy") == [
        "economy-stock-chart.jpg",
        "laptop-coding-on-ide.jpg",
        "mountain-lake-sunset.jpg",
    ]


def test_filter_subject_images_never_keeps_generic_images() -> None:
    library = ["economy-generic-chart.jpg", "economy-stock-chart.jpg", "mountain-generic.jpg"]
    assert filter_subject_images(library, "AI Economy") == ["economy-stock-chart.jpg"]


def test_filter_generic_images() -> None:
    assert filter_generic_images(LIBRARY) == ["ai-generic-robot.jpg", "server-room-generic.png"]


def test_is_brand_safe_filename_only() -> None:
    assert is_brand_safe("mountain-lake-sunset.jpg")
    assert not is_brand_safe("brand-openai-logo.jpg")


def test_metadata_can_only_add_restrictions() -> None:
    metadata = {
        # Metadata claiming a brand- file is clean must not relax the marker
        "brand-openai-logo.jpg": ImageMetadata(
            filename="brand-openai-logo.jpg", logo_visible=False, trademark_present=False
        ),
        "ai-generic-robot.jpg": ImageMetadata(filename="ai-generic-robot.jpg", logo_visible=True),
        "server-room-generic.png": ImageMetadata(filename="server-room-generic.png", primary_category="Brand"),
    }

    assert not is_brand_safe("brand-openai-logo.jpg", metadata)
    assert not is_brand_safe("ai-generic-robot.jpg", metadata)
    assert not is_brand_safe("server-room-generic.png", metadata)
    assert is_brand_safe("mountain-lake-sunset.jpg", metadata)


def test_filter_brand_safe() -> None:
    metadata = {"laptop-coding-on-ide.jpg": ImageMetadata(filename="laptop-coding-on-ide.jpg", trademark_present=True)}
    safe = filter_brand_safe(LIBRARY, metadata)
    assert "brand-openai-logo.jpg" not in safe
    assert "laptop-coding-on-ide.jpg" not in safe
    assert "mountain-lake-sunset.jpg" in safe
