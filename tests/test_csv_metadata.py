"""Tests for the image master table loader."""

from pathlib import Path
from tempfile import TemporaryDirectory

from news_imagery.adapters.metadata import load_image_metadata, parse_yes_no

HEADER = (
    "id,filename,extension,source,license,paid_account,logo_visible,trademark_present,"
    "primary_category,context_type,brand_name,allowed_generic_articles,"
    "allowed_brand_articles,fallback_tier,notes"
)


def test_parse_yes_no() -> None:
    assert parse_yes_no("Yes") is True
    assert parse_yes_no(" no ") is False
    assert parse_yes_no("") is None
    assert parse_yes_no("maybe") is None
    assert parse_yes_no(None) is None


def test_load_image_metadata() -> None:
    with TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "image-master-table.csv"
        csv_path.write_text(
            "\n".join([
                HEADER,
                '1,brand-openai-logo.jpg,jpg,Unsplash,"Unsplash License, Commercial",Yes,Yes,Yes,Brand,,OpenAI,No,Yes,,',
                "2,ai-generic-robot.jpg,jpg,Unsplash,Unsplash License,Yes,No,No,Generic,,,Yes,Yes,3,",
                "3,,jpg,Unsplash,Unsplash License,Yes,,,,,,,,,",
            ]),
            encoding="utf-8",
        )

        table = load_image_metadata(csv_path)

        assert set(table) == {"brand-openai-logo.jpg", "ai-generic-robot.jpg"}

        brand = table["brand-openai-logo.jpg"]
        assert brand.logo_visible is True
        assert brand.brand_name == "OpenAI"
        assert brand.license == "Unsplash License, Commercial"
        assert brand.restricts_brand_use

        generic = table["ai-generic-robot.jpg"]
        assert generic.logo_visible is False
        assert generic.primary_category == "Generic"
        assert not generic.restricts_brand_use


def test_missing_csv_is_empty_table() -> None:
    with TemporaryDirectory() as tmpdir:
        assert load_image_metadata(Path(tmpdir) / "missing.csv") == {}
    assert load_image_metadata(None) == {}
