"""Optional per-image metadata."""

from news_imagery.adapters.metadata.csv_metadata import load_image_metadata, parse_yes_no

__all__ = ["load_image_metadata", "parse_yes_no"]
