"""Image master table (CSV) with per-image brand attributes."""

import csv
import logging
from pathlib import Path
from typing import Optional

from news_imagery.core import ImageMetadata

logger = logging.getLogger(__name__)


def parse_yes_no(value: Optional[str]) -> Optional[bool]:
    """Parse "Yes"/"No" cells; blank or unknown values stay undecided."""
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in ("yes", "y", "true", "1"):
        return True
    if normalized in ("no", "n", "false", "0"):
        return False
    return None


def load_image_metadata(csv_path: Optional[Path]) -> dict[str, ImageMetadata]:
    """
    Load the image master table keyed by filename.

    Args:
        csv_path: Path to the CSV file, or None to skip

    Returns:
        Mapping of filename to metadata (empty if the file is absent or
        unreadable; the filename markers still apply without it)
    """
    if csv_path is None or not csv_path.exists():
        return {}

    table: dict[str, ImageMetadata] = {}
    try:
        with open(csv_path, "r", encoding="utf-8", newline="") as f:
            for row in csv.DictReader(f):
                filename = (row.get("filename") or "").strip()
                if not filename:
                    continue
                table[filename] = ImageMetadata(
                    filename=filename,
                    logo_visible=parse_yes_no(row.get("logo_visible")),
                    trademark_present=parse_yes_no(row.get("trademark_present")),
                    primary_category=(row.get("primary_category") or "").strip(),
                    brand_name=(row.get("brand_name") or "").strip(),
                    source=(row.get("source") or "").strip(),
                    license=(row.get("license") or "").strip(),
                )
    except (OSError, csv.Error) as e:
        logger.warning(f"Could not read image metadata {csv_path}: {e}")
        return {}

    logger.info(f"Loaded metadata for {len(table)} images from {csv_path}")
    return table
