"""Image library discovered from a directory on disk."""

import logging
from pathlib import Path
from typing import Optional

from news_imagery.core import ImageLibrary

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".svg", ".gif"})


class FilesystemImageLibrary(ImageLibrary):
    """List image files of a single directory, memoized until cleared."""

    def __init__(self, images_dir: Path) -> None:
        self.images_dir = images_dir
        self._images: Optional[list[str]] = None

    def list_images(self) -> list[str]:
        """Return image filenames sorted alphabetically.

        A missing directory yields an empty library; the selector decides what
        an empty library means.
        """
        if self._images is not None:
            return self._images

        if not self.images_dir.is_dir():
            logger.warning(f"Image directory {self.images_dir} not found")
            images: list[str] = []
        else:
            images = sorted(
                path.name
                for path in self.images_dir.iterdir()
                if path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS
            )
            logger.info(f"Discovered {len(images)} images in {self.images_dir}")

        # Concurrent first calls may both scan; the result is identical
        self._images = images
        return images

    def clear(self) -> None:
        self._images = None
