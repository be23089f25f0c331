"""Image library discovery."""

from news_imagery.adapters.library.filesystem import IMAGE_EXTENSIONS, FilesystemImageLibrary

__all__ = ["FilesystemImageLibrary", "IMAGE_EXTENSIONS"]
