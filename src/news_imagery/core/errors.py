"""Core exceptions."""


class NewsImageryError(Exception):
    """Base error for the image selection pipeline."""


class EmptyImageLibraryError(NewsImageryError):
    """Raised in strict mode when there is no image to choose from at all."""


class CuratorError(NewsImageryError):
    """Semantic curator returned something unusable."""
