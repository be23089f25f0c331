"""Adapters for the image selection core."""
