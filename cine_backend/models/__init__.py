"""
Domain models shared across the API and the TMDb integration.
"""

from cine_backend.models.images import ImageMetadata, parse_images

__all__ = [
    "ImageMetadata",
    "parse_images",
]
