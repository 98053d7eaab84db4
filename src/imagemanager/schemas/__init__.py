"""Image manager schemas."""

from imagemanager.schemas.dimensions import ImageDimensionsModel

__all__ = ["ImageDimensionsModel"]
