"""Image manager entities."""

from imagemanager.entities.dimensions import ImageDimensions

__all__ = ["ImageDimensions"]
