"""Image manager library."""

from __future__ import annotations

from importlib import metadata

from imagemanager.core.serialization import Serializable
from imagemanager.entities.dimensions import ImageDimensions
from imagemanager.exceptions import DivisionError
from imagemanager.exceptions import EmptyInputError
from imagemanager.exceptions import ImageManagerError
from imagemanager.exceptions import ParseError

try:
    __version__ = metadata.version("imagemanager")
except metadata.PackageNotFoundError:
    __version__ = "unknown"


__all__ = [
    "__version__",
    "ImageDimensions",
    "Serializable",
    "ImageManagerError",
    "EmptyInputError",
    "ParseError",
    "DivisionError",
]
