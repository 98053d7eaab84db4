"""Image manager core functionalities."""

from imagemanager.core.serialization import Serializable
from imagemanager.core.serialization import get_deserializer
from imagemanager.core.serialization import get_serializer

__all__ = ["Serializable", "get_deserializer", "get_serializer"]
