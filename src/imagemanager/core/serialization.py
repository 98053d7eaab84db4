"""(De)serialization factory design pattern.

Current support for JSON and YAML.
"""

from __future__ import annotations

import json
from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import Callable
from typing import Self

import yaml

DECODE_ERRORS = (ValueError, RecursionError, yaml.YAMLError)


class Serializable(ABC):
    """Serializable base class.

    Here we define the interface for any entity that can be turned into a string
    stream and back, so it can plug into a generic persistence or caching layer.
    """

    __slots__ = ()

    @abstractmethod
    def serialize(self, stream_format: str = "JSON") -> str:
        """Abstract method for serialize."""

    @classmethod
    @abstractmethod
    def deserialize(cls, stream: str | None, stream_format: str = "JSON") -> Self:
        """Abstract method for deserialize."""


def get_serializer(stream_format: str) -> Callable[[dict[str, Any]], str]:
    """Get serializer based on format."""
    stream_format = stream_format.upper()
    if stream_format == "JSON":
        return _serialize_to_json
    elif stream_format == "YAML":
        return _serialize_to_yaml
    else:
        raise ValueError(f"Unsupported serializer format: {stream_format}")


def get_deserializer(stream_format: str) -> Callable[[str], Any]:
    """Get deserializer based on format."""
    stream_format = stream_format.upper()
    if stream_format == "JSON":
        return _deserialize_json
    elif stream_format == "YAML":
        return _deserialize_yaml
    else:
        raise ValueError(f"Unsupported deserializer format: {stream_format}")


def _serialize_to_json(payload: dict[str, Any]) -> str:
    """Convert dictionary to compact JSON string."""
    return json.dumps(payload, separators=(",", ":"))


def _serialize_to_yaml(payload: dict[str, Any]) -> str:
    """Convert dictionary to YAML string."""
    return yaml.dump(payload, sort_keys=False)


def _deserialize_json(stream: str) -> Any:  # noqa: ANN401
    """Convert JSON string to Python object."""
    return json.loads(stream)


def _deserialize_yaml(stream: str) -> Any:  # noqa: ANN401
    """Convert YAML string to Python object."""
    return yaml.safe_load(stream)
