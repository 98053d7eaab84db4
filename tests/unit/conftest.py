"""Extra configurations for unit tests."""

from __future__ import annotations

import pytest

from imagemanager import ImageDimensions


@pytest.fixture
def mock_dimensions() -> ImageDimensions:
    """Make mock dimensions with every field set."""
    return ImageDimensions(width=200, height=100, maintain_ratio=True, upscale=False, grab=True)


@pytest.fixture
def mock_json() -> str:
    """Serialized form of the mock dimensions."""
    return '{"width":200,"height":100,"upscale":false,"grab":true,"maintain-ratio":true}'
