"""Test configuration before everything runs."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clean_environment() -> Iterator[None]:
    """Hide image manager settings set in the calling shell."""
    overrides = {key: value for key, value in os.environ.items() if not key.startswith("IMAGEMANAGER__")}
    with patch.dict(os.environ, overrides, clear=True):
        yield
