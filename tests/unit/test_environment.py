"""Tests for the image manager settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from imagemanager.config import ImageManagerSettings


class TestEnvironment:
    """Test the settings module."""

    def test_defaults(self) -> None:
        """Defaults without any environment variables."""
        settings = ImageManagerSettings()
        assert settings.aspect_ratio_scale == 3
        assert settings.fill_missing_flags is False

    @pytest.mark.parametrize(
        ("env_var", "value", "property_name", "expected"),
        [
            ("IMAGEMANAGER__ASPECT_RATIO__SCALE", "5", "aspect_ratio_scale", 5),
            ("IMAGEMANAGER__DESERIALIZE__FILL_MISSING_FLAGS", "true", "fill_missing_flags", True),
            ("IMAGEMANAGER__DESERIALIZE__FILL_MISSING_FLAGS", "ON", "fill_missing_flags", True),
            ("IMAGEMANAGER__DESERIALIZE__FILL_MISSING_FLAGS", "no", "fill_missing_flags", False),
        ],
    )
    def test_env_var_overrides(self, env_var: str, value: str, property_name: str, expected: object) -> None:
        """Test environment variables override defaults."""
        with patch.dict(os.environ, {env_var: value}):
            settings = ImageManagerSettings()
            result = getattr(settings, property_name)
            assert result == expected

    def test_negative_scale_rejected(self) -> None:
        """Scale can't be below zero."""
        with patch.dict(os.environ, {"IMAGEMANAGER__ASPECT_RATIO__SCALE": "-1"}), pytest.raises(ValidationError):
            ImageManagerSettings()

    def test_environment_isolation(self) -> None:
        """Test that environment changes don't affect other tests."""
        original_values = {
            "scale": ImageManagerSettings().aspect_ratio_scale,
            "bool": ImageManagerSettings().fill_missing_flags,
        }

        with patch.dict(
            os.environ,
            {
                "IMAGEMANAGER__ASPECT_RATIO__SCALE": "7",
                "IMAGEMANAGER__DESERIALIZE__FILL_MISSING_FLAGS": "1",
            },
        ):
            assert ImageManagerSettings().aspect_ratio_scale == 7
            assert ImageManagerSettings().fill_missing_flags is True

        # Values should be restored after context
        assert ImageManagerSettings().aspect_ratio_scale == original_values["scale"]
        assert ImageManagerSettings().fill_missing_flags == original_values["bool"]
