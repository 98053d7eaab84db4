"""Environment variable management for image manager operations."""

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class ImageManagerSettings(BaseSettings):
    """Image manager environment configuration settings."""

    # Aspect ratio configuration
    aspect_ratio_scale: int = Field(
        default=3,
        ge=0,
        description="Number of fractional digits kept when truncating aspect ratios",
        alias="IMAGEMANAGER__ASPECT_RATIO__SCALE",
    )

    # Deserialization configuration
    fill_missing_flags: bool = Field(
        default=False,
        description="Whether flags missing from a serialized stream fall back to constructor defaults",
        alias="IMAGEMANAGER__DESERIALIZE__FILL_MISSING_FLAGS",
    )

    model_config = SettingsConfigDict(case_sensitive=True)

    @field_validator("fill_missing_flags", mode="before")
    @classmethod
    def parse_bool_fields(cls, v: object) -> bool:
        """Parse boolean fields leniently."""
        if v is None:
            return False
        if isinstance(v, str):
            return v.lower() in ("1", "true", "yes", "on")
        return bool(v)
