"""Image dimensions schema."""

from pydantic import Field

from imagemanager.schemas.core import KebabCaseModel


class ImageDimensionsModel(KebabCaseModel):
    """Wire representation of a set of image resampling rules.

    Field order is the key order of the serialized stream.
    """

    width: int | None = Field(default=None, description="Proposed width in pixels.")
    height: int | None = Field(default=None, description="Proposed height in pixels.")
    upscale: bool | None = Field(default=None, description="Allow enlarging beyond original size.")
    grab: bool | None = Field(default=None, description="Crop as well as resize.")
    maintain_ratio: bool | None = Field(default=None, description="Preserve original aspect ratio.")
