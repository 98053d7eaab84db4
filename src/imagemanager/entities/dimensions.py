"""Image dimensions (resampling rules) and serializers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_DOWN
from decimal import Decimal
from decimal import localcontext
from typing import Any

from pydantic import ValidationError

from imagemanager.config import ImageManagerSettings
from imagemanager.core.serialization import DECODE_ERRORS
from imagemanager.core.serialization import Serializable
from imagemanager.core.serialization import get_deserializer
from imagemanager.core.serialization import get_serializer
from imagemanager.exceptions import DivisionError
from imagemanager.exceptions import EmptyInputError
from imagemanager.exceptions import ParseError
from imagemanager.schemas.core import model_aliases
from imagemanager.schemas.dimensions import ImageDimensionsModel

logger = logging.getLogger(__name__)

FLAG_NAMES = ("maintain_ratio", "upscale", "grab")


@dataclass(frozen=True, slots=True)
class ImageDimensions(Serializable):
    """A set of rules for resampling images.

    Fields are not validated. Width and height are left as given, and the flags
    also accept `None`, which reads as false everywhere a flag is consumed.

    Args:
        width: Proposed width in pixels. `None` leaves it unconstrained.
        height: Proposed height in pixels. `None` leaves it unconstrained.
        maintain_ratio: Preserve the original aspect ratio.
        upscale: Allow enlarging beyond the original size.
        grab: Crop as well as resize.

    Example:
        >>> dims = ImageDimensions(200, 100, maintain_ratio=True, upscale=False, grab=True)
        >>> dims.to_signature()
        'x200y100u0r1gg'
        >>> dims.serialize()
        '{"width":200,"height":100,"upscale":false,"grab":true,"maintain-ratio":true}'
    """

    width: int | None = None
    height: int | None = None
    maintain_ratio: bool | None = True
    upscale: bool | None = True
    grab: bool | None = False

    def __str__(self) -> str:
        """Signature of the dimension specification."""
        return self.to_signature()

    def get_width(self) -> int | None:
        """Get proposed width."""
        return self.width

    def get_height(self) -> int | None:
        """Get proposed height."""
        return self.height

    def can_upscale(self) -> bool | None:
        """Check if the image can be upscaled."""
        return self.upscale

    def get_maintain_ratio(self) -> bool | None:
        """Check if we should maintain the image ratio."""
        return self.maintain_ratio

    def get_grab(self) -> bool | None:
        """Check if we also crop as well as resize."""
        return self.grab

    def get_aspect_ratio(self, scale: int | None = None) -> str:
        """Get image aspect ratio based on the width and height provided.

        The division is done in decimal arithmetic and truncated (never rounded)
        to `scale` fractional digits. A missing width counts as zero.

        Args:
            scale: Number of fractional digits. Defaults to the configured
                `aspect_ratio_scale`, which is 3 unless overridden.

        Returns:
            Width over height as a fixed-point string, e.g. "3.333".

        Raises:
            DivisionError: If height is zero or missing.
            ValueError: If scale is negative.
        """
        if scale is None:
            scale = ImageManagerSettings().aspect_ratio_scale
        if scale < 0:
            msg = f"Aspect ratio scale must be zero or more, got {scale}"
            raise ValueError(msg)

        if not self.height:
            msg = f"Can't compute aspect ratio with height {self.height!r}"
            raise DivisionError(msg)

        numerator = Decimal(self.width or 0)
        with localcontext() as ctx:
            # Enough digits to hold the integer part plus every kept fraction digit.
            ctx.prec = max(ctx.prec, len(str(abs(int(numerator)))) + scale + 2)
            ctx.rounding = ROUND_DOWN
            ratio = (numerator / Decimal(self.height)).quantize(Decimal(1).scaleb(-scale))

        if ratio.is_zero():
            ratio = ratio.copy_abs()

        return format(ratio, "f")

    def to_signature(self) -> str:
        """Creates a signature containing the dimension specification.

        Zero or missing width and height are both written as "-".
        """
        return (
            f"x{self.width or '-'}"
            f"y{self.height or '-'}"
            f"u{'1' if self.upscale else '0'}"
            f"r{'1' if self.maintain_ratio else '0'}"
            f"g{'g' if self.grab else '0'}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Mapping of the serialized keys, flags cast to booleans."""
        model = ImageDimensionsModel.model_construct(
            width=self.width,
            height=self.height,
            upscale=bool(self.upscale),
            grab=bool(self.grab),
            maintain_ratio=bool(self.maintain_ratio),
        )
        return model.model_dump(by_alias=True)

    def serialize(self, stream_format: str = "JSON") -> str:
        """Serialize the dimensions to a JSON (default) or YAML stream."""
        serializer = get_serializer(stream_format)
        return serializer(self.to_dict())

    @classmethod
    def deserialize(cls, stream: str | None, stream_format: str = "JSON") -> ImageDimensions:
        """Build dimensions from a JSON (default) or YAML stream.

        Missing or null keys are passed to the constructor as `None`, so a
        stream without "upscale" gives `upscale=None` instead of the default.
        Set `IMAGEMANAGER__DESERIALIZE__FILL_MISSING_FLAGS` to fall back to the
        constructor defaults for the flags instead.

        Raises:
            EmptyInputError: If the stream is empty or missing.
            ParseError: If the stream can't be decoded, isn't a mapping or holds
                values that can't be coerced.
        """
        if not stream:
            msg = "Serialized stream is empty"
            raise EmptyInputError(msg)

        deserializer = get_deserializer(stream_format)
        try:
            payload = deserializer(stream)
        except DECODE_ERRORS as exc:
            msg = f"Can't decode {stream_format.upper()} stream"
            raise ParseError(msg, [str(exc)]) from exc

        if not isinstance(payload, Mapping):
            msg = "Serialized stream must hold a mapping"
            raise ParseError(msg, [f"Got: {type(payload).__name__}"])

        extra_keys = set(payload) - model_aliases(ImageDimensionsModel)
        if extra_keys:
            logger.debug("Ignoring extra keys: %s", sorted(map(str, extra_keys)))

        try:
            model = ImageDimensionsModel.model_validate(payload)
        except ValidationError as exc:
            details = [f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors()]
            msg = "Invalid image dimensions"
            raise ParseError(msg, details) from exc

        kwargs = {
            "width": model.width,
            "height": model.height,
            "maintain_ratio": model.maintain_ratio,
            "upscale": model.upscale,
            "grab": model.grab,
        }

        if ImageManagerSettings().fill_missing_flags:
            missing = [name for name in FLAG_NAMES if kwargs[name] is None]
            if missing:
                logger.debug("Filling missing flags with defaults: %s", missing)
            for name in missing:
                del kwargs[name]

        return cls(**kwargs)
