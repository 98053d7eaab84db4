"""Test the wire schemas."""

import pytest
from pydantic import ValidationError

from imagemanager.schemas import ImageDimensionsModel
from imagemanager.schemas.core import model_aliases
from imagemanager.schemas.core import to_kebab


@pytest.mark.parametrize(("name", "expected"), [("maintain_ratio", "maintain-ratio"), ("width", "width")])
def test_to_kebab(name: str, expected: str) -> None:
    """Field names become kebab case aliases."""
    assert to_kebab(name) == expected


def test_model_aliases() -> None:
    """Serialized keys of the dimensions model."""
    assert model_aliases(ImageDimensionsModel) == {"width", "height", "upscale", "grab", "maintain-ratio"}


def test_validate_by_alias() -> None:
    """Kebab case keys populate the snake case fields."""
    model = ImageDimensionsModel.model_validate({"maintain-ratio": True, "maintain_ratio": False})
    assert model.maintain_ratio is True


def test_frozen() -> None:
    """Models can't be modified once built."""
    model = ImageDimensionsModel.model_validate({"width": 5})
    with pytest.raises(ValidationError):
        model.width = 6  # type: ignore[misc]
