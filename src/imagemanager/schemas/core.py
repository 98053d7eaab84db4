"""This module implements the core components of the image manager schemas."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict


def to_kebab(name: str) -> str:
    """Convert a snake_case field name to its kebab-case alias.

    Example:
        >>> to_kebab("maintain_ratio")
        'maintain-ratio'
    """
    return name.replace("_", "-")


def model_aliases(model: type[BaseModel]) -> set[str]:
    """Extract the serialized keys of a Pydantic BaseModel.

    Args:
        model: (Type) The model object for which the keys will be extracted.

    Returns:
        A set with the alias of every field, or its name when it has no alias.
    """
    return {field_info.alias or field_name for field_name, field_info in model.model_fields.items()}


class KebabCaseModel(BaseModel):
    """A frozen model with kebab case aliases that drops unknown keys."""

    model_config = ConfigDict(
        alias_generator=to_kebab,
        serialize_by_alias=True,
        extra="ignore",
        frozen=True,
    )
