"""Shared base for vendor wire records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """camelCase wire names, unknown keys ignored, ``null`` read as the field default."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        declared = set(cls.model_fields)
        declared.update(field.alias for field in cls.model_fields.values() if field.alias)
        # Undeclared keys pass through untouched so passthrough records keep them
        return {key: value for key, value in data.items() if not (value is None and key in declared)}
