"""Shared pydantic base for models read from data files."""

from typing import Any

from pydantic import BaseModel, model_validator


class CaseInsensitiveModel(BaseModel):
    """Accepts input keys in any case, e.g. ``HotelId`` or ``hotelid``.

    Keys are mapped onto the field's alias (or name) before validation.
    Keys that already match exactly are kept; unknown keys pass through.
    """

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        canonical: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            canonical.setdefault(name.lower(), name)
            if field.alias:
                canonical[field.alias.lower()] = field.alias

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            target = canonical.get(key.lower(), key) if isinstance(key, str) else key
            normalized.setdefault(target, value)
        return normalized
