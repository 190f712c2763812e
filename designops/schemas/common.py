"""Building blocks shared by the form schemas."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, model_validator

from ..utils.date_parser import parse_timestamp


def _coerce_timestamp(value: Any) -> Any:
    if value is None or isinstance(value, datetime):
        return value
    return parse_timestamp(value)


# Accepts ISO strings, loose date strings, dates and datetimes
Timestamp = Annotated[datetime, BeforeValidator(_coerce_timestamp)]


class FormModel(BaseModel):
    """Base for payloads coming from admin forms.

    Strings are trimmed and blank strings become None, so an untouched text
    input is indistinguishable from an absent field.
    """

    @model_validator(mode="before")
    @classmethod
    def blank_strings_to_none(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip() or None
            cleaned[key] = value
        return cleaned
