"""
Wire Schemas.

Pydantic models for the JSON payloads exchanged with the application
management API.

Decoding rules shared by every response model:
- Keys match field names case-insensitively ("Name" populates name)
- Unknown keys are ignored
- Missing or null keys take the field's zero value
- A null body, list element or map value decodes as an empty value
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, model_validator

from appctl.core.utils import ZERO_INSTANT


class _WireModel(BaseModel):
    """Base for response payloads."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        return {
            str(key).lower(): value
            for key, value in data.items()
            if value is not None
        }


class Unit(_WireModel):
    """A running instance of an application."""

    ip: str = ""


class Application(_WireModel):
    """Application summary as returned by GET /apps."""

    name: str = ""
    state: str = ""
    units: list[Unit] = Field(default_factory=list)

    @property
    def ip(self) -> str:
        """Address of the first unit, or an empty string."""
        return self.units[0].ip if self.units else ""


class LogEntry(_WireModel):
    """One application log line."""

    date: datetime = ZERO_INSTANT
    message: str = ""


class AppCreateRequest(BaseModel):
    """Request body for POST /apps."""

    name: str
    framework: str


def _empty_if_null(empty: Any) -> BeforeValidator:
    return BeforeValidator(lambda value: empty() if value is None else value)


NullableStr = Annotated[str, _empty_if_null(str)]

ApplicationList = TypeAdapter(Annotated[list[Application], _empty_if_null(list)])
LogEntryList = TypeAdapter(Annotated[list[LogEntry], _empty_if_null(list)])
StringMap = TypeAdapter(Annotated[dict[str, NullableStr], _empty_if_null(dict)])
