"""
Shared base classes for API schemas.

JSON bodies use camelCase field names (isActive, categoryId, ...);
snake_case names are accepted on input as well.

Reference: https://docs.pydantic.dev/latest/concepts/alias/#using-alias-generators
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, ClassVar, Type

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; stored timestamps are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateModel(CamelModel):
    """
    Base schema for partial updates.

    All fields are optional; only fields present in the request are applied.
    Fields named in ``not_nullable`` may be omitted but not sent as null.
    Reference: https://fastapi.tiangolo.com/tutorial/body-updates/
    """

    not_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        """Required columns cannot be cleared through a partial update."""
        for name in self.not_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class ResponseModel(CamelModel):
    """Base schema for records read back from the database."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Record ID (UUID)")


class MessageResponse(BaseModel):
    """Plain confirmation message (e.g. after a delete)."""

    message: str


def match_choice(value: Any, choices: Type[Enum]) -> Any:
    """Map a case-insensitive string onto an enum value ("summer" -> "Summer")."""
    if isinstance(value, str):
        for choice in choices:
            if choice.value.lower() == value.strip().lower():
                return choice.value
    return value
