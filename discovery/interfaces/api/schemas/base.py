"""Shared configuration for API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, as the web client expects.

    Snake case names are still accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class SuccessResponse(CamelModel):
    success: bool = True


class ErrorResponse(CamelModel):
    error: str


__all__ = ["CamelModel", "ErrorResponse", "SuccessResponse"]
