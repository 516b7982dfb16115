"""Shared schema base and envelope models."""

from typing import Annotated

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _stringify_id(value):
    if isinstance(value, ObjectId):
        return str(value)
    return value


# ObjectId on the way in, hex string on the wire
ObjectIdStr = Annotated[str, BeforeValidator(_stringify_id)]


class APIModel(BaseModel):
    """Base model with camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain success message."""
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Schema for error envelope."""
    success: bool = False
    message: str


class HealthResponse(BaseModel):
    """Schema for health check response."""
    status: str = "ok"
