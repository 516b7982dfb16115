"""Chat schemas."""

from pydantic import BaseModel


class StreamTokenResponse(BaseModel):
    """Chat-service user token."""
    token: str
