"""Shared schema bases."""

from pydantic import BaseModel, ConfigDict


class RequestBody(BaseModel):
    """Request body accepting both field names and camelCase aliases."""
    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
