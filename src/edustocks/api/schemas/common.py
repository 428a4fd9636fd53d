"""Shared response schemas."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every application error."""

    error: str
    message: str
