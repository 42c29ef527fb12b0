"""Shared response envelopes."""

from datetime import datetime

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Success envelope with no payload."""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    success: bool = True
    message: str
    timestamp: datetime
