"""Schemas describing service applications."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import CamelModel


class ApplicationCreate(CamelModel):
    """Payload used to submit an application for the authenticated user."""

    service_id: int = Field(..., ge=1)
    form_data: dict[str, Any] = Field(default_factory=dict)
    status: str | None = None


class ApplicationRead(CamelModel):
    id: int
    application_number: str
    user_id: int
    service_id: int
    status: str
    submitted_at: datetime
    updated_at: datetime
    form_data: dict[str, Any] = Field(default_factory=dict)


__all__ = ["ApplicationCreate", "ApplicationRead"]
