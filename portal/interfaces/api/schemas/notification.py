"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from .base import CamelModel


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    title: str
    message: str
    type: str
    is_read: bool
    created_at: datetime


class UnreadCountRead(BaseModel):
    count: int


class MarkAllReadResponse(BaseModel):
    message: str
    updated: int


__all__ = ["NotificationRead", "UnreadCountRead", "MarkAllReadResponse"]
