"""Schemas for the service catalog."""

from .base import CamelModel


class ServiceRead(CamelModel):
    id: int
    name: str
    description: str
    category: str
    icon: str
    featured: bool
    popular: bool


class ServiceCategoryRead(CamelModel):
    id: int
    name: str
    icon: str


__all__ = ["ServiceRead", "ServiceCategoryRead"]
