"""Domain entity grouping catalog services."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceCategory:
    id: int | None
    name: str
    icon: str


__all__ = ["ServiceCategory"]
