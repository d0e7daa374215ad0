"""Domain entity representing a government service in the catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    """Catalog entry a citizen can apply for.

    ``category`` holds the category name as plain text; it is not a reference
    to a :class:`ServiceCategory` record.
    """

    id: int | None
    name: str
    description: str
    category: str
    icon: str
    featured: bool = False
    popular: bool = False


__all__ = ["Service"]
