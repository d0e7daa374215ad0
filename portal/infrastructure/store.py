"""In-memory entity store backing the portal.

The store keeps one insertion-ordered collection per :class:`EntityKind`.
Each collection issues its own identifiers starting at ``1``; identifiers are
never reused. All public methods hold a single re-entrant lock, so id
issuance, uniqueness checks and merges are atomic even when FastAPI runs
handlers on its threadpool.
Records are copied on the way in and out, so callers never hold a reference
to stored state.
"""

from __future__ import annotations

import copy
import itertools
import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import fields, replace
from enum import Enum
from typing import Any, TypeVar

from portal.domain.entities import (
    Application,
    Notification,
    Service,
    ServiceCategory,
    User,
)
from portal.domain.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
Predicate = Callable[[Any], bool]


class EntityKind(str, Enum):
    """Partitions of the store's identifier space."""

    USER = "user"
    SERVICE = "service"
    SERVICE_CATEGORY = "service_category"
    APPLICATION = "application"
    NOTIFICATION = "notification"


_ENTITY_TYPES: dict[EntityKind, type] = {
    EntityKind.USER: User,
    EntityKind.SERVICE: Service,
    EntityKind.SERVICE_CATEGORY: ServiceCategory,
    EntityKind.APPLICATION: Application,
    EntityKind.NOTIFICATION: Notification,
}

# Fields whose values must be distinct across every record of the kind.
_UNIQUE_FIELDS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.USER: ("username", "nik"),
    EntityKind.APPLICATION: ("application_number",),
}


class _Collection:
    __slots__ = ("records", "ids")

    def __init__(self) -> None:
        self.records: dict[int, Any] = {}
        self.ids = itertools.count(1)


class EntityStore:
    """Keyed storage for the five portal entity kinds."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._collections = {kind: _Collection() for kind in EntityKind}
        self._initialized: set[str] = set()

    def get(self, kind: EntityKind, entity_id: int) -> Any | None:
        """Return the record stored under ``entity_id`` or ``None``."""

        with self._lock:
            record = self._collections[kind].records.get(entity_id)
            return copy.deepcopy(record)

    def insert(self, kind: EntityKind, entity: EntityT) -> EntityT:
        """Store ``entity`` under the next identifier of ``kind``.

        Any ``id`` already present on ``entity`` is ignored.
        """

        self._ensure_type(kind, entity)
        with self._lock:
            collection = self._collections[kind]
            self._check_unique(kind, entity, exclude_id=None)
            record = replace(copy.deepcopy(entity), id=next(collection.ids))
            collection.records[record.id] = record
            logger.debug("Inserted %s %s", kind.value, record.id)
            return copy.deepcopy(record)

    def update(
        self, kind: EntityKind, entity_id: int, changes: Mapping[str, Any] | None = None
    ) -> Any:
        """Shallow-merge ``changes`` over the stored record and return it.

        Raises :class:`NotFoundError` when ``entity_id`` is unknown, even when
        ``changes`` is empty.
        """

        changes = dict(changes or {})
        with self._lock:
            collection = self._collections[kind]
            current = collection.records.get(entity_id)
            if current is None:
                raise NotFoundError(f"{kind.value} with id {entity_id} not found")
            if not changes:
                return copy.deepcopy(current)

            if "id" in changes:
                raise ValidationError("Identifiers cannot be changed")
            known = {item.name for item in fields(current)}
            unknown = sorted(set(changes) - known)
            if unknown:
                raise ValidationError(
                    f"Unknown {kind.value} fields: {', '.join(unknown)}"
                )

            updated = replace(current, **copy.deepcopy(changes))
            self._check_unique(kind, updated, exclude_id=entity_id)
            collection.records[entity_id] = updated
            return copy.deepcopy(updated)

    def scan(self, kind: EntityKind, predicate: Predicate | None = None) -> list[Any]:
        """Return the records of ``kind`` matching ``predicate`` in insertion order."""

        with self._lock:
            records = copy.deepcopy(list(self._collections[kind].records.values()))
        if predicate is None:
            return records
        return [record for record in records if predicate(record)]

    def count(self, kind: EntityKind, predicate: Predicate | None = None) -> int:
        return len(self.scan(kind, predicate))

    def mark_initialized(self, name: str) -> bool:
        """Record a one-time initialization step.

        Returns ``True`` the first time ``name`` is seen by this store and
        ``False`` afterwards.
        """

        with self._lock:
            if name in self._initialized:
                return False
            self._initialized.add(name)
            return True

    @staticmethod
    def _ensure_type(kind: EntityKind, entity: Any) -> None:
        expected = _ENTITY_TYPES[kind]
        if not isinstance(entity, expected):
            msg = f"Expected {expected.__name__} for kind '{kind.value}', got {type(entity).__name__}"
            raise ValidationError(msg)

    def _check_unique(self, kind: EntityKind, candidate: Any, *, exclude_id: int | None) -> None:
        unique_fields = _UNIQUE_FIELDS.get(kind, ())
        if not unique_fields:
            return
        for record_id, record in self._collections[kind].records.items():
            if record_id == exclude_id:
                continue
            for name in unique_fields:
                value = getattr(candidate, name)
                if value is not None and getattr(record, name) == value:
                    raise ConflictError(
                        f"{kind.value} with {name} '{value}' already exists"
                    )


__all__ = ["EntityKind", "EntityStore"]
