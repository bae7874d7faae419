"""In-memory entity store.

One dict per entity kind, keyed by id, plus one id counter per kind. The store
knows nothing about attributes other than ``id``; every attribute lookup is a
scan done by :class:`coursehub.store.service.StorageService`.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .models import Entity, EntityKind


class MemoryStore:
    """Keyed collections for every :class:`EntityKind`.

    Instances are created and owned by the application (see ``main.lifespan``);
    there is no process-wide default store.
    """

    def __init__(self) -> None:
        self._tables: dict[EntityKind, dict[int, Entity]] = {
            kind: {} for kind in EntityKind
        }
        self._next_ids: dict[EntityKind, int] = dict.fromkeys(EntityKind, 1)
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["MemoryStore"]:
        """Hold the store lock across a read-then-write sequence."""
        with self._lock:
            yield self

    def next_id(self, kind: EntityKind) -> int:
        """Hand out the next id for ``kind``; ids start at 1 and are never reused."""
        with self._lock:
            value = self._next_ids[kind]
            self._next_ids[kind] = value + 1
            return value

    def get(self, kind: EntityKind, entity_id: int) -> Entity | None:
        """Return the entity with ``entity_id`` or None."""
        return self._tables[kind].get(entity_id)

    def put(self, kind: EntityKind, entity: Entity) -> Entity:
        """Insert or overwrite ``entity`` by its id."""
        with self._lock:
            self._tables[kind][entity.id] = entity
            # Keep the counter ahead of explicitly numbered entities
            if entity.id >= self._next_ids[kind]:
                self._next_ids[kind] = entity.id + 1
        return entity

    def list(self, kind: EntityKind) -> list[Entity]:
        """All entities of ``kind`` in store order."""
        return list(self._tables[kind].values())

    def count(self, kind: EntityKind) -> int:
        """Number of stored entities of ``kind``."""
        return len(self._tables[kind])

    def counts(self) -> dict[str, int]:
        """Entity count per kind, keyed by kind value."""
        return {kind.value: self.count(kind) for kind in EntityKind}
