"""
Painel Storage — Keyed Entity Collection
==========================================
One collection per entity kind: rows keyed by integer id,
plus the collection's own id counter.

Rules:
- Ids are positive, strictly increasing, never reused
- insert() consumes an id before the row is built
- Deleting a row never lowers the counter
- Thread-safe: one lock per collection guards reads and writes,
  so readers never observe a half-applied mutation

Not-found is reported as None / False, never raised.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

logger = logging.getLogger("painel.storage")

E = TypeVar("E")


class EntityCollection(Generic[E]):
    """
    Insertion-ordered keyed collection with a monotonic id counter.

    Usage:
        customers = EntityCollection[Customer]("customers")
        row = customers.insert(lambda new_id: Customer(id=new_id, ...))
        customers.replace(row.id, lambda old: replace(old, city="Recife"))
        customers.delete(row.id)    # True
        customers.delete(row.id)    # False
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._rows: Dict[int, E] = {}
        self._next_id: int = 1
        self._lock = Lock()

    # ══════════════════════════════════════════════════════════
    # READS
    # ══════════════════════════════════════════════════════════

    def list(self) -> List[E]:
        with self._lock:
            return list(self._rows.values())

    def get(self, entity_id: int) -> Optional[E]:
        with self._lock:
            return self._rows.get(entity_id)

    def filter(self, predicate: Callable[[E], bool]) -> List[E]:
        with self._lock:
            return [row for row in self._rows.values() if predicate(row)]

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    @property
    def highest_id(self) -> int:
        """Highest id currently stored, 0 when empty."""
        with self._lock:
            return max(self._rows, default=0)

    # ══════════════════════════════════════════════════════════
    # WRITES
    # ══════════════════════════════════════════════════════════

    def insert(self, build: Callable[[int], E]) -> E:
        """
        Assign the next id, build the row with it, store it.

        The counter advances even if build() raises.
        """
        with self._lock:
            entity_id = self._next_id
            self._next_id += 1
            row = build(entity_id)
            self._rows[entity_id] = row
        logger.debug("%s: created id=%s", self.name, entity_id)
        return row

    def replace(
        self, entity_id: int, merge: Callable[[E], E]
    ) -> Optional[E]:
        """Swap the row for merge(old). None (and no change) if unknown."""
        with self._lock:
            current = self._rows.get(entity_id)
            if current is None:
                return None
            updated = merge(current)
            self._rows[entity_id] = updated
        logger.debug("%s: updated id=%s", self.name, entity_id)
        return updated

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            removed = self._rows.pop(entity_id, None) is not None
        if removed:
            logger.debug("%s: deleted id=%s", self.name, entity_id)
        return removed

    def seed(self, rows: Iterable[E]) -> None:
        """
        Store rows that already carry explicit ids.

        Afterwards the counter sits one past the highest stored id
        (never below where it already was).
        """
        with self._lock:
            for row in rows:
                entity_id = row.id
                if not isinstance(entity_id, int) or entity_id < 1:
                    raise ValueError(
                        f"{self.name}: seeded id must be a positive int, "
                        f"got {entity_id!r}."
                    )
                self._rows[entity_id] = row
            self._next_id = max(self._next_id, max(self._rows, default=0) + 1)
            next_id = self._next_id
        logger.debug("%s: seeded, next id=%s", self.name, next_id)
