"""In-memory entity store.

The store is a set of per-type tables keyed by integer id.  It is
volatile: it lives for the lifetime of the process (or of a test) and
is rebuilt from the sample fixture on startup.  Nothing here knows about
relationships between entity types; foreign keys and uniqueness rules
are enforced one layer up, in the repositories.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from app.models import Activity, Alert, Favorite, Property, Record, SavedSearch, User

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)

Clock = Callable[[], datetime]

# Fields the store owns; partial updates never touch them.
_STORE_MANAGED_FIELDS = frozenset({"id", "created_at"})


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityTable(Generic[RecordT]):
    """Keyed record table for a single entity type.

    Ids start at 1 and increase by one per ``create``; they are never
    reused, even after the record holding them is deleted.

    Every primitive runs under ``lock``.  The lock is re-entrant so that
    a caller composing several primitives into one check-then-write
    sequence can hold it across the whole sequence::

        with table.lock:
            if table.find_first(...) is None:
                table.create(...)
    """

    def __init__(self, model: Type[RecordT], clock: Optional[Clock] = None) -> None:
        self._model = model
        self._clock: Clock = clock or utcnow
        self._rows: Dict[int, RecordT] = {}
        self._next_id = 1
        self.lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._model.__name__

    def create(self, **fields: Any) -> RecordT:
        """Assign the next id and ``created_at``, store and return the record."""
        with self.lock:
            record_id = self._next_id
            record = self._model(id=record_id, created_at=self._clock(), **fields)
            self._next_id += 1
            self._rows[record_id] = record
        logger.debug("Created %s %d", self.name, record_id)
        return record

    def get(self, record_id: int) -> Optional[RecordT]:
        """Return the record, or ``None`` if the id is unknown."""
        with self.lock:
            return self._rows.get(record_id)

    def update_partial(
        self, record_id: int, fields: Mapping[str, Any]
    ) -> Optional[RecordT]:
        """Shallow-merge *fields* into a stored record.

        Only the keys present in *fields* change, and each one is
        replaced wholesale: a new ``filters`` map replaces the old map,
        it is not merged into it.  ``id`` and ``created_at`` are owned
        by the store and silently ignored.

        Returns the updated record, or ``None`` if the id is unknown.
        """
        changes = {k: v for k, v in fields.items() if k not in _STORE_MANAGED_FIELDS}
        unknown = set(changes) - set(self._model.model_fields)
        if unknown:
            raise ValueError(
                f"Unknown {self.name} field(s): {', '.join(sorted(unknown))}"
            )

        with self.lock:
            current = self._rows.get(record_id)
            if current is None:
                return None
            updated = self._model.model_validate(
                {**current.model_dump(), **changes}
            )
            self._rows[record_id] = updated
        logger.debug("Updated %s %d: %s", self.name, record_id, sorted(changes))
        return updated

    def delete(self, record_id: int) -> bool:
        """Remove a record; return whether anything was removed."""
        with self.lock:
            removed = self._rows.pop(record_id, None) is not None
        if removed:
            logger.debug("Deleted %s %d", self.name, record_id)
        return removed

    def list(self, **criteria: Any) -> List[RecordT]:
        """Return records in id order, keeping those whose fields equal *criteria*."""
        with self.lock:
            rows = list(self._rows.values())
        if not criteria:
            return rows
        return [
            row
            for row in rows
            if all(getattr(row, key) == value for key, value in criteria.items())
        ]

    def find_first(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        """Linear scan for the first record satisfying *predicate*."""
        with self.lock:
            for row in self._rows.values():
                if predicate(row):
                    return row
        return None

    def __len__(self) -> int:
        with self.lock:
            return len(self._rows)


class EntityStore:
    """The full table set for one directory instance.

    Constructed explicitly and handed to repositories, so tests (or
    several apps in one process) each get an isolated store.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock: Clock = clock or utcnow
        self.users: EntityTable[User] = EntityTable(User, self.clock)
        self.properties: EntityTable[Property] = EntityTable(Property, self.clock)
        self.favorites: EntityTable[Favorite] = EntityTable(Favorite, self.clock)
        self.saved_searches: EntityTable[SavedSearch] = EntityTable(
            SavedSearch, self.clock
        )
        self.alerts: EntityTable[Alert] = EntityTable(Alert, self.clock)
        self.activities: EntityTable[Activity] = EntityTable(Activity, self.clock)
