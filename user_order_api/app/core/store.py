"""
Thread-safe in-memory record store.

A ``RecordStore`` holds every record of one entity type in a dict keyed
by the record's ``id``.  All access goes through a single
:class:`~user_order_api.app.core.rwlock.ReadWriteLock`: lookups take
the shared side, mutations the exclusive side.  Records are frozen
pydantic models, so a reader always sees either the old or the new
version of a record, never a mixture.

There is no persistence; a store lives as long as the application that
owns it.
"""

from typing import Dict, Generic, List, Optional, TypeVar

from ..schemas.order import Order
from ..schemas.user import User
from .rwlock import ReadWriteLock

RecordT = TypeVar("RecordT", User, Order)


class RecordStore(Generic[RecordT]):
    """Keyed collection of records guarded by one reader/writer lock."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._records: Dict[str, RecordT] = {}

    def create(self, record: RecordT) -> None:
        """Insert ``record``, silently replacing any record with the same id."""
        with self._lock.write_lock():
            self._records[record.id] = record

    def get(self, record_id: str) -> Optional[RecordT]:
        """Return the record stored under ``record_id`` or ``None``."""
        with self._lock.read_lock():
            return self._records.get(record_id)

    def get_all(self) -> List[RecordT]:
        """Return a snapshot of all records in no particular order."""
        with self._lock.read_lock():
            return list(self._records.values())

    def update(self, record: RecordT) -> bool:
        """Replace an existing record.

        Returns ``False`` without inserting anything when no record with
        ``record.id`` exists.
        """
        with self._lock.write_lock():
            if record.id not in self._records:
                return False
            self._records[record.id] = record
            return True

    def delete(self, record_id: str) -> bool:
        """Remove the record stored under ``record_id`` if present."""
        with self._lock.write_lock():
            if record_id not in self._records:
                return False
            del self._records[record_id]
            return True

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock.read_lock():
            return record_id in self._records


UserStore = RecordStore[User]
OrderStore = RecordStore[Order]
