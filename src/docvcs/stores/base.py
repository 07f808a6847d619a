# region Docstring
"""
docvcs.stores.base

Shared plumbing for the stores that keep one model per collection.

Every store method performs a full read-modify-write of its collection inside
KeyValueStore.transaction(), so concurrent callers in the same process are
serialised and multi-collection updates are atomic.
"""
# endregion
# region Imports
from logging import Logger as T_Logger
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import ValidationError

from docvcs.constants import CollectionKey
from docvcs.logger import get_logger
from docvcs.models import RecordPatch, StoreRecord
from docvcs.storage import KeyValueStore

# endregion
# region CollectionStore
M = TypeVar("M", bound=StoreRecord)


class CollectionStore(Generic[M]):
    """
    Base class for stores persisting a list of records under one collection key.

    Subclasses set `collection` and `model`.
    """

    collection: CollectionKey
    model: type[M]

    def __init__(self, store: KeyValueStore, logger: Optional[T_Logger] = None) -> None:
        self._store = store
        self._logger = (
            logger.getChild(self.__class__.__name__)
            if logger
            else get_logger(self.__class__.__name__)
        )

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def _load(self) -> List[M]:
        """Read and validate the collection, skipping records that fail validation."""
        records: List[M] = []
        for raw in self._store.get_all(self.collection.value):
            try:
                records.append(self.model.from_record(raw))
            except ValidationError as e:
                self._logger.warning(
                    f"Skipping invalid {self.model.__name__} record in "
                    f"{self.collection.value}: {e.error_count()} error(s)"
                )
        return records

    def _save(self, records: List[M]) -> None:
        self._store.save_all(
            self.collection.value, [record.to_record() for record in records]
        )

    def _find(self, predicate: Callable[[M], bool]) -> Optional[M]:
        return next((record for record in self._load() if predicate(record)), None)

    def _filter(self, predicate: Callable[[M], bool]) -> List[M]:
        return [record for record in self._load() if predicate(record)]

    def _delete_where(self, predicate: Callable[[M], bool]) -> int:
        """Remove every record matching the predicate. Returns how many were removed."""
        with self._store.transaction():
            records = self._load()
            remaining = [record for record in records if not predicate(record)]
            removed = len(records) - len(remaining)
            if removed:
                self._save(remaining)
        return removed

    def get_by_id(self, id: str) -> Optional[M]:
        """Record with the given id, or None."""
        return self._find(lambda record: record.id == id)


# endregion
# region Helpers


def as_dict(data: Any) -> Dict[str, Any]:
    """Normalise a patch model, mapping or None into a plain dict of changes."""
    if data is None:
        return {}
    if isinstance(data, RecordPatch):
        return data.changes()
    return dict(data)


def index_of(records: List[StoreRecord], id: str) -> Optional[int]:
    """Position of the record with the given id, or None."""
    return next((i for i, record in enumerate(records) if record.id == id), None)


# endregion
