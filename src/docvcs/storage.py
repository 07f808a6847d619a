# region Docstring
"""
docvcs.storage

Persistent named-collection key-value store backed by SQLite.

Overview:
- Stores each collection (repositories, branches, commits, workingFiles, currentUser)
    as one JSON document in a `collections` table managed through sqlite-utils.
- Every primitive is total: a missing key reads as empty, an unavailable store reads
    as empty and ignores writes, and (de)serialization failures are logged and
    recovered from. No storage exception reaches the callers.

Contents:
- KeyValueStore:
    - get_all(key) -> list / save_all(key, items): sequence collections.
    - get_value(key) / set_value(key, value): singleton documents.
    - transaction(): re-entrant context manager grouping read-modify-write cycles
        into one SQLite transaction under a process-wide lock.
    - clear(key=None): drop one collection or all of them.
    - available: whether a database is attached.

Design Notes:
- The store has no knowledge of entity semantics; models are validated by the
    stores that sit on top of it.
- Writers are serialised by an RLock and by SQLite's write lock (BEGIN IMMEDIATE),
    so multi-collection updates such as a cascade delete commit or roll back as a unit.
- An exception raised by caller code inside transaction() rolls back every write
    made in the block and propagates unchanged.
"""
# endregion
# region Imports
import json
import sqlite3
import threading
from contextlib import contextmanager
from logging import Logger as T_Logger
from pathlib import Path
from typing import Any, Iterator, Optional

from sqlite_utils import Database
from sqlite_utils.db import NotFoundError

from docvcs.config import StorageSettings, get_settings
from docvcs.constants import COLLECTION_KEYS
from docvcs.logger import get_logger
from docvcs.utils import get_time

# endregion
# region KeyValueStore

TABLE_NAME = "collections"


class KeyValueStore:
    """
    Named-collection key-value store.

    Attributes:
        __logger (Logger): The logger instance.
        __settings (StorageSettings): The storage settings.
        __db (Optional[Database]): The sqlite-utils database, None when unavailable.
    """

    __logger: T_Logger
    __settings: StorageSettings
    __db: Optional[Database]

    def __init__(
        self,
        settings: Optional[StorageSettings] = None,
        logger: Optional[T_Logger] = None,
    ) -> None:
        """
        Open the database described by the settings.

        Arguments:
            settings (Optional[StorageSettings]): Storage settings. Defaults to the
                cached StorageSettings instance.
            logger (Optional[Logger]): Parent logger. Defaults to the package logger.
        """
        self.__settings = settings or get_settings(StorageSettings)
        self.__logger = (
            logger.getChild(self.__class__.__name__)
            if logger
            else get_logger(self.__class__.__name__)
        )
        self.__lock = threading.RLock()
        self.__depth = 0
        self.__db = self.__open() if self.__settings.enabled else None
        if self.__db is None:
            self.__logger.warning(
                "Persistent storage unavailable; running without persistence."
            )

    # region Connection

    def __open(self) -> Optional[Database]:
        """Connect to the configured database and ensure the collections table exists."""
        db_path = self.__settings.db_path
        try:
            if not self.__settings.in_memory:
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(db_path, check_same_thread=False)
            db = Database(conn)
            if not db[TABLE_NAME].exists():
                db[TABLE_NAME].create(
                    {"key": str, "value": str, "updated_at": str},
                    pk="key",
                )
        except (sqlite3.Error, OSError) as e:
            self.__logger.error(f"Error opening database at {db_path}: {e}")
            return None
        self.__logger.debug(f"Opened key-value store at {db_path}")
        return db

    @property
    def available(self) -> bool:
        """True when a database is attached and writes persist."""
        return self.__db is not None

    @property
    def settings(self) -> StorageSettings:
        return self.__settings

    def close(self) -> None:
        """Close the underlying connection. The store is unavailable afterwards."""
        with self.__lock:
            if self.__db is not None:
                self.__db.conn.close()
                self.__db = None

    def key_for(self, key: str) -> str:
        """Physical key for a collection name, including the configured prefix."""
        return f"{self.__settings.key_prefix}{key}"

    # endregion
    # region Transactions

    @contextmanager
    def transaction(self) -> Iterator["KeyValueStore"]:
        """
        Group reads and writes into one atomic unit.

        Re-entrant: only the outermost block begins and commits the SQLite
        transaction. Exceptions raised inside the block roll back and propagate.

        Yields:
            KeyValueStore: This store.
        """
        with self.__lock:
            outermost = self.__depth == 0 and self.__db is not None
            self.__depth += 1
            try:
                if outermost:
                    self.__begin()
                yield self
            except BaseException:
                if outermost:
                    self.__rollback()
                raise
            else:
                if outermost:
                    self.__commit()
            finally:
                self.__depth -= 1

    def __begin(self) -> None:
        try:
            self.__db.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as e:
            self.__logger.error(f"Error starting transaction: {e}")

    def __commit(self) -> None:
        try:
            self.__db.conn.commit()
        except sqlite3.Error as e:
            self.__logger.error(f"Error committing transaction: {e}")
            self.__rollback()

    def __rollback(self) -> None:
        try:
            self.__db.conn.rollback()
        except sqlite3.Error as e:
            self.__logger.error(f"Error rolling back transaction: {e}")

    # endregion
    # region Primitives

    def get_value(self, key: str) -> Any:
        """
        Read a JSON document.

        Arguments:
            key (str): Collection name.

        Returns:
            Any: The decoded document, or None when absent, unreadable or unavailable.
        """
        if self.__db is None:
            return None
        physical_key = self.key_for(key)
        try:
            with self.__lock:
                row = self.__db[TABLE_NAME].get(physical_key)
        except NotFoundError:
            return None
        except sqlite3.Error as e:
            self.__logger.error(f"Error reading from storage key {physical_key}: {e}")
            return None
        try:
            return json.loads(row["value"]) if row["value"] else None
        except (TypeError, ValueError) as e:
            self.__logger.error(f"Error decoding storage key {physical_key}: {e}")
            return None

    def set_value(self, key: str, value: Any) -> None:
        """
        Write a JSON document, replacing any previous one.

        Arguments:
            key (str): Collection name.
            value (Any): JSON-serializable document.
        """
        if self.__db is None:
            return
        physical_key = self.key_for(key)
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            self.__logger.error(f"Error encoding storage key {physical_key}: {e}")
            return
        with self.transaction():
            try:
                self.__db.execute(
                    f"INSERT OR REPLACE INTO [{TABLE_NAME}] (key, value, updated_at) "
                    "VALUES (?, ?, ?)",
                    [physical_key, payload, get_time().isoformat()],
                )
            except sqlite3.Error as e:
                self.__logger.error(f"Error saving to storage key {physical_key}: {e}")

    def get_all(self, key: str) -> list:
        """
        Read a collection.

        Arguments:
            key (str): Collection name.

        Returns:
            list: The stored items, empty when the collection is missing or unreadable.
        """
        value = self.get_value(key)
        if value is None:
            return []
        if not isinstance(value, list):
            self.__logger.warning(
                f"Storage key {self.key_for(key)} does not hold a list; treating as empty."
            )
            return []
        return value

    def save_all(self, key: str, items: list) -> None:
        """
        Replace a collection.

        Arguments:
            key (str): Collection name.
            items (list): JSON-serializable items.
        """
        self.set_value(key, list(items))

    def clear(self, key: Optional[str] = None) -> None:
        """
        Remove one collection, or every known collection when key is None.
        """
        if self.__db is None:
            return
        keys = [key] if key is not None else COLLECTION_KEYS
        with self.transaction():
            for name in keys:
                try:
                    self.__db.execute(
                        f"DELETE FROM [{TABLE_NAME}] WHERE key = ?",
                        [self.key_for(name)],
                    )
                except sqlite3.Error as e:
                    self.__logger.error(f"Error clearing storage key {name}: {e}")

    def keys(self) -> list[str]:
        """Physical keys currently stored."""
        if self.__db is None:
            return []
        try:
            return [row["key"] for row in self.__db[TABLE_NAME].rows]
        except sqlite3.Error as e:
            self.__logger.error(f"Error listing storage keys: {e}")
            return []

    # endregion


# endregion
