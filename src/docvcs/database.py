"""
docvcs.database

Wires the key-value adapter and every store into one object.

Overview:
- LocalDatabase builds a KeyValueStore from StorageSettings and shares it between
    the identity provider and the repository, branch, working directory and commit
    stores.

Contents:
- LocalDatabase:
    - __init__(storage_settings=None, identity_settings=None, store=None, logger=None)
    - identity, repositories, branches, working_directory, commits: the stores.
    - get_current_user() -> User
    - close()
- open_database(): LocalDatabase built from the cached settings.

Design Notes:
- Passing an existing KeyValueStore lets several facades share one connection.
- The facade is a context manager that closes its connection on exit.
"""

from logging import Logger as T_Logger
from typing import Optional

from docvcs.config import IdentitySettings, StorageSettings, get_settings
from docvcs.logger import logger as package_logger
from docvcs.models import User
from docvcs.storage import KeyValueStore
from docvcs.stores import (
    BranchStore,
    CommitStore,
    IdentityProvider,
    RepositoryStore,
    WorkingDirectoryStore,
)


class LocalDatabase:
    """
    Entry point to the versioned-storage engine.

    Attributes:
        store (KeyValueStore): Shared persistent adapter.
        identity (IdentityProvider): Current user provider.
        branches (BranchStore): Branch records.
        working_directory (WorkingDirectoryStore): Staging area.
        commits (CommitStore): Commit records.
        repositories (RepositoryStore): Repository records.
    """

    def __init__(
        self,
        storage_settings: Optional[StorageSettings] = None,
        identity_settings: Optional[IdentitySettings] = None,
        store: Optional[KeyValueStore] = None,
        logger: Optional[T_Logger] = None,
    ) -> None:
        logger = logger or package_logger
        storage_settings = storage_settings or get_settings(StorageSettings)
        self.store = store or KeyValueStore(storage_settings, logger)
        self.identity = IdentityProvider(self.store, identity_settings, logger)
        self.branches = BranchStore(self.store, logger)
        self.working_directory = WorkingDirectoryStore(self.store, logger)
        self.commits = CommitStore(
            self.store,
            self.branches,
            self.working_directory,
            self.identity,
            history_limit=self.store.settings.history_limit,
            logger=logger,
        )
        self.repositories = RepositoryStore(
            self.store,
            self.branches,
            self.commits,
            self.working_directory,
            self.identity,
            logger,
        )

    def get_current_user(self) -> User:
        return self.identity.get_current_user()

    def close(self) -> None:
        self.store.close()

    def __enter__(self) -> "LocalDatabase":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_database() -> LocalDatabase:
    """LocalDatabase built from the cached StorageSettings and IdentitySettings."""
    return LocalDatabase(
        get_settings(StorageSettings),
        get_settings(IdentitySettings),
    )
