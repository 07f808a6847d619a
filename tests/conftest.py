import pytest

from docvcs.config import IdentitySettings, StorageSettings
from docvcs.database import LocalDatabase
from docvcs.models import Repository
from docvcs.storage import KeyValueStore


@pytest.fixture
def storage_settings() -> StorageSettings:
    """In-memory storage settings."""
    return StorageSettings(db_path=":memory:", enabled=True, key_prefix="")


@pytest.fixture
def identity_settings() -> IdentitySettings:
    """Deterministic fallback identity."""
    return IdentitySettings(
        user_id="test-user",
        user_email="tester@example.com",
        user_name="Test User",
    )


@pytest.fixture
def kv_store(storage_settings):
    """A fresh in-memory key-value store."""
    store = KeyValueStore(storage_settings)
    yield store
    store.close()


@pytest.fixture
def db(kv_store, storage_settings, identity_settings) -> LocalDatabase:
    """A LocalDatabase wired over the in-memory store."""
    return LocalDatabase(storage_settings, identity_settings, store=kv_store)


@pytest.fixture
def repo(db) -> Repository:
    """A repository created with default settings."""
    return db.repositories.create(name="handbook")


@pytest.fixture
def offline_db(identity_settings) -> LocalDatabase:
    """A LocalDatabase without persistent storage."""
    settings = StorageSettings(db_path=":memory:", enabled=False)
    return LocalDatabase(settings, identity_settings)
