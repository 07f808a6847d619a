"""
docvcs: local Git-style versioned storage for documentation content.

Repositories, branches, a staging area and commits with aggregate diff statistics,
persisted as named JSON collections in a SQLite key-value store.

Typical use:
    >>> from docvcs import LocalDatabase, StorageSettings
    >>> db = LocalDatabase(StorageSettings(db_path=":memory:"))
    >>> repo = db.repositories.create(name="handbook")
    >>> f = db.working_directory.add_file(repo.id, "README.md", "# Hi", "added")
    >>> _ = db.working_directory.stage_all_files(repo.id)
    >>> db.commits.create(repo.id, "main", "Initial commit").files_changed
    1
"""

from docvcs.config import IdentitySettings, StorageSettings  # noqa: F401
from docvcs.constants import ChangeType, CollectionKey  # noqa: F401
from docvcs.database import LocalDatabase, open_database  # noqa: F401
from docvcs.exceptions import (  # noqa: F401
    BranchAlreadyExistsError,
    BranchNotFoundError,
    DefaultBranchError,
    DocVcsError,
)
from docvcs.models import (  # noqa: F401
    Branch,
    Commit,
    Repository,
    User,
    WorkingFile,
)
from docvcs.storage import KeyValueStore  # noqa: F401

__version__ = "0.1.0"
