# region Docstring
"""
docvcs.models
Centralized imports for the Pydantic models persisted by the docvcs stores.

Contents:
- Records: User, Repository, Branch, Commit, WorkingFile
- Typed inputs: RepositoryCreate, RepositoryPatch, BranchCreate, BranchPatch
- Bases: StoreRecord, TimestampedRecord, RecordPatch
"""
# endregion
# region Imports
from .base import RecordPatch, StoreRecord, TimestampedRecord  # noqa: F401
from .branch import Branch, BranchCreate, BranchPatch  # noqa: F401
from .commit import Commit  # noqa: F401
from .repository import Repository, RepositoryCreate, RepositoryPatch  # noqa: F401
from .user import User  # noqa: F401
from .working_file import WorkingFile  # noqa: F401

# endregion

__all__ = [
    "Branch",
    "BranchCreate",
    "BranchPatch",
    "Commit",
    "RecordPatch",
    "Repository",
    "RepositoryCreate",
    "RepositoryPatch",
    "StoreRecord",
    "TimestampedRecord",
    "User",
    "WorkingFile",
]
