# region Docstring
"""
docvcs.models.branch
Branch records: named pointers to the latest commit of a repository line of history.
Contents:
- Branch: the persisted record. commit_sha back-references the newest commit.
- BranchCreate: fields accepted when creating a branch.
- BranchPatch: fields a caller may update. The head pointer is not among them; it only
    moves when a commit is created.
"""
# endregion
# region Imports
from typing import Optional

from pydantic import Field

from docvcs.constants import NEW_BRANCH_NAME
from docvcs.models.base import RecordPatch, TimestampedRecord

# endregion
# region Pydantic Models


class Branch(TimestampedRecord):
    """
    A branch of a repository.

    Attributes:
        id (str): Unique identifier.
        repository_id (str): Owning repository.
        name (str): Branch name, unique within the repository.
        commit_sha (Optional[str]): Sha of the most recent commit on this branch.
        is_default (bool): Whether this is the repository's default branch.
        is_protected (bool): Protection flag.
        ahead_count (int): Commits ahead of the default branch.
        behind_count (int): Commits behind the default branch.
    """

    repository_id: str = Field(..., description="Owning repository id")
    name: str = Field(NEW_BRANCH_NAME, description="Branch name")
    commit_sha: Optional[str] = Field(None, description="Head commit sha")
    is_default: bool = Field(False, description="Default branch flag")
    is_protected: bool = Field(False, description="Protection flag")
    ahead_count: int = Field(0, ge=0, description="Commits ahead")
    behind_count: int = Field(0, ge=0, description="Commits behind")


class BranchCreate(RecordPatch):
    """Fields accepted by BranchStore.create."""

    name: str = Field(NEW_BRANCH_NAME, min_length=1)
    is_default: bool = False
    is_protected: bool = False
    ahead_count: int = Field(0, ge=0)
    behind_count: int = Field(0, ge=0)


class BranchPatch(RecordPatch):
    """Fields accepted by BranchStore.update."""

    name: Optional[str] = Field(None, min_length=1)
    is_default: Optional[bool] = None
    is_protected: Optional[bool] = None
    ahead_count: Optional[int] = Field(None, ge=0)
    behind_count: Optional[int] = Field(None, ge=0)


# endregion
