"""
docvcs.models.commit
Immutable commit records with diff totals snapshotted at commit time.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from docvcs.models.base import StoreRecord


class Commit(StoreRecord):
    """
    A commit on a branch.

    Attributes:
        id (str): Unique identifier.
        repository_id (str): Owning repository.
        branch_id (str): Branch the commit was made on.
        sha (str): Random 40 hex character identifier.
        message (str): Commit summary.
        description (Optional[str]): Extended description.
        author_name (str): Display name of the author.
        author_email (str): Email of the author.
        files_changed (int): Number of staged files consumed.
        additions (int): Sum of the staged files' additions.
        deletions (int): Sum of the staged files' deletions.
        created_at (datetime): Commit time.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    repository_id: str = Field(..., description="Owning repository id")
    branch_id: str = Field(..., description="Branch id")
    sha: str = Field(..., pattern=r"^[0-9a-f]{40}$", description="Commit sha")
    message: str = Field(..., description="Commit summary")
    description: Optional[str] = Field(None, description="Extended description")
    author_name: str = Field(..., description="Author display name")
    author_email: str = Field(..., description="Author email")
    files_changed: int = Field(0, ge=0, description="Files in the commit")
    additions: int = Field(0, ge=0, description="Lines added")
    deletions: int = Field(0, ge=0, description="Lines deleted")
    created_at: datetime = Field(..., description="Commit time")

    @field_validator("created_at", mode="before")
    def validate_created_at(cls, v: Any) -> Any:
        if isinstance(v, str):
            return datetime.fromisoformat(v)
        return v

    @property
    def short_sha(self) -> str:
        """First seven characters of the sha."""
        return self.sha[:7]
