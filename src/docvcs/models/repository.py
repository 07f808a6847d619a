# region Docstring
"""
docvcs.models.repository
Repository records, the root aggregate owning branches, commits and working files.
Contents:
- Repository: the persisted record.
- RepositoryCreate: fields accepted when creating a repository, with their defaults.
- RepositoryPatch: fields a caller may update.
Design notes:
- Topics are an unordered set of labels; duplicates are dropped keeping the first
    occurrence so the stored order is stable.
- id, owner and created_at are never accepted from callers.
"""
# endregion
# region Imports
from typing import Any, List, Optional

from pydantic import Field, field_validator

from docvcs.constants import DEFAULT_BRANCH_NAME, DEFAULT_REPOSITORY_NAME
from docvcs.models.base import RecordPatch, TimestampedRecord

# endregion


def _unique_topics(v: Any) -> Any:
    if v is None:
        return []
    if isinstance(v, (list, tuple, set, frozenset)):
        seen: List[str] = []
        for topic in v:
            if topic not in seen:
                seen.append(topic)
        return seen
    return v


# region Pydantic Models
class Repository(TimestampedRecord):
    """
    A documentation repository.

    Attributes:
        id (str): Globally unique, immutable identifier.
        name (str): Display name.
        description (Optional[str]): Free-text description.
        owner (str): Email of the user who created the repository.
        is_private (bool): Visibility flag.
        default_branch (str): Name of the branch created with the repository.
        created_at (datetime): Creation time.
        updated_at (datetime): Time of the last mutation.
        stars_count (int): Star counter.
        forks_count (int): Fork counter.
        language (Optional[str]): Main language of the content.
        topics (List[str]): Free-text labels.
    """

    name: str = Field(..., description="Display name")
    description: Optional[str] = Field(None, description="Free-text description")
    owner: str = Field(..., description="Email of the repository owner")
    is_private: bool = Field(False, description="Visibility flag")
    default_branch: str = Field(
        DEFAULT_BRANCH_NAME, description="Name of the default branch"
    )
    stars_count: int = Field(0, ge=0, description="Star counter")
    forks_count: int = Field(0, ge=0, description="Fork counter")
    language: Optional[str] = Field(None, description="Main language")
    topics: List[str] = Field(default_factory=list, description="Free-text labels")

    @field_validator("topics", mode="before")
    def validate_topics(cls, v: Any) -> Any:
        return _unique_topics(v)


class RepositoryCreate(RecordPatch):
    """Fields accepted by RepositoryStore.create."""

    name: str = Field(DEFAULT_REPOSITORY_NAME, min_length=1)
    description: Optional[str] = None
    is_private: bool = False
    default_branch: str = Field(DEFAULT_BRANCH_NAME, min_length=1)
    stars_count: int = Field(0, ge=0)
    forks_count: int = Field(0, ge=0)
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)

    @field_validator("topics", mode="before")
    def validate_topics(cls, v: Any) -> Any:
        return _unique_topics(v)


class RepositoryPatch(RecordPatch):
    """Fields accepted by RepositoryStore.update."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    is_private: Optional[bool] = None
    default_branch: Optional[str] = Field(None, min_length=1)
    stars_count: Optional[int] = Field(None, ge=0)
    forks_count: Optional[int] = Field(None, ge=0)
    language: Optional[str] = None
    topics: Optional[List[str]] = None

    @field_validator("topics", mode="before")
    def validate_topics(cls, v: Any) -> Any:
        return _unique_topics(v)


# endregion
