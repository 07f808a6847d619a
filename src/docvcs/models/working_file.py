"""
docvcs.models.working_file
Uncommitted changes tracked by the working directory (staging area).
"""

from typing import Optional

from pydantic import Field

from docvcs.constants import ChangeType
from docvcs.models.base import TimestampedRecord


class WorkingFile(TimestampedRecord):
    """
    An uncommitted change to one path of a repository.

    Attributes:
        id (str): Unique identifier.
        repository_id (str): Owning repository.
        file_path (str): Path of the file within the repository.
        content (Optional[str]): New content of the file.
        change_type (ChangeType): added, modified, deleted or renamed.
        is_staged (bool): Whether the change is part of the next commit.
        additions (int): Estimated lines added.
        deletions (int): Estimated lines deleted.
    """

    repository_id: str = Field(..., description="Owning repository id")
    file_path: str = Field(..., min_length=1, description="Path within the repository")
    content: Optional[str] = Field(None, description="File content")
    change_type: ChangeType = Field(..., description="Kind of change")
    is_staged: bool = Field(False, description="Staged for the next commit")
    additions: int = Field(0, ge=0, description="Estimated lines added")
    deletions: int = Field(0, ge=0, description="Estimated lines deleted")
