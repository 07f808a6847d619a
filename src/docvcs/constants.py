# region Docstring
"""
docvcs.constants
Shared constants and enumerations for the versioned-storage engine.
Overview:
- Names the persisted collections and the kinds of working-directory change.
- Holds the defaults applied when records are created without explicit values.
Contents:
- Enumerations:
    - CollectionKey: Stable names of the persisted collections (repositories, branches,
        commits, workingFiles, currentUser).
    - ChangeType: Kind of change a working file records (added, modified, deleted, renamed).
- Defaults:
    - DEFAULT_REPOSITORY_NAME, DEFAULT_BRANCH_NAME, NEW_BRANCH_NAME, DEFAULT_HISTORY_LIMIT
    - MODIFIED_DELETION_RATIO: Share of a modified file's lines counted as deletions.
    - SHA_LENGTH: Number of hex characters in a commit sha.
Design Notes:
- Enums inherit from both str and enum.Enum so members compare equal to their
    persisted string values.
"""
# endregion
# region Imports
import enum
from typing import List

# endregion
# region Enumerations


class CollectionKey(str, enum.Enum):
    """Names of the persisted collections."""

    REPOSITORIES = "repositories"
    BRANCHES = "branches"
    COMMITS = "commits"
    WORKING_FILES = "workingFiles"
    CURRENT_USER = "currentUser"


class ChangeType(str, enum.Enum):
    """Kind of change recorded for a working file."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"


COLLECTION_KEYS: List[str] = [key.value for key in CollectionKey]
"""All collection key names, in declaration order."""

# endregion
# region Defaults
DEFAULT_REPOSITORY_NAME = "Untitled Repository"
DEFAULT_BRANCH_NAME = "main"
NEW_BRANCH_NAME = "new-branch"
DEFAULT_HISTORY_LIMIT = 50
MODIFIED_DELETION_RATIO = 0.3
SHA_LENGTH = 40
# endregion
