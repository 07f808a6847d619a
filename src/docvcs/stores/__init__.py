"""
docvcs.stores
Stores layered over the key-value adapter: identity, repositories, branches,
working directory and commits.
"""

from .base import CollectionStore  # noqa: F401
from .branches import BranchStore  # noqa: F401
from .commits import CommitStore  # noqa: F401
from .identity import IdentityProvider  # noqa: F401
from .repositories import RepositoryStore  # noqa: F401
from .working_directory import WorkingDirectoryStore  # noqa: F401

__all__ = [
    "BranchStore",
    "CollectionStore",
    "CommitStore",
    "IdentityProvider",
    "RepositoryStore",
    "WorkingDirectoryStore",
]
