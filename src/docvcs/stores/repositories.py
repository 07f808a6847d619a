# region Docstring
"""
docvcs.stores.repositories

CRUD over repository records, the root aggregate.

Contents:
- RepositoryStore:
    - create(data=None, **fields) -> Repository
    - get_all() -> list[Repository]
    - get_by_id(id) -> Optional[Repository]
    - update(id, patch=None, **fields) -> Optional[Repository]
    - delete(id) -> bool

Design Notes:
- create also creates the repository's default branch in the same transaction.
- Changing default_branch through update flags the named branch as default, which
    must already exist in the repository.
- delete cascades to the branches, commits and working files of the repository.
    The four collections are rewritten in one SQLite transaction, so a failure part
    way through leaves no orphaned records.
"""
# endregion
# region Imports
from logging import Logger as T_Logger
from typing import List, Optional, Union

from docvcs.constants import CollectionKey
from docvcs.exceptions import BranchNotFoundError
from docvcs.models import Repository, RepositoryCreate, RepositoryPatch
from docvcs.storage import KeyValueStore
from docvcs.stores.base import CollectionStore, as_dict, index_of
from docvcs.stores.branches import BranchStore
from docvcs.stores.commits import CommitStore
from docvcs.stores.identity import IdentityProvider
from docvcs.stores.working_directory import WorkingDirectoryStore
from docvcs.utils import generate_id, get_time

# endregion
# region RepositoryStore


class RepositoryStore(CollectionStore[Repository]):
    """Store for Repository records."""

    collection = CollectionKey.REPOSITORIES
    model = Repository

    def __init__(
        self,
        store: KeyValueStore,
        branches: BranchStore,
        commits: CommitStore,
        working_directory: WorkingDirectoryStore,
        identity: IdentityProvider,
        logger: Optional[T_Logger] = None,
    ) -> None:
        super().__init__(store, logger)
        self.__branches = branches
        self.__commits = commits
        self.__working_directory = working_directory
        self.__identity = identity

    def create(
        self,
        data: Optional[Union[RepositoryCreate, dict]] = None,
        **fields,
    ) -> Repository:
        """
        Create a repository and its default branch.

        Arguments:
            data (Optional[RepositoryCreate | dict]): Repository fields.
            **fields: Repository fields, merged over `data`.

        Returns:
            Repository: The persisted repository.
        """
        values = as_dict(data)
        values.update(fields)
        request = RepositoryCreate(**values)
        now = get_time()
        with self._store.transaction():
            owner = self.__identity.get_current_user().email
            repository = Repository(
                id=generate_id(),
                owner=owner,
                created_at=now,
                updated_at=now,
                **request.model_dump(),
            )
            repositories = self._load()
            repositories.append(repository)
            self._save(repositories)
            self.__branches.create(
                repository.id,
                name=repository.default_branch,
                is_default=True,
            )
        self._logger.info(f"Created repository {repository.name} ({repository.id})")
        return repository

    def get_all(self) -> List[Repository]:
        """All repositories, in insertion order."""
        return self._load()

    def get_by_name(self, name: str) -> Optional[Repository]:
        """First repository with the given name, or None."""
        return self._find(lambda r: r.name == name)

    def update(
        self,
        id: str,
        patch: Optional[Union[RepositoryPatch, dict]] = None,
        **fields,
    ) -> Optional[Repository]:
        """
        Merge changes into a repository and refresh updated_at.

        Arguments:
            id (str): Repository id.
            patch (Optional[RepositoryPatch | dict]): Fields to change.
            **fields: Fields to change, merged over `patch`.

        Returns:
            Optional[Repository]: The updated repository, or None if the id is unknown.

        Raises:
            BranchNotFoundError: If default_branch names a branch the repository lacks.
        """
        values = as_dict(patch)
        values.update(fields)
        changes = RepositoryPatch(**values).changes()
        with self._store.transaction():
            current = self.get_by_id(id)
            if current is None:
                return None
            default_branch = changes.get("default_branch")
            if default_branch is not None and default_branch != current.default_branch:
                branch = self.__branches.get_by_name(id, default_branch)
                if branch is None:
                    raise BranchNotFoundError(id, default_branch)
                self.__branches.update(branch.id, is_default=True)
            repositories = self._load()
            index = index_of(repositories, id)
            repositories[index] = repositories[index].model_copy(
                update={**changes, "updated_at": get_time()}
            )
            self._save(repositories)
        return repositories[index]

    def delete(self, id: str) -> bool:
        """
        Remove a repository and everything it owns.

        Returns:
            bool: False if the id is unknown (nothing is removed).
        """
        with self._store.transaction():
            if not self._delete_where(lambda r: r.id == id):
                return False
            branches = self.__branches.delete_by_repository(id)
            commits = self.__commits.delete_by_repository(id)
            files = self.__working_directory.delete_by_repository(id)
        self._logger.info(
            f"Deleted repository {id} with {branches} branches, {commits} commits "
            f"and {files} working files"
        )
        return True


# endregion
