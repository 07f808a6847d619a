# region Docstring
"""
docvcs.stores.branches

CRUD over branch records scoped to a repository.

Contents:
- BranchStore:
    - create(repository_id, data=None, **fields) -> Branch
    - get_by_repository(repository_id) -> list[Branch]
    - get_by_id(id) / get_by_name(repository_id, name) -> Optional[Branch]
    - update(id, patch=None, **fields) -> Optional[Branch]
    - delete(id) -> bool
    - advance_head(id, sha) -> Optional[Branch]

Design Notes:
- Branch names are unique within a repository; create and rename raise
    BranchAlreadyExistsError on a clash.
- Marking a branch as default clears the flag on its siblings and points the owning
    repository's default_branch at it, so each repository keeps a single default
    branch whose name matches the repository record. Renaming the default branch
    updates the repository record too.
- The default branch cannot be unflagged or deleted directly; another branch must
    be made default first (DefaultBranchError).
- advance_head is the only way commit_sha changes and is called by the commit store.
"""
# endregion
# region Imports
from datetime import datetime
from typing import List, Optional, Union

from pydantic import ValidationError

from docvcs.constants import CollectionKey
from docvcs.exceptions import BranchAlreadyExistsError, DefaultBranchError
from docvcs.models import Branch, BranchCreate, BranchPatch, Repository
from docvcs.stores.base import CollectionStore, as_dict, index_of
from docvcs.utils import generate_id, get_time

# endregion
# region BranchStore


class BranchStore(CollectionStore[Branch]):
    """Store for Branch records."""

    collection = CollectionKey.BRANCHES
    model = Branch

    def create(
        self,
        repository_id: str,
        data: Optional[Union[BranchCreate, dict]] = None,
        **fields,
    ) -> Branch:
        """
        Create a branch in a repository.

        Arguments:
            repository_id (str): Owning repository.
            data (Optional[BranchCreate | dict]): Branch fields.
            **fields: Branch fields, merged over `data`.

        Returns:
            Branch: The persisted branch.

        Raises:
            BranchAlreadyExistsError: If the repository already has a branch with this name.
        """
        values = as_dict(data)
        values.update(fields)
        request = BranchCreate(**values)
        now = get_time()
        branch = Branch(
            id=generate_id(),
            repository_id=repository_id,
            created_at=now,
            updated_at=now,
            **request.model_dump(),
        )
        with self._store.transaction():
            branches = self._load()
            if any(
                b.repository_id == repository_id and b.name == branch.name
                for b in branches
            ):
                raise BranchAlreadyExistsError(repository_id, branch.name)
            if branch.is_default:
                branches = self.__clear_default(branches, repository_id, now)
            branches.append(branch)
            self._save(branches)
            if branch.is_default:
                self.__sync_repository(repository_id, branch.name, now)
        self._logger.debug(
            f"Created branch {branch.name} ({branch.id}) in repository {repository_id}"
        )
        return branch

    def get_by_repository(self, repository_id: str) -> List[Branch]:
        """Branches of a repository, in insertion order."""
        return self._filter(lambda b: b.repository_id == repository_id)

    def get_by_name(self, repository_id: str, name: str) -> Optional[Branch]:
        """Branch of a repository by name, or None."""
        return self._find(lambda b: b.repository_id == repository_id and b.name == name)

    def get_default(self, repository_id: str) -> Optional[Branch]:
        """The repository's default branch, or None."""
        return self._find(lambda b: b.repository_id == repository_id and b.is_default)

    def update(
        self,
        id: str,
        patch: Optional[Union[BranchPatch, dict]] = None,
        **fields,
    ) -> Optional[Branch]:
        """
        Merge changes into a branch and refresh updated_at.

        Arguments:
            id (str): Branch id.
            patch (Optional[BranchPatch | dict]): Fields to change.
            **fields: Fields to change, merged over `patch`.

        Returns:
            Optional[Branch]: The updated branch, or None if the id is unknown.

        Raises:
            BranchAlreadyExistsError: If renaming onto a name already used in the repository.
            DefaultBranchError: If unflagging the repository's default branch.
        """
        values = as_dict(patch)
        values.update(fields)
        changes = BranchPatch(**values).changes()
        with self._store.transaction():
            branches = self._load()
            index = index_of(branches, id)
            if index is None:
                return None
            current = branches[index]
            new_name = changes.get("name")
            if new_name is not None and new_name != current.name:
                if any(
                    b.repository_id == current.repository_id and b.name == new_name
                    for b in branches
                ):
                    raise BranchAlreadyExistsError(current.repository_id, new_name)
            if current.is_default and changes.get("is_default") is False:
                raise DefaultBranchError(current.repository_id, current.name)
            now = get_time()
            if changes.get("is_default"):
                branches = self.__clear_default(branches, current.repository_id, now)
            updated = current.model_copy(update={**changes, "updated_at": now})
            branches[index] = updated
            self._save(branches)
            if updated.is_default:
                self.__sync_repository(updated.repository_id, updated.name, now)
        return updated

    def advance_head(self, id: str, sha: str) -> Optional[Branch]:
        """
        Point a branch at a new head commit.

        Arguments:
            id (str): Branch id.
            sha (str): Sha of the new head commit.

        Returns:
            Optional[Branch]: The updated branch, or None if the id is unknown.
        """
        with self._store.transaction():
            branches = self._load()
            index = index_of(branches, id)
            if index is None:
                return None
            branches[index] = branches[index].model_copy(
                update={"commit_sha": sha, "updated_at": get_time()}
            )
            self._save(branches)
        self._logger.debug(f"Branch {branches[index].name} now at {sha}")
        return branches[index]

    def delete(self, id: str) -> bool:
        """
        Remove a branch.

        Returns:
            bool: False if the id is unknown.

        Raises:
            DefaultBranchError: If the branch is its repository's default branch.
        """
        with self._store.transaction():
            branch = self.get_by_id(id)
            if branch is None:
                return False
            if branch.is_default:
                raise DefaultBranchError(branch.repository_id, branch.name)
            return self._delete_where(lambda b: b.id == id) > 0

    def delete_by_repository(self, repository_id: str) -> int:
        """Remove every branch of a repository. Returns how many were removed."""
        return self._delete_where(lambda b: b.repository_id == repository_id)

    @staticmethod
    def __clear_default(branches: List[Branch], repository_id: str, now) -> List[Branch]:
        return [
            (
                b.model_copy(update={"is_default": False, "updated_at": now})
                if b.repository_id == repository_id and b.is_default
                else b
            )
            for b in branches
        ]

    def __sync_repository(self, repository_id: str, name: str, now: datetime) -> None:
        """Point the owning repository's default_branch at `name`."""
        key = CollectionKey.REPOSITORIES.value
        records = self._store.get_all(key)
        for i, record in enumerate(records):
            if not isinstance(record, dict) or record.get("id") != repository_id:
                continue
            try:
                repository = Repository.from_record(record)
            except ValidationError:
                return
            if repository.default_branch != name:
                records[i] = repository.model_copy(
                    update={"default_branch": name, "updated_at": now}
                ).to_record()
                self._store.save_all(key, records)
                self._logger.debug(
                    f"Repository {repository_id} default branch is now {name}"
                )
            return


# endregion
