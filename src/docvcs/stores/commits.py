# region Docstring
"""
docvcs.stores.commits

Creates immutable commits from the staged working files of a repository.

Contents:
- CommitStore:
    - create(repository_id, branch_name, message, description=None) -> Commit
    - get_by_repository(repository_id, limit=None) -> list[Commit]
    - get_by_id(id) -> Optional[Commit]

Commit algorithm:
    1. Resolve the branch by (repository_id, branch_name); raise BranchNotFoundError
        before writing anything when it does not exist.
    2. Collect the staged working files. An empty set yields a zero-change commit.
    3. Build the commit: new id, random sha, author from the current user, totals
        summed over the staged files.
    4. Persist the commit, advance the branch head, purge the staged files.
    Steps 1 to 4 run in one transaction.
"""
# endregion
# region Imports
from logging import Logger as T_Logger
from typing import List, Optional

from docvcs.constants import DEFAULT_HISTORY_LIMIT, CollectionKey
from docvcs.exceptions import BranchNotFoundError
from docvcs.models import Commit
from docvcs.storage import KeyValueStore
from docvcs.stores.base import CollectionStore
from docvcs.stores.branches import BranchStore
from docvcs.stores.identity import IdentityProvider
from docvcs.stores.working_directory import WorkingDirectoryStore
from docvcs.utils import generate_id, generate_sha, get_time

# endregion
# region CommitStore


class CommitStore(CollectionStore[Commit]):
    """Store for Commit records."""

    collection = CollectionKey.COMMITS
    model = Commit

    def __init__(
        self,
        store: KeyValueStore,
        branches: BranchStore,
        working_directory: WorkingDirectoryStore,
        identity: IdentityProvider,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        logger: Optional[T_Logger] = None,
    ) -> None:
        super().__init__(store, logger)
        self.__branches = branches
        self.__working_directory = working_directory
        self.__identity = identity
        self.__history_limit = history_limit

    def create(
        self,
        repository_id: str,
        branch_name: str,
        message: str,
        description: Optional[str] = None,
    ) -> Commit:
        """
        Commit the staged files of a repository to a branch.

        Arguments:
            repository_id (str): Repository to commit in.
            branch_name (str): Name of the target branch.
            message (str): Commit summary.
            description (Optional[str]): Extended description.

        Returns:
            Commit: The persisted commit.

        Raises:
            BranchNotFoundError: If the repository has no branch with this name.
        """
        with self._store.transaction():
            branch = self.__branches.get_by_name(repository_id, branch_name)
            if branch is None:
                raise BranchNotFoundError(repository_id, branch_name)

            staged = self.__working_directory.get_staged_files(repository_id)
            user = self.__identity.get_current_user()
            commit = Commit(
                id=generate_id(),
                repository_id=repository_id,
                branch_id=branch.id,
                sha=generate_sha(),
                message=message,
                description=description,
                author_name=user.name,
                author_email=user.email,
                files_changed=len(staged),
                additions=sum(f.additions for f in staged),
                deletions=sum(f.deletions for f in staged),
                created_at=get_time(),
            )

            commits = self._load()
            commits.append(commit)
            self._save(commits)
            self.__branches.advance_head(branch.id, commit.sha)
            self.__working_directory.purge_staged(repository_id)

        self._logger.info(
            f"[{branch_name} {commit.short_sha}] {message} "
            f"({commit.files_changed} files, +{commit.additions} -{commit.deletions})"
        )
        return commit

    def get_by_repository(
        self, repository_id: str, limit: Optional[int] = None
    ) -> List[Commit]:
        """
        Commits of a repository, newest first.

        Commits with equal timestamps are ordered by insertion, latest first.

        Arguments:
            repository_id (str): Repository id.
            limit (Optional[int]): Maximum number of commits. Defaults to the
                configured history limit (50).

        Returns:
            list[Commit]: At most `limit` commits.
        """
        limit = self.__history_limit if limit is None else limit
        commits = self._filter(lambda c: c.repository_id == repository_id)
        commits = sorted(reversed(commits), key=lambda c: c.created_at, reverse=True)
        return commits[: max(limit, 0)]

    def get_by_branch(self, branch_id: str) -> List[Commit]:
        """Commits made on a branch, newest first."""
        commits = self._filter(lambda c: c.branch_id == branch_id)
        return sorted(reversed(commits), key=lambda c: c.created_at, reverse=True)

    def delete_by_repository(self, repository_id: str) -> int:
        """Remove every commit of a repository. Returns how many were removed."""
        return self._delete_where(lambda c: c.repository_id == repository_id)


# endregion
