# region Docstring
"""
docvcs.stores.working_directory

The staging area: uncommitted file changes per repository.

Contents:
- WorkingDirectoryStore:
    - add_file(repository_id, file_path, content, change_type) -> WorkingFile
    - get_files(repository_id) / get_staged_files(repository_id) -> list[WorkingFile]
    - stage_file(id) / unstage_file(id) -> Optional[WorkingFile]
    - stage_all_files(repository_id) / unstage_all_files(repository_id) -> list[WorkingFile]
    - delete_file(id) -> bool
    - purge_staged(repository_id) -> int

Design Notes:
- At most one record exists per (repository_id, file_path); adding a path again
    replaces the previous record and resets it to unstaged.
- additions/deletions are a line-count estimate (see docvcs.utils.estimate_diff),
    not a real diff.
"""
# endregion
# region Imports
from typing import List, Optional, Union

from docvcs.constants import ChangeType, CollectionKey
from docvcs.models import WorkingFile
from docvcs.stores.base import CollectionStore, index_of
from docvcs.utils import estimate_diff, generate_id, get_time

# endregion
# region WorkingDirectoryStore


class WorkingDirectoryStore(CollectionStore[WorkingFile]):
    """Store for WorkingFile records."""

    collection = CollectionKey.WORKING_FILES
    model = WorkingFile

    def add_file(
        self,
        repository_id: str,
        file_path: str,
        content: Optional[str],
        change_type: Union[ChangeType, str] = ChangeType.MODIFIED,
    ) -> WorkingFile:
        """
        Record a change to a path, replacing any existing record for that path.

        Arguments:
            repository_id (str): Owning repository.
            file_path (str): Path within the repository.
            content (Optional[str]): New content of the file.
            change_type (ChangeType | str): added, modified, deleted or renamed.

        Returns:
            WorkingFile: The new, unstaged record.
        """
        change_type = ChangeType(change_type)
        additions, deletions = estimate_diff(content, change_type)
        now = get_time()
        working_file = WorkingFile(
            id=generate_id(),
            repository_id=repository_id,
            file_path=file_path,
            content=content,
            change_type=change_type,
            is_staged=False,
            additions=additions,
            deletions=deletions,
            created_at=now,
            updated_at=now,
        )
        with self._store.transaction():
            files = [
                f
                for f in self._load()
                if not (f.repository_id == repository_id and f.file_path == file_path)
            ]
            files.append(working_file)
            self._save(files)
        self._logger.debug(
            f"{change_type.value} {file_path} in repository {repository_id} "
            f"(+{additions} -{deletions})"
        )
        return working_file

    def get_files(self, repository_id: str) -> List[WorkingFile]:
        """Working files of a repository, in insertion order."""
        return self._filter(lambda f: f.repository_id == repository_id)

    def get_staged_files(self, repository_id: str) -> List[WorkingFile]:
        """Staged working files of a repository."""
        return self._filter(lambda f: f.repository_id == repository_id and f.is_staged)

    def get_by_path(self, repository_id: str, file_path: str) -> Optional[WorkingFile]:
        """Working file for a path, or None."""
        return self._find(
            lambda f: f.repository_id == repository_id and f.file_path == file_path
        )

    def stage_file(self, id: str) -> Optional[WorkingFile]:
        """Stage a working file. Returns None if the id is unknown."""
        return self.__set_staged(id, True)

    def unstage_file(self, id: str) -> Optional[WorkingFile]:
        """Unstage a working file. Returns None if the id is unknown."""
        return self.__set_staged(id, False)

    def stage_all_files(self, repository_id: str) -> List[WorkingFile]:
        """Stage every working file of a repository and return them."""
        return self.__set_all_staged(repository_id, True)

    def unstage_all_files(self, repository_id: str) -> List[WorkingFile]:
        """Unstage every working file of a repository and return them."""
        return self.__set_all_staged(repository_id, False)

    def delete_file(self, id: str) -> bool:
        """Discard a working file. Returns False if the id is unknown."""
        return self._delete_where(lambda f: f.id == id) > 0

    def purge_staged(self, repository_id: str) -> int:
        """Remove the staged files of a repository. Returns how many were removed."""
        return self._delete_where(
            lambda f: f.repository_id == repository_id and f.is_staged
        )

    def delete_by_repository(self, repository_id: str) -> int:
        """Remove every working file of a repository. Returns how many were removed."""
        return self._delete_where(lambda f: f.repository_id == repository_id)

    def __set_staged(self, id: str, staged: bool) -> Optional[WorkingFile]:
        with self._store.transaction():
            files = self._load()
            index = index_of(files, id)
            if index is None:
                return None
            files[index] = files[index].model_copy(
                update={"is_staged": staged, "updated_at": get_time()}
            )
            self._save(files)
        return files[index]

    def __set_all_staged(self, repository_id: str, staged: bool) -> List[WorkingFile]:
        now = get_time()
        with self._store.transaction():
            files = [
                (
                    f.model_copy(update={"is_staged": staged, "updated_at": now})
                    if f.repository_id == repository_id
                    else f
                )
                for f in self._load()
            ]
            self._save(files)
        return [f for f in files if f.repository_id == repository_id]


# endregion
