# region Docstring
"""
docvcs.exceptions

Errors raised for caller misuse. Expected absence (unknown ids) is reported with
None/False return values instead, and storage failures never leave the adapter.
"""
# endregion


class DocVcsError(Exception):
    """Base exception for docvcs precondition violations."""

    pass


class BranchNotFoundError(DocVcsError):
    """Raised when a commit targets a branch that does not exist in the repository."""

    def __init__(self, repository_id: str, branch_name: str) -> None:
        self.repository_id = repository_id
        self.branch_name = branch_name
        super().__init__(f"Branch {branch_name} not found")


class BranchAlreadyExistsError(DocVcsError):
    """Raised when a branch name is already taken within a repository."""

    def __init__(self, repository_id: str, branch_name: str) -> None:
        self.repository_id = repository_id
        self.branch_name = branch_name
        super().__init__(
            f"Branch {branch_name} already exists in repository {repository_id}"
        )


class DefaultBranchError(DocVcsError):
    """Raised when a change would leave a repository without its default branch."""

    def __init__(self, repository_id: str, branch_name: str) -> None:
        self.repository_id = repository_id
        self.branch_name = branch_name
        super().__init__(
            f"Branch {branch_name} is the default branch of repository {repository_id}"
        )
