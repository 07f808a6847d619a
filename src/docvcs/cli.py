from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docvcs.config import LoggingSettings, StorageSettings
from docvcs.constants import COLLECTION_KEYS, ChangeType
from docvcs.database import LocalDatabase
from docvcs.exceptions import DocVcsError
from docvcs.logger import configure_logging
from docvcs.models import Repository
from docvcs.samples import seed_sample_data

console = Console(
    record=True,
    width=120,
    color_system="auto",
)

app = typer.Typer(name="docvcs", help="Local Git-style version control for documentation.")
repo_app = typer.Typer(help="Manage repositories.")
branch_app = typer.Typer(help="Manage branches.")
file_app = typer.Typer(help="Manage working directory changes.")
app.add_typer(repo_app, name="repo")
app.add_typer(branch_app, name="branch")
app.add_typer(file_app, name="file")


# region Helpers


def _db(ctx: typer.Context) -> LocalDatabase:
    return ctx.obj


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


def _resolve_repository(db: LocalDatabase, ref: str) -> Repository:
    """Find a repository by id, then by name."""
    repository = db.repositories.get_by_id(ref) or db.repositories.get_by_name(ref)
    if repository is None:
        _fail(f"Repository {ref} not found.")
    return repository


# endregion
# region Root


@app.callback()
def main(
    ctx: typer.Context,
    db_path: Optional[str] = typer.Option(
        None, "--db", help="SQLite database path (overrides DOCVCS_DB_PATH)."
    ),
) -> None:
    configure_logging(LoggingSettings())
    settings = StorageSettings()
    if db_path:
        settings = settings.model_copy(update={"db_path": db_path})
    ctx.obj = LocalDatabase(settings)
    ctx.call_on_close(ctx.obj.close)


@app.command(name="whoami", help="Show the current user.")
def whoami(ctx: typer.Context):
    user = _db(ctx).get_current_user()
    console.print(f"[bold cyan]{user.name}[/bold cyan] <{user.email}> ({user.id})")


@app.command(name="keys", help="List the persisted collection keys.")
def keys(ctx: typer.Context):
    store = _db(ctx).store
    for key in COLLECTION_KEYS:
        console.print(store.key_for(key))


@app.command(name="seed", help="Create the demo repository when the database is empty.")
def seed(ctx: typer.Context):
    repository = seed_sample_data(_db(ctx))
    if repository is None:
        console.print("[yellow]Sample data not created (database not empty).[/yellow]")
    else:
        console.print(f"[bold green]Created {repository.name}[/bold green] ({repository.id})")


@app.command(name="commit", help="Commit the staged files of a repository.")
def commit(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    message: str = typer.Argument(..., help="Commit message."),
    branch: Optional[str] = typer.Option(
        None, "--branch", "-b", help="Target branch (defaults to the default branch)."
    ),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    try:
        created = db.commits.create(
            repo.id, branch or repo.default_branch, message, description
        )
    except DocVcsError as e:
        _fail(str(e))
    console.print(
        "[bold green]"
        + escape(f"[{branch or repo.default_branch} {created.short_sha}]")
        + f"[/bold green] {escape(created.message)}"
    )
    console.print(
        f"{created.files_changed} files changed, "
        f"{created.additions} insertions(+), {created.deletions} deletions(-)"
    )


@app.command(name="log", help="Show the commit history of a repository.")
def log(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    commits = db.commits.get_by_repository(repo.id, limit)
    if not commits:
        console.print("[yellow]No commits yet.[/yellow]")
        return
    table = Table(title=f"{repo.name} history")
    table.add_column("sha", style="yellow")
    table.add_column("message")
    table.add_column("author")
    table.add_column("date")
    table.add_column("+/-", justify="right")
    for c in commits:
        table.add_row(
            c.short_sha,
            c.message,
            c.author_name,
            c.created_at.isoformat(timespec="seconds"),
            f"+{c.additions} -{c.deletions}",
        )
    console.print(table)


# endregion
# region Repositories


@repo_app.command(name="create", help="Create a repository and its default branch.")
def repo_create(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Repository name."),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    private: bool = typer.Option(False, "--private", help="Mark the repository private."),
    default_branch: str = typer.Option("main", "--default-branch"),
    language: Optional[str] = typer.Option(None, "--language", "-l"),
    topic: Optional[List[str]] = typer.Option(None, "--topic", "-t"),
):
    repository = _db(ctx).repositories.create(
        name=name,
        description=description,
        is_private=private,
        default_branch=default_branch,
        language=language,
        topics=topic or [],
    )
    console.print(f"[bold green]Created {repository.name}[/bold green] ({repository.id})")


@repo_app.command(name="list", help="List repositories.")
def repo_list(ctx: typer.Context):
    repositories = _db(ctx).repositories.get_all()
    if not repositories:
        console.print("[yellow]No repositories.[/yellow]")
        return
    table = Table(title="Repositories")
    table.add_column("id", style="cyan")
    table.add_column("name", style="bold")
    table.add_column("default branch")
    table.add_column("owner")
    table.add_column("topics")
    for r in repositories:
        table.add_row(r.id, r.name, r.default_branch, r.owner, ", ".join(r.topics))
    console.print(table)


@repo_app.command(name="show", help="Show a repository as JSON.")
def repo_show(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
):
    repo = _resolve_repository(_db(ctx), repository)
    console.print_json(repo.model_dump_json(by_alias=True))


@repo_app.command(name="delete", help="Delete a repository and everything it owns.")
def repo_delete(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    db.repositories.delete(repo.id)
    console.print(f"[bold green]Deleted {repo.name}[/bold green]")


# endregion
# region Branches


@branch_app.command(name="create", help="Create a branch.")
def branch_create(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    name: str = typer.Argument(..., help="Branch name."),
    protected: bool = typer.Option(False, "--protected"),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    try:
        branch = db.branches.create(repo.id, name=name, is_protected=protected)
    except DocVcsError as e:
        _fail(str(e))
    console.print(f"[bold green]Created branch {branch.name}[/bold green]")


@branch_app.command(name="list", help="List the branches of a repository.")
def branch_list(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    for b in db.branches.get_by_repository(repo.id):
        marker = "*" if b.is_default else " "
        head = b.commit_sha[:7] if b.commit_sha else "-------"
        console.print(f"{marker} {b.name} {head}")


@branch_app.command(name="delete", help="Delete a branch.")
def branch_delete(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    name: str = typer.Argument(..., help="Branch name."),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    branch = db.branches.get_by_name(repo.id, name)
    try:
        deleted = branch is not None and db.branches.delete(branch.id)
    except DocVcsError as e:
        _fail(str(e))
    if not deleted:
        _fail(f"Branch {name} not found.")
    console.print(f"[bold green]Deleted branch {name}[/bold green]")


# endregion
# region Working Directory


@file_app.command(name="add", help="Record a change to a file.")
def file_add(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    path: str = typer.Argument(..., help="Path within the repository."),
    content: Optional[str] = typer.Option(None, "--content", help="New file content."),
    source: Optional[Path] = typer.Option(
        None, "--from-file", exists=True, dir_okay=False, help="Read content from a file."
    ),
    change_type: ChangeType = typer.Option(ChangeType.MODIFIED, "--change-type", "-c"),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    if source is not None:
        content = source.read_text(encoding="utf-8")
    working_file = db.working_directory.add_file(
        repo.id, path, content if content is not None else "", change_type
    )
    console.print(
        f"{working_file.change_type.value} {working_file.file_path} "
        f"(+{working_file.additions} -{working_file.deletions})"
    )


@file_app.command(name="list", help="Show the working directory status.")
def file_list(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    files = db.working_directory.get_files(repo.id)
    if not files:
        console.print("[yellow]Nothing to commit, working tree clean.[/yellow]")
        return
    table = Table(title=f"{repo.name} working directory")
    table.add_column("staged")
    table.add_column("change")
    table.add_column("path")
    table.add_column("+/-", justify="right")
    for f in files:
        table.add_row(
            "yes" if f.is_staged else "no",
            f.change_type.value,
            f.file_path,
            f"+{f.additions} -{f.deletions}",
        )
    console.print(table)


def _set_staged(ctx: typer.Context, repository: str, paths: List[str], all_files: bool, staged: bool):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    wd = db.working_directory
    if all_files:
        files = wd.stage_all_files(repo.id) if staged else wd.unstage_all_files(repo.id)
        console.print(f"{len(files)} files {'staged' if staged else 'unstaged'}")
        return
    if not paths:
        _fail("Give at least one path or --all.")
    for path in paths:
        working_file = wd.get_by_path(repo.id, path)
        if working_file is None:
            _fail(f"No change recorded for {path}.")
        if staged:
            wd.stage_file(working_file.id)
        else:
            wd.unstage_file(working_file.id)
        console.print(f"{'staged' if staged else 'unstaged'} {path}")


@file_app.command(name="stage", help="Stage files for the next commit.")
def file_stage(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    paths: Optional[List[str]] = typer.Argument(None, help="Paths to stage."),
    all_files: bool = typer.Option(False, "--all", "-a"),
):
    _set_staged(ctx, repository, paths or [], all_files, True)


@file_app.command(name="unstage", help="Remove files from the next commit.")
def file_unstage(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    paths: Optional[List[str]] = typer.Argument(None, help="Paths to unstage."),
    all_files: bool = typer.Option(False, "--all", "-a"),
):
    _set_staged(ctx, repository, paths or [], all_files, False)


@file_app.command(name="rm", help="Discard a recorded change.")
def file_rm(
    ctx: typer.Context,
    repository: str = typer.Argument(..., help="Repository id or name."),
    path: str = typer.Argument(..., help="Path within the repository."),
):
    db = _db(ctx)
    repo = _resolve_repository(db, repository)
    working_file = db.working_directory.get_by_path(repo.id, path)
    if working_file is None or not db.working_directory.delete_file(working_file.id):
        _fail(f"No change recorded for {path}.")
    console.print(f"discarded {path}")


# endregion


if __name__ == "__main__":
    app()
