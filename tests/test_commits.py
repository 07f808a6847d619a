import re
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from docvcs.constants import ChangeType, CollectionKey
from docvcs.exceptions import BranchNotFoundError, DocVcsError


def _add(db, repo, path, content="one\ntwo\nthree", change_type=ChangeType.ADDED):
    return db.working_directory.add_file(repo.id, path, content, change_type)


def test_commit_consumes_only_staged_files(db, repo):
    a = _add(db, repo, "a.md")
    b = _add(db, repo, "b.md", change_type=ChangeType.MODIFIED)
    _add(db, repo, "c.md")
    db.working_directory.stage_file(a.id)
    db.working_directory.stage_file(b.id)

    commit = db.commits.create(repo.id, "main", "Add docs", "Longer text")

    assert commit.files_changed == 2
    assert commit.additions == a.additions + b.additions == 6
    assert commit.deletions == a.deletions + b.deletions == 0
    assert commit.description == "Longer text"
    remaining = db.working_directory.get_files(repo.id)
    assert [f.file_path for f in remaining] == ["c.md"]
    assert remaining[0].is_staged is False


def test_commit_advances_branch_head(db, repo):
    _add(db, repo, "a.md")
    db.working_directory.stage_all_files(repo.id)
    commit = db.commits.create(repo.id, "main", "first")

    main = db.branches.get_by_name(repo.id, "main")
    assert main.commit_sha == commit.sha
    assert commit.branch_id == main.id


def test_commit_on_non_default_branch(db, repo):
    feature = db.branches.create(repo.id, name="feature")
    commit = db.commits.create(repo.id, "feature", "wip")

    assert db.branches.get_by_id(feature.id).commit_sha == commit.sha
    assert db.branches.get_by_name(repo.id, "main").commit_sha is None


def test_empty_commit_is_allowed(db, repo):
    _add(db, repo, "unstaged.md")
    commit = db.commits.create(repo.id, "main", "nothing staged")

    assert (commit.files_changed, commit.additions, commit.deletions) == (0, 0, 0)
    assert len(db.working_directory.get_files(repo.id)) == 1


def test_commit_attribution_and_sha(db, repo):
    commit = db.commits.create(repo.id, "main", "msg")

    assert commit.author_name == "Test User"
    assert commit.author_email == "tester@example.com"
    assert re.fullmatch(r"[0-9a-f]{40}", commit.sha)
    assert commit.short_sha == commit.sha[:7]
    assert db.commits.get_by_id(commit.id) == commit
    assert db.commits.get_by_id("missing") is None


def test_commits_are_immutable(db, repo):
    commit = db.commits.create(repo.id, "main", "msg")
    with pytest.raises(ValidationError):
        commit.message = "rewritten"


def test_missing_branch_raises_without_side_effects(db, repo):
    wf = _add(db, repo, "a.md")
    db.working_directory.stage_file(wf.id)
    commits_before = db.store.get_all(CollectionKey.COMMITS.value)
    branches_before = db.store.get_all(CollectionKey.BRANCHES.value)

    with pytest.raises(BranchNotFoundError) as excinfo:
        db.commits.create(repo.id, "nonexistent", "msg")

    assert isinstance(excinfo.value, DocVcsError)
    assert excinfo.value.branch_name == "nonexistent"
    assert db.store.get_all(CollectionKey.COMMITS.value) == commits_before
    assert db.store.get_all(CollectionKey.BRANCHES.value) == branches_before
    assert db.working_directory.get_staged_files(repo.id)[0].id == wf.id


def test_branch_of_other_repository_is_not_found(db, repo):
    other = db.repositories.create(name="other")
    db.branches.create(other.id, name="only-there")
    with pytest.raises(BranchNotFoundError):
        db.commits.create(repo.id, "only-there", "msg")


# region History


def test_history_is_newest_first_and_limited(db, repo, monkeypatch):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    times = iter([base, base + timedelta(minutes=1), base + timedelta(minutes=2)])
    monkeypatch.setattr("docvcs.stores.commits.get_time", lambda: next(times))

    c1 = db.commits.create(repo.id, "main", "t1")
    c2 = db.commits.create(repo.id, "main", "t2")
    c3 = db.commits.create(repo.id, "main", "t3")

    assert [c.id for c in db.commits.get_by_repository(repo.id, limit=2)] == [
        c3.id,
        c2.id,
    ]
    assert [c.id for c in db.commits.get_by_repository(repo.id)] == [
        c3.id,
        c2.id,
        c1.id,
    ]


def test_history_ties_list_latest_insert_first(db, repo, monkeypatch):
    same = datetime(2024, 1, 1, tzinfo=timezone.utc)
    monkeypatch.setattr("docvcs.stores.commits.get_time", lambda: same)

    first = db.commits.create(repo.id, "main", "a")
    second = db.commits.create(repo.id, "main", "b")

    assert [c.id for c in db.commits.get_by_repository(repo.id)] == [
        second.id,
        first.id,
    ]


def test_history_default_limit_comes_from_settings(identity_settings):
    from docvcs.config import StorageSettings
    from docvcs.database import LocalDatabase

    db = LocalDatabase(
        StorageSettings(db_path=":memory:", history_limit=2),
        identity_settings,
    )
    repo = db.repositories.create(name="short")
    for i in range(3):
        db.commits.create(repo.id, "main", f"c{i}")
    assert len(db.commits.get_by_repository(repo.id)) == 2
    db.close()


def test_history_is_scoped_to_repository(db, repo):
    other = db.repositories.create(name="other")
    db.commits.create(other.id, "main", "elsewhere")
    assert db.commits.get_by_repository(repo.id) == []
    assert len(db.commits.get_by_branch(db.branches.get_default(other.id).id)) == 1


# endregion
