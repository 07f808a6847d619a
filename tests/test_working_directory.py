import pytest

from docvcs.constants import ChangeType

TEN_LINES = "\n".join(f"line {i}" for i in range(10))


# region add_file


@pytest.mark.parametrize(
    "change_type, expected",
    [
        (ChangeType.ADDED, (10, 0)),
        (ChangeType.MODIFIED, (10, 3)),
        (ChangeType.RENAMED, (10, 3)),
        (ChangeType.DELETED, (0, 10)),
    ],
)
def test_add_file_estimates_diff(db, repo, change_type, expected):
    wf = db.working_directory.add_file(repo.id, "doc.md", TEN_LINES, change_type)
    assert (wf.additions, wf.deletions) == expected
    assert wf.is_staged is False
    assert wf.change_type == change_type


def test_add_file_accepts_string_change_type(db, repo):
    wf = db.working_directory.add_file(repo.id, "doc.md", "x", "added")
    assert wf.change_type is ChangeType.ADDED


def test_add_file_rejects_unknown_change_type(db, repo):
    with pytest.raises(ValueError):
        db.working_directory.add_file(repo.id, "doc.md", "x", "copied")


def test_add_file_replaces_existing_path(db, repo):
    first = db.working_directory.add_file(repo.id, "a.md", "c1", ChangeType.ADDED)
    db.working_directory.stage_file(first.id)
    second = db.working_directory.add_file(repo.id, "a.md", "c2", ChangeType.MODIFIED)

    files = db.working_directory.get_files(repo.id)
    assert len(files) == 1
    assert files[0].id == second.id
    assert files[0].content == "c2"
    assert files[0].is_staged is False


def test_same_path_in_other_repository_is_kept(db, repo):
    other = db.repositories.create(name="other")
    db.working_directory.add_file(repo.id, "a.md", "one", ChangeType.ADDED)
    db.working_directory.add_file(other.id, "a.md", "two", ChangeType.ADDED)
    assert len(db.working_directory.get_files(repo.id)) == 1
    assert len(db.working_directory.get_files(other.id)) == 1


# endregion
# region Staging


def test_stage_and_unstage_are_idempotent(db, repo):
    wf = db.working_directory.add_file(repo.id, "a.md", "x", ChangeType.ADDED)

    assert db.working_directory.stage_file(wf.id).is_staged is True
    assert db.working_directory.stage_file(wf.id).is_staged is True
    assert db.working_directory.unstage_file(wf.id).is_staged is False
    assert db.working_directory.unstage_file(wf.id).is_staged is False


def test_stage_missing_returns_none(db):
    assert db.working_directory.stage_file("missing") is None
    assert db.working_directory.unstage_file("missing") is None


def test_stage_all_is_scoped_to_repository(db, repo):
    other = db.repositories.create(name="other")
    db.working_directory.add_file(repo.id, "a.md", "x", ChangeType.ADDED)
    db.working_directory.add_file(repo.id, "b.md", "y", ChangeType.ADDED)
    db.working_directory.add_file(other.id, "c.md", "z", ChangeType.ADDED)

    staged = db.working_directory.stage_all_files(repo.id)
    assert [f.file_path for f in staged] == ["a.md", "b.md"]
    assert all(f.is_staged for f in staged)
    assert not db.working_directory.get_files(other.id)[0].is_staged

    unstaged = db.working_directory.unstage_all_files(repo.id)
    assert not any(f.is_staged for f in unstaged)


def test_get_staged_files(db, repo):
    a = db.working_directory.add_file(repo.id, "a.md", "x", ChangeType.ADDED)
    db.working_directory.add_file(repo.id, "b.md", "y", ChangeType.ADDED)
    db.working_directory.stage_file(a.id)
    assert [f.file_path for f in db.working_directory.get_staged_files(repo.id)] == [
        "a.md"
    ]


# endregion
# region Removal


def test_delete_file(db, repo):
    wf = db.working_directory.add_file(repo.id, "a.md", "x", ChangeType.ADDED)
    assert db.working_directory.delete_file(wf.id) is True
    assert db.working_directory.delete_file(wf.id) is False
    assert db.working_directory.get_files(repo.id) == []


def test_purge_staged_leaves_unstaged(db, repo):
    a = db.working_directory.add_file(repo.id, "a.md", "x", ChangeType.ADDED)
    db.working_directory.add_file(repo.id, "b.md", "y", ChangeType.ADDED)
    db.working_directory.stage_file(a.id)

    assert db.working_directory.purge_staged(repo.id) == 1
    assert [f.file_path for f in db.working_directory.get_files(repo.id)] == ["b.md"]


# endregion
