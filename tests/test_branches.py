import pytest
from pydantic import ValidationError

from docvcs.exceptions import BranchAlreadyExistsError, DefaultBranchError
from docvcs.models import BranchPatch


def test_create_defaults(db, repo):
    branch = db.branches.create(repo.id)

    assert branch.name == "new-branch"
    assert branch.repository_id == repo.id
    assert branch.is_default is False
    assert branch.is_protected is False
    assert branch.ahead_count == 0 and branch.behind_count == 0
    assert branch.commit_sha is None


def test_get_by_repository_keeps_insertion_order(db, repo):
    db.branches.create(repo.id, name="feature-a")
    db.branches.create(repo.id, name="feature-b")
    other = db.repositories.create(name="other")

    names = [b.name for b in db.branches.get_by_repository(repo.id)]
    assert names == ["main", "feature-a", "feature-b"]
    assert [b.name for b in db.branches.get_by_repository(other.id)] == ["main"]


def test_duplicate_name_is_rejected(db, repo):
    with pytest.raises(BranchAlreadyExistsError):
        db.branches.create(repo.id, name="main")
    assert len(db.branches.get_by_repository(repo.id)) == 1


def test_same_name_allowed_in_other_repository(db, repo):
    other = db.repositories.create(name="other")
    branch = db.branches.create(other.id, name="feature")
    assert db.branches.create(repo.id, name="feature").name == branch.name


def test_get_by_name(db, repo):
    feature = db.branches.create(repo.id, name="feature")
    assert db.branches.get_by_name(repo.id, "feature") == feature
    assert db.branches.get_by_name(repo.id, "nope") is None


def test_update_merges_fields(db, repo):
    branch = db.branches.create(repo.id, name="feature")
    updated = db.branches.update(branch.id, BranchPatch(is_protected=True, ahead_count=2))

    assert updated.is_protected is True
    assert updated.ahead_count == 2
    assert updated.name == "feature"
    assert updated.updated_at >= branch.updated_at


def test_update_missing_returns_none(db):
    assert db.branches.update("missing", name="x") is None


def test_rename_onto_existing_name_is_rejected(db, repo):
    branch = db.branches.create(repo.id, name="feature")
    with pytest.raises(BranchAlreadyExistsError):
        db.branches.update(branch.id, name="main")


def test_head_pointer_is_not_patchable(db, repo):
    branch = db.branches.get_default(repo.id)
    with pytest.raises(ValidationError):
        db.branches.update(branch.id, commit_sha="0" * 40)


def test_setting_default_clears_siblings(db, repo):
    feature = db.branches.create(repo.id, name="feature")
    db.branches.update(feature.id, is_default=True)

    defaults = [b for b in db.branches.get_by_repository(repo.id) if b.is_default]
    assert [b.name for b in defaults] == ["feature"]
    assert db.repositories.get_by_id(repo.id).default_branch == "feature"


def test_advance_head(db, repo):
    branch = db.branches.get_default(repo.id)
    sha = "a" * 40
    assert db.branches.advance_head(branch.id, sha).commit_sha == sha
    assert db.branches.advance_head("missing", sha) is None


def test_delete(db, repo):
    branch = db.branches.create(repo.id, name="feature")
    assert db.branches.delete(branch.id) is True
    assert db.branches.delete(branch.id) is False
    assert [b.name for b in db.branches.get_by_repository(repo.id)] == ["main"]


# region Default branch


def test_creating_default_branch_repoints_repository(db, repo):
    db.branches.create(repo.id, name="dev", is_default=True)

    defaults = [b.name for b in db.branches.get_by_repository(repo.id) if b.is_default]
    assert defaults == ["dev"]
    assert db.repositories.get_by_id(repo.id).default_branch == "dev"


def test_renaming_default_branch_renames_repository_default(db, repo):
    main = db.branches.get_default(repo.id)
    db.branches.update(main.id, name="trunk")

    assert db.repositories.get_by_id(repo.id).default_branch == "trunk"
    assert db.branches.get_default(repo.id).name == "trunk"


def test_renaming_other_branch_leaves_repository_alone(db, repo):
    feature = db.branches.create(repo.id, name="feature")
    db.branches.update(feature.id, name="feature-2")
    assert db.repositories.get_by_id(repo.id).default_branch == "main"


def test_default_branch_cannot_be_unflagged(db, repo):
    main = db.branches.get_default(repo.id)
    with pytest.raises(DefaultBranchError):
        db.branches.update(main.id, is_default=False)
    assert db.branches.get_default(repo.id).id == main.id


def test_default_branch_cannot_be_deleted(db, repo):
    main = db.branches.get_default(repo.id)
    with pytest.raises(DefaultBranchError):
        db.branches.delete(main.id)
    assert db.branches.get_by_id(main.id) is not None


def test_former_default_can_be_deleted_after_switch(db, repo):
    main = db.branches.get_default(repo.id)
    feature = db.branches.create(repo.id, name="feature")
    db.branches.update(feature.id, is_default=True)
    assert db.branches.delete(main.id) is True


# endregion
