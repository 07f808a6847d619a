import threading

from docvcs.constants import ChangeType
from docvcs.samples import SAMPLE_FILES, SAMPLE_REPOSITORY_NAME, seed_sample_data


def test_seed_creates_demo_repository(db):
    repository = seed_sample_data(db)

    assert repository.name == SAMPLE_REPOSITORY_NAME
    assert repository.language == "TypeScript"
    assert repository.topics == ["documentation", "demo", "typescript"]
    assert db.branches.get_default(repository.id).name == "main"

    files = db.working_directory.get_files(repository.id)
    assert [f.file_path for f in files] == list(SAMPLE_FILES)
    assert all(f.change_type is ChangeType.ADDED for f in files)
    assert not any(f.is_staged for f in files)
    assert db.commits.get_by_repository(repository.id) == []


def test_seed_skips_non_empty_database(db, repo):
    assert seed_sample_data(db) is None
    assert len(db.repositories.get_all()) == 1


def test_seed_is_a_no_op_without_storage(offline_db):
    assert seed_sample_data(offline_db) is None


def test_concurrent_seeds_create_one_repository(db):
    barrier = threading.Barrier(2)
    results = []

    def seed():
        barrier.wait()
        results.append(seed_sample_data(db))

    threads = [threading.Thread(target=seed) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len([r for r in results if r is not None]) == 1
    assert [r.name for r in db.repositories.get_all()] == [SAMPLE_REPOSITORY_NAME]
