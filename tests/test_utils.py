import re

import pytest

from docvcs.constants import ChangeType
from docvcs.utils import count_lines, estimate_diff, generate_id, generate_sha, get_time


def test_generate_id_is_unique_hex():
    ids = {generate_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(re.fullmatch(r"[0-9a-f]{32}", i) for i in ids)


def test_generate_sha_format():
    assert re.fullmatch(r"[0-9a-f]{40}", generate_sha())


def test_get_time_is_timezone_aware():
    assert get_time().tzinfo is not None


@pytest.mark.parametrize(
    "content, expected",
    [(None, 0), ("", 1), ("one", 1), ("a\nb\nc", 3), ("trailing\n", 2)],
)
def test_count_lines(content, expected):
    assert count_lines(content) == expected


@pytest.mark.parametrize(
    "change_type, expected",
    [
        (ChangeType.ADDED, (7, 0)),
        (ChangeType.MODIFIED, (7, 2)),
        (ChangeType.RENAMED, (7, 2)),
        (ChangeType.DELETED, (0, 7)),
    ],
)
def test_estimate_diff(change_type, expected):
    content = "\n".join(["x"] * 7)
    assert estimate_diff(content, change_type) == expected


def test_estimate_diff_without_content():
    assert estimate_diff(None, ChangeType.MODIFIED) == (0, 0)
    assert estimate_diff(None, ChangeType.DELETED) == (0, 0)
