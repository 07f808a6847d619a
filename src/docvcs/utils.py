import math
import secrets
import uuid
from datetime import datetime, timezone
from typing import Optional

from docvcs.constants import MODIFIED_DELETION_RATIO, SHA_LENGTH, ChangeType


def get_time() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def generate_id() -> str:
    """
    Generate a unique record identifier.

    Returns:
        str: 32 lowercase hex characters.

    Example:
        >>> len(generate_id())
        32
    """
    return uuid.uuid4().hex


def generate_sha() -> str:
    """
    Generate a random commit sha.

    The value is random, not derived from the commit contents.

    Returns:
        str: 40 lowercase hex characters.
    """
    return secrets.token_hex(SHA_LENGTH // 2)


def count_lines(content: Optional[str]) -> int:
    """
    Count the lines of a file's content.

    Args:
        content (Optional[str]): The file content. None counts as zero lines.

    Returns:
        int: Number of newline-separated segments.

    Example:
        >>> count_lines("a\\nb")
        2
        >>> count_lines("")
        1
    """
    if content is None:
        return 0
    return len(content.split("\n"))


def estimate_diff(content: Optional[str], change_type: ChangeType) -> tuple[int, int]:
    """
    Estimate the (additions, deletions) of a working file change.

    This is a display estimate, not a diff: additions are the line count unless
    the file was deleted; deletions are zero for added files, the full line
    count for deleted files and 30% of the lines otherwise.

    Args:
        content (Optional[str]): New content of the file.
        change_type (ChangeType): Kind of change.

    Returns:
        tuple[int, int]: additions, deletions.

    Example:
        >>> estimate_diff("a\\nb\\nc\\nd\\ne\\nf\\ng\\nh\\ni\\nj", ChangeType.MODIFIED)
        (10, 3)
    """
    change_type = ChangeType(change_type)
    lines = count_lines(content)
    additions = 0 if change_type == ChangeType.DELETED else lines
    if change_type == ChangeType.ADDED:
        deletions = 0
    elif change_type == ChangeType.DELETED:
        deletions = lines
    else:
        deletions = math.floor(lines * MODIFIED_DELETION_RATIO)
    return additions, deletions
