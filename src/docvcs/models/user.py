"""
docvcs.models.user
The local user identity used for ownership and commit attribution.
"""

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from docvcs.models.base import StoreRecord


class User(StoreRecord):
    """
    Read-only identity of the current user.

    Attributes:
        id (str): User identifier.
        email (str): Email used as repository owner and commit author email.
        name (str): Display name used as commit author name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    email: str = Field(..., description="User email")
    name: str = Field(..., description="Display name")
