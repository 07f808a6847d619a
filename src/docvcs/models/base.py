# region Docstring
"""
docvcs.models.base
Base Pydantic models shared by every persisted record.
Overview:
- Records are persisted as JSON objects with camelCase keys (repositoryId, isStaged, ...)
    while Python code uses snake_case attribute names.
- Patch models describe the fields a caller may change; unknown fields are rejected.
Contents:
- StoreRecord:
    Base for persisted records. Provides to_record() for JSON-safe serialization and
    from_record() for validation of stored dictionaries.
- RecordPatch:
    Base for typed partial updates. changes() returns only the fields explicitly set.
Design Notes:
- Timestamps are timezone-aware datetimes serialized to ISO 8601 strings.
- populate_by_name lets callers pass either snake_case names or camelCase aliases.
"""
# endregion
# region Imports
from datetime import datetime
from typing import Any, Dict, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

# endregion
# region Base Models
R = TypeVar("R", bound="StoreRecord")


class StoreRecord(BaseModel):
    """Base model for records persisted in a collection."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    id: str

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the JSON-safe, camelCase dictionary stored in a collection."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls: type[R], record: Dict[str, Any]) -> R:
        """Validate a stored dictionary into a model instance."""
        return cls.model_validate(record)


class TimestampedRecord(StoreRecord):
    """Record carrying created_at/updated_at timestamps."""

    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    def validate_datetimes(cls, v: Any) -> Any:
        if isinstance(v, str):
            return datetime.fromisoformat(v)
        return v


class RecordPatch(BaseModel):
    """Base model for typed partial updates."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly set on the patch, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


# endregion
