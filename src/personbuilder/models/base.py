"""
Base model for all buildable records.

Provides the shared pydantic configuration and serialization helpers.
"""

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """
    Base model for records populated by a builder.

    Provides:
    - Assignment-time type coercion, so builder steps can set fields directly
    - Dictionary and JSON serialization
    """

    model_config = ConfigDict(
        # Re-validate on assignment (steps mutate fields after construction)
        validate_assignment=True,
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump()

    def to_json(self) -> str:
        """Convert to JSON string."""
        return self.model_dump_json()

    @property
    def is_empty(self) -> bool:
        """Check if every field still holds its default value."""
        return self.model_dump() == type(self)().model_dump()
