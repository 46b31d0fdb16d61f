"""
Pydantic models for the records assembled by the builders.
"""

from personbuilder.models.base import RecordModel
from personbuilder.models.person import Person

__all__ = [
    "RecordModel",
    "Person",
]
