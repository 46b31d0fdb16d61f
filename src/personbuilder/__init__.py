"""
Person Builder - Builder pattern examples for assembling Person records.

This package provides two ways of constructing a Person:
- a functional builder that records deferred mutation steps and replays
  them on a fresh record at build time
- a fluent builder that groups related fields behind address and job
  sub-builders
"""

__version__ = "0.1.0"

from personbuilder.builders import (
    DeferredBuilder,
    FluentPersonBuilder,
    PersonAddressBuilder,
    PersonBuilder,
    PersonJobBuilder,
    PersonModifier,
    new_fluent_person_builder,
    new_person_builder,
)
from personbuilder.models import Person, RecordModel

__all__ = [
    # Models
    "RecordModel",
    "Person",
    # Functional builder
    "DeferredBuilder",
    "PersonBuilder",
    "PersonModifier",
    "new_person_builder",
    # Fluent builder
    "FluentPersonBuilder",
    "PersonAddressBuilder",
    "PersonJobBuilder",
    "new_fluent_person_builder",
]
