"""
Builders for assembling Person records.

- functional.py: deferred-action builder that replays recorded steps
- fluent.py: fluent builder with address and job sub-builders
"""

from personbuilder.builders.fluent import (
    FluentPersonBuilder,
    PersonAddressBuilder,
    PersonJobBuilder,
    new_fluent_person_builder,
)
from personbuilder.builders.functional import (
    DeferredBuilder,
    PersonBuilder,
    PersonModifier,
    new_person_builder,
)

__all__ = [
    "DeferredBuilder",
    "PersonBuilder",
    "PersonModifier",
    "new_person_builder",
    "FluentPersonBuilder",
    "PersonAddressBuilder",
    "PersonJobBuilder",
    "new_fluent_person_builder",
]
