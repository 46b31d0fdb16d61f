"""
Fluent builder with sub-builders.

Related fields are grouped behind secondary builders that hold a
back-reference to the parent and return it when their group is complete.
"""

from __future__ import annotations

import logging

from personbuilder.models.person import Person

logger = logging.getLogger(__name__)


class FluentPersonBuilder:
    """
    Fluent builder for Person records.

    Example:
        person = (
            new_fluent_person_builder()
            .called("John Doe")
            .lives()
                .at("123 Main St")
                .with_postcode("12345")
                .in_("Anytown")
            .works()
                .as_a("Software Engineer")
                .earning(75000)
            .build()
        )
    """

    def __init__(self) -> None:
        self.person = Person()

    def called(self, name: str) -> "FluentPersonBuilder":
        """Set the name."""
        self.person.name = name
        return self

    def lives(self) -> "PersonAddressBuilder":
        """Start the address group."""
        return PersonAddressBuilder(self)

    def works(self) -> "PersonJobBuilder":
        """Start the job group."""
        return PersonJobBuilder(self)

    def build(self) -> Person:
        """
        Return the assembled Person.

        A copy is returned so that further calls on this builder do not
        change records already handed out.
        """
        logger.debug(f"Built {self.person!s}")
        return self.person.model_copy()


class PersonAddressBuilder:
    """Sets address fields on the parent builder's Person."""

    def __init__(self, builder: FluentPersonBuilder):
        self.builder = builder

    def at(self, address: str) -> "PersonAddressBuilder":
        self.builder.person.address = address
        return self

    def with_postcode(self, postcode: str) -> "PersonAddressBuilder":
        self.builder.person.postcode = postcode
        return self

    def in_(self, city: str) -> FluentPersonBuilder:
        """Set the city and return to the parent builder."""
        self.builder.person.city = city
        return self.builder


class PersonJobBuilder:
    """Sets job fields on the parent builder's Person."""

    def __init__(self, builder: FluentPersonBuilder):
        self.builder = builder

    def as_a(self, position: str) -> "PersonJobBuilder":
        self.builder.person.position = position
        return self

    def earning(self, income: float) -> FluentPersonBuilder:
        """Set the income and return to the parent builder."""
        self.builder.person.income = income
        return self.builder


def new_fluent_person_builder() -> FluentPersonBuilder:
    """Create a fluent Person builder over a default record."""
    return FluentPersonBuilder()
