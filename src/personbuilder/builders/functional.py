"""
Functional (deferred-action) builder.

Configuration calls only record what to do; nothing is constructed until
build() creates a fresh record and applies the recorded steps in order.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from personbuilder.models.person import Person

logger = logging.getLogger(__name__)

T = TypeVar("T")

PersonModifier = Callable[[Person], None]


class DeferredBuilder(Generic[T]):
    """
    Accumulates mutation steps and replays them on a new record.

    Steps are kept in the order they were configured and are never removed,
    reordered or deduplicated. Each build() starts from a default record
    produced by ``factory`` and replays every step, so repeated builds give
    independent records.

    Example:
        builder = DeferredBuilder(Person)
        builder.configure(lambda p: setattr(p, "name", "John Doe"))
        person = builder.build()
    """

    def __init__(self, factory: Callable[[], T]):
        """
        Initialize an empty builder.

        Args:
            factory: Zero-argument callable returning a default record
        """
        self._factory = factory
        self._steps: list[Callable[[T], None]] = []

    @classmethod
    def create(cls, factory: Callable[[], T]) -> "DeferredBuilder[T]":
        """Create a builder with no recorded steps."""
        return cls(factory)

    def configure(self, step: Callable[[T], None]) -> "DeferredBuilder[T]":
        """
        Record a step to apply at build time.

        Args:
            step: Callable that mutates the record passed to it

        Returns:
            This builder, for chaining
        """
        self._steps.append(step)
        return self

    @property
    def steps(self) -> tuple[Callable[[T], None], ...]:
        """Recorded steps, in application order."""
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def build(self) -> T:
        """
        Create a new record and apply every recorded step to it.

        Returns:
            The populated record
        """
        record = self._factory()
        for step in self._steps:
            step(record)
        logger.debug(f"Built {type(record).__name__} from {len(self._steps)} step(s)")
        return record


class PersonBuilder(DeferredBuilder[Person]):
    """
    Deferred builder for Person records.

    Example:
        person = (
            new_person_builder()
            .called("John Doe")
            .lives_at("123 Main St", "Anytown")
            .build()
        )
    """

    def __init__(self) -> None:
        super().__init__(Person)

    @classmethod
    def create(cls) -> "PersonBuilder":
        """Create a builder with no recorded steps."""
        return cls()

    def called(self, name: str) -> "PersonBuilder":
        """Record setting the name."""

        def set_name(person: Person) -> None:
            logger.debug("Adding name...")
            person.name = name

        self.configure(set_name)
        return self

    def lives_at(self, address: str, city: str) -> "PersonBuilder":
        """Record setting the address and city together."""

        def set_address_city(person: Person) -> None:
            logger.debug("Adding address and city...")
            person.address = address
            person.city = city

        self.configure(set_address_city)
        return self

    def with_postcode(self, postcode: str) -> "PersonBuilder":
        """Record setting the postcode."""

        def set_postcode(person: Person) -> None:
            logger.debug("Adding postcode...")
            person.postcode = postcode

        self.configure(set_postcode)
        return self

    def works_as(self, position: str, income: float) -> "PersonBuilder":
        """Record setting the position and income together."""

        def set_job(person: Person) -> None:
            logger.debug("Adding position and income...")
            person.position = position
            person.income = income

        self.configure(set_job)
        return self


def new_person_builder() -> PersonBuilder:
    """Create an empty deferred Person builder."""
    return PersonBuilder.create()
