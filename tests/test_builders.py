"""
Tests for the functional and fluent builders.
"""

from unittest.mock import MagicMock

import pytest

from personbuilder.builders import (
    DeferredBuilder,
    FluentPersonBuilder,
    PersonAddressBuilder,
    PersonBuilder,
    PersonJobBuilder,
    new_fluent_person_builder,
    new_person_builder,
)
from personbuilder.models import Person


class TestDeferredBuilder:
    """Tests for the generic deferred-action builder."""

    def test_create_is_empty(self):
        """Test that a new builder has no steps."""
        builder = DeferredBuilder.create(Person)
        assert len(builder) == 0
        assert builder.steps == ()

    def test_configure_does_not_touch_record(self):
        """Test that configuring neither creates nor mutates a record."""
        factory = MagicMock(side_effect=Person)
        step = MagicMock()

        builder = DeferredBuilder(factory).configure(step).configure(step)

        factory.assert_not_called()
        step.assert_not_called()
        assert len(builder) == 2

    def test_steps_applied_in_order(self):
        """Test that steps run first-configured, first-applied."""
        calls = []
        builder = DeferredBuilder(Person)
        builder.configure(lambda p: calls.append("first"))
        builder.configure(lambda p: calls.append("second"))
        builder.configure(lambda p: calls.append("third"))

        builder.build()
        assert calls == ["first", "second", "third"]

    def test_each_build_uses_fresh_record(self):
        """Test that every build starts from a new default record."""
        factory = MagicMock(side_effect=Person)
        builder = DeferredBuilder(factory)
        builder.configure(lambda p: setattr(p, "name", p.name + "x"))

        assert builder.build().name == "x"
        assert builder.build().name == "x"
        assert factory.call_count == 2

    def test_configure_returns_builder(self):
        """Test that configure returns the same builder."""
        builder = DeferredBuilder(Person)
        assert builder.configure(lambda p: None) is builder

    def test_steps_view_is_read_only(self):
        """Test that the steps view cannot change the recorded steps."""
        builder = DeferredBuilder(Person).configure(lambda p: None)
        steps = builder.steps
        with pytest.raises(AttributeError):
            steps.append(lambda p: None)
        assert len(builder) == 1

    def test_step_exception_propagates(self):
        """Test that a failing caller-supplied step is not swallowed."""

        def boom(person):
            raise RuntimeError("boom")

        builder = DeferredBuilder(Person).configure(boom)
        with pytest.raises(RuntimeError, match="boom"):
            builder.build()


class TestPersonBuilder:
    """Tests for the deferred Person builder."""

    def test_scenario(self):
        """Test building the documented example person."""
        person = (
            new_person_builder()
            .called("John Doe")
            .lives_at("123 Main St", "Anytown")
            .build()
        )
        assert person == Person(name="John Doe", address="123 Main St", city="Anytown")
        assert person.postcode == ""
        assert person.position == ""
        assert person.income == 0.0

    def test_empty_builder(self):
        """Test that an unconfigured builder yields an all-default record."""
        person = PersonBuilder.create().build()
        assert person == Person()
        assert person.is_empty

    def test_later_step_wins(self):
        """Test that a later step overrides an earlier one on the same field."""
        person = new_person_builder().called("A").called("B").build()
        assert person.name == "B"

    def test_overlapping_groups(self):
        """Test ordering when steps write overlapping fields."""
        person = (
            new_person_builder()
            .lives_at("1 First St", "Oldtown")
            .called("John Doe")
            .lives_at("2 Second St", "Newtown")
            .build()
        )
        assert person.address == "2 Second St"
        assert person.city == "Newtown"
        assert person.name == "John Doe"

    def test_independent_builds(self):
        """Test that repeated builds are equal but independent."""
        builder = new_person_builder().called("John Doe").lives_at("123 Main St", "Anytown")
        first = builder.build()
        second = builder.build()

        assert first == second
        assert first is not second

        first.name = "Changed"
        assert second.name == "John Doe"
        assert builder.build().name == "John Doe"

    def test_configuration_is_deferred(self):
        """Test that values are captured when configured, applied when built."""
        builder = new_person_builder().called("John Doe")
        assert len(builder) == 1

        builder.works_as("Engineer", 50000)
        person = builder.build()
        assert person.position == "Engineer"
        assert person.income == 50000.0

    def test_chaining_returns_same_builder(self):
        """Test that every configuration method returns the builder."""
        builder = new_person_builder()
        assert builder.called("x") is builder
        assert builder.lives_at("a", "c") is builder
        assert builder.with_postcode("p") is builder
        assert builder.works_as("j", 1.0) is builder
        assert builder.configure(lambda p: None) is builder
        assert len(builder) == 5

    def test_custom_step(self):
        """Test mixing named methods with a caller-supplied step."""

        def set_postcode(person):
            person.postcode = "12345"

        person = new_person_builder().called("John Doe").configure(set_postcode).build()
        assert person.postcode == "12345"
        assert person.name == "John Doe"

    def test_with_postcode(self):
        """Test that the postcode step sets the postcode on the built record."""
        person = new_person_builder().with_postcode("12345").build()
        assert person.postcode == "12345"
        assert person.name == ""

    def test_negative_income(self):
        """Test that the job step accepts any income value."""
        person = new_person_builder().works_as("Intern", -5.0).build()
        assert person.income == -5.0


class TestFluentPersonBuilder:
    """Tests for the fluent builder and its sub-builders."""

    def test_full_chain(self):
        """Test building a person through both sub-builders."""
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
        assert person == Person(
            name="John Doe",
            address="123 Main St",
            postcode="12345",
            city="Anytown",
            position="Software Engineer",
            income=75000.0,
        )

    def test_empty_builder(self):
        """Test that an unconfigured builder yields an all-default record."""
        assert FluentPersonBuilder().build() == Person()

    def test_sub_builders_return_parent(self):
        """Test that closing a group hands control back to the parent."""
        builder = new_fluent_person_builder()

        address = builder.lives()
        assert isinstance(address, PersonAddressBuilder)
        assert address.at("x") is address
        assert address.with_postcode("y") is address
        assert address.in_("z") is builder

        job = builder.works()
        assert isinstance(job, PersonJobBuilder)
        assert job.as_a("x") is job
        assert job.earning(1.0) is builder

    def test_sub_builder_writes_through_parent(self):
        """Test that sub-builders populate the parent's record."""
        builder = new_fluent_person_builder()
        builder.lives().at("123 Main St")
        assert builder.person.address == "123 Main St"

    def test_build_returns_copy(self):
        """Test that later builder calls do not change built records."""
        builder = new_fluent_person_builder().called("John Doe")
        first = builder.build()
        builder.called("Jane Roe")
        second = builder.build()

        assert first.name == "John Doe"
        assert second.name == "Jane Roe"
        assert first is not second


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
