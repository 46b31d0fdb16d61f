"""
Person model.

The plain aggregate both builders populate.
"""

from pydantic import Field

from personbuilder.models.base import RecordModel


class Person(RecordModel):
    """
    A person with contact and job details.

    Every field is independently settable and defaults to its zero value;
    there are no constraints between fields.

    Attributes:
        name: Full name
        address: Street address
        postcode: Postal code
        city: City of residence
        position: Job title
        income: Yearly income
    """

    name: str = Field(default="", description="Full name")

    address: str = Field(default="", description="Street address")

    postcode: str = Field(default="", description="Postal code")

    city: str = Field(default="", description="City of residence")

    position: str = Field(default="", description="Job title")

    income: float = Field(default=0.0, description="Yearly income")

    @property
    def location(self) -> str:
        """Get the address parts that are set, joined for display."""
        parts = [p for p in (self.address, self.postcode, self.city) if p]
        return ", ".join(parts)

    def __str__(self) -> str:
        """String representation."""
        name = self.name or "<unnamed>"
        text = f"Person: {name}"
        if self.location:
            text += f" [{self.location}]"
        if self.position:
            text += f" - {self.position} ({self.income:.2f})"
        return text
