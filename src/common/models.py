"""Shared Pydantic data models for the sales dashboard.

The Sale Record mirrors one entry of the remote product transaction
dataset. Field aliases keep the source's camelCase names on the wire.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

# Fixed English names, independent of the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class SaleRecord(BaseModel):
    """A single product sale from the source dataset."""
    id: int | str | None = None
    title: str = ""
    description: str = ""
    price: int | float = Field(description="Sale amount, kept as int when the source has one")
    category: str | None = None
    date_of_sale: datetime = Field(alias="dateOfSale")
    sold: bool = False

    model_config = {"populate_by_name": True, "extra": "allow"}

    @field_validator("date_of_sale", mode="before")
    @classmethod
    def coerce_date_of_sale(cls, value):
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        return value

    @property
    def month_name(self) -> str:
        """English long month name of the sale date, in its own offset."""
        return MONTH_NAMES[self.date_of_sale.month - 1]

    @property
    def price_text(self) -> str:
        """Price as a decimal string: ``100`` rather than ``100.0``."""
        if isinstance(self.price, int):
            return str(self.price)
        if self.price.is_integer():
            return str(int(self.price))
        return repr(self.price)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
