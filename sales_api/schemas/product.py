"""Product schemas module for seed ingestion."""
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ProductRecord(BaseModel):
    """Validated product transaction as stored.

    Raw feed records are loosely typed: ``id`` may arrive as a string,
    ``sold`` as 0/1 and ``dateOfSale`` as a full ISO-8601 timestamp.
    """

    id: int = Field(..., description="Product transaction identifier")
    title: str = Field(..., description="Product title")
    price: Decimal = Field(..., ge=0, description="Sale price")
    description: Optional[str] = Field(None, description="Product description")
    category: str = Field(..., description="Free-form category label")
    image: Optional[str] = Field(None, description="Image URI")
    sold: bool = Field(..., description="Whether the item was sold")
    date_of_sale: date = Field(
        ...,
        alias="dateOfSale",
        description="Calendar date of sale (ISO 8601)",
    )

    class Config:
        populate_by_name = True

    @field_validator("date_of_sale", mode="before")
    @classmethod
    def _calendar_date(cls, value):
        # Offset timestamps count in UTC; bare dates and naive times are taken as written
        if isinstance(value, str):
            text = value.strip()
            if len(text) == 10:
                return date.fromisoformat(text)
            value = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        return value

    @property
    def month_key(self) -> str:
        """Two-digit month number of the sale date."""
        return f"{self.date_of_sale.month:02d}"


class IngestReport(BaseModel):
    """Result of a bulk ingestion."""

    inserted_count: int = Field(
        ...,
        alias="insertedCount",
        description="Number of records inserted",
    )

    class Config:
        populate_by_name = True


class InitializeResponse(BaseModel):
    """Response schema for the database initialization endpoint."""

    message: str = Field(..., description="Operation result message")
    inserted: int = Field(..., description="Number of records inserted")
