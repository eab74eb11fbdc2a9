"""Analytics schemas module.

Response schemas for the monthly statistics, bar chart (price histogram),
pie chart (category distribution) and combined report endpoints.
"""
from pydantic import BaseModel, Field


# --- Statistics ---

class StatisticsResponse(BaseModel):
    """Sale totals for one month."""

    total_sale_amount: float = Field(
        ...,
        alias="totalSaleAmount",
        description="Sum of prices of all records in the month, sold or not",
    )
    total_sold_items: int = Field(
        ...,
        alias="totalSoldItems",
        description="Number of sold items",
    )
    total_not_sold_items: int = Field(
        ...,
        alias="totalNotSoldItems",
        description="Number of unsold items",
    )

    class Config:
        populate_by_name = True


# --- Bar Chart ---

class PriceRangeCount(BaseModel):
    """Item count for one price bucket."""

    price_range: str = Field(
        ...,
        alias="priceRange",
        description="Price bucket label",
    )
    item_count: int = Field(..., alias="itemCount", description="Items in the bucket")

    class Config:
        populate_by_name = True


# --- Pie Chart ---

class CategoryCount(BaseModel):
    """Item count for one category."""

    category: str = Field(..., description="Category label")
    item_count: int = Field(..., alias="itemCount", description="Items in the category")

    class Config:
        populate_by_name = True


# --- Combined ---

class CombinedDataResponse(BaseModel):
    """Statistics, bar chart and pie chart for one month."""

    statistics: StatisticsResponse
    bar_chart: list[PriceRangeCount] = Field(
        default_factory=list,
        alias="barChart",
    )
    pie_chart: list[CategoryCount] = Field(
        default_factory=list,
        alias="pieChart",
    )

    class Config:
        populate_by_name = True
