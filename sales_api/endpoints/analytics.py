"""Analytics endpoint module.

Monthly statistics, bar chart, pie chart and combined report. Every route
requires a ``month`` query parameter holding an English month name.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from sales_api.database.database import get_store
from sales_api.database.store import TransactionStore
from sales_api.schemas.analytics import (
    CategoryCount,
    CombinedDataResponse,
    PriceRangeCount,
    StatisticsResponse,
)
from sales_api.services.analytics_service import (
    compute_category_distribution,
    compute_histogram,
    compute_statistics,
    month_key_for,
)
from sales_api.services.report_service import compute_combined_data

router = APIRouter(tags=["analytics"])


def validated_month_key(
    month: Optional[str] = Query(
        default=None,
        description="Month name, January to December",
    ),
) -> str:
    """Dependency turning the month query parameter into its two-digit key."""
    return month_key_for(month)


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    month_key: str = Depends(validated_month_key),
    store: TransactionStore = Depends(get_store),
) -> StatisticsResponse:
    """
    Get sale totals for the month.

    - **totalSaleAmount**: Sum of prices of all items in the month
    - **totalSoldItems**: Number of sold items
    - **totalNotSoldItems**: Number of unsold items
    """
    return await compute_statistics(store, month_key)


@router.get("/bar-chart", response_model=list[PriceRangeCount])
async def get_bar_chart(
    month_key: str = Depends(validated_month_key),
    store: TransactionStore = Depends(get_store),
) -> list[PriceRangeCount]:
    """Get item counts per price range for the month (empty ranges omitted)."""
    return await compute_histogram(store, month_key)


@router.get("/pie-chart", response_model=list[CategoryCount])
async def get_pie_chart(
    month_key: str = Depends(validated_month_key),
    store: TransactionStore = Depends(get_store),
) -> list[CategoryCount]:
    """Get item counts per category for the month."""
    return await compute_category_distribution(store, month_key)


@router.get("/combined-data", response_model=CombinedDataResponse)
async def get_combined_data(
    month_key: str = Depends(validated_month_key),
    store: TransactionStore = Depends(get_store),
) -> CombinedDataResponse:
    """Get statistics, bar chart and pie chart for the month in one response."""
    return await compute_combined_data(store, month_key)
