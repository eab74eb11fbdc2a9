"""Combined report service module.

Runs the three monthly views concurrently, each on its own session, and
merges them. Any failure fails the whole report.
"""
import asyncio
import logging

from sales_api.database.store import TransactionStore
from sales_api.exceptions.api_exception import AggregationFailure
from sales_api.schemas.analytics import CombinedDataResponse
from sales_api.services.analytics_service import (
    compute_category_distribution,
    compute_histogram,
    compute_statistics,
)

logger = logging.getLogger(__name__)


async def compute_combined_data(store: TransactionStore, month_key: str) -> CombinedDataResponse:
    """
    Build the combined report for a month.

    Returns:
        CombinedDataResponse with statistics, bar chart and pie chart

    Raises:
        AggregationFailure: If any of the three views fails
    """
    tasks = [
        asyncio.create_task(compute_statistics(store, month_key)),
        asyncio.create_task(compute_histogram(store, month_key)),
        asyncio.create_task(compute_category_distribution(store, month_key)),
    ]
    try:
        statistics, bar_chart, pie_chart = await asyncio.gather(*tasks)
    except Exception as exc:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.error("Combined report for month %s failed: %s", month_key, exc)
        raise AggregationFailure("combined data") from exc

    return CombinedDataResponse(
        statistics=statistics,
        barChart=bar_chart,
        pieChart=pie_chart,
    )
