"""Tests for combined report service."""
import asyncio

import pytest

from sales_api.exceptions.api_exception import AggregationFailure
from sales_api.services import report_service
from sales_api.services.analytics_service import (
    compute_category_distribution,
    compute_histogram,
    compute_statistics,
)
from sales_api.services.report_service import compute_combined_data


@pytest.mark.asyncio
class TestComputeCombinedData:
    """Tests for compute_combined_data."""

    async def test_combined_matches_individual_views(self, store, sample_products):
        """Composition does not alter any sub-result."""
        for month_key in ("03", "04", "08"):
            combined = await compute_combined_data(store, month_key)

            assert combined.statistics == await compute_statistics(store, month_key)
            assert combined.bar_chart == await compute_histogram(store, month_key)
            assert combined.pie_chart == await compute_category_distribution(store, month_key)

    async def test_combined_serializes_with_aliases(self, store, sample_products):
        combined = await compute_combined_data(store, "04")
        payload = combined.model_dump(by_alias=True)

        assert set(payload) == {"statistics", "barChart", "pieChart"}
        assert payload["statistics"]["totalSoldItems"] == 1
        assert payload["pieChart"] == [
            {"category": "A", "itemCount": 1},
            {"category": "B", "itemCount": 1},
        ]

    async def test_empty_month(self, store):
        combined = await compute_combined_data(store, "02")
        assert combined.statistics.total_sold_items == 0
        assert combined.bar_chart == []
        assert combined.pie_chart == []

    async def test_one_failing_view_fails_the_report(self, store, sample_products, monkeypatch):
        """No partial report is returned when a sub-query fails."""

        async def failing_histogram(store, month_key):
            raise AggregationFailure("bar chart data")

        monkeypatch.setattr(report_service, "compute_histogram", failing_histogram)

        with pytest.raises(AggregationFailure) as exc_info:
            await compute_combined_data(store, "03")

        assert exc_info.value.detail == "Error fetching combined data."
        assert exc_info.value.operation == "combined data"

    async def test_unexpected_error_cancels_siblings(self, store, sample_products, monkeypatch):
        """Any view error stops the other views and is reported as the combined failure."""
        started = asyncio.Event()
        cancelled = asyncio.Event()

        async def slow_statistics(store, month_key):
            started.set()
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                cancelled.set()
                raise

        async def broken_pie_chart(store, month_key):
            await started.wait()
            raise RuntimeError("connection reset")

        monkeypatch.setattr(report_service, "compute_statistics", slow_statistics)
        monkeypatch.setattr(report_service, "compute_category_distribution", broken_pie_chart)

        with pytest.raises(AggregationFailure) as exc_info:
            await compute_combined_data(store, "03")

        assert exc_info.value.detail == "Error fetching combined data."
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert cancelled.is_set()
