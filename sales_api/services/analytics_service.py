"""Analytics service module.

Computes the monthly views over stored product transactions:
- Statistics: total sale amount plus sold / not sold counts
- Bar chart: item counts per fixed price bucket
- Pie chart: item counts per category

All views are scoped by the two-digit month key only, so records from
different years that share a calendar month are aggregated together.
"""
import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import and_, case, func, select
from sqlalchemy.exc import SQLAlchemyError

from sales_api.database.store import TransactionStore
from sales_api.exceptions.api_exception import AggregationFailure, InvalidMonthError
from sales_api.models.product import Product
from sales_api.schemas.analytics import CategoryCount, PriceRangeCount, StatisticsResponse

logger = logging.getLogger(__name__)

# =============================================================================
# MONTHS
# =============================================================================

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def month_key_for(month: Optional[str]) -> str:
    """Map a month name (e.g. 'March') to its two-digit key ('03').

    Raises InvalidMonthError for anything but an exact month name.
    """
    if not month or month not in MONTHS:
        raise InvalidMonthError()
    return f"{MONTHS.index(month) + 1:02d}"


# =============================================================================
# PRICE BUCKETS
# =============================================================================
# (lower, upper, label): lower is exclusive except for the first bucket,
# upper is inclusive; None means unbounded.

PRICE_BUCKETS = [
    (Decimal("0"), Decimal("100"), "0 - 100"),
    (Decimal("100"), Decimal("200"), "101 - 200"),
    (Decimal("200"), Decimal("300"), "201 - 300"),
    (Decimal("300"), Decimal("400"), "301 - 400"),
    (Decimal("400"), Decimal("500"), "401 - 500"),
    (Decimal("500"), Decimal("600"), "501 - 600"),
    (Decimal("600"), Decimal("700"), "601 - 700"),
    (Decimal("700"), Decimal("800"), "701 - 800"),
    (Decimal("800"), Decimal("900"), "801 - 900"),
    (Decimal("900"), None, "901-above"),
]

BUCKET_ORDER = {label: position for position, (_, _, label) in enumerate(PRICE_BUCKETS)}


def _price_range_expression():
    """SQL CASE expression assigning each row its bucket label."""
    whens = []
    for position, (lower, upper, label) in enumerate(PRICE_BUCKETS):
        lower_bound = Product.price >= lower if position == 0 else Product.price > lower
        condition = lower_bound if upper is None else and_(lower_bound, Product.price <= upper)
        whens.append((condition, label))
    return case(*whens, else_=None)


# =============================================================================
# VIEWS
# =============================================================================

async def compute_statistics(store: TransactionStore, month_key: str) -> StatisticsResponse:
    """
    Compute sale totals for a month.

    The sale amount sums every record in the month regardless of its sold
    flag; the two counts split the same records by sold status. An empty
    month yields zeros for all three fields.
    """
    query = select(
        func.sum(Product.price).label("total_sale_amount"),
        func.sum(case((Product.sold.is_(True), 1), else_=0)).label("total_sold_items"),
        func.sum(case((Product.sold.is_(False), 1), else_=0)).label("total_not_sold_items"),
    ).where(Product.sale_month == month_key)

    try:
        async with store.session() as session:
            row = (await session.execute(query)).one()
    except SQLAlchemyError as exc:
        logger.exception("Statistics query failed for month %s", month_key)
        raise AggregationFailure("statistics") from exc

    return StatisticsResponse(
        totalSaleAmount=row.total_sale_amount or 0,
        totalSoldItems=row.total_sold_items or 0,
        totalNotSoldItems=row.total_not_sold_items or 0,
    )


async def compute_histogram(store: TransactionStore, month_key: str) -> list[PriceRangeCount]:
    """Count items per price bucket for a month; empty buckets are omitted."""
    price_range = _price_range_expression().label("price_range")
    query = (
        select(price_range, func.count().label("item_count"))
        .where(Product.sale_month == month_key)
        .group_by(price_range)
    )

    try:
        async with store.session() as session:
            rows = (await session.execute(query)).all()
    except SQLAlchemyError as exc:
        logger.exception("Bar chart query failed for month %s", month_key)
        raise AggregationFailure("bar chart data") from exc

    items = [
        PriceRangeCount(priceRange=row.price_range, itemCount=row.item_count)
        for row in rows
        if row.price_range is not None
    ]
    items.sort(key=lambda item: BUCKET_ORDER[item.price_range])
    return items


async def compute_category_distribution(
    store: TransactionStore,
    month_key: str,
) -> list[CategoryCount]:
    """Count items per exact category label for a month."""
    query = (
        select(Product.category, func.count().label("item_count"))
        .where(Product.sale_month == month_key)
        .group_by(Product.category)
        .order_by(Product.category)
    )

    try:
        async with store.session() as session:
            rows = (await session.execute(query)).all()
    except SQLAlchemyError as exc:
        logger.exception("Pie chart query failed for month %s", month_key)
        raise AggregationFailure("pie chart data") from exc

    return [CategoryCount(category=row.category, itemCount=row.item_count) for row in rows]
