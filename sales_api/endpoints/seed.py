"""Seed data endpoint module."""
from fastapi import APIRouter, Depends

from sales_api.database.database import get_store
from sales_api.database.store import TransactionStore
from sales_api.schemas.product import InitializeResponse
from sales_api.services.feed_client import fetch_seed_batch
from sales_api.services.ingest_service import ingest_products
from sales_api.settings import settings

router = APIRouter(tags=["seed"])


@router.get("/initialize-database", response_model=InitializeResponse)
async def initialize_database(
    store: TransactionStore = Depends(get_store),
) -> InitializeResponse:
    """
    Fetch the remote seed feed and load it into the store.

    The whole batch is inserted in one transaction; any failure leaves
    the store unchanged and is reported as a fetch,
    validation or ingestion error.
    """
    raw_batch = await fetch_seed_batch(
        settings.SEED_DATA_URL,
        timeout=settings.FEED_TIMEOUT_SECONDS,
    )
    report = await ingest_products(store, raw_batch)

    return InitializeResponse(
        message="Database initialized with seed data.",
        inserted=report.inserted_count,
    )
