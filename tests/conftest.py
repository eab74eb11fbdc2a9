"""Pytest fixtures for async SQLite test stores."""
import httpx
import pytest
import pytest_asyncio

from sales_api.app import create_app
from sales_api.database.store import TransactionStore
from sales_api.services.ingest_service import ingest_products


@pytest.fixture
def raw_product():
    """Factory for feed-shaped raw records."""

    def _make(id, price, category, sold, date_of_sale, **overrides):
        record = {
            "id": id,
            "title": f"Product {id}",
            "price": price,
            "description": f"Description of product {id}",
            "category": category,
            "image": f"https://example.com/images/{id}.jpg",
            "sold": sold,
            "dateOfSale": date_of_sale,
        }
        record.update(overrides)
        return record

    return _make


@pytest_asyncio.fixture
async def store(tmp_path):
    """Create a fresh file-backed SQLite store for each test."""
    store = TransactionStore(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await store.ensure_schema()
    yield store
    await store.close()


@pytest.fixture
def sample_batch(raw_product):
    """Raw batch spanning March of two years and April."""
    return [
        # March 2021
        raw_product(1, 50, "A", True, "2021-03-01T10:00:00+05:30"),
        raw_product(2, 150, "B", False, "2021-03-15T08:30:00+05:30"),
        raw_product(4, "100.01", "electronics", False, "2021-03-20T23:59:59+05:30"),
        raw_product(5, 950, "a", True, "2021-03-31T00:00:00+05:30"),
        # March 2022 shares the month key with March 2021
        raw_product(3, 100, "A", True, "2022-03-10T12:00:00+05:30"),
        # April 2021
        raw_product(6, 900, "B", False, "2021-04-02T09:00:00+05:30"),
        raw_product(7, 0, "A", True, "2021-04-28T18:45:00+05:30"),
    ]


@pytest_asyncio.fixture
async def sample_products(store, sample_batch):
    """Ingest the sample batch into the store."""
    await ingest_products(store, sample_batch)
    return sample_batch


@pytest_asyncio.fixture
async def client(store):
    """HTTP client bound to an app built around the test store."""
    app = create_app(store)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
