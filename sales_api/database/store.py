"""Transaction store module.

Owns the async engine and session factory for the ``products`` table.
A store is constructed explicitly and handed to the services that need it;
``ensure_schema`` and ``close`` bracket its lifetime.
"""
import asyncio
import logging
from collections import Counter
from collections.abc import AsyncIterator, Sequence
from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from sales_api.database.database import Base
from sales_api.exceptions.api_exception import IngestionFailure
from sales_api.models.product import Product
from sales_api.schemas.product import ProductRecord

logger = logging.getLogger(__name__)


class TransactionStore:
    """Durable, month-indexed collection of product transactions."""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_async_engine(database_url, echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        # Serializes bulk writes on this store instance
        self._write_lock = asyncio.Lock()

    def session(self) -> AsyncSession:
        """Open a new session; use as ``async with store.session() as session``."""
        return self.session_factory()

    async def ensure_schema(self) -> None:
        """Create the backing tables if they do not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        await self.engine.dispose()

    async def bulk_insert(
        self,
        records: Sequence[ProductRecord],
        replace: bool = False,
    ) -> int:
        """
        Insert all records in a single transaction.

        Either every record becomes visible or none does. With ``replace``
        the existing rows are deleted inside the same transaction first.

        Args:
            records: Validated product records
            replace: Reload the store wholesale instead of appending

        Returns:
            Number of inserted records

        Raises:
            IngestionFailure: On a duplicate id or any rejected write
        """
        id_counts = Counter(record.id for record in records)
        duplicates = sorted(i for i, count in id_counts.items() if count > 1)
        if duplicates:
            raise IngestionFailure(f"Duplicate product id(s) in batch: {duplicates}")

        rows = [_to_row(record) for record in records]

        async with self._write_lock:
            try:
                async with self.session() as session:
                    async with session.begin():
                        if replace:
                            await session.execute(delete(Product))
                        if rows:
                            await session.execute(insert(Product), rows)
            except IntegrityError as exc:
                logger.exception("Bulk insert of %d product(s) rejected", len(rows))
                raise IngestionFailure(
                    "Bulk insert rejected: duplicate id or missing required field"
                ) from exc
            except SQLAlchemyError as exc:
                logger.exception("Bulk insert of %d product(s) failed", len(rows))
                raise IngestionFailure() from exc

        return len(rows)

    async def query_by_month(
        self,
        month_key: str,
        sold: Optional[bool] = None,
    ) -> AsyncIterator[Product]:
        """
        Stream products whose sale month matches, optionally filtered by sold status.

        The generator holds a session open until it is exhausted or closed;
        callers that may stop early should wrap it in ``contextlib.aclosing``.
        """
        query = select(Product).where(Product.sale_month == month_key)
        if sold is not None:
            query = query.where(Product.sold.is_(sold))

        async with self.session() as session:
            result = await session.stream_scalars(query)
            async for product in result:
                yield product


def _to_row(record: ProductRecord) -> dict:
    """Map a validated record onto ``products`` column attributes."""
    return {
        "id": record.id,
        "title": record.title,
        "price": record.price,
        "description": record.description,
        "category": record.category,
        "image": record.image,
        "sold": record.sold,
        "date_of_sale": record.date_of_sale,
        "sale_month": record.month_key,
    }
