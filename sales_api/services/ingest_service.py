"""Ingestion service module.

Validates a raw seed batch and writes it to the store as one transaction.
Every record is validated before anything is written, so a bad record
late in the batch can never leave earlier records committed.
"""
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from sales_api.database.store import TransactionStore
from sales_api.exceptions.api_exception import ValidationFailure
from sales_api.schemas.product import IngestReport, ProductRecord

logger = logging.getLogger(__name__)


def validate_batch(raw_batch: Sequence[dict[str, Any]]) -> list[ProductRecord]:
    """Coerce raw feed records into ProductRecord, failing on the first bad one."""
    records = []
    for index, raw in enumerate(raw_batch):
        try:
            records.append(ProductRecord.model_validate(raw))
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise ValidationFailure(f"Invalid record at position {index}: {errors}") from exc
    return records


async def ingest_products(
    store: TransactionStore,
    raw_batch: Sequence[dict[str, Any]],
    replace: bool = False,
) -> IngestReport:
    """
    Validate and persist a raw batch atomically.

    Args:
        store: Target transaction store
        raw_batch: Raw records as delivered by the feed
        replace: Replace the store contents instead of appending

    Returns:
        IngestReport with the inserted record count

    Raises:
        ValidationFailure: If any record cannot be coerced
        IngestionFailure: If the store rejects the batch
    """
    logger.info("Ingesting batch of %d record(s)", len(raw_batch))
    records = validate_batch(raw_batch)
    inserted = await store.bulk_insert(records, replace=replace)
    logger.info("Ingested %d product(s)", inserted)
    return IngestReport(insertedCount=inserted)
