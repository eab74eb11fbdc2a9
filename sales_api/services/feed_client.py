"""Seed feed client module.

Fetches the raw product transaction batch from the remote JSON feed.
Failures are reported as FetchFailure and never retried here.
"""
import logging
from typing import Any, Optional

import httpx

from sales_api.exceptions.api_exception import FetchFailure

logger = logging.getLogger(__name__)


async def fetch_seed_batch(
    url: str,
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[dict[str, Any]]:
    """
    Download the seed batch.

    Args:
        url: Feed URL returning a JSON array of records
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used to stub the network)

    Returns:
        List of raw, loosely-typed record dictionaries

    Raises:
        FetchFailure: If the feed is unreachable or the payload is not a list of objects
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url)
            response.raise_for_status()
            payload = response.json()
    except httpx.HTTPError as exc:
        logger.exception("Fetching seed data from %s failed", url)
        raise FetchFailure(f"Failed to fetch seed data: {exc}") from exc
    except ValueError as exc:
        logger.exception("Seed feed at %s returned invalid JSON", url)
        raise FetchFailure("Seed feed returned invalid JSON") from exc

    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        raise FetchFailure("Seed feed did not return a list of records")

    logger.info("Fetched %d raw record(s) from %s", len(payload), url)
    return payload
