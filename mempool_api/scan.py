"""
Address-history helpers built on top of :class:`AsyncClient`.

These issue many client calls per invocation, so they live outside the client
itself. Errors from any call propagate to the caller.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from mempool_api.api import AddressTx
from mempool_api.client import AsyncClient

logger = logging.getLogger(__name__)

# Confirmed transactions returned per page by /address/:address/txs/chain.
DEFAULT_PAGE_SIZE = 25
DEFAULT_GAP_LIMIT = 20
DEFAULT_BATCH_SIZE = 5


@dataclass(slots=True)
class ScanResult:
    """Histories keyed by address, plus the index of the last address with activity."""

    histories: Dict[str, List[AddressTx]] = field(default_factory=dict)
    last_active: Optional[int] = None


async def fetch_address_history(
    client: AsyncClient, address: str, *, page_size: int = DEFAULT_PAGE_SIZE
) -> List[AddressTx]:
    """Follow ``after_txid`` pagination until a short page is returned."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    history: List[AddressTx] = []
    after_txid: Optional[str] = None
    while True:
        page = await client.get_address_txs(address, after_txid=after_txid)
        history.extend(page)
        if len(page) < page_size:
            return history
        after_txid = page[-1].txid


async def _fetch_batch(client: AsyncClient, batch: List[str], page_size: int) -> List[List[AddressTx]]:
    """Fetch a batch concurrently; on the first failure cancel the rest before raising."""
    tasks = [
        asyncio.ensure_future(fetch_address_history(client, address, page_size=page_size))
        for address in batch
    ]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def scan_addresses(
    client: AsyncClient,
    addresses: Iterable[str],
    *,
    gap_limit: int = DEFAULT_GAP_LIMIT,
    batch_size: int = DEFAULT_BATCH_SIZE,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ScanResult:
    """
    Fetch histories for ``addresses`` in order until the gap limit is exceeded.

    ``addresses`` may be a lazy, unbounded iterator; it is consumed
    ``batch_size`` items at a time and histories within a batch are fetched
    concurrently. Scanning stops after the batch in which more than
    ``gap_limit`` addresses without history have been seen in total.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    result = ScanResult()
    unused = 0
    index = 0
    remaining = iter(addresses)
    while unused <= gap_limit:
        batch = list(itertools.islice(remaining, batch_size))
        if not batch:
            break
        histories = await _fetch_batch(client, batch, page_size)
        for offset, (address, history) in enumerate(zip(batch, histories)):
            result.histories[address] = history
            if history:
                result.last_active = index + offset
            else:
                unused += 1
        index += len(batch)
    logger.debug(
        "Scanned %d address(es), last active index %s", len(result.histories), result.last_active
    )
    return result
