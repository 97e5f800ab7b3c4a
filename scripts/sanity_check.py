"""Minimal live checks against a mempool instance using the httpx transport."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from mempool_api import AsyncClient  # noqa: E402
from mempool_api.config import MempoolConfig  # noqa: E402
from mempool_api.httpx_transport import HttpxTransport  # noqa: E402
from mempool_api.logging_config import configure_logging  # noqa: E402
from mempool_api.scan import fetch_address_history  # noqa: E402

# Override via env; defaults to a well-known address with a short history.
SAMPLE_ADDRESS = os.getenv("MEMPOOL_SAMPLE_ADDRESS", "1wiz18xYmhRX6xStj2b9t1rwWX4GKUgpv")
# Opt-in to the paginated history fetch (several requests).
RUN_HISTORY = os.getenv("RUN_HISTORY_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    config = MempoolConfig.from_env()
    configure_logging(config)
    async with HttpxTransport(config) as transport:
        client = AsyncClient.from_config(transport, config)

        print("Tip height:", await client.get_tip_height())
        tip_hash = await client.get_tip_hash()
        print("Tip hash:", tip_hash)
        print("Tip block:", await client.get_block(tip_hash))
        print("Recommended fees:", await client.get_recommended_fees())
        print("Address:", await client.get_address(SAMPLE_ADDRESS))

        if RUN_HISTORY:
            history = await fetch_address_history(client, SAMPLE_ADDRESS)
            print("History length:", len(history))


if __name__ == "__main__":
    asyncio.run(main())
