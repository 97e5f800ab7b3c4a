"""
Async client for the mempool REST API.

The client turns one method call into exactly one transport round trip: it
builds the endpoint path, hands the absolute URL to the injected transport and
decodes the returned bytes. It holds no connection or session state, so a
single instance can serve any number of concurrent calls.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, List, Optional, TypeVar
from urllib.parse import urlsplit

from mempool_api import endpoints
from mempool_api.api import (
    AddressInfo,
    AddressTx,
    AddressUtxo,
    BlockStatus,
    BlockSummary,
    MempoolStats,
    MerkleProof,
    OutputStatus,
    RecommendedFees,
    Status,
    TxInfo,
)
from mempool_api.config import MempoolConfig, default_config
from mempool_api.endpoints import Endpoint
from mempool_api.errors import DecodeError, InvalidBaseUrlError, InvalidRequestError
from mempool_api.http import Http, HttpMethod

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=Http)
T = TypeVar("T")


def _validate_base_url(base_url: str) -> str:
    if not isinstance(base_url, str) or not base_url.strip():
        raise InvalidBaseUrlError("Base URL must be a non-empty string.", code="EMPTY_BASE_URL")
    base_url = base_url.strip()
    parts = urlsplit(base_url)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise InvalidBaseUrlError(
            f"Base URL must be an absolute http(s) URL, got {base_url!r}.", code="INVALID_BASE_URL"
        )
    return base_url


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class AsyncClient(Generic[H]):
    """Typed async client, generic over the :class:`~mempool_api.http.Http` transport."""

    def __init__(self, base_url: str, transport: H) -> None:
        self._base_url = _validate_base_url(base_url)
        self._transport = transport

    @classmethod
    def from_config(cls, transport: H, config: MempoolConfig | None = None) -> "AsyncClient[H]":
        config = config or default_config
        return cls(config.base_url, transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> H:
        return self._transport

    def url_for(self, endpoint: Endpoint[Any], **params: Any) -> str:
        """Absolute URL for ``endpoint``; raises InvalidRequestError on bad parameters."""
        return join_url(self._base_url, endpoint.build_path(**params))

    async def _call(self, endpoint: Endpoint[T], *, body: Optional[bytes] = None, **params: Any) -> T:
        url = self.url_for(endpoint, **params)
        if endpoint.method is not HttpMethod.POST:
            body = None
        logger.debug("%s %s", endpoint.method.value, url, extra={"endpoint": endpoint.name, "url": url})
        payload = await self._transport.send(endpoint.method, url, body)
        if isinstance(payload, (bytearray, memoryview)):
            payload = bytes(payload)
        elif not isinstance(payload, bytes):
            raise DecodeError(
                f"Transport returned {type(payload).__name__}, expected bytes.", code="INVALID_PAYLOAD_TYPE"
            )
        return endpoint.decode(payload)

    async def get_tip_hash(self) -> str:
        """GET ``/blocks/tip/hash``."""
        return await self._call(endpoints.TIP_HASH)

    async def get_tip_height(self) -> int:
        """GET ``/blocks/tip/height``."""
        return await self._call(endpoints.TIP_HEIGHT)

    async def get_block_hash(self, height: int) -> str:
        """GET ``/block-height/:height``."""
        return await self._call(endpoints.BLOCK_HASH, height=height)

    async def get_block(self, block_hash: str) -> BlockSummary:
        """GET ``/block/:hash``."""
        return await self._call(endpoints.BLOCK, block_hash=block_hash)

    async def get_block_status(self, block_hash: str) -> BlockStatus:
        """GET ``/block/:hash/status``."""
        return await self._call(endpoints.BLOCK_STATUS, block_hash=block_hash)

    async def get_block_txids(self, block_hash: str) -> List[str]:
        """GET ``/block/:hash/txids``."""
        return await self._call(endpoints.BLOCK_TXIDS, block_hash=block_hash)

    async def get_blocks(self, height: Optional[int] = None) -> List[BlockSummary]:
        """Recent blocks, or the blocks ending at ``height`` when given."""
        if height is None:
            return await self._call(endpoints.RECENT_BLOCKS)
        return await self._call(endpoints.BLOCKS_FROM_HEIGHT, height=height)

    async def get_recommended_fees(self) -> RecommendedFees:
        """GET ``/v1/fees/recommended``."""
        return await self._call(endpoints.RECOMMENDED_FEES)

    async def get_mempool(self) -> MempoolStats:
        """GET ``/mempool``."""
        return await self._call(endpoints.MEMPOOL)

    async def get_mempool_txids(self) -> List[str]:
        """GET ``/mempool/txids``."""
        return await self._call(endpoints.MEMPOOL_TXIDS)

    async def get_tx(self, txid: str) -> TxInfo:
        """GET ``/tx/:txid``."""
        return await self._call(endpoints.TX, txid=txid)

    async def get_tx_status(self, txid: str) -> Status:
        """GET ``/tx/:txid/status``."""
        return await self._call(endpoints.TX_STATUS, txid=txid)

    async def get_tx_hex(self, txid: str) -> str:
        """GET ``/tx/:txid/hex``."""
        return await self._call(endpoints.TX_HEX, txid=txid)

    async def get_tx_merkle_proof(self, txid: str) -> MerkleProof:
        """GET ``/tx/:txid/merkle-proof``."""
        return await self._call(endpoints.TX_MERKLE_PROOF, txid=txid)

    async def get_tx_outspend(self, txid: str, vout: int) -> OutputStatus:
        """Spending status of output ``vout`` of ``txid``."""
        return await self._call(endpoints.TX_OUTSPEND, txid=txid, vout=vout)

    async def get_address(self, address: str) -> AddressInfo:
        """GET ``/address/:address``."""
        return await self._call(endpoints.ADDRESS, address=address)

    async def get_address_txs(self, address: str, after_txid: Optional[str] = None) -> List[AddressTx]:
        """
        Transaction history for ``address``, newest first.

        Without ``after_txid`` the service returns unconfirmed transactions plus
        the first page of confirmed ones; with it, the next page of confirmed
        transactions after that txid.
        """
        if after_txid is None:
            return await self._call(endpoints.ADDRESS_TXS, address=address)
        return await self._call(endpoints.ADDRESS_TXS_CHAIN, address=address, after_txid=after_txid)

    async def get_address_utxos(self, address: str) -> List[AddressUtxo]:
        """GET ``/address/:address/utxo``."""
        return await self._call(endpoints.ADDRESS_UTXOS, address=address)

    async def broadcast(self, tx_hex: str) -> str:
        """POST a raw transaction as hex to ``/tx``; returns the txid."""
        if not isinstance(tx_hex, str) or not tx_hex.strip():
            raise InvalidRequestError("Transaction hex must be a non-empty string.", code="EMPTY_BODY")
        return await self._call(endpoints.BROADCAST, body=tx_hex.strip().encode("utf-8"))
