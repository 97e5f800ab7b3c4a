"""
Static catalogue of the service endpoints the client knows about.

Each :class:`Endpoint` ties an HTTP method and a path template to the decoder
for its response. Building a path and decoding a payload are pure, synchronous
steps; only the transport call in between does I/O.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Tuple, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter, ValidationError

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
from mempool_api.errors import DecodeError, InvalidRequestError
from mempool_api.http import HttpMethod

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

Decoder = Callable[[bytes], T]

_FORMATTER = string.Formatter()


def _preview(payload: bytes, limit: int = 80) -> str:
    text = payload[:limit].decode("utf-8", errors="replace")
    return text + ("..." if len(payload) > limit else "")


def decode_text(payload: bytes) -> str:
    """Decode a plain-text body, rejecting empty or non UTF-8 payloads."""
    try:
        text = payload.decode("utf-8").strip()
    except UnicodeDecodeError as exc:
        raise DecodeError("Response is not valid UTF-8.", payload=payload) from exc
    if not text:
        raise DecodeError("Response body is empty.", payload=payload)
    return text


def decode_int(payload: bytes) -> int:
    text = decode_text(payload)
    try:
        return int(text)
    except ValueError as exc:
        raise DecodeError(f"Expected an integer, got {_preview(payload)!r}.", payload=payload) from exc


def _validator(adapter: Callable[[bytes], T], expected: str) -> Decoder[T]:
    def decode(payload: bytes) -> T:
        try:
            return adapter(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"Response does not match {expected}: {exc.error_count()} error(s).",
                payload=payload,
            ) from exc

    return decode


def json_model(model: Type[M]) -> Decoder[M]:
    """Decoder for a JSON object described by ``model``."""
    return _validator(model.model_validate_json, model.__name__)


def json_list(item_type: Any) -> Decoder[List[Any]]:
    """Decoder for a JSON array whose items are ``item_type``."""
    adapter = TypeAdapter(List[item_type])
    name = getattr(item_type, "__name__", str(item_type))
    return _validator(adapter.validate_json, f"list[{name}]")


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """One service endpoint: method, path template and response decoder."""

    name: str
    method: HttpMethod
    path: str
    decoder: Decoder[T]

    @property
    def parameters(self) -> Tuple[str, ...]:
        return tuple(field for _, field, _, _ in _FORMATTER.parse(self.path) if field is not None)

    def build_path(self, **params: Any) -> str:
        """
        Fill the path template.

        Every placeholder needs a non-empty value and unknown parameters are
        rejected. Values are percent-encoded so they cannot add path segments;
        their format is left for the service to judge.
        """
        expected = self.parameters
        unknown = sorted(set(params) - set(expected))
        if unknown:
            raise InvalidRequestError(
                f"Unexpected parameter(s) for {self.name}: {', '.join(unknown)}.", code="UNKNOWN_PARAMETER"
            )
        encoded = {}
        for field in expected:
            value = params.get(field)
            if value is None or not str(value).strip():
                raise InvalidRequestError(
                    f"Missing value for path parameter '{field}' of {self.name}.", code="MISSING_PARAMETER"
                )
            encoded[field] = quote(str(value).strip(), safe="")
        return self.path.format(**encoded)

    def decode(self, payload: bytes) -> T:
        return self.decoder(payload)


TIP_HASH = Endpoint("tip_hash", HttpMethod.GET, "/blocks/tip/hash", decode_text)
TIP_HEIGHT = Endpoint("tip_height", HttpMethod.GET, "/blocks/tip/height", decode_int)
BLOCK_HASH = Endpoint("block_hash", HttpMethod.GET, "/block-height/{height}", decode_text)
BLOCK = Endpoint("block", HttpMethod.GET, "/block/{block_hash}", json_model(BlockSummary))
BLOCK_STATUS = Endpoint("block_status", HttpMethod.GET, "/block/{block_hash}/status", json_model(BlockStatus))
BLOCK_TXIDS = Endpoint("block_txids", HttpMethod.GET, "/block/{block_hash}/txids", json_list(str))
RECENT_BLOCKS = Endpoint("recent_blocks", HttpMethod.GET, "/blocks", json_list(BlockSummary))
BLOCKS_FROM_HEIGHT = Endpoint("blocks_from_height", HttpMethod.GET, "/blocks/{height}", json_list(BlockSummary))

RECOMMENDED_FEES = Endpoint("recommended_fees", HttpMethod.GET, "/v1/fees/recommended", json_model(RecommendedFees))
MEMPOOL = Endpoint("mempool", HttpMethod.GET, "/mempool", json_model(MempoolStats))
MEMPOOL_TXIDS = Endpoint("mempool_txids", HttpMethod.GET, "/mempool/txids", json_list(str))

TX = Endpoint("tx", HttpMethod.GET, "/tx/{txid}", json_model(TxInfo))
TX_STATUS = Endpoint("tx_status", HttpMethod.GET, "/tx/{txid}/status", json_model(Status))
TX_HEX = Endpoint("tx_hex", HttpMethod.GET, "/tx/{txid}/hex", decode_text)
TX_MERKLE_PROOF = Endpoint("tx_merkle_proof", HttpMethod.GET, "/tx/{txid}/merkle-proof", json_model(MerkleProof))
TX_OUTSPEND = Endpoint("tx_outspend", HttpMethod.GET, "/tx/{txid}/outspend/{vout}", json_model(OutputStatus))
BROADCAST = Endpoint("broadcast", HttpMethod.POST, "/tx", decode_text)

ADDRESS = Endpoint("address", HttpMethod.GET, "/address/{address}", json_model(AddressInfo))
ADDRESS_TXS = Endpoint("address_txs", HttpMethod.GET, "/address/{address}/txs", json_list(AddressTx))
ADDRESS_TXS_CHAIN = Endpoint(
    "address_txs_chain", HttpMethod.GET, "/address/{address}/txs/chain/{after_txid}", json_list(AddressTx)
)
ADDRESS_UTXOS = Endpoint("address_utxos", HttpMethod.GET, "/address/{address}/utxo", json_list(AddressUtxo))

CATALOGUE: Tuple[Endpoint[Any], ...] = (
    TIP_HASH,
    TIP_HEIGHT,
    BLOCK_HASH,
    BLOCK,
    BLOCK_STATUS,
    BLOCK_TXIDS,
    RECENT_BLOCKS,
    BLOCKS_FROM_HEIGHT,
    RECOMMENDED_FEES,
    MEMPOOL,
    MEMPOOL_TXIDS,
    TX,
    TX_STATUS,
    TX_HEX,
    TX_MERKLE_PROOF,
    TX_OUTSPEND,
    BROADCAST,
    ADDRESS,
    ADDRESS_TXS,
    ADDRESS_TXS_CHAIN,
    ADDRESS_UTXOS,
)
