"""
Response shapes returned by the mempool REST API.

Models are immutable and tolerate fields the service adds later; field names
follow the service's snake_case JSON except for the fee estimates, which the
service reports in camelCase.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Common configuration for all response models."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class RecommendedFees(ApiModel):
    """Response to GET recommended fees, in sat/vB."""

    fastest_fee: int = Field(alias="fastestFee")
    half_hour_fee: int = Field(alias="halfHourFee")
    hour_fee: int = Field(alias="hourFee")
    economy_fee: Optional[int] = Field(default=None, alias="economyFee")
    minimum_fee: Optional[int] = Field(default=None, alias="minimumFee")


class Status(ApiModel):
    """Confirmation status of a transaction."""

    confirmed: bool
    block_height: Optional[int] = None
    block_hash: Optional[str] = None
    block_time: Optional[int] = None


class Vout(ApiModel):
    scriptpubkey: str
    scriptpubkey_asm: str
    scriptpubkey_type: str
    # Absent for outputs without a standard address (e.g. OP_RETURN).
    scriptpubkey_address: str = ""
    value: int


class Vin(ApiModel):
    txid: str
    vout: int
    # Null for coinbase inputs.
    prevout: Optional[Vout] = None
    scriptsig: str
    scriptsig_asm: str
    witness: List[str] = Field(default_factory=list)
    is_coinbase: bool
    sequence: int


class TxInfo(ApiModel):
    """A transaction as returned by GET /tx/:txid."""

    txid: str
    version: int
    locktime: int
    vin: List[Vin]
    vout: List[Vout]
    size: int
    weight: int
    sigops: Optional[int] = None
    fee: int
    status: Status


class AddressTx(TxInfo):
    """Element of the response to GET /address/:address/txs."""


class MempoolStats(ApiModel):
    """Response to GET /mempool."""

    count: int
    vsize: int
    total_fee: int
    # (fee rate, vsize) pairs.
    fee_histogram: List[Tuple[float, int]]


class BlockSummary(ApiModel):
    """A block header plus summary counters, as returned by GET /block/:hash."""

    id: str
    height: int
    version: int
    timestamp: int
    tx_count: int
    size: int
    weight: int
    merkle_root: str
    previousblockhash: Optional[str] = None
    mediantime: int
    nonce: int
    bits: int
    difficulty: float


class AddressStats(ApiModel):
    funded_txo_count: int
    funded_txo_sum: int
    spent_txo_count: int
    spent_txo_sum: int
    tx_count: int


class AddressInfo(ApiModel):
    """Response to GET /address/:address."""

    address: str
    chain_stats: AddressStats
    mempool_stats: AddressStats


class MerkleProof(ApiModel):
    block_height: int
    merkle: List[str]
    pos: int


class AddressUtxo(ApiModel):
    txid: str
    vout: int
    value: int
    status: Status


class OutputStatus(ApiModel):
    """Response to GET /tx/:txid/outspend/:vout."""

    spent: bool
    txid: Optional[str] = None
    vin: Optional[int] = None
    status: Optional[Status] = None


class BlockStatus(ApiModel):
    in_best_chain: bool
    height: Optional[int] = None
    next_best: Optional[str] = None
