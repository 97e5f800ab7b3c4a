import copy
import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

TXID = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
BLOCK_HASH = "00000000000000000002a7c4c1e48d76c5a37902165a270156b7a8d72728a054"

TX_PAYLOAD = {
    "txid": TXID,
    "version": 2,
    "locktime": 0,
    "vin": [
        {
            "txid": "c3a2d2b3e1f0a9b8c7d6e5f4a3b2c1d0e9f8a7b6c5d4e3f2a1b0c9d8e7f6a5b4",
            "vout": 1,
            "prevout": {
                "scriptpubkey": "0014751e76e8199196d454941c45d1b3a323f1433bd6",
                "scriptpubkey_asm": "OP_0 OP_PUSHBYTES_20 751e76e8199196d454941c45d1b3a323f1433bd6",
                "scriptpubkey_type": "v0_p2wpkh",
                "scriptpubkey_address": "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4",
                "value": 150000,
            },
            "scriptsig": "",
            "scriptsig_asm": "",
            "witness": ["3044022000", "02a1633cafcc01ebfb6d78e39f687a1f0995c62fc95f51ead10a02ee0be551b5dc"],
            "is_coinbase": False,
            "sequence": 4294967293,
        }
    ],
    "vout": [
        {
            "scriptpubkey": "6a04deadbeef",
            "scriptpubkey_asm": "OP_RETURN OP_PUSHBYTES_4 deadbeef",
            "scriptpubkey_type": "op_return",
            "value": 0,
        },
        {
            "scriptpubkey": "0014751e76e8199196d454941c45d1b3a323f1433bd6",
            "scriptpubkey_asm": "OP_0 OP_PUSHBYTES_20 751e76e8199196d454941c45d1b3a323f1433bd6",
            "scriptpubkey_type": "v0_p2wpkh",
            "scriptpubkey_address": "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4",
            "value": 148590,
        },
    ],
    "size": 222,
    "weight": 561,
    "sigops": 1,
    "fee": 1410,
    "status": {
        "confirmed": True,
        "block_height": 800000,
        "block_hash": BLOCK_HASH,
        "block_time": 1690168629,
    },
}

BLOCK_PAYLOAD = {
    "id": BLOCK_HASH,
    "height": 800000,
    "version": 536870912,
    "timestamp": 1690168629,
    "tx_count": 3721,
    "size": 1634032,
    "weight": 3993379,
    "merkle_root": "8f6b5b3c4a4e8d8d2b1f5f0b5c7f0b7e9f5b9e1d2c3b4a5f6e7d8c9b0a1f2e3d",
    "previousblockhash": "00000000000000000000ac8c5f5e8e6b4e3b5f4f3a9a1d1c8d3c2b2a1b0f9e8d",
    "mediantime": 1690165851,
    "nonce": 3828575046,
    "bits": 386193223,
    "difficulty": 53911173001054.59,
    "extras": {"medianFee": 12},
}


@pytest.fixture
def tx_payload():
    return copy.deepcopy(TX_PAYLOAD)


@pytest.fixture
def block_payload():
    return copy.deepcopy(BLOCK_PAYLOAD)
