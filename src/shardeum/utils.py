from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

BLOCK_TAGS = frozenset({"latest", "earliest", "pending", "safe", "finalized"})


def utc_now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def hex_to_int(value: Union[str, int, None]) -> int:
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected hex string or int, got {type(value).__name__}")
    return int(value, 16)


def to_block_id(block: Union[str, int]) -> str:
    """Normalize a block number or tag to its JSON-RPC form."""
    if isinstance(block, bool):
        raise TypeError("Block identifier must be an int or a string")
    if isinstance(block, int):
        if block < 0:
            raise ValueError(f"Block number must be non-negative: {block}")
        return hex(block)
    if block in BLOCK_TAGS:
        return block
    if block.startswith("0x"):
        int(block, 16)
        return block
    if block.isdigit():
        return hex(int(block))
    raise ValueError(f"Invalid block identifier: {block!r}")


def text_to_hex(data: Union[str, bytes]) -> str:
    """Hex-encode data for web3_sha3; 0x-prefixed strings pass through."""
    if isinstance(data, bytes):
        return "0x" + data.hex()
    if data.startswith("0x"):
        return data
    return "0x" + data.encode("utf-8").hex()
