"""
Contract call encoding for eth_call.

ABI encoding/decoding is done with eth-abi; function selectors are the
first 4 bytes of the Keccak-256 hash of the canonical signature.
"""

from __future__ import annotations

from typing import Any

from eth_abi import decode, encode
from eth_hash.auto import keccak

# Minimal ERC-20 ABI (balanceOf, decimals, symbol)
ERC20_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "decimals",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
    },
    {
        "type": "function",
        "name": "symbol",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
    },
]


def keccak256(data: bytes) -> bytes:
    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    return keccak(data)


def _find_function(abi: list, function_name: str) -> dict:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def function_selector(signature: str) -> bytes:
    """Selector for a canonical signature such as ``transfer(address,uint256)``."""
    return keccak256(signature.encode("utf-8"))[:4]


def encode_function_call(abi: list, function_name: str, args: list) -> str:
    """
    ABI-encode a function call.

    Args:
        abi: Contract ABI
        function_name: Function name to call
        args: Function arguments

    Returns:
        0x-prefixed hex encoded calldata
    """
    func = _find_function(abi, function_name)
    input_types = [inp["type"] for inp in func.get("inputs", [])]
    if len(args) != len(input_types):
        raise ValueError(
            f"{function_name} expects {len(input_types)} argument(s), got {len(args)}"
        )

    selector = function_selector(f"{function_name}({','.join(input_types)})")
    encoded_args = encode(input_types, args) if args else b""
    return "0x" + selector.hex() + encoded_args.hex()


def decode_function_result(abi: list, function_name: str, data: str) -> Any:
    """
    ABI-decode a function call result.

    Returns:
        Decoded result (single value or tuple), None for functions
        without outputs
    """
    func = _find_function(abi, function_name)
    output_types = [out["type"] for out in func.get("outputs", [])]
    if not output_types:
        return None

    raw = bytes.fromhex(data[2:] if data.startswith("0x") else data)
    decoded = decode(output_types, raw)

    if len(decoded) == 1:
        return decoded[0]
    return decoded
