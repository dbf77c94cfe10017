"""
Transaction Builder - Build value-transfer transactions.

Builds legacy (gasPrice) transactions in the dict shape eth-account
signs. Network lookups (nonce, fee quote) are done by the caller.
"""

from __future__ import annotations

from typing import Any, Optional

from eth_utils import is_address, to_checksum_address

# Gas used by a plain value transfer with no calldata
TRANSFER_GAS = 21_000

# Transaction fields that JSON-RPC expects as hex quantities
_QUANTITY_FIELDS = ("value", "nonce", "gas", "gasPrice", "maxFeePerGas", "maxPriorityFeePerGas", "chainId")


def require_address(address: str, field: str = "address") -> str:
    """Validate an address and return it EIP-55 checksummed.

    eth-account requires checksummed addresses in transaction fields.
    """
    if not isinstance(address, str) or not is_address(address):
        raise ValueError(f"Invalid {field}: {address!r}")
    return to_checksum_address(address)


def build_transfer_tx(
    to: str,
    value: int,
    nonce: int,
    gas_price: int,
    chain_id: int,
    gas_limit: Optional[int] = None,
) -> dict[str, Any]:
    """
    Build an unsigned value transfer.

    Args:
        to: Recipient address
        value: Amount in wei
        nonce: Sender nonce
        gas_price: Fee per gas unit in wei
        chain_id: Target chain id
        gas_limit: Gas limit (default: 21000)

    Returns:
        Unsigned transaction dict
    """
    if value < 0:
        raise ValueError(f"Value must not be negative: {value}")
    return {
        "to": require_address(to, "recipient"),
        "value": value,
        "nonce": nonce,
        "gas": gas_limit or TRANSFER_GAS,
        "gasPrice": gas_price,
        "chainId": chain_id,
    }


def to_rpc_tx(tx: dict[str, Any]) -> dict[str, Any]:
    """Encode integer quantities as hex strings for JSON-RPC parameters."""
    encoded = dict(tx)
    for key in _QUANTITY_FIELDS:
        value = encoded.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            encoded[key] = hex(value)
    return encoded
