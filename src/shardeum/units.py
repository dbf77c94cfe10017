"""
Unit conversion between wei (smallest unit) and SHM (1 SHM = 10**18 wei).

Arithmetic is delegated to eth-utils; this module only validates input
and formats output the way wallets display balances ("1.0", "0.001").
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from eth_utils import from_wei as _from_wei
from eth_utils import to_wei as _to_wei

WEI_PER_SHM = 10**18
DECIMALS = 18

Amount = Union[str, int, float, Decimal]


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, bool):
        raise ValueError("Amount must be numeric")
    if isinstance(amount, float):
        amount = str(amount)
    try:
        value = Decimal(amount.strip() if isinstance(amount, str) else amount)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"Invalid amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    return value


def to_wei(amount: Amount) -> int:
    """
    Convert a human-readable SHM amount to wei.

    Raises:
        ValueError: If the amount is negative, not numeric, or has more
            than 18 fractional digits.
    """
    value = _to_decimal(amount)
    if value < 0:
        raise ValueError(f"Amount must not be negative: {amount}")
    exponent = value.normalize().as_tuple().exponent
    if isinstance(exponent, int) and -exponent > DECIMALS:
        raise ValueError(f"Too many decimal places (max {DECIMALS}): {amount}")
    if value == 0:
        return 0
    return int(_to_wei(value, "ether"))


def from_wei(value: Union[int, str]) -> Decimal:
    """Convert wei (int or 0x-prefixed hex) to SHM."""
    if isinstance(value, str):
        value = int(value, 16) if value.startswith("0x") else int(value)
    if value < 0:
        raise ValueError(f"Wei value must not be negative: {value}")
    # eth-utils returns a plain int 0 for zero
    return Decimal(_from_wei(value, "ether"))


def format_shm(value: Union[int, str]) -> str:
    """Format wei as a decimal SHM string that always has a fractional part."""
    text = format(from_wei(value).normalize(), "f")
    if "." not in text:
        text += ".0"
    return text
