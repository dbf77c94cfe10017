"""
Errors raised by the Shardeum client.

Every failure is surfaced to the caller; nothing is retried locally.
The CLI maps each class to its ``exit_code``.
"""

from __future__ import annotations

from typing import Any, Optional


class ShardeumError(RuntimeError):
    exit_code: int = 1


class WalletNotFoundError(ShardeumError):
    """No wallet (private key) is available in this environment."""

    exit_code = 2


class WalletNotConnectedError(ShardeumError):
    """An operation needs a signer but connect_wallet() has not succeeded."""

    exit_code = 2


class UserRejectedError(ShardeumError):
    """The wallet owner declined the request."""

    exit_code = 3
    code = 4001

    def __init__(self, message: str = "User rejected the request") -> None:
        super().__init__(message)


class RpcError(ShardeumError):
    """Error member of a JSON-RPC response, passed through verbatim."""

    exit_code = 4

    def __init__(self, code: Optional[int], message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        text = f"RPC error {code}: {message}"
        if data is not None:
            text += f" (data: {data})"
        super().__init__(text)


class TransportError(ShardeumError):
    """HTTP, DNS, timeout, or body decoding failure."""

    exit_code = 5
