"""
Wallet connector.

``Wallet`` plays the part of a browser's injected provider: it holds a key
and asks its owner to approve each request through an ``approve`` callback
(an interactive prompt in the CLI). ``Wallet.connect()`` returns a
``Signer`` bound to that key's account.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from ..errors import UserRejectedError
from .keys import load_private_key

logger = logging.getLogger(__name__)

# Receives an EIP-1193 style request: {"method": ..., "params": [...]}
ApproveCallback = Callable[[dict[str, Any]], bool]


def approve_all(request: dict[str, Any]) -> bool:
    return True


class Wallet:
    """Key holder that signs only what its owner approves."""

    def __init__(self, private_key: str, approve: Optional[ApproveCallback] = None) -> None:
        self._account: LocalAccount = Account.from_key(private_key)
        self._approve = approve or approve_all

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None, approve: Optional[ApproveCallback] = None) -> "Wallet":
        """
        Build a wallet from PRIVATE_KEY in the environment or ~/.shardeum/.env.

        Raises:
            WalletNotFoundError: If no key is configured
        """
        return cls(load_private_key(env_path), approve=approve)

    @property
    def address(self) -> str:
        return self._account.address

    def request_approval(self, method: str, params: list) -> None:
        if not self._approve({"method": method, "params": params}):
            logger.info("%s declined for %s", method, self.address)
            raise UserRejectedError(f"User rejected {method}")

    def connect(self) -> "Signer":
        """
        Ask for account access and return a signer for the account.

        Raises:
            UserRejectedError: If the owner declines
        """
        self.request_approval("eth_requestAccounts", [])
        return Signer(self._account, self)


class Signer:
    """Authorized signing handle bound to one account."""

    def __init__(self, account: LocalAccount, wallet: Wallet) -> None:
        self._account = account
        self._wallet = wallet

    @property
    def address(self) -> str:
        return self._account.address

    def sign_transaction(self, tx: dict[str, Any]) -> str:
        """
        Sign a transaction after the owner approves it.

        Returns:
            0x-prefixed raw signed transaction

        Raises:
            UserRejectedError: If the owner declines
        """
        self._wallet.request_approval("eth_sendTransaction", [dict(tx, **{"from": self.address})])
        signed = self._account.sign_transaction(tx)
        return "0x" + bytes(signed.raw_transaction).hex()

    def sign_message(self, message: str) -> str:
        """Sign a text message with EIP-191 personal_sign."""
        self._wallet.request_approval("personal_sign", [message, self.address])
        signed = self._account.sign_message(encode_defunct(text=message))
        return "0x" + bytes(signed.signature).hex()

    def __repr__(self) -> str:
        return f"Signer({self.address})"
