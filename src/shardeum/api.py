"""
ShardeumAPI - wrapper over Shardeum's JSON-RPC methods.

Every method follows the same shape: build an envelope, POST it, check
for an error member, then unwrap or reformat the result. Standard
Ethereum methods and the ``shardeum_*`` extensions are both covered.

Typical use::

    api = ShardeumAPI()
    api.get_balance("0x...")          # "1.0"
    api.connect_wallet()
    tx_hash = api.send_shm("0x...", "0.001")
"""

from __future__ import annotations

import itertools
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from .errors import WalletNotConnectedError
from .rpc.client import get_chain_id, get_rpc_url, rpc_call
from .rpc.contract import decode_function_result, encode_function_call
from .rpc.tx import build_transfer_tx, require_address, to_rpc_tx
from .units import Amount, format_shm, to_wei
from .utils import hex_to_int, text_to_hex, to_block_id, utc_now_rfc3339
from .wallet.signer import Signer, Wallet

logger = logging.getLogger(__name__)

BlockId = Union[str, int]


@dataclass(frozen=True)
class TransferRecord:
    """A locally observed outgoing transfer."""

    to: str
    amount: str
    hash: str
    timestamp: str


def _optional_int(value: Optional[str]) -> Optional[int]:
    return None if value is None else hex_to_int(value)


class ShardeumAPI:
    """
    Client for a Shardeum node.

    Args:
        rpc_url: Node endpoint (default: SHARDEUM_RPC_URL or testnet)
        wallet: Wallet used by connect_wallet(); loaded from the
            environment on demand when omitted
        chain_id: Chain id used when signing (default: SHARDEUM_CHAIN_ID,
            else the node's eth_chainId, fetched once)
        timeout: HTTP timeout in seconds
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        wallet: Optional[Wallet] = None,
        chain_id: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.rpc_url = rpc_url or get_rpc_url()
        self.wallet = wallet
        self.chain_id_override = chain_id
        self.timeout = timeout
        self.signer: Optional[Signer] = None
        self.transaction_history: dict[str, list[TransferRecord]] = {}
        self._node_chain_id: Optional[int] = None
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------ core

    def request(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        """Call any JSON-RPC method and return its raw result."""
        return rpc_call(
            method,
            params,
            rpc_url=self.rpc_url,
            request_id=next(self._ids),
            timeout=self.timeout,
        )

    # ------------------------------------------------------------- web3/net

    def client_version(self) -> str:
        return self.request("web3_clientVersion")

    def sha3(self, data: Union[str, bytes]) -> str:
        """Keccak-256 of data, computed by the node.

        Text is UTF-8 encoded first; 0x-prefixed strings are sent as-is.
        """
        return self.request("web3_sha3", [text_to_hex(data)])

    def net_version(self) -> str:
        return self.request("net_version")

    def net_listening(self) -> bool:
        return bool(self.request("net_listening"))

    # ------------------------------------------------------------------ eth

    def chain_id(self) -> str:
        """Chain id as reported by the node (hex string, unchanged)."""
        return self.request("eth_chainId")

    def block_number(self) -> int:
        return hex_to_int(self.request("eth_blockNumber"))

    def gas_price(self) -> int:
        """Current fee per gas unit, in wei."""
        return hex_to_int(self.request("eth_gasPrice"))

    def get_balance_wei(self, address: str, block: BlockId = "latest") -> int:
        return hex_to_int(self.request("eth_getBalance", [address, to_block_id(block)]))

    def get_balance(self, address: str, block: BlockId = "latest") -> str:
        """Balance in SHM as a decimal string, e.g. ``"1.0"``."""
        return format_shm(self.get_balance_wei(address, block))

    def get_storage_at(self, address: str, position: Union[int, str], block: BlockId = "latest") -> str:
        slot = hex(position) if isinstance(position, int) else position
        return self.request("eth_getStorageAt", [address, slot, to_block_id(block)])

    def get_transaction_count(self, address: str, block: BlockId = "latest") -> int:
        return hex_to_int(self.request("eth_getTransactionCount", [address, to_block_id(block)]))

    def get_block_transaction_count_by_hash(self, block_hash: str) -> Optional[int]:
        return _optional_int(self.request("eth_getBlockTransactionCountByHash", [block_hash]))

    def get_block_transaction_count_by_number(self, block: BlockId = "latest") -> Optional[int]:
        return _optional_int(
            self.request("eth_getBlockTransactionCountByNumber", [to_block_id(block)])
        )

    def sign_transaction(self, tx: dict[str, Any]) -> Any:
        """Ask the node to sign a transaction with one of its own accounts."""
        return self.request("eth_signTransaction", [to_rpc_tx(tx)])

    def send_transaction(self, tx: dict[str, Any]) -> str:
        """Ask the node to sign and submit a transaction from one of its accounts."""
        return self.request("eth_sendTransaction", [to_rpc_tx(tx)])

    def send_raw_transaction(self, raw_tx: str) -> str:
        return self.request("eth_sendRawTransaction", [raw_tx])

    def subscribe(self, kind: str, *params: Any) -> str:
        """Create a subscription and return its id.

        Notifications are pushed over WebSocket connections only; over
        HTTP this returns the id and nothing is streamed.
        """
        return self.request("eth_subscribe", [kind, *params])

    def estimate_gas(self, tx: dict[str, Any]) -> int:
        return hex_to_int(self.request("eth_estimateGas", [to_rpc_tx(tx)]))

    def call(self, tx: dict[str, Any], block: BlockId = "latest") -> str:
        return self.request("eth_call", [to_rpc_tx(tx), to_block_id(block)])

    def get_block_by_hash(self, block_hash: str, full_transactions: bool = False) -> Optional[dict]:
        return self.request("eth_getBlockByHash", [block_hash, full_transactions])

    def get_block_by_number(self, block: BlockId = "latest", full_transactions: bool = False) -> Optional[dict]:
        return self.request("eth_getBlockByNumber", [to_block_id(block), full_transactions])

    def get_transaction_by_hash(self, tx_hash: str) -> Optional[dict]:
        return self.request("eth_getTransactionByHash", [tx_hash])

    def get_transaction_receipt(self, tx_hash: str) -> Optional[dict]:
        return self.request("eth_getTransactionReceipt", [tx_hash])

    # ------------------------------------------------------------- shardeum

    def get_node_list(self, page: Optional[int] = None, limit: Optional[int] = None) -> Any:
        """Active validators, optionally paginated."""
        query: dict[str, int] = {}
        if page is not None:
            query["page"] = page
        if limit is not None:
            query["limit"] = limit
        return self.request("shardeum_getNodeList", [query] if query else [])

    def get_network_account(self) -> Any:
        """Network-wide parameters held in the network account."""
        return self.request("shardeum_getNetworkAccount")

    def get_cycle_info(self, cycle_number: Optional[int] = None) -> Any:
        """Cycle record for cycle_number, or the latest cycle when omitted."""
        return self.request("shardeum_getCycleInfo", [] if cycle_number is None else [cycle_number])

    # ------------------------------------------------------------ contracts

    def read_contract(
        self,
        contract_address: str,
        abi: list,
        function_name: str,
        args: Optional[list] = None,
        block: BlockId = "latest",
    ) -> Any:
        """
        Read from a smart contract (eth_call).

        Returns:
            Decoded return value(s), None for empty return data
        """
        calldata = encode_function_call(abi, function_name, args or [])
        result = self.call({"to": contract_address, "data": calldata}, block)
        if result is None or result == "0x":
            return None
        return decode_function_result(abi, function_name, result)

    # --------------------------------------------------------------- wallet

    def connect_wallet(self) -> Signer:
        """
        Obtain a signer from the wallet.

        Raises:
            WalletNotFoundError: If no wallet is available
            UserRejectedError: If the owner declines account access
        """
        if self.wallet is None:
            self.wallet = Wallet.from_env()
        self.signer = self.wallet.connect()
        logger.info("Connected wallet %s", self.signer.address)
        return self.signer

    def _resolve_chain_id(self) -> int:
        """Chain id to sign with: explicit, then SHARDEUM_CHAIN_ID, then the node's."""
        if self.chain_id_override is not None:
            return self.chain_id_override
        if "SHARDEUM_CHAIN_ID" in os.environ:
            return get_chain_id()
        if self._node_chain_id is None:
            self._node_chain_id = hex_to_int(self.chain_id())
        return self._node_chain_id

    def send_shm(self, to: str, amount: Amount, gas_limit: Optional[int] = None) -> str:
        """
        Transfer SHM from the connected account.

        Args:
            to: Recipient address
            amount: Human-readable amount, e.g. "0.001"
            gas_limit: Gas limit (default: 21000)

        Returns:
            Transaction hash

        Raises:
            WalletNotConnectedError: If connect_wallet() has not succeeded
            ValueError: If the recipient or amount is invalid
            UserRejectedError: If the owner declines the transfer
            RpcError / TransportError: If the node rejects or cannot be reached
        """
        if self.signer is None:
            raise WalletNotConnectedError("Wallet not connected. Call connect_wallet() first.")

        recipient = require_address(to, "recipient")
        value = to_wei(amount)
        sender = self.signer.address

        chain_id = self._resolve_chain_id()
        gas_price = self.gas_price()
        nonce = self.get_transaction_count(sender, "pending")
        tx = build_transfer_tx(
            to=recipient,
            value=value,
            nonce=nonce,
            gas_price=gas_price,
            chain_id=chain_id,
            gas_limit=gas_limit,
        )

        raw_tx = self.signer.sign_transaction(tx)
        tx_hash = self.send_raw_transaction(raw_tx)
        logger.info("Sent %s wei from %s to %s: %s", value, sender, recipient, tx_hash)

        self.transaction_history.setdefault(sender, []).append(
            TransferRecord(
                to=recipient,
                amount=format_shm(value),
                hash=tx_hash,
                timestamp=utc_now_rfc3339(),
            )
        )
        return tx_hash

    def get_transaction_history(self, address: str) -> list[TransferRecord]:
        """Transfers sent from address by this client, oldest first."""
        for sender, records in self.transaction_history.items():
            if sender.lower() == address.lower():
                return list(records)
        return []

    def wait_for_receipt(
        self,
        tx_hash: str,
        timeout: float = 120,
        poll_interval: float = 2.0,
    ) -> dict:
        """
        Poll for a transaction receipt.

        Raises:
            TimeoutError: If no receipt appears within timeout seconds
        """
        start = time.monotonic()
        while time.monotonic() - start < timeout:
            receipt = self.get_transaction_receipt(tx_hash)
            if receipt is not None:
                return receipt
            time.sleep(poll_interval)

        raise TimeoutError(f"Transaction {tx_hash} not confirmed within {timeout}s")
