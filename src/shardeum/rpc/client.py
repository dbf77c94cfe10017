"""
JSON-RPC transport for Shardeum nodes.

Lightweight alternative to web3.py: uses httpx for HTTP. One request per
call, no retry and no batching; every failure is raised to the caller.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import httpx

from ..errors import RpcError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Network:
    name: str
    rpc_url: str
    chain_id: int
    explorer_url: str


NETWORKS: dict[str, Network] = {
    "mainnet": Network(
        name="mainnet",
        rpc_url="https://api.shardeum.org",
        chain_id=8118,
        explorer_url="https://explorer.shardeum.org",
    ),
    "testnet": Network(
        name="testnet",
        rpc_url="https://api-testnet.shardeum.org",
        chain_id=8083,
        explorer_url="https://explorer-testnet.shardeum.org",
    ),
}

DEFAULT_NETWORK = NETWORKS["testnet"]
DEFAULT_RPC_URL = DEFAULT_NETWORK.rpc_url
DEFAULT_CHAIN_ID = DEFAULT_NETWORK.chain_id
DEFAULT_TIMEOUT = 30.0

# JSON-RPC 2.0 internal error, used for malformed responses
INTERNAL_ERROR = -32603


def resolve_network(name: str) -> Network:
    """Look up a network preset by name (case-insensitive)."""
    try:
        return NETWORKS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(NETWORKS))
        raise ValueError(f"Unknown network {name!r} (known: {known})") from None


def get_rpc_url() -> str:
    """Get the RPC URL from environment or default."""
    return os.environ.get("SHARDEUM_RPC_URL", DEFAULT_RPC_URL)


def get_chain_id() -> int:
    """Get the chain ID from environment or default."""
    return int(os.environ.get("SHARDEUM_CHAIN_ID", str(DEFAULT_CHAIN_ID)))


def get_timeout() -> float:
    """Get the HTTP timeout in seconds from environment or default."""
    return float(os.environ.get("SHARDEUM_RPC_TIMEOUT", str(DEFAULT_TIMEOUT)))


def build_request(method: str, params: Optional[Sequence[Any]], request_id: int) -> dict[str, Any]:
    """
    Build a JSON-RPC 2.0 request envelope.

    Args:
        method: RPC method name (e.g., "eth_chainId")
        params: Positional parameters (default: [])
        request_id: Numeric request id

    Returns:
        Envelope dict ready to be serialized as JSON
    """
    if not isinstance(method, str) or not method:
        raise ValueError("RPC method must be a non-empty string")
    if isinstance(request_id, bool) or not isinstance(request_id, int):
        raise TypeError("RPC request id must be an int")
    return {
        "jsonrpc": "2.0",
        "method": method,
        "params": list(params) if params is not None else [],
        "id": request_id,
    }


def unwrap_response(data: Any) -> Any:
    """
    Return the result member of a JSON-RPC response.

    Raises:
        RpcError: If the response carries an error member or is malformed
    """
    if not isinstance(data, dict):
        raise RpcError(INTERNAL_ERROR, f"Malformed JSON-RPC response: {data!r}")

    error = data.get("error")
    if error is not None:
        if isinstance(error, dict):
            raise RpcError(
                error.get("code"),
                str(error.get("message", "unknown error")),
                error.get("data"),
            )
        raise RpcError(None, str(error))

    if "result" not in data:
        raise RpcError(INTERNAL_ERROR, f"Malformed JSON-RPC response (no result): {data!r}")

    return data["result"]


def _error_envelope(response: httpx.Response) -> Optional[dict[str, Any]]:
    """JSON-RPC error envelope carried by a non-2xx response, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("error") is not None:
        return data
    return None


def rpc_call(
    method: str,
    params: Optional[Sequence[Any]] = None,
    rpc_url: Optional[str] = None,
    request_id: int = 1,
    timeout: Optional[float] = None,
) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_getBalance")
        params: RPC parameters
        rpc_url: RPC endpoint URL
        request_id: Numeric id placed in the envelope
        timeout: HTTP timeout in seconds

    Returns:
        Result field from the RPC response

    Raises:
        RpcError: If the node reports an error (with any HTTP status)
        TransportError: If the HTTP exchange fails
    """
    url = rpc_url or get_rpc_url()
    payload = build_request(method, params, request_id)
    logger.debug("-> %s id=%s url=%s", method, request_id, url)

    try:
        with httpx.Client(timeout=timeout if timeout is not None else get_timeout()) as client:
            response = client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as exc:
        data = _error_envelope(exc.response)
        if data is None:
            raise TransportError(
                f"HTTP {exc.response.status_code} from {url} for {method}"
            ) from exc
        logger.debug("<- %s id=%s HTTP %s with error body", method, request_id, exc.response.status_code)
    except httpx.HTTPError as exc:
        raise TransportError(f"Request to {url} failed for {method}: {exc}") from exc
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError
        raise TransportError(f"Invalid JSON from {url} for {method}: {exc}") from exc

    logger.debug("<- %s id=%s", method, request_id)
    return unwrap_response(data)
