"""Shared fixtures: isolated config and a fake JSON-RPC node served through respx."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Union

import httpx
import pytest
import respx

RPC_URL = "http://node.test/rpc"

# Well-known development key (never holds real funds)
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
RECIPIENT = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
TX_HASH = "0x" + "ab" * 32

Result = Union[Any, Callable[[list], Any]]


class FakeNode:
    """Answers JSON-RPC envelopes from canned results and records every request."""

    def __init__(self) -> None:
        self.results: dict[str, Result] = {}
        self.errors: dict[str, dict[str, Any]] = {}
        self.requests: list[dict[str, Any]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append(payload)
        method = payload["method"]

        if method in self.errors:
            body = {"jsonrpc": "2.0", "id": payload["id"], "error": self.errors[method]}
        elif method in self.results:
            result = self.results[method]
            if callable(result):
                result = result(payload["params"])
            body = {"jsonrpc": "2.0", "id": payload["id"], "result": result}
        else:
            body = {
                "jsonrpc": "2.0",
                "id": payload["id"],
                "error": {"code": -32601, "message": f"Method {method} not found"},
            }
        return httpx.Response(200, json=body)

    @property
    def methods(self) -> list[str]:
        return [r["method"] for r in self.requests]

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def shardeum_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ~/.shardeum at a temp dir and clear config from the environment."""
    for var in (
        "PRIVATE_KEY",
        "SHARDEUM_RPC_URL",
        "SHARDEUM_CHAIN_ID",
        "SHARDEUM_RPC_TIMEOUT",
        "SHARDEUM_NETWORK",
    ):
        monkeypatch.delenv(var, raising=False)

    home = tmp_path / ".shardeum"
    monkeypatch.setattr("shardeum.wallet.keys.SHARDEUM_DIR", home)
    monkeypatch.setattr("shardeum.wallet.keys.SHARDEUM_ENV", home / ".env")
    return home


@pytest.fixture()
def node():
    fake = FakeNode()
    with respx.mock(assert_all_called=False) as router:
        router.post(RPC_URL).mock(side_effect=fake)
        yield fake
