"""Calldata encoding and transaction building."""

from __future__ import annotations

import pytest
from eth_abi import encode

from shardeum.rpc.contract import (
    ERC20_ABI,
    decode_function_result,
    encode_function_call,
    function_selector,
)
from shardeum.rpc.tx import TRANSFER_GAS, build_transfer_tx, require_address, to_rpc_tx

from .conftest import RECIPIENT, TEST_ADDRESS


class TestContractEncoding:
    def test_known_selector(self) -> None:
        assert function_selector("transfer(address,uint256)").hex() == "a9059cbb"

    def test_balance_of_calldata(self) -> None:
        calldata = encode_function_call(ERC20_ABI, "balanceOf", [TEST_ADDRESS])
        assert calldata.startswith("0x70a08231")
        # selector + one 32-byte word
        assert len(calldata) == 2 + 8 + 64
        assert calldata.endswith(TEST_ADDRESS[2:].lower())

    def test_no_args(self) -> None:
        assert encode_function_call(ERC20_ABI, "decimals", []) == "0x313ce567"

    def test_wrong_arg_count(self) -> None:
        with pytest.raises(ValueError, match="expects 1"):
            encode_function_call(ERC20_ABI, "balanceOf", [])

    def test_unknown_function(self) -> None:
        with pytest.raises(ValueError, match="not found"):
            encode_function_call(ERC20_ABI, "mint", [])

    def test_decode_uint(self) -> None:
        data = "0x" + encode(["uint256"], [42]).hex()
        assert decode_function_result(ERC20_ABI, "balanceOf", data) == 42

    def test_decode_string(self) -> None:
        data = "0x" + encode(["string"], ["SHM"]).hex()
        assert decode_function_result(ERC20_ABI, "symbol", data) == "SHM"


class TestTransferTx:
    def test_build(self) -> None:
        tx = build_transfer_tx(
            to=RECIPIENT.lower(),
            value=10**15,
            nonce=3,
            gas_price=1_000_000_000,
            chain_id=8083,
        )
        assert tx == {
            "to": RECIPIENT,
            "value": 10**15,
            "nonce": 3,
            "gas": TRANSFER_GAS,
            "gasPrice": 1_000_000_000,
            "chainId": 8083,
        }

    def test_custom_gas_limit(self) -> None:
        tx = build_transfer_tx(RECIPIENT, 1, 0, 1, 8083, gas_limit=50_000)
        assert tx["gas"] == 50_000

    def test_rejects_bad_recipient(self) -> None:
        with pytest.raises(ValueError, match="recipient"):
            build_transfer_tx("0x1234", 1, 0, 1, 8083)

    def test_rejects_negative_value(self) -> None:
        with pytest.raises(ValueError):
            build_transfer_tx(RECIPIENT, -1, 0, 1, 8083)

    def test_require_address_checksums(self) -> None:
        assert require_address(TEST_ADDRESS.lower()) == TEST_ADDRESS

    def test_to_rpc_tx_hex_encodes_quantities(self) -> None:
        tx = {"from": TEST_ADDRESS, "to": RECIPIENT, "value": 255, "gas": 21000, "data": "0x"}
        assert to_rpc_tx(tx) == {
            "from": TEST_ADDRESS,
            "to": RECIPIENT,
            "value": "0xff",
            "gas": "0x5208",
            "data": "0x",
        }

    def test_to_rpc_tx_does_not_mutate(self) -> None:
        tx = {"value": 1}
        to_rpc_tx(tx)
        assert tx == {"value": 1}
