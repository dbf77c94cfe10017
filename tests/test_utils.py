"""Unit tests for utils.py functions."""

from __future__ import annotations

import re

import pytest

from shardeum.utils import hex_to_int, text_to_hex, to_block_id, utc_now_rfc3339


class TestUtcNowRfc3339:
    """Tests for utc_now_rfc3339 function."""

    def test_format_ends_with_z(self) -> None:
        assert utc_now_rfc3339().endswith("Z")

    def test_valid_rfc3339_format(self) -> None:
        result = utc_now_rfc3339()
        pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z$"
        assert re.match(pattern, result), f"Invalid format: {result}"


class TestHexToInt:
    def test_hex_string(self) -> None:
        assert hex_to_int("0x1b4") == 436

    def test_int_passthrough(self) -> None:
        assert hex_to_int(7) == 7

    def test_rejects_none(self) -> None:
        with pytest.raises(TypeError):
            hex_to_int(None)


class TestToBlockId:
    """Tests for block number / tag normalization."""

    def test_int_becomes_hex(self) -> None:
        assert to_block_id(10) == "0xa"

    def test_zero(self) -> None:
        assert to_block_id(0) == "0x0"

    @pytest.mark.parametrize("tag", ["latest", "earliest", "pending", "safe", "finalized"])
    def test_tags_pass_through(self, tag: str) -> None:
        assert to_block_id(tag) == tag

    def test_hex_string_passes_through(self) -> None:
        assert to_block_id("0x10") == "0x10"

    def test_decimal_string(self) -> None:
        assert to_block_id("16") == "0x10"

    def test_rejects_unknown_tag(self) -> None:
        with pytest.raises(ValueError):
            to_block_id("newest")

    def test_rejects_bad_hex(self) -> None:
        with pytest.raises(ValueError):
            to_block_id("0xzz")

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            to_block_id(-1)

    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            to_block_id(True)


class TestTextToHex:
    def test_text_is_utf8_encoded(self) -> None:
        assert text_to_hex("hello") == "0x68656c6c6f"

    def test_hex_passes_through(self) -> None:
        assert text_to_hex("0x68656c6c6f") == "0x68656c6c6f"

    def test_bytes(self) -> None:
        assert text_to_hex(b"\x01\xff") == "0x01ff"
