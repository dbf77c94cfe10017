"""Wei / SHM conversion."""

from __future__ import annotations

from decimal import Decimal

import pytest

from shardeum.units import WEI_PER_SHM, format_shm, from_wei, to_wei


class TestToWei:
    def test_one_shm(self) -> None:
        assert to_wei("1") == WEI_PER_SHM

    def test_fraction(self) -> None:
        assert to_wei("0.001") == 10**15

    def test_int_input(self) -> None:
        assert to_wei(2) == 2 * WEI_PER_SHM

    def test_float_input_uses_its_repr(self) -> None:
        assert to_wei(0.1) == 10**17

    def test_decimal_input(self) -> None:
        assert to_wei(Decimal("1.5")) == 1_500_000_000_000_000_000

    def test_smallest_unit(self) -> None:
        assert to_wei("0.000000000000000001") == 1

    def test_zero(self) -> None:
        assert to_wei("0") == 0

    def test_trailing_zeros_are_not_extra_precision(self) -> None:
        assert to_wei("1.000000000000000000000") == WEI_PER_SHM

    def test_rejects_too_many_decimals(self) -> None:
        with pytest.raises(ValueError, match="decimal places"):
            to_wei("0.0000000000000000001")

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            to_wei("-1")

    @pytest.mark.parametrize("bad", ["abc", "", "NaN", "Infinity", True])
    def test_rejects_non_numeric(self, bad) -> None:
        with pytest.raises(ValueError):
            to_wei(bad)


class TestFromWei:
    def test_int(self) -> None:
        assert from_wei(10**15) == Decimal("0.001")

    def test_hex_string(self) -> None:
        assert from_wei("0xde0b6b3a7640000") == Decimal(1)

    def test_zero_is_decimal(self) -> None:
        assert isinstance(from_wei(0), Decimal)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            from_wei(-1)


class TestFormatShm:
    def test_whole_amount_keeps_decimal_point(self) -> None:
        assert format_shm("0xde0b6b3a7640000") == "1.0"

    def test_zero(self) -> None:
        assert format_shm(0) == "0.0"

    def test_fraction(self) -> None:
        assert format_shm(1_500_000_000_000_000_000) == "1.5"

    def test_one_wei_has_no_exponent(self) -> None:
        assert format_shm(1) == "0.000000000000000001"

    def test_large_amount_has_no_exponent(self) -> None:
        assert format_shm(10_000 * WEI_PER_SHM) == "10000.0"

    @pytest.mark.parametrize(
        "amount, expected",
        [("0.001", "0.001"), ("1", "1.0"), ("123.456", "123.456"), ("0.000000000000000001", "0.000000000000000001")],
    )
    def test_round_trip_through_wei(self, amount: str, expected: str) -> None:
        assert format_shm(to_wei(amount)) == expected
