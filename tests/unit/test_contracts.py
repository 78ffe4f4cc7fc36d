"""Tests for pm_common.contracts — Decimal contract counts."""

from decimal import Decimal

from src.pm_common.contracts import MIN_CONTRACTS, floor_contracts, quantize_contracts, to_contracts


class TestToContracts:
    def test_parses_numbers_and_strings(self) -> None:
        assert to_contracts(3) == Decimal(3)
        assert to_contracts(0.1) == Decimal("0.1")
        assert to_contracts(" 1,250.5 ") == Decimal("1250.5")

    def test_rejects_non_numbers(self) -> None:
        assert to_contracts("abc") is None
        assert to_contracts("") is None
        assert to_contracts(None) is None
        assert to_contracts(True) is None

    def test_rejects_non_finite(self) -> None:
        assert to_contracts(float("nan")) is None
        assert to_contracts(float("inf")) is None
        assert to_contracts(Decimal("NaN")) is None


class TestFloorContracts:
    def test_positive_passes_through(self) -> None:
        assert floor_contracts(Decimal("2.5")) == Decimal("2.5")

    def test_zero_and_negative_floor_to_minimum(self) -> None:
        assert floor_contracts(0) == MIN_CONTRACTS
        assert floor_contracts(-4) == MIN_CONTRACTS
        assert floor_contracts(Decimal("0.001")) == MIN_CONTRACTS

    def test_junk_floors_to_minimum(self) -> None:
        assert floor_contracts(float("nan")) == MIN_CONTRACTS
        assert floor_contracts("x") == MIN_CONTRACTS


def test_quantize_truncates_to_two_places() -> None:
    assert quantize_contracts(Decimal("1.239")) == Decimal("1.23")
