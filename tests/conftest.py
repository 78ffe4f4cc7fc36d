"""Shared test fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from src.pm_common.enums import CovenantState
from src.pm_market.domain.models import Market

# "mkt-1" -> character-code seed 426 -> ladder sizes [30, 41, 18, 29, 40, 17, 28, 39]
DEFAULT_MARKET_ID = "mkt-1"


def build_market(**kwargs: Any) -> Market:
    return Market(
        id=kwargs.get("id", DEFAULT_MARKET_ID),
        state=kwargs.get("state", CovenantState.UNRESOLVED),
        expiry_height=kwargs.get("expiry_height", 1_000),
        current_height=kwargs.get("current_height", 500),
        cpt_sats=kwargs.get("cpt_sats", 5_000),
        yes_price_probability=kwargs.get("yes_price_probability", 0.65),
        question=kwargs.get("question", "Will BTC close above 100k?"),
        category=kwargs.get("category", "Bitcoin"),
        oracle_pubkey=kwargs.get("oracle_pubkey", ""),
        yes_asset_id=kwargs.get("yes_asset_id", "a1b2c3"),
        no_asset_id=kwargs.get("no_asset_id", "d4e5f6"),
        creation_txid=kwargs.get("creation_txid", "ab" * 32),
    )


@pytest.fixture
def make_market() -> Callable[..., Market]:
    """Factory for market snapshots; defaults to an open, unexpired market at 65 sats."""
    return build_market


@pytest.fixture
def market() -> Market:
    return build_market()
