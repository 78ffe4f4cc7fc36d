"""Market records from the registry and the registry snapshot."""

from collections.abc import Callable
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.pm_common.enums import CovenantState, Side
from src.pm_common.errors import MarketNotFoundError
from src.pm_market.application.schemas import DiscoveredMarketIn
from src.pm_market.domain.models import Market
from src.pm_market.domain.registry import MarketRegistry
from src.pm_matching.engine.ladder import base_price_sats
from src.pm_preview.domain.models import PositionSnapshot

MarketFactory = Callable[..., Market]


def _record(**overrides: object) -> dict[str, object]:
    record: dict[str, object] = {
        "id": "evt-1",
        "market_id": "abcd",
        "question": "Rain in Lisbon on Friday?",
        "category": "Weather",
        "expiry_height": 3_000_000,
        "cpt_sats": 5000,
        "yes_asset_id": "a1b2",
        "no_asset_id": "c3d4",
        "creation_txid": "ff" * 32,
        "state": 1,
        "starting_yes_price": 72,
        "yes_price_bps": None,
        "oracle_pubkey": "02" + "aa" * 32,
        "nostr_event_json": "{}",
    }
    record.update(overrides)
    return record


class TestDiscoveredMarketIn:
    def test_to_domain(self) -> None:
        m = DiscoveredMarketIn.model_validate(_record()).to_domain(current_height=2_999_000)
        assert m.state == CovenantState.UNRESOLVED
        assert m.yes_price_probability == 0.72
        assert m.current_height == 2_999_000
        assert m.category == "Weather"
        assert m.cpt_sats == 5000
        assert m.oracle_pubkey == "02" + "aa" * 32

    def test_starting_price_drives_the_ladder(self) -> None:
        m = DiscoveredMarketIn.model_validate(_record()).to_domain(0)
        assert base_price_sats(m, Side.YES) == 72
        assert base_price_sats(m, Side.NO) == 28

    def test_live_quote_overrides_starting_price(self) -> None:
        m = DiscoveredMarketIn.model_validate(_record(yes_price_bps=6500)).to_domain(0)
        assert m.yes_price_probability == 0.65

    def test_unknown_category_falls_back(self) -> None:
        m = DiscoveredMarketIn.model_validate(_record(category="Memes")).to_domain(0)
        assert m.category == "Bitcoin"

    def test_requires_starting_price(self) -> None:
        record = _record()
        del record["starting_yes_price"]
        with pytest.raises(ValidationError):
            DiscoveredMarketIn.model_validate(record)

    def test_rejects_non_positive_cpt(self) -> None:
        with pytest.raises(ValidationError):
            DiscoveredMarketIn.model_validate(_record(cpt_sats=0))

    def test_rejects_unknown_state(self) -> None:
        with pytest.raises(ValidationError):
            DiscoveredMarketIn.model_validate(_record(state=7))


class TestMarketRegistry:
    def test_lookup(self, make_market: MarketFactory) -> None:
        registry = MarketRegistry([make_market(id="a"), make_market(id="b")])
        assert registry.get("b").id == "b"
        assert "a" in registry
        assert len(registry) == 2

    def test_missing_market_raises(self) -> None:
        with pytest.raises(MarketNotFoundError) as exc:
            MarketRegistry([]).get("nope")
        assert exc.value.code == 3001

    def test_trending_keeps_supplied_order(self, make_market: MarketFactory) -> None:
        registry = MarketRegistry([make_market(id=str(i)) for i in range(10)])
        assert [m.id for m in registry.trending()] == [str(i) for i in range(7)]

    def test_by_state(self, make_market: MarketFactory) -> None:
        registry = MarketRegistry([
            make_market(id="d", state=CovenantState.DORMANT),
            make_market(id="u"),
        ])
        assert [m.id for m in registry.by_state(CovenantState.DORMANT)] == ["d"]


class TestFilteredMarkets:
    @pytest.fixture
    def registry(self, make_market: MarketFactory) -> MarketRegistry:
        return MarketRegistry([
            make_market(id="btc", question="BTC above 100k?", category="Bitcoin", oracle_pubkey="me"),
            make_market(id="rain", question="Rain in Lisbon?", category="Weather"),
            make_market(id="fed", question="Fed cuts in March?", category="Macro", oracle_pubkey="me"),
        ])

    def test_no_criteria_keeps_everything(self, registry: MarketRegistry) -> None:
        assert [m.id for m in registry.filtered()] == ["btc", "rain", "fed"]

    def test_by_category(self, registry: MarketRegistry) -> None:
        assert [m.id for m in registry.filtered(category="Weather")] == ["rain"]

    def test_search_is_case_insensitive(self, registry: MarketRegistry) -> None:
        assert [m.id for m in registry.filtered(search="  lisbon ")] == ["rain"]

    def test_search_matches_category(self, registry: MarketRegistry) -> None:
        assert [m.id for m in registry.filtered(search="MACRO")] == ["fed"]

    def test_by_oracle(self, registry: MarketRegistry) -> None:
        assert [m.id for m in registry.filtered(oracle_pubkey="me")] == ["btc", "fed"]

    def test_criteria_combine(self, registry: MarketRegistry) -> None:
        assert registry.filtered(category="Bitcoin", search="fed") == []


class TestPositionFromWallet:
    def test_balances_keyed_by_reversed_asset_id(self, make_market: MarketFactory) -> None:
        m = make_market(yes_asset_id="a1b2c3", no_asset_id="d4e5f6")
        pos = PositionSnapshot.from_wallet_balance(m, {"c3b2a1": 5, "f6e5d4": 2, "other": 9})
        assert pos.yes == Decimal(5)
        assert pos.no == Decimal(2)
        assert pos.pairs == Decimal(2)

    def test_no_wallet_data(self, market: Market) -> None:
        assert PositionSnapshot.from_wallet_balance(market, None) == PositionSnapshot()

    def test_missing_assets_are_zero(self, market: Market) -> None:
        pos = PositionSnapshot.from_wallet_balance(market, {"unrelated": 1})
        assert pos.yes == 0
        assert pos.no == 0

    def test_float_balances(self, market: Market) -> None:
        pos = PositionSnapshot.from_wallet_balance(market, {"c3b2a1": 2.5, "f6e5d4": -1})
        assert pos.yes == Decimal("2.5")
        assert pos.no == 0


class TestPositionSnapshot:
    def test_plain_numbers_become_decimal(self) -> None:
        pos = PositionSnapshot(yes=5.0, no=3)  # type: ignore[arg-type]
        assert isinstance(pos.yes, Decimal)
        assert pos.yes == Decimal(5)
        assert pos.pairs == Decimal(3)

    def test_junk_counts_as_nothing_held(self) -> None:
        pos = PositionSnapshot(yes=float("nan"), no=-2)  # type: ignore[arg-type]
        assert pos == PositionSnapshot()
