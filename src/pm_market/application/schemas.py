"""Pydantic schemas for market records delivered by the registry/sync service.

starting_yes_price is the creator's YES price in percent (72 -> 0.72).
yes_price_bps, when the sync service has a live quote, is basis points of a
full contract (6500 -> 0.65) and takes precedence.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.pm_common.enums import CovenantState, MarketCategory
from src.pm_market.domain.models import Market

_KNOWN_CATEGORIES = {c.value for c in MarketCategory}


class DiscoveredMarketIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    market_id: str = ""
    question: str = ""
    category: str = ""
    oracle_pubkey: str = ""
    expiry_height: int
    cpt_sats: int = Field(gt=0)
    yes_asset_id: str = ""
    no_asset_id: str = ""
    creation_txid: str | None = None
    state: CovenantState
    starting_yes_price: int = Field(ge=0, le=100)
    yes_price_bps: int | None = None

    def yes_probability(self) -> float:
        if self.yes_price_bps is not None:
            return self.yes_price_bps / 10_000
        return self.starting_yes_price / 100

    def to_domain(self, current_height: int) -> Market:
        """Build a snapshot as of ``current_height`` (the chain tip)."""
        category = self.category if self.category in _KNOWN_CATEGORIES else MarketCategory.BITCOIN.value
        return Market(
            id=self.id,
            state=self.state,
            expiry_height=self.expiry_height,
            current_height=current_height,
            cpt_sats=self.cpt_sats,
            yes_price_probability=self.yes_probability(),
            question=self.question,
            category=category,
            oracle_pubkey=self.oracle_pubkey,
            yes_asset_id=self.yes_asset_id,
            no_asset_id=self.no_asset_id,
            creation_txid=self.creation_txid,
        )
