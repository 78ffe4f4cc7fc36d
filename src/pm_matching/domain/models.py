from dataclasses import dataclass
from decimal import Decimal

from src.pm_common.enums import OrderType


@dataclass(frozen=True)
class OrderbookLevel:
    """One rung of the synthetic ladder. Recomputed per preview, never stored."""

    price_sats: int
    contracts_available: int


@dataclass(frozen=True)
class FillEstimate:
    """Simulated execution of one request against a ladder."""

    avg_price_sats: Decimal
    best_price_sats: int
    worst_price_sats: int
    filled_contracts: Decimal
    requested_contracts: Decimal  # after the 0.01 floor
    total_sats: int  # matched notional, rounded half-up
    is_partial: bool

    @property
    def slippage_pct(self) -> Decimal:
        """Distance from best to worst touched price, as % of best."""
        if self.best_price_sats <= 0:
            return Decimal(0)
        pct = Decimal(self.worst_price_sats - self.best_price_sats) / self.best_price_sats * 100
        return max(Decimal(0), pct)

    def fillability_label(self, order_type: OrderType) -> str:
        if order_type == OrderType.LIMIT:
            if self.filled_contracts <= 0:
                return "Resting only (not fillable now)"
            if self.is_partial:
                return "Partially fillable now"
            return "Fully fillable now"
        if self.is_partial:
            return "May partially fill"
        return "Expected to fill now"
