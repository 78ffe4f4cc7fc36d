"""Domain models for pm_preview — immutable inputs and results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from src.pm_common.contracts import to_contracts
from src.pm_common.enums import Side
from src.pm_common.hexutil import reverse_hex
from src.pm_market.domain.models import Market
from src.pm_matching.domain.models import FillEstimate, OrderbookLevel

if TYPE_CHECKING:
    from src.pm_preview.application.schemas import TradeRequest


@dataclass(frozen=True)
class PositionSnapshot:
    """Held token amounts per side, as last reported by the wallet."""

    yes: Decimal = Decimal(0)
    no: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        # wallets report plain numbers; junk and negatives count as nothing held
        for name in ("yes", "no"):
            amount = to_contracts(getattr(self, name))
            object.__setattr__(self, name, amount if amount is not None and amount > 0 else Decimal(0))

    def for_side(self, side: Side) -> Decimal:
        return self.yes if side == Side.YES else self.no

    @property
    def pairs(self) -> Decimal:
        """Matched YES+NO pairs that could be cancelled."""
        return min(self.yes, self.no)

    @classmethod
    def from_wallet_balance(cls, market: Market, balance: Mapping[str, object] | None) -> "PositionSnapshot":
        """Pick the market's two token balances out of a wallet balance map.

        The wallet keys balances by the byte-reversed asset id.
        """
        if not balance:
            return cls()

        def _held(asset_id: str) -> Decimal:
            amount = to_contracts(balance.get(reverse_hex(asset_id), 0)) if asset_id else None
            return amount if amount is not None else Decimal(0)

        return cls(yes=_held(market.yes_asset_id), no=_held(market.no_asset_id))


EMPTY_POSITION = PositionSnapshot()


@dataclass(frozen=True)
class TradePreview:
    """What would happen if the ticket were submitted now.

    Recomputed wholesale on every input change; never patched.
    """

    request: "TradeRequest"
    levels: tuple[OrderbookLevel, ...]
    fill: FillEstimate
    base_price_sats: int
    limit_price_sats: int
    reference_price_sats: int
    requested_contracts: Decimal
    execution_price_sats: Decimal
    notional_sats: int  # intended spend, independent of the fill
    executed_sats: int  # actually matched notional
    execution_fee_sats: int
    win_fee_sats: int
    gross_payout_sats: int
    net_if_correct_sats: int
    max_profit_sats: int
    net_after_fees_sats: int
    position_contracts: Decimal
    exceeds_position: bool = field(default=False)

    @property
    def slippage_pct(self) -> Decimal:
        return self.fill.slippage_pct

    @property
    def total_fees_sats(self) -> int:
        return self.execution_fee_sats + self.win_fee_sats
