"""Fill estimation — walk a ladder the way a taker order would consume it.

Levels are consumed in the order given (the generator already orders them
by priority); nothing is re-sorted. Never raises: no liquidity is a zero,
partial fill.
"""
import logging
from decimal import Decimal

from src.pm_common.contracts import CONTRACT_EPSILON, floor_contracts
from src.pm_common.enums import OrderType, TradeIntent
from src.pm_common.sats import round_half_up
from src.pm_matching.domain.models import FillEstimate, OrderbookLevel

logger = logging.getLogger(__name__)


def is_executable(
    level: OrderbookLevel, intent: TradeIntent, order_type: OrderType, limit_price_sats: int
) -> bool:
    """Limit buys fill at or below their cap, limit sells at or above their floor."""
    if order_type == OrderType.MARKET:
        return True
    if intent == TradeIntent.OPEN:
        return level.price_sats <= limit_price_sats
    return level.price_sats >= limit_price_sats


def estimate_fill(
    levels: list[OrderbookLevel],
    requested_contracts: Decimal | float | int,
    intent: TradeIntent,
    order_type: OrderType,
    limit_price_sats: int,
) -> FillEstimate:
    request = floor_contracts(requested_contracts)
    executable = [
        lv for lv in levels if is_executable(lv, intent, order_type, limit_price_sats)
    ]

    remaining = request
    filled = Decimal(0)
    total_sats = Decimal(0)
    best_price = executable[0].price_sats if executable else limit_price_sats
    worst_price = best_price

    for level in executable:
        if remaining <= 0:
            break
        take = min(remaining, Decimal(level.contracts_available))
        filled += take
        total_sats += take * level.price_sats
        worst_price = level.price_sats
        remaining -= take

    avg_price = total_sats / filled if filled > 0 else Decimal(limit_price_sats)

    estimate = FillEstimate(
        avg_price_sats=avg_price,
        best_price_sats=best_price,
        worst_price_sats=worst_price,
        filled_contracts=filled,
        requested_contracts=request,
        total_sats=round_half_up(total_sats),
        is_partial=filled + CONTRACT_EPSILON < request,
    )
    logger.debug(
        "Fill estimate: requested=%s filled=%s levels=%d/%d total_sats=%d partial=%s",
        request, filled, len(executable), len(levels), estimate.total_sats, estimate.is_partial,
    )
    return estimate
