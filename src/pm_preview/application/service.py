"""Trade preview composer.

Pure function of (market snapshot, ticket request, position snapshot):
ladder -> fill -> fees -> payout. No ambient state is read except the fee
schedule in settings, and every call recomputes everything.
"""
import logging
from decimal import Decimal

from config.settings import settings
from src.pm_common.contracts import CONTRACT_EPSILON, floor_contracts
from src.pm_common.enums import OrderType, SizeMode, TradeIntent
from src.pm_common.sats import SATS_PER_FULL_CONTRACT, floor_sats, round_half_up
from src.pm_market.domain.models import Market
from src.pm_matching.engine.fill_estimator import estimate_fill
from src.pm_matching.engine.ladder import base_price_sats, orderbook_levels
from src.pm_preview.application.schemas import TradeRequest
from src.pm_preview.domain.fee import execution_fee_sats, win_fee_sats
from src.pm_preview.domain.models import EMPTY_POSITION, PositionSnapshot, TradePreview

logger = logging.getLogger(__name__)


def resolve_requested_contracts(request: TradeRequest, reference_price_sats: int) -> Decimal:
    """Contracts the ticket asks for; sats sizing divides by the reference price."""
    if request.size_mode == SizeMode.CONTRACTS:
        return floor_contracts(request.size_contracts)
    return Decimal(max(1, request.size_sats)) / max(1, reference_price_sats)


def compose_trade_preview(
    market: Market,
    request: TradeRequest,
    position: PositionSnapshot = EMPTY_POSITION,
) -> TradePreview:
    base = base_price_sats(market, request.side)
    limit = request.limit_price_sats if request.limit_price_sats is not None else base
    reference = limit if request.order_type == OrderType.LIMIT else base
    requested = resolve_requested_contracts(request, reference)

    levels = orderbook_levels(market, request.side, request.intent)
    fill = estimate_fill(levels, requested, request.intent, request.order_type, limit)

    if request.order_type == OrderType.MARKET:
        execution_price = max(Decimal(1), fill.avg_price_sats)
    else:
        execution_price = Decimal(limit)

    # intended spend, not the matched amount, so partial fills still show it
    if request.size_mode == SizeMode.SATS:
        notional = max(1, request.size_sats)
    else:
        notional = max(1, round_half_up(requested * reference))

    executed = max(0, fill.total_sats)
    execution_fee = execution_fee_sats(executed, settings.EXECUTION_FEE_RATE)
    gross_payout = floor_sats(fill.filled_contracts * SATS_PER_FULL_CONTRACT)
    if request.intent == TradeIntent.OPEN:
        win_fee = win_fee_sats(gross_payout, executed, settings.WIN_FEE_RATE)
    else:
        win_fee = 0
    net_if_correct = max(0, gross_payout - execution_fee - win_fee)

    position_contracts = position.for_side(request.side)
    exceeds_position = (
        request.intent == TradeIntent.CLOSE
        and requested > position_contracts + CONTRACT_EPSILON
    )
    if exceeds_position:
        logger.warning(
            "Close size exceeds held position: market=%s side=%s requested=%s held=%s",
            market.id, request.side.value, requested, position_contracts,
        )

    preview = TradePreview(
        request=request,
        levels=tuple(levels),
        fill=fill,
        base_price_sats=base,
        limit_price_sats=limit,
        reference_price_sats=reference,
        requested_contracts=requested,
        execution_price_sats=execution_price,
        notional_sats=notional,
        executed_sats=executed,
        execution_fee_sats=execution_fee,
        win_fee_sats=win_fee,
        gross_payout_sats=gross_payout,
        net_if_correct_sats=net_if_correct,
        max_profit_sats=max(0, net_if_correct - executed),
        net_after_fees_sats=max(0, executed - execution_fee),
        position_contracts=position_contracts,
        exceeds_position=exceeds_position,
    )
    logger.debug(
        "Preview: market=%s side=%s intent=%s type=%s notional=%d executed=%d fees=%d net=%d",
        market.id, request.side.value, request.intent.value, request.order_type.value,
        notional, executed, preview.total_fees_sats, net_if_correct,
    )
    return preview
