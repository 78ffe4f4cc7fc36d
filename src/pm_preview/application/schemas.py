# src/pm_preview/application/schemas.py
"""Pydantic schemas for the trade ticket.

TradeRequest is the explicit, immutable order-parameter input of a preview.
Out-of-range sizes and prices are normalised here instead of rejected:
sizes floor at 1 sat / 0.01 contracts, limit prices clamp to [1, 99].
Wrong enum literals still fail validation.
"""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from src.pm_common.contracts import MIN_CONTRACTS, floor_contracts, to_contracts
from src.pm_common.enums import OrderType, Side, SizeMode, TradeIntent
from src.pm_common.sats import clamp_contract_price_sats, floor_sats
from src.pm_preview.domain.models import TradePreview


class TradeRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    side: Side = Side.YES
    intent: TradeIntent = TradeIntent.OPEN
    order_type: OrderType = OrderType.MARKET
    size_mode: SizeMode = SizeMode.SATS
    size_sats: int = 1
    size_contracts: Decimal = MIN_CONTRACTS
    limit_price_sats: int | None = None  # None = use the side's mid price

    @field_validator("size_sats", mode="before")
    @classmethod
    def floor_size_sats(cls, v: object) -> int:
        parsed = to_contracts(v)
        if parsed is None:
            return 1
        return max(1, floor_sats(parsed))

    @field_validator("size_contracts", mode="before")
    @classmethod
    def floor_size_contracts(cls, v: object) -> Decimal:
        return floor_contracts(v)

    @field_validator("limit_price_sats", mode="before")
    @classmethod
    def clamp_limit_price(cls, v: object) -> int | None:
        if v is None:
            return None
        parsed = to_contracts(v)
        if parsed is None:
            return None
        return clamp_contract_price_sats(parsed)


class LevelOut(BaseModel):
    price_sats: int
    contracts_available: int


class FillOut(BaseModel):
    avg_price_sats: Decimal
    best_price_sats: int
    worst_price_sats: int
    filled_contracts: Decimal
    requested_contracts: Decimal
    total_sats: int
    is_partial: bool


class TradePreviewOut(BaseModel):
    side: Side
    intent: TradeIntent
    order_type: OrderType
    levels: list[LevelOut]
    fill: FillOut
    base_price_sats: int
    limit_price_sats: int
    reference_price_sats: int
    requested_contracts: Decimal
    execution_price_sats: Decimal
    notional_sats: int
    executed_sats: int
    execution_fee_sats: int
    win_fee_sats: int
    gross_payout_sats: int
    net_if_correct_sats: int
    max_profit_sats: int
    net_after_fees_sats: int
    slippage_pct: Decimal
    position_contracts: Decimal
    exceeds_position: bool

    @classmethod
    def from_preview(cls, preview: TradePreview) -> "TradePreviewOut":
        fill = preview.fill
        return cls(
            side=preview.request.side,
            intent=preview.request.intent,
            order_type=preview.request.order_type,
            levels=[
                LevelOut(price_sats=lv.price_sats, contracts_available=lv.contracts_available)
                for lv in preview.levels
            ],
            fill=FillOut(
                avg_price_sats=fill.avg_price_sats,
                best_price_sats=fill.best_price_sats,
                worst_price_sats=fill.worst_price_sats,
                filled_contracts=fill.filled_contracts,
                requested_contracts=fill.requested_contracts,
                total_sats=fill.total_sats,
                is_partial=fill.is_partial,
            ),
            base_price_sats=preview.base_price_sats,
            limit_price_sats=preview.limit_price_sats,
            reference_price_sats=preview.reference_price_sats,
            requested_contracts=preview.requested_contracts,
            execution_price_sats=preview.execution_price_sats,
            notional_sats=preview.notional_sats,
            executed_sats=preview.executed_sats,
            execution_fee_sats=preview.execution_fee_sats,
            win_fee_sats=preview.win_fee_sats,
            gross_payout_sats=preview.gross_payout_sats,
            net_if_correct_sats=preview.net_if_correct_sats,
            max_profit_sats=preview.max_profit_sats,
            net_after_fees_sats=preview.net_after_fees_sats,
            slippage_pct=preview.slippage_pct,
            position_contracts=preview.position_contracts,
            exceeds_position=preview.exceeds_position,
        )
