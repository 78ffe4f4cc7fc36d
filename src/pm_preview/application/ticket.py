"""Ticket summary — request-based estimates shown before anything fills.

Unlike TradePreview fees (which use the matched notional), these use the
intended spend and the requested size, so the ticket shows what a full fill
would cost.
"""
from dataclasses import dataclass
from decimal import Decimal

from config.settings import settings
from src.pm_common.enums import TradeIntent
from src.pm_common.sats import SATS_PER_FULL_CONTRACT, floor_sats
from src.pm_preview.domain.fee import execution_fee_sats, win_fee_sats
from src.pm_preview.domain.models import TradePreview


@dataclass(frozen=True)
class TicketSummary:
    estimated_execution_fee_sats: int
    estimated_gross_payout_sats: int
    estimated_win_fee_sats: int
    estimated_fees_sats: int
    estimated_net_if_correct_sats: int
    close_proceeds_sats: int  # what a full close would return after fees
    position_remaining_contracts: Decimal
    fillability_label: str
    cta_label: str


def summarize_ticket(preview: TradePreview) -> TicketSummary:
    request = preview.request
    est_execution_fee = execution_fee_sats(preview.notional_sats, settings.EXECUTION_FEE_RATE)
    est_gross = floor_sats(preview.requested_contracts * SATS_PER_FULL_CONTRACT)
    if request.intent == TradeIntent.OPEN:
        est_win_fee = win_fee_sats(est_gross, preview.notional_sats, settings.WIN_FEE_RATE)
    else:
        est_win_fee = 0
    est_fees = est_execution_fee + est_win_fee
    verb = "Buy" if request.intent == TradeIntent.OPEN else "Sell"
    return TicketSummary(
        estimated_execution_fee_sats=est_execution_fee,
        estimated_gross_payout_sats=est_gross,
        estimated_win_fee_sats=est_win_fee,
        estimated_fees_sats=est_fees,
        estimated_net_if_correct_sats=max(0, est_gross - est_fees),
        close_proceeds_sats=max(0, preview.notional_sats - est_execution_fee),
        position_remaining_contracts=max(
            Decimal(0), preview.position_contracts - preview.requested_contracts
        ),
        fillability_label=preview.fill.fillability_label(request.order_type),
        cta_label=f"{verb} {request.side.value.capitalize()}",
    )
