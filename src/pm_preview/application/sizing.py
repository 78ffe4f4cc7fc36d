"""Ticket input normalisation.

Turns raw text the user typed (or a preset button) into the values a
TradeRequest is built from. Nothing here rejects input; junk collapses to
the smallest valid size or the previous price.
"""
import re
from decimal import Decimal

from src.pm_common.contracts import MIN_CONTRACTS, quantize_contracts, to_contracts
from src.pm_common.enums import Side, TradeIntent
from src.pm_common.sats import clamp_contract_price_sats, floor_sats
from src.pm_preview.domain.models import PositionSnapshot

CONTRACT_STEP = Decimal("0.01")
_NON_DIGITS = re.compile(r"[^\d]")


def commit_size_sats_draft(text: str) -> int:
    """'12,500' -> 12500; empty, zero or junk -> 1."""
    parsed = to_contracts(text.replace(",", ""))
    if not parsed:
        return 1
    return max(1, floor_sats(parsed))


def format_size_sats(sats: int) -> str:
    return f"{max(1, sats):,}"


def commit_contracts_draft(text: str, intent: TradeIntent, available: Decimal) -> Decimal:
    """Parse a contracts field; closes are capped at the held amount."""
    parsed = to_contracts(text)
    normalized = max(MIN_CONTRACTS, quantize_contracts(parsed if parsed is not None else MIN_CONTRACTS))
    if intent == TradeIntent.CLOSE:
        return min(normalized, available)
    return normalized


def format_contracts(value: Decimal) -> str:
    return f"{value:.2f}"


def step_contracts(current: Decimal, delta: int, intent: TradeIntent, available: Decimal) -> Decimal:
    """One 0.01 step in the direction of ``delta``, re-committed."""
    if delta == 0:
        return current
    direction = 1 if delta > 0 else -1
    next_value = max(MIN_CONTRACTS, current + direction * CONTRACT_STEP)
    return commit_contracts_draft(format_contracts(next_value), intent, available)


def commit_limit_price_draft(text: str, current_sats: int) -> int:
    """Keep digits only; an empty field restores the current price."""
    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return clamp_contract_price_sats(current_sats)
    return clamp_contract_price_sats(int(digits))


def step_limit_price(current_sats: int, delta: int) -> int:
    if delta == 0:
        return clamp_contract_price_sats(current_sats)
    direction = 1 if delta > 0 else -1
    return clamp_contract_price_sats(clamp_contract_price_sats(current_sats) + direction)


def sell_fraction_contracts(available: Decimal, fraction: Decimal) -> Decimal:
    """Size for the 25% / 50% / Max sell presets."""
    return max(MIN_CONTRACTS, available * fraction)


def cashout_selection(position: PositionSnapshot) -> tuple[Side, Decimal]:
    """Side with the larger holding and half of it (never more than held)."""
    side = Side.YES if position.yes >= position.no else Side.NO
    available = position.for_side(side)
    return side, max(MIN_CONTRACTS, min(available, available / 2))
