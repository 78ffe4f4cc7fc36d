"""Integer satoshi arithmetic for the per-contract price scale.

Every price is an int number of sats out of SATS_PER_FULL_CONTRACT; a YES
and a NO contract together are always worth the full amount.
Rounding follows the half-up convention (2.5 -> 3) used everywhere prices
are shown to the user, never banker's rounding.
"""

import math
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

SATS_PER_FULL_CONTRACT = 100
MIN_PRICE_SATS = 1
MAX_PRICE_SATS = SATS_PER_FULL_CONTRACT - 1


def round_half_up(value: float | int | Decimal) -> int:
    """Round to the nearest integer, ties towards +infinity."""
    if isinstance(value, Decimal):
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return math.floor(value + 0.5)


def floor_sats(value: float | int | Decimal) -> int:
    if isinstance(value, Decimal):
        return int(value.to_integral_value(rounding=ROUND_FLOOR))
    return math.floor(value)


def clamp_contract_price_sats(value: float | int | Decimal) -> int:
    """Round ``value`` and clamp into [1, SATS_PER_FULL_CONTRACT - 1].

    A zero-priced side is meaningless and a side priced at the full amount
    leaves nothing for its complement, so both ends are excluded.
    Non-finite input collapses to the nearest bound.
    """
    if isinstance(value, float) and math.isnan(value):
        return MIN_PRICE_SATS
    if isinstance(value, float) and math.isinf(value):
        return MAX_PRICE_SATS if value > 0 else MIN_PRICE_SATS
    return max(MIN_PRICE_SATS, min(MAX_PRICE_SATS, round_half_up(value)))


def sats_to_display(sats: int) -> str:
    """Format sats for display: 50000 -> '50,000 sats', -1200 -> '-1,200 sats'."""
    return f"{sats:,} sats"


def probability_to_display(probability: float) -> str:
    """0.65 -> '65% (65 sats)'."""
    sats = round_half_up(probability * SATS_PER_FULL_CONTRACT)
    return f"{round_half_up(probability * 100)}% ({sats} sats)"
