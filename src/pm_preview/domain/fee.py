"""Fee math — whole sats, half-up rounding.

Execution fee: a rate on the matched notional, both directions.
Win fee: a rate on the positive payout-minus-cost, charged on opens only.
"""
from decimal import Decimal

from src.pm_common.sats import round_half_up


def execution_fee_sats(executed_sats: int, rate: Decimal) -> int:
    if executed_sats <= 0 or rate == 0:
        return 0
    return round_half_up(Decimal(executed_sats) * rate)


def win_fee_sats(gross_payout_sats: int, cost_sats: int, rate: Decimal) -> int:
    profit = max(0, gross_payout_sats - cost_sats)
    if profit == 0 or rate == 0:
        return 0
    return round_half_up(Decimal(profit) * rate)
