"""Fractional contract counts.

Contract sizes are Decimal with a 0.01 granularity floor; sats amounts stay
int. Mixing the two goes through these helpers only.
"""

from decimal import ROUND_DOWN, Decimal, InvalidOperation

MIN_CONTRACTS = Decimal("0.01")
CONTRACT_EPSILON = Decimal("0.0001")
_TWO_PLACES = Decimal("0.01")


def to_contracts(value: object) -> Decimal | None:
    """Best-effort conversion to a finite Decimal; None when not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int | float | str):
        try:
            result = Decimal(str(value).strip().replace(",", ""))
        except InvalidOperation:
            return None
    else:
        return None
    if not result.is_finite():
        return None
    return result


def floor_contracts(value: object) -> Decimal:
    """Floor a requested size at MIN_CONTRACTS; junk becomes MIN_CONTRACTS."""
    parsed = to_contracts(value)
    if parsed is None or parsed < MIN_CONTRACTS:
        return MIN_CONTRACTS
    return parsed


def quantize_contracts(value: Decimal) -> Decimal:
    """Truncate to the 0.01 display granularity.

    Values too large to carry two places in the default context are
    returned unchanged.
    """
    try:
        return value.quantize(_TWO_PLACES, rounding=ROUND_DOWN)
    except InvalidOperation:
        return value
