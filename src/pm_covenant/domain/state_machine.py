"""Covenant state machine — the single source of action legality.

    DORMANT --initial_issue--> UNRESOLVED
    UNRESOLVED --issue/cancel--> UNRESOLVED          (not expired)
    UNRESOLVED --resolve--> RESOLVED_YES | RESOLVED_NO
    UNRESOLVED (expired) --expiry_redeem--> UNRESOLVED
    RESOLVED_* --redeem--> (terminal)

Presentation, submission planning and tests all go through
path_availability(); nothing else decides what is legal.
"""

from datetime import datetime

from src.pm_common.datetime_utils import blocks_to_duration, utc_now
from src.pm_common.enums import CovenantState
from src.pm_covenant.domain.models import PathAvailability
from src.pm_market.domain.models import Market

_STATE_LABELS = {
    CovenantState.DORMANT: "DORMANT",
    CovenantState.UNRESOLVED: "UNRESOLVED",
    CovenantState.RESOLVED_YES: "RESOLVED YES",
    CovenantState.RESOLVED_NO: "RESOLVED NO",
}


def is_expired(market: Market) -> bool:
    return market.current_height >= market.expiry_height


def path_availability(market: Market) -> PathAvailability:
    expired = is_expired(market)
    unresolved = market.state == CovenantState.UNRESOLVED
    return PathAvailability(
        initial_issue=market.state == CovenantState.DORMANT,
        issue=unresolved and not expired,
        resolve=unresolved and not expired,
        redeem=market.state in (CovenantState.RESOLVED_YES, CovenantState.RESOLVED_NO),
        expiry_redeem=unresolved and expired,
        # unwinding matched collateral stays legal after expiry
        cancel=unresolved,
    )


def state_label(state: CovenantState) -> str:
    return _STATE_LABELS[CovenantState(state)]


def blocks_remaining(market: Market) -> int:
    return max(0, market.expiry_height - market.current_height)


def estimated_settlement_time(market: Market, now: datetime | None = None) -> datetime:
    """Wall-clock estimate of when the expiry height is reached."""
    start = now if now is not None else utc_now()
    return start + blocks_to_duration(blocks_remaining(market))
