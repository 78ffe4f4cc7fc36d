"""Submission planning — parameters for the external settlement backend.

The preview engine is advisory and never raises; this layer is where a
confirmed ticket becomes a concrete covenant call, so it refuses anything
path_availability() does not allow.
"""
import logging
from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

from src.pm_common.enums import CovenantAction, Side, TradeIntent
from src.pm_common.errors import (
    ActionNotAvailableError,
    InsufficientPositionError,
    InvalidQuantityError,
    MissingAttestationError,
    MissingCreationTxidError,
)
from src.pm_covenant.domain.collateral import (
    cancellation_refund,
    expiry_redeem_payout,
    issuance_collateral,
    post_resolution_redeem_payout,
)
from src.pm_covenant.domain.state_machine import path_availability
from src.pm_market.domain.models import Market
from src.pm_preview.domain.models import EMPTY_POSITION, PositionSnapshot, TradePreview

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionPlan:
    """One covenant call, ready to hand to the settlement backend."""

    action: CovenantAction
    market_id: str
    quantity: int  # pairs for issue/cancel, tokens for redeem, 0 for resolve
    amount_sats: int  # collateral locked (issue) or released (cancel/redeem)
    token_side: Side | None = None  # held side (expiry redeem) or outcome (resolve)
    oracle_signature_hex: str | None = None  # resolve only


def _require_quantity(quantity: object) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityError(quantity)
    return quantity


def _whole(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def plan_issue(market: Market, pairs: int) -> SubmissionPlan:
    pairs = _require_quantity(pairs)
    paths = path_availability(market)
    if paths.initial_issue:
        action = CovenantAction.INITIAL_ISSUE
    elif paths.issue:
        action = CovenantAction.ISSUE
    else:
        raise ActionNotAvailableError(CovenantAction.ISSUE.value, market.id)
    if not market.creation_txid:
        raise MissingCreationTxidError(market.id)
    plan = SubmissionPlan(
        action=action,
        market_id=market.id,
        quantity=pairs,
        amount_sats=issuance_collateral(pairs, market.cpt_sats),
    )
    logger.info(
        "Planned %s: market=%s pairs=%d collateral=%d", action.value, market.id, pairs, plan.amount_sats
    )
    return plan


def plan_cancel(market: Market, pairs: int, position: PositionSnapshot | None = None) -> SubmissionPlan:
    """Burn matched pairs; with a position, cap at the pairs actually held."""
    pairs = _require_quantity(pairs)
    if not path_availability(market).cancel:
        raise ActionNotAvailableError(CovenantAction.CANCEL.value, market.id)
    if position is not None:
        held_pairs = _whole(position.pairs)
        if held_pairs <= 0:
            raise InsufficientPositionError("cancelling needs both YES and NO tokens")
        pairs = min(pairs, held_pairs)
    plan = SubmissionPlan(
        action=CovenantAction.CANCEL,
        market_id=market.id,
        quantity=pairs,
        amount_sats=cancellation_refund(pairs, market.cpt_sats),
    )
    logger.info("Planned CANCEL: market=%s pairs=%d refund=%d", market.id, pairs, plan.amount_sats)
    return plan


def plan_resolve(market: Market, outcome: Side, oracle_signature_hex: str) -> SubmissionPlan:
    """Execute an oracle attestation; moves no collateral."""
    if not path_availability(market).resolve:
        raise ActionNotAvailableError(CovenantAction.RESOLVE.value, market.id)
    if not oracle_signature_hex.strip():
        raise MissingAttestationError(market.id)
    plan = SubmissionPlan(
        action=CovenantAction.RESOLVE,
        market_id=market.id,
        quantity=0,
        amount_sats=0,
        token_side=outcome,
        oracle_signature_hex=oracle_signature_hex.strip(),
    )
    logger.info("Planned RESOLVE: market=%s outcome=%s", market.id, outcome.value)
    return plan


def plan_redeem(market: Market, tokens: int, position: PositionSnapshot | None = None) -> SubmissionPlan:
    """Post-resolution redemption if open, else expiry redemption, else refuse.

    Expiry redemption burns whichever side is held, YES first.
    """
    tokens = _require_quantity(tokens)
    paths = path_availability(market)
    if paths.redeem:
        plan = SubmissionPlan(
            action=CovenantAction.REDEEM,
            market_id=market.id,
            quantity=tokens,
            amount_sats=post_resolution_redeem_payout(tokens, market.cpt_sats),
        )
    elif paths.expiry_redeem:
        held = position if position is not None else EMPTY_POSITION
        side = Side.YES if held.yes > 0 else Side.NO
        plan = SubmissionPlan(
            action=CovenantAction.EXPIRY_REDEEM,
            market_id=market.id,
            quantity=tokens,
            amount_sats=expiry_redeem_payout(tokens, market.cpt_sats),
            token_side=side,
        )
    else:
        raise ActionNotAvailableError(CovenantAction.REDEEM.value, market.id)
    logger.info(
        "Planned %s: market=%s tokens=%d payout=%d",
        plan.action.value, market.id, tokens, plan.amount_sats,
    )
    return plan


def plan_trade_submission(
    market: Market, preview: TradePreview, position: PositionSnapshot
) -> SubmissionPlan:
    """Map a confirmed buy/sell ticket onto issuance or cancellation.

    Buying mints whole pairs (the user keeps the side they wanted); selling
    burns pairs the user already holds.
    """
    pairs = max(1, _whole(preview.requested_contracts))
    if preview.request.intent == TradeIntent.OPEN:
        return plan_issue(market, pairs)
    return plan_cancel(market, pairs, position)
