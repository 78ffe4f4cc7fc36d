"""Collateral formulas — exact integer sats, no rounding anywhere.

A pair is one YES plus one NO token, so it is backed by 2 * CPT. Callers
reject non-positive pair/token counts before calling these.
"""

from src.pm_covenant.domain.models import PathAvailability


def issuance_collateral(pairs: int, cpt_sats: int) -> int:
    """Collateral locked when minting ``pairs`` YES+NO pairs."""
    return pairs * 2 * cpt_sats


def cancellation_refund(pairs: int, cpt_sats: int) -> int:
    """Collateral released by burning ``pairs`` matched pairs.

    Always equal to issuance_collateral for the same pair count.
    """
    return pairs * 2 * cpt_sats


def post_resolution_redeem_payout(tokens: int, cpt_sats: int) -> int:
    """Winning tokens of a resolved market pay the full pair collateral."""
    return tokens * 2 * cpt_sats


def expiry_redeem_payout(tokens: int, cpt_sats: int) -> int:
    """Tokens of an expired, unresolved market pay only their own side's share."""
    return tokens * cpt_sats


def redeem_rate_sats(paths: PathAvailability, cpt_sats: int) -> int:
    """Per-token payout of whichever redemption path is open, 0 if none."""
    if paths.redeem:
        return post_resolution_redeem_payout(1, cpt_sats)
    if paths.expiry_redeem:
        return expiry_redeem_payout(1, cpt_sats)
    return 0
