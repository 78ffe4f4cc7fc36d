"""Domain models for pm_market — frozen snapshots, no business logic."""

from dataclasses import dataclass

from src.pm_common.enums import CovenantState


@dataclass(frozen=True)
class Market:
    """Point-in-time snapshot of one binary-outcome covenant.

    Supplied by the market registry; the engine never mutates it.
    """

    id: str
    state: CovenantState
    expiry_height: int
    current_height: int
    cpt_sats: int  # collateral per token
    yes_price_probability: float  # mid-price anchor, in (0, 1)
    question: str = ""
    category: str = "Bitcoin"
    oracle_pubkey: str = ""
    yes_asset_id: str = ""
    no_asset_id: str = ""
    creation_txid: str | None = None
