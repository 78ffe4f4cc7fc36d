from dataclasses import dataclass


@dataclass(frozen=True)
class PathAvailability:
    """Which covenant spending paths are legal right now. Derived, never stored."""

    initial_issue: bool
    issue: bool
    resolve: bool
    redeem: bool
    expiry_redeem: bool
    cancel: bool
