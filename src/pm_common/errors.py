"""Unified error codes and custom exceptions.

The preview engine itself never raises; these cover the layers around it
(registry lookup, submission planning).

Error code ranges:
  3xxx: Market
  5xxx: Position
  6xxx: Covenant action
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 3xxx: Market ---

class MarketNotFoundError(AppError):
    def __init__(self, market_id: str) -> None:
        super().__init__(3001, f"Market not found: {market_id}")


class MissingCreationTxidError(AppError):
    def __init__(self, market_id: str) -> None:
        super().__init__(3003, f"Market has no creation txid: {market_id}")


# --- 5xxx: Position ---

class InsufficientPositionError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(5001, f"Insufficient position: {detail}")


# --- 6xxx: Covenant action ---

class ActionNotAvailableError(AppError):
    def __init__(self, action: str, market_id: str) -> None:
        super().__init__(6001, f"Action {action} is not available for market {market_id}")


class InvalidQuantityError(AppError):
    def __init__(self, quantity: object) -> None:
        super().__init__(6002, f"Quantity must be a positive integer, got {quantity}")


class MissingAttestationError(AppError):
    def __init__(self, market_id: str) -> None:
        super().__init__(6003, f"No oracle attestation to resolve market {market_id}")
