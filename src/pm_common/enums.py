"""Global enums shared by every context.

String enums mirror the values the presentation layer and the settlement
backend exchange; ``CovenantState`` keeps the on-chain integer encoding.
"""

from enum import Enum, IntEnum


class CovenantState(IntEnum):
    """On-chain lifecycle phase of a market covenant."""
    DORMANT = 0
    UNRESOLVED = 1
    RESOLVED_YES = 2
    RESOLVED_NO = 3


class Side(str, Enum):
    YES = "yes"
    NO = "no"


class TradeIntent(str, Enum):
    """open = buy into a position, close = sell out of one"""
    OPEN = "open"
    CLOSE = "close"


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"


class SizeMode(str, Enum):
    SATS = "sats"
    CONTRACTS = "contracts"


class CovenantAction(str, Enum):
    """Submission calls a settlement backend accepts for a covenant."""
    INITIAL_ISSUE = "INITIAL_ISSUE"
    ISSUE = "ISSUE"
    CANCEL = "CANCEL"
    RESOLVE = "RESOLVE"
    REDEEM = "REDEEM"
    EXPIRY_REDEEM = "EXPIRY_REDEEM"


class MarketCategory(str, Enum):
    POLITICS = "Politics"
    SPORTS = "Sports"
    CULTURE = "Culture"
    BITCOIN = "Bitcoin"
    WEATHER = "Weather"
    MACRO = "Macro"
