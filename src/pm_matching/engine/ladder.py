"""Synthetic liquidity ladder.

There is no real order book behind a covenant market, so previews walk a
deterministic pseudo-book derived from the market id and its mid price.
Golden tests pin the exact levels; the seed is deliberately the plain sum of
character codes, not a real hash.
"""

from src.pm_common.enums import Side, TradeIntent
from src.pm_common.sats import SATS_PER_FULL_CONTRACT, clamp_contract_price_sats
from src.pm_market.domain.models import Market
from src.pm_matching.domain.models import OrderbookLevel

LADDER_DEPTH = 8
MIN_LEVEL_CONTRACTS = 12
LEVEL_CONTRACTS_SPAN = 34
LEVEL_SEED_STRIDE = 11


def base_price_sats(market: Market, side: Side) -> int:
    """Mid price of ``side`` in sats, clamped to [1, TOTAL - 1]."""
    probability = market.yes_price_probability
    if side == Side.NO:
        probability = 1 - probability
    return clamp_contract_price_sats(probability * SATS_PER_FULL_CONTRACT)


def display_prices_sats(market: Market) -> tuple[int, int]:
    """(yes, no) prices for the side buttons; always sum to the full contract."""
    yes = base_price_sats(market, Side.YES)
    return yes, SATS_PER_FULL_CONTRACT - yes


def market_seed(market: Market) -> int:
    return sum(ord(ch) for ch in market.id)


def orderbook_levels(market: Market, side: Side, intent: TradeIntent) -> list[OrderbookLevel]:
    """Eight levels in consumption order.

    Opening walks up from mid (each rung costs more), closing walks down
    (each rung recovers less).
    """
    seed = market_seed(market)
    base = base_price_sats(market, side)
    step = 1 if intent == TradeIntent.OPEN else -1
    levels: list[OrderbookLevel] = []
    for idx in range(LADDER_DEPTH):
        price = clamp_contract_price_sats(base + step * (idx + 1))
        contracts = MIN_LEVEL_CONTRACTS + (seed + idx * LEVEL_SEED_STRIDE) % LEVEL_CONTRACTS_SPAN
        levels.append(OrderbookLevel(price_sats=price, contracts_available=contracts))
    return levels
