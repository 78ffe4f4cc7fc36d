"""In-memory market registry snapshot."""

from collections.abc import Iterable
from types import MappingProxyType

from src.pm_common.enums import CovenantState
from src.pm_common.errors import MarketNotFoundError
from src.pm_market.domain.models import Market

TRENDING_LIMIT = 7


class MarketRegistry:
    """Read-only view over the markets the sync service last delivered.

    A new snapshot replaces the registry wholesale; nothing is patched.
    """

    def __init__(self, markets: Iterable[Market]) -> None:
        ordered = list(markets)
        self._ordered: tuple[Market, ...] = tuple(ordered)
        self._by_id = MappingProxyType({m.id: m for m in ordered})

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, market_id: object) -> bool:
        return market_id in self._by_id

    def get(self, market_id: str) -> Market:
        market = self._by_id.get(market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        return market

    def all(self) -> tuple[Market, ...]:
        return self._ordered

    def trending(self, limit: int = TRENDING_LIMIT) -> list[Market]:
        return list(self._ordered[:limit])

    def by_state(self, state: CovenantState) -> list[Market]:
        return [m for m in self._ordered if m.state == state]

    def filtered(
        self,
        category: str | None = None,
        search: str = "",
        oracle_pubkey: str | None = None,
    ) -> list[Market]:
        """Markets matching every given criterion, in snapshot order.

        ``search`` is a case-insensitive substring of the question or the
        category. ``oracle_pubkey`` keeps the markets that oracle created.
        """
        needle = search.strip().lower()
        result = []
        for m in self._ordered:
            if category is not None and m.category != category:
                continue
            if oracle_pubkey is not None and m.oracle_pubkey != oracle_pubkey:
                continue
            if needle and needle not in m.question.lower() and needle not in m.category.lower():
                continue
            result.append(m)
        return result
