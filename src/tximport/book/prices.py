#!/usr/bin/env python3
"""
Price Database

Recorded exchange rates between commodities. A price quotes one unit of
its commodity in its currency: value = amount * price.
"""

from dataclasses import dataclass
from datetime import datetime

from ..core.numeric import Numeric
from .models import Commodity


@dataclass(frozen=True)
class Price:
    """Rate of one commodity in another at a point in time."""

    commodity: Commodity
    currency: Commodity
    time: datetime
    value: Numeric


class PriceDB:
    """In-memory collection of prices with nearest-in-time lookup."""

    def __init__(self) -> None:
        self._prices: list[Price] = []

    def add_price(self, price: Price) -> Price:
        """Record a price."""
        self._prices.append(price)
        return price

    def lookup_nearest_in_time(self, commodity: Commodity, currency: Commodity, when: datetime) -> Price | None:
        """
        Find the price between two commodities recorded closest to a time.

        Prices quoted in either direction (commodity in currency, or currency
        in commodity) qualify; the caller has to check which direction the
        returned price uses. On equal distance the earlier price wins.

        Args:
            commodity: One side of the pair
            currency: Other side of the pair
            when: Time to get closest to

        Returns:
            Nearest Price, or None if the pair has no prices
        """
        candidates = [
            p
            for p in self._prices
            if (p.commodity.equiv(commodity) and p.currency.equiv(currency))
            or (p.commodity.equiv(currency) and p.currency.equiv(commodity))
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda p: (abs((p.time - when).total_seconds()), p.time))
