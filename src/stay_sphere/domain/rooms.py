"""Domain models for rooms."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PriceRange:
    """Inclusive nightly price range."""

    low: float
    high: float

    def as_query(self) -> dict[str, object]:
        """Return the store predicate selecting rooms inside the range."""
        return {"price_per_night": {"$gte": self.low, "$lte": self.high}}


def parse_price_filter(raw: str | None) -> PriceRange | None:
    """Parse a ``<low>-<high>`` filter; anything unparseable means no filter."""
    if not raw:
        return None
    parts = raw.split("-", maxsplit=1)
    if len(parts) != 2:
        return None
    low = _parse_bound(parts[0])
    high = _parse_bound(parts[1])
    if low is None or high is None:
        return None
    return PriceRange(low=low, high=high)


def _parse_bound(value: str) -> float | None:
    try:
        number = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number
