from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastResult:
    """Perturbed short-horizon projection derived from a single candle."""

    change_rate: float
    adjusted_rate: float
    price: float
