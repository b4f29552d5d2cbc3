from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FixedPriceFeed:
    """Feed that always reports the same raw price."""

    price: int
    decimals: int = 0

    def __post_init__(self) -> None:
        if self.decimals < 0:
            msg = "decimals must be >= 0"
            raise ValueError(msg)

    def get_price(self) -> int:
        return self.price

    def get_decimals(self) -> int:
        return self.decimals


@dataclass(frozen=True)
class FixedRateConverter:
    """Converter with a constant ``assets / shares`` exchange rate, rounding down."""

    assets: int
    shares: int = 1

    def __post_init__(self) -> None:
        if self.assets < 0:
            msg = "assets must be >= 0"
            raise ValueError(msg)
        if self.shares <= 0:
            msg = "shares must be > 0"
            raise ValueError(msg)

    def get_assets(self, shares: int) -> int:
        return shares * self.assets // self.shares


__all__ = ["FixedPriceFeed", "FixedRateConverter"]
