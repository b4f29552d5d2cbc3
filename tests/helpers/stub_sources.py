from __future__ import annotations


class StubFeed:
    """Feed whose answer and decimals can be changed between queries."""

    def __init__(self, price: int, decimals: int = 0, *, error: Exception | None = None) -> None:
        self.price = price
        self.decimals = decimals
        self.error = error
        self.price_calls = 0
        self.decimals_calls = 0

    def get_price(self) -> int:
        self.price_calls += 1
        if self.error is not None:
            raise self.error
        return self.price

    def get_decimals(self) -> int:
        self.decimals_calls += 1
        return self.decimals


class StubConverter:
    """Linear converter recording every share amount it is asked about."""

    def __init__(self, assets_per_share: int = 1, *, result: object | None = None) -> None:
        self.assets_per_share = assets_per_share
        self.result = result
        self.calls: list[int] = []

    def get_assets(self, shares: int) -> int:
        self.calls.append(shares)
        if self.result is not None:
            return self.result  # type: ignore[return-value]
        return shares * self.assets_per_share
