from __future__ import annotations

from typing import Protocol

from .errors import ConverterReadError, FeedReadError, NegativeAnswerError


class PriceFeed(Protocol):
    """Raw integer price with a fixed number of implied fractional digits."""

    def get_price(self) -> int: ...

    def get_decimals(self) -> int: ...


class ShareConverter(Protocol):
    """Vault-like wrapper reporting underlying assets for a number of shares."""

    def get_assets(self, shares: int) -> int: ...


def feed_price(feed: PriceFeed | None) -> int:
    # An absent feed is the multiplicative identity.
    if feed is None:
        return 1
    answer = feed.get_price()
    if isinstance(answer, bool) or not isinstance(answer, int):
        msg = f"feed returned a non-integer answer: {answer!r}"
        raise FeedReadError(msg, source=type(feed).__name__)
    if answer < 0:
        raise NegativeAnswerError(answer, source=type(feed).__name__)
    return answer


def feed_decimals(feed: PriceFeed | None) -> int:
    if feed is None:
        return 0
    return feed.get_decimals()


def converter_assets(converter: ShareConverter | None, sample: int) -> int:
    # sample is always 1 when no converter is configured.
    if converter is None:
        return sample
    assets = converter.get_assets(sample)
    if isinstance(assets, bool) or not isinstance(assets, int) or assets < 0:
        msg = f"converter returned an invalid asset amount: {assets!r}"
        raise ConverterReadError(msg, source=type(converter).__name__)
    return assets


__all__ = [
    "PriceFeed",
    "ShareConverter",
    "converter_assets",
    "feed_decimals",
    "feed_price",
]
