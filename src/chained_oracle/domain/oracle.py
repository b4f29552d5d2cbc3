from __future__ import annotations

import logging
from decimal import Decimal, localcontext
from typing import Any

from .configuration import OracleConfiguration, SideConfiguration, assemble_configuration
from .errors import FeedDecimalsMismatchError, PriceOverflowError, ZeroDenominatorError
from .fixed_point import FixedPointOverflowError, checked_mul, mul_div
from .sources import converter_assets, feed_decimals, feed_price

logger = logging.getLogger(__name__)


class ChainedOracle:
    """Price of one base unit in quote units, scaled by ``10**price_decimals``.

    Every query reads the feeds and converters afresh and combines them as::

        scale_factor * base_assets * base_feed_1 * base_feed_2
        ------------------------------------------------------
              quote_assets * quote_feed_1 * quote_feed_2
    """

    def __init__(self, configuration: OracleConfiguration) -> None:
        self.configuration = configuration

    @classmethod
    def create(cls, **kwargs: Any) -> ChainedOracle:
        return cls(assemble_configuration(**kwargs))

    @property
    def scale_factor(self) -> int:
        return self.configuration.scale_factor

    @property
    def price_decimals(self) -> int:
        return self.configuration.price_decimals

    def price(self) -> int:
        numerator = _side_value(self.configuration.base, "base")
        denominator = _side_value(self.configuration.quote, "quote")
        if denominator == 0:
            raise ZeroDenominatorError("quote side evaluated to zero")

        try:
            result = mul_div(self.configuration.scale_factor, numerator, denominator)
        except FixedPointOverflowError as exc:
            raise PriceOverflowError("price does not fit in uint256") from exc

        logger.debug("Oracle price numerator=%d denominator=%d price=%d", numerator, denominator, result)
        return result

    def price_as_decimal(self) -> Decimal:
        raw = self.price()
        with localcontext() as ctx:
            ctx.prec = 100
            return Decimal(raw).scaleb(-self.price_decimals)

    def verify_feed_decimals(self) -> None:
        """Re-read feed decimals and compare them with the assembled values.

        ``price()`` never calls this; decimals are trusted after assembly.
        """
        mismatches: dict[str, tuple[int, int]] = {}
        for side_name, side in (("base", self.configuration.base), ("quote", self.configuration.quote)):
            for slot, feed, configured in (
                ("feed_1", side.feed_1, side.feed_1_decimals),
                ("feed_2", side.feed_2, side.feed_2_decimals),
            ):
                if feed is None:
                    continue
                live = feed_decimals(feed)
                if live != configured:
                    mismatches[f"{side_name}_{slot}"] = (configured, live)
        if mismatches:
            raise FeedDecimalsMismatchError(mismatches)


def _side_value(side: SideConfiguration, name: str) -> int:
    assets = converter_assets(side.converter, side.sample)
    price_1 = feed_price(side.feed_1)
    price_2 = feed_price(side.feed_2)
    try:
        return checked_mul(assets, price_1, price_2)
    except FixedPointOverflowError as exc:
        raise PriceOverflowError(f"{name} side product does not fit in uint256") from exc


__all__ = ["ChainedOracle"]
