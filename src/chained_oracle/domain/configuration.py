from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import OracleConfigurationError
from .fixed_point import PRICE_SCALE_DECIMALS, UINT256_MAX, pow10
from .sources import PriceFeed, ShareConverter, feed_decimals

logger = logging.getLogger(__name__)

MAX_DECIMALS = 255


@dataclass(frozen=True)
class SideConfiguration:
    """One side (base or quote) of the oracle.

    ``feed_*_decimals`` are the values read when the configuration was
    assembled; they are trusted for the lifetime of the instance.
    """

    token_decimals: int
    converter: ShareConverter | None = None
    sample: int = 1
    feed_1: PriceFeed | None = None
    feed_2: PriceFeed | None = None
    feed_1_decimals: int = 0
    feed_2_decimals: int = 0

    @property
    def total_decimals(self) -> int:
        return self.token_decimals + self.feed_1_decimals + self.feed_2_decimals


@dataclass(frozen=True)
class OracleConfiguration:
    base: SideConfiguration
    quote: SideConfiguration
    exponent: int
    scale_factor: int

    @property
    def price_decimals(self) -> int:
        return PRICE_SCALE_DECIMALS + self.quote.token_decimals - self.base.token_decimals

    @property
    def base_converter(self) -> ShareConverter | None:
        return self.base.converter

    @property
    def base_sample(self) -> int:
        return self.base.sample

    @property
    def base_feed_1(self) -> PriceFeed | None:
        return self.base.feed_1

    @property
    def base_feed_2(self) -> PriceFeed | None:
        return self.base.feed_2

    @property
    def quote_converter(self) -> ShareConverter | None:
        return self.quote.converter

    @property
    def quote_sample(self) -> int:
        return self.quote.sample

    @property
    def quote_feed_1(self) -> PriceFeed | None:
        return self.quote.feed_1

    @property
    def quote_feed_2(self) -> PriceFeed | None:
        return self.quote.feed_2


def assemble_configuration(
    *,
    base_converter: ShareConverter | None = None,
    base_sample: int = 1,
    base_feed_1: PriceFeed | None = None,
    base_feed_2: PriceFeed | None = None,
    base_token_decimals: int,
    quote_converter: ShareConverter | None = None,
    quote_sample: int = 1,
    quote_feed_1: PriceFeed | None = None,
    quote_feed_2: PriceFeed | None = None,
    quote_token_decimals: int,
) -> OracleConfiguration:
    """Validate the parameters and derive the immutable scale factor.

    The scale factor is ``10**E * quote_sample // base_sample`` where
    ``E = 36 + quote decimals (token + feeds) - base decimals (token + feeds)``.
    Feed decimals are read once here; absent feeds count as 0.

    Raises:
        OracleConfigurationError: on an invalid sample, out-of-range decimals,
            a negative exponent or a scale factor outside ``(0, 2**256)``.
    """
    _validate_sample(base_sample, base_converter, "base")
    _validate_sample(quote_sample, quote_converter, "quote")
    _validate_decimals(base_token_decimals, "base_token_decimals")
    _validate_decimals(quote_token_decimals, "quote_token_decimals")

    base = SideConfiguration(
        token_decimals=base_token_decimals,
        converter=base_converter,
        sample=base_sample,
        feed_1=base_feed_1,
        feed_2=base_feed_2,
        feed_1_decimals=_read_feed_decimals(base_feed_1, "base_feed_1"),
        feed_2_decimals=_read_feed_decimals(base_feed_2, "base_feed_2"),
    )
    quote = SideConfiguration(
        token_decimals=quote_token_decimals,
        converter=quote_converter,
        sample=quote_sample,
        feed_1=quote_feed_1,
        feed_2=quote_feed_2,
        feed_1_decimals=_read_feed_decimals(quote_feed_1, "quote_feed_1"),
        feed_2_decimals=_read_feed_decimals(quote_feed_2, "quote_feed_2"),
    )

    exponent = PRICE_SCALE_DECIMALS + quote.total_decimals - base.total_decimals
    if exponent < 0:
        msg = f"scale exponent is not representable: {exponent} < 0"
        raise OracleConfigurationError(msg)

    try:
        scale_factor = pow10(exponent) * quote_sample // base_sample
    except ArithmeticError as exc:
        msg = f"scale factor 10**{exponent} does not fit in uint256"
        raise OracleConfigurationError(msg) from exc
    if scale_factor == 0:
        msg = f"scale factor is zero (10**{exponent} * {quote_sample} // {base_sample})"
        raise OracleConfigurationError(msg)
    if scale_factor > UINT256_MAX:
        msg = f"scale factor does not fit in uint256: {scale_factor}"
        raise OracleConfigurationError(msg)

    logger.info(
        "Assembled oracle configuration exponent=%d scale_factor=%d base_sample=%d quote_sample=%d",
        exponent,
        scale_factor,
        base_sample,
        quote_sample,
    )
    return OracleConfiguration(base=base, quote=quote, exponent=exponent, scale_factor=scale_factor)


def _validate_sample(sample: int, converter: ShareConverter | None, side: str) -> None:
    if isinstance(sample, bool) or not isinstance(sample, int):
        msg = f"{side} conversion sample must be an int, got {type(sample).__name__}"
        raise OracleConfigurationError(msg)
    if sample == 0:
        raise OracleConfigurationError(f"{side} conversion sample is zero")
    if sample < 0 or sample > UINT256_MAX:
        msg = f"{side} conversion sample out of range: {sample}"
        raise OracleConfigurationError(msg)
    if converter is None and sample != 1:
        msg = f"{side} conversion sample is not one but no converter is configured"
        raise OracleConfigurationError(msg)


def _validate_decimals(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise OracleConfigurationError(msg)
    if not 0 <= value <= MAX_DECIMALS:
        msg = f"{name} must be within 0..{MAX_DECIMALS}, got {value}"
        raise OracleConfigurationError(msg)
    return value


def _read_feed_decimals(feed: PriceFeed | None, slot: str) -> int:
    return _validate_decimals(feed_decimals(feed), f"{slot} decimals")


__all__ = [
    "MAX_DECIMALS",
    "OracleConfiguration",
    "SideConfiguration",
    "assemble_configuration",
]
