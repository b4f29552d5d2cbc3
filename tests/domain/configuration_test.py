from __future__ import annotations

import dataclasses

import pytest

from chained_oracle.domain.configuration import assemble_configuration
from chained_oracle.domain.errors import OracleConfigurationError
from tests.helpers.stub_sources import StubConverter, StubFeed


def test_scale_factor_for_single_quote_feed(usd_feed: StubFeed) -> None:
    configuration = assemble_configuration(
        base_token_decimals=18,
        quote_feed_1=usd_feed,
        quote_token_decimals=6,
    )

    assert configuration.exponent == 30
    assert configuration.scale_factor == 10**30
    assert configuration.price_decimals == 24
    assert configuration.quote.feed_1_decimals == 6
    assert configuration.base.feed_1_decimals == 0


def test_scale_factor_combines_all_feed_decimals() -> None:
    configuration = assemble_configuration(
        base_feed_1=StubFeed(price=1, decimals=8),
        base_feed_2=StubFeed(price=1, decimals=18),
        base_token_decimals=8,
        quote_feed_1=StubFeed(price=1, decimals=8),
        quote_feed_2=StubFeed(price=1, decimals=6),
        quote_token_decimals=18,
    )

    # 36 + 18 + 8 + 6 - 8 - 8 - 18
    assert configuration.exponent == 34
    assert configuration.scale_factor == 10**34


def test_scale_factor_applies_conversion_samples() -> None:
    configuration = assemble_configuration(
        base_converter=StubConverter(),
        base_sample=10**18,
        base_token_decimals=18,
        quote_converter=StubConverter(),
        quote_sample=10**6,
        quote_token_decimals=6,
    )

    assert configuration.exponent == 24
    assert configuration.scale_factor == 10**24 * 10**6 // 10**18


def test_scale_factor_floors_the_sample_ratio() -> None:
    configuration = assemble_configuration(
        base_converter=StubConverter(),
        base_sample=3,
        base_token_decimals=36,
        quote_token_decimals=1,
    )

    assert configuration.scale_factor == 10 // 3


@pytest.mark.parametrize("side", ["base", "quote"])
def test_zero_sample_is_rejected(side: str) -> None:
    kwargs = {
        f"{side}_converter": StubConverter(),
        f"{side}_sample": 0,
        "base_token_decimals": 18,
        "quote_token_decimals": 18,
    }
    with pytest.raises(OracleConfigurationError, match="sample is zero"):
        assemble_configuration(**kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize("side", ["base", "quote"])
def test_sample_must_be_one_without_converter(side: str) -> None:
    kwargs = {f"{side}_sample": 10**18, "base_token_decimals": 18, "quote_token_decimals": 18}
    with pytest.raises(OracleConfigurationError, match="not one"):
        assemble_configuration(**kwargs)  # type: ignore[arg-type]


def test_zero_sample_without_converter_reports_zero() -> None:
    with pytest.raises(OracleConfigurationError, match="sample is zero"):
        assemble_configuration(base_sample=0, base_token_decimals=18, quote_token_decimals=18)


def test_rejection_is_deterministic() -> None:
    for _ in range(3):
        with pytest.raises(OracleConfigurationError):
            assemble_configuration(quote_sample=2, base_token_decimals=18, quote_token_decimals=6)


def test_negative_exponent_is_rejected() -> None:
    with pytest.raises(OracleConfigurationError, match="exponent"):
        assemble_configuration(
            base_feed_1=StubFeed(price=1, decimals=30),
            base_token_decimals=18,
            quote_token_decimals=0,
        )


def test_zero_scale_factor_is_rejected() -> None:
    with pytest.raises(OracleConfigurationError, match="scale factor is zero"):
        assemble_configuration(
            base_converter=StubConverter(),
            base_sample=10,
            base_token_decimals=36,
            quote_token_decimals=0,
        )


def test_scale_factor_beyond_uint256_is_rejected() -> None:
    with pytest.raises(OracleConfigurationError, match="uint256"):
        assemble_configuration(base_token_decimals=0, quote_token_decimals=42)

    with pytest.raises(OracleConfigurationError, match="uint256"):
        assemble_configuration(
            base_token_decimals=0,
            quote_converter=StubConverter(),
            quote_sample=10**10,
            quote_token_decimals=36,
        )


@pytest.mark.parametrize("decimals", [-1, 256, True])
def test_token_decimals_are_validated(decimals: object) -> None:
    with pytest.raises(OracleConfigurationError):
        assemble_configuration(base_token_decimals=decimals, quote_token_decimals=6)  # type: ignore[arg-type]


def test_invalid_feed_decimals_are_rejected() -> None:
    with pytest.raises(OracleConfigurationError, match="quote_feed_2 decimals"):
        assemble_configuration(
            base_token_decimals=18,
            quote_feed_2=StubFeed(price=1, decimals=-2),
            quote_token_decimals=6,
        )


def test_feed_decimals_are_read_once(usd_feed: StubFeed) -> None:
    assemble_configuration(base_token_decimals=18, quote_feed_1=usd_feed, quote_token_decimals=6)

    assert usd_feed.decimals_calls == 1
    assert usd_feed.price_calls == 0


def test_configuration_is_immutable(usd_feed: StubFeed) -> None:
    configuration = assemble_configuration(base_token_decimals=18, quote_feed_1=usd_feed, quote_token_decimals=6)

    with pytest.raises(dataclasses.FrozenInstanceError):
        configuration.scale_factor = 1  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        configuration.quote.sample = 2  # type: ignore[misc]


def test_flat_accessors_expose_each_slot() -> None:
    base_converter = StubConverter()
    base_feed_1 = StubFeed(price=1, decimals=8)
    quote_feed_2 = StubFeed(price=1, decimals=8)
    configuration = assemble_configuration(
        base_converter=base_converter,
        base_sample=10**18,
        base_feed_1=base_feed_1,
        base_token_decimals=18,
        quote_feed_2=quote_feed_2,
        quote_token_decimals=6,
    )

    assert configuration.base_converter is base_converter
    assert configuration.base_sample == 10**18
    assert configuration.base_feed_1 is base_feed_1
    assert configuration.base_feed_2 is None
    assert configuration.quote_converter is None
    assert configuration.quote_sample == 1
    assert configuration.quote_feed_1 is None
    assert configuration.quote_feed_2 is quote_feed_2
