from __future__ import annotations

import logging
from weakref import WeakSet

from web3 import Web3

from chained_oracle.domain.errors import OracleDefinitionError
from chained_oracle.domain.oracle import ChainedOracle
from chained_oracle.domain.sources import PriceFeed, ShareConverter

from .chainlink_feed import ChainlinkFeed
from .erc4626_vault import Erc4626Vault
from .oracle_definition import ConverterDefinition, ConverterKind, FeedDefinition, FeedKind, OracleDefinition
from .static_sources import FixedPriceFeed, FixedRateConverter

logger = logging.getLogger(__name__)


class OracleFactory:
    """Build oracles from definitions and remember which ones it built."""

    def __init__(self, w3: Web3 | None = None) -> None:
        self.w3 = w3
        self._created: WeakSet[ChainedOracle] = WeakSet()

    def create_oracle(self, definition: OracleDefinition) -> ChainedOracle:
        oracle = ChainedOracle.create(
            base_converter=self._build_converter(definition.base.converter),
            base_sample=definition.base.sample,
            base_feed_1=self._build_feed(definition.base.feed_1),
            base_feed_2=self._build_feed(definition.base.feed_2),
            base_token_decimals=definition.base.token_decimals,
            quote_converter=self._build_converter(definition.quote.converter),
            quote_sample=definition.quote.sample,
            quote_feed_1=self._build_feed(definition.quote.feed_1),
            quote_feed_2=self._build_feed(definition.quote.feed_2),
            quote_token_decimals=definition.quote.token_decimals,
        )
        self._created.add(oracle)
        logger.info("Created oracle scale_factor=%d price_decimals=%d", oracle.scale_factor, oracle.price_decimals)
        return oracle

    def is_oracle(self, candidate: object) -> bool:
        return isinstance(candidate, ChainedOracle) and candidate in self._created

    def _build_feed(self, definition: FeedDefinition | None) -> PriceFeed | None:
        if definition is None:
            return None
        if definition.kind is FeedKind.FIXED:
            assert definition.price is not None and definition.decimals is not None
            return FixedPriceFeed(price=definition.price, decimals=definition.decimals)
        assert definition.address is not None
        return ChainlinkFeed(self._require_web3(definition.kind), definition.address)

    def _build_converter(self, definition: ConverterDefinition | None) -> ShareConverter | None:
        if definition is None:
            return None
        if definition.kind is ConverterKind.FIXED:
            assert definition.assets is not None and definition.shares is not None
            return FixedRateConverter(assets=definition.assets, shares=definition.shares)
        assert definition.address is not None
        return Erc4626Vault(self._require_web3(definition.kind), definition.address)

    def _require_web3(self, kind: str) -> Web3:
        if self.w3 is None:
            msg = f"{kind} sources require a web3 connection"
            raise OracleDefinitionError(msg)
        return self.w3


__all__ = ["OracleFactory"]
