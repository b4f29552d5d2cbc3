"""On-chain Chainlink AggregatorV3 price feed.

Read-only calls; no gas required. Docs:
https://docs.chain.link/data-feeds/api-reference#aggregatorv3interface
"""
from __future__ import annotations

import logging
from typing import Any

import requests
from web3 import Web3
from web3.exceptions import Web3Exception

from chained_oracle.domain.errors import FeedReadError, NegativeAnswerError

from .abis import AGGREGATOR_V3_ABI

logger = logging.getLogger(__name__)

# web3 v6 reports JSON-RPC error responses as plain ValueError.
_READ_ERRORS = (Web3Exception, requests.RequestException, ValueError)


class ChainlinkFeed:
    """Raw ``answer`` and ``decimals`` of an AggregatorV3 contract.

    Unlike a display provider the price is returned unscaled; the oracle
    accounts for ``decimals`` once, when its configuration is assembled.
    """

    source_name = "chainlink"

    def __init__(self, w3: Web3, address: str) -> None:
        if not address:
            msg = "address must be provided"
            raise ValueError(msg)
        self.address = w3.to_checksum_address(address)
        self._feed = w3.eth.contract(address=self.address, abi=AGGREGATOR_V3_ABI)

    def get_price(self) -> int:
        round_data = self._call("latestRoundData", self._feed.functions.latestRoundData())
        answer = int(round_data[1])
        if answer < 0:
            raise NegativeAnswerError(answer, source=self.source_name, address=self.address)
        return answer

    def get_decimals(self) -> int:
        return int(self._call("decimals", self._feed.functions.decimals()))

    def _call(self, name: str, function: Any) -> Any:
        try:
            return function.call()
        except _READ_ERRORS as exc:
            logger.warning("Chainlink feed %s %s() failed: %s", self.address, name, exc)
            raise FeedReadError(
                f"Chainlink {name}() call failed", source=self.source_name, address=self.address
            ) from exc

    def __repr__(self) -> str:
        return f"ChainlinkFeed({self.address})"


__all__ = ["ChainlinkFeed"]
