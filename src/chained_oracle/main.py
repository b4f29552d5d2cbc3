from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Sequence

from web3 import Web3

from chained_oracle.config import config
from chained_oracle.domain.errors import OracleError
from chained_oracle.domain.oracle import ChainedOracle
from chained_oracle.services.oracle_definition import (
    ConverterKind,
    FeedKind,
    OracleDefinition,
    load_oracle_definition,
)
from chained_oracle.services.oracle_factory import OracleFactory
from chained_oracle.services.web3_client import build_web3

logger = logging.getLogger(__name__)


def needs_web3(definition: OracleDefinition) -> bool:
    for side in (definition.base, definition.quote):
        if side.converter is not None and side.converter.kind is ConverterKind.ERC4626:
            return True
        for feed in (side.feed_1, side.feed_2):
            if feed is not None and feed.kind is FeedKind.CHAINLINK:
                return True
    return False


def build_oracle(definition_path: Path, *, rpc_url: str | None = None) -> ChainedOracle:
    definition = load_oracle_definition(definition_path)
    w3: Web3 | None = None
    if needs_web3(definition):
        w3 = build_web3(rpc_url=rpc_url)
    return OracleFactory(w3).create_oracle(definition)


def run(definition_path: Path, *, rpc_url: str | None, repeat: int) -> None:
    logger.info("Loading oracle definition from %s", definition_path)
    oracle = build_oracle(definition_path, rpc_url=rpc_url)
    print(f"scale_factor={oracle.scale_factor} price_decimals={oracle.price_decimals}")

    for idx in range(1, repeat + 1):
        started = perf_counter()
        raw = oracle.price()
        rendered = oracle.price_as_decimal()
        print(f"[query {idx}] price={raw} ({rendered}) in {perf_counter() - started:.3f}s")


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(level=config().log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    parser = argparse.ArgumentParser(description="Query a chained feed oracle defined in a JSON file.")
    parser.add_argument("--definition", type=Path, required=True, help="Path to the oracle definition (JSON).")
    parser.add_argument("--rpc-url", default=None, help="Override the configured RPC endpoint.")
    parser.add_argument("--repeat", type=int, default=1, help="Number of price queries (default: 1).")
    args = parser.parse_args(argv)
    if args.repeat <= 0:
        parser.error("--repeat must be > 0")

    try:
        run(args.definition, rpc_url=args.rpc_url, repeat=args.repeat)
    except OracleError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
