from .chainlink_feed import ChainlinkFeed
from .erc4626_vault import Erc4626Vault
from .oracle_definition import OracleDefinition, load_oracle_definition
from .oracle_factory import OracleFactory
from .static_sources import FixedPriceFeed, FixedRateConverter

__all__ = [
    "ChainlinkFeed",
    "Erc4626Vault",
    "FixedPriceFeed",
    "FixedRateConverter",
    "OracleDefinition",
    "OracleFactory",
    "load_oracle_definition",
]
