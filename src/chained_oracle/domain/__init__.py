from .configuration import OracleConfiguration, SideConfiguration, assemble_configuration
from .errors import (
    ConverterReadError,
    FeedDecimalsMismatchError,
    FeedReadError,
    NegativeAnswerError,
    OracleConfigurationError,
    OracleDefinitionError,
    OracleError,
    OracleQueryError,
    PriceOverflowError,
    ZeroDenominatorError,
)
from .fixed_point import PRICE_SCALE_DECIMALS, UINT256_MAX, mul_div
from .oracle import ChainedOracle
from .sources import PriceFeed, ShareConverter

__all__ = [
    "ChainedOracle",
    "ConverterReadError",
    "FeedDecimalsMismatchError",
    "FeedReadError",
    "NegativeAnswerError",
    "OracleConfiguration",
    "OracleConfigurationError",
    "OracleDefinitionError",
    "OracleError",
    "OracleQueryError",
    "PRICE_SCALE_DECIMALS",
    "PriceFeed",
    "PriceOverflowError",
    "ShareConverter",
    "SideConfiguration",
    "UINT256_MAX",
    "ZeroDenominatorError",
    "assemble_configuration",
    "mul_div",
]
