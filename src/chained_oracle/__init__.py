"""Fixed-point exchange rates composed from chained price feeds and vault conversions."""

from chained_oracle.domain import (
    ChainedOracle,
    OracleConfiguration,
    OracleConfigurationError,
    OracleError,
    OracleQueryError,
    assemble_configuration,
)

__version__ = "0.1.0"

__all__ = [
    "ChainedOracle",
    "OracleConfiguration",
    "OracleConfigurationError",
    "OracleError",
    "OracleQueryError",
    "assemble_configuration",
]
