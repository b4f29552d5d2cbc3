from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from web3 import Web3

from chained_oracle.domain.errors import OracleDefinitionError


class FeedKind(StrEnum):
    CHAINLINK = "chainlink"
    FIXED = "fixed"


class ConverterKind(StrEnum):
    ERC4626 = "erc4626"
    FIXED = "fixed"


def _require_address(value: str | None) -> str | None:
    if value is not None and not Web3.is_address(value):
        raise ValueError(f"{value!r} is not a valid address")
    return value


class FeedDefinition(BaseModel):
    kind: FeedKind
    address: str | None = None
    price: int | None = Field(default=None, ge=0)
    decimals: int | None = Field(default=None, ge=0)

    _check_address = field_validator("address")(_require_address)

    @model_validator(mode="after")
    def _validate_kind(self) -> FeedDefinition:
        if self.kind is FeedKind.CHAINLINK and not self.address:
            raise ValueError("chainlink feed requires an address")
        if self.kind is FeedKind.FIXED and (self.price is None or self.decimals is None):
            raise ValueError("fixed feed requires price and decimals")
        return self


class ConverterDefinition(BaseModel):
    kind: ConverterKind
    address: str | None = None
    assets: int | None = Field(default=None, ge=0)
    shares: int | None = Field(default=None, gt=0)

    _check_address = field_validator("address")(_require_address)

    @model_validator(mode="after")
    def _validate_kind(self) -> ConverterDefinition:
        if self.kind is ConverterKind.ERC4626 and not self.address:
            raise ValueError("erc4626 converter requires an address")
        if self.kind is ConverterKind.FIXED and (self.assets is None or self.shares is None):
            raise ValueError("fixed converter requires assets and shares")
        return self


class SideDefinition(BaseModel):
    # Sample rules are enforced by the configuration assembler, not here.
    token_decimals: int
    sample: int = 1
    converter: ConverterDefinition | None = None
    feed_1: FeedDefinition | None = None
    feed_2: FeedDefinition | None = None


class OracleDefinition(BaseModel):
    base: SideDefinition
    quote: SideDefinition


def load_oracle_definition(path: Path) -> OracleDefinition:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OracleDefinitionError(f"Cannot read oracle definition {path}: {exc}") from exc
    try:
        return OracleDefinition.model_validate_json(raw)
    except ValidationError as exc:
        raise OracleDefinitionError(f"Invalid oracle definition {path}: {exc}") from exc


__all__ = [
    "ConverterKind",
    "ConverterDefinition",
    "FeedKind",
    "FeedDefinition",
    "OracleDefinition",
    "SideDefinition",
    "load_oracle_definition",
]
