"""ERC-4626 vault share converter (https://eips.ethereum.org/EIPS/eip-4626)."""
from __future__ import annotations

import logging

import requests
from web3 import Web3
from web3.exceptions import Web3Exception

from chained_oracle.domain.errors import ConverterReadError

from .abis import ERC4626_ABI

logger = logging.getLogger(__name__)

_READ_ERRORS = (Web3Exception, requests.RequestException, ValueError)


class Erc4626Vault:
    source_name = "erc4626"

    def __init__(self, w3: Web3, address: str) -> None:
        if not address:
            msg = "address must be provided"
            raise ValueError(msg)
        self.address = w3.to_checksum_address(address)
        self._vault = w3.eth.contract(address=self.address, abi=ERC4626_ABI)

    def get_assets(self, shares: int) -> int:
        try:
            assets = self._vault.functions.convertToAssets(shares).call()
        except _READ_ERRORS as exc:
            logger.warning("ERC-4626 vault %s convertToAssets(%d) failed: %s", self.address, shares, exc)
            raise ConverterReadError(
                "ERC-4626 convertToAssets() call failed", source=self.source_name, address=self.address
            ) from exc
        return int(assets)

    def __repr__(self) -> str:
        return f"Erc4626Vault({self.address})"


__all__ = ["Erc4626Vault"]
