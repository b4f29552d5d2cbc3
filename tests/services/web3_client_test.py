from __future__ import annotations

import pytest
from web3 import HTTPProvider

from chained_oracle.config import AppSettings
from chained_oracle.services.web3_client import build_session, build_web3


def test_build_session_retries_only_rate_limits() -> None:
    session = build_session(retry_attempts=3)

    retries = session.get_adapter("https://rpc.example.com").max_retries
    assert retries.total == 3
    assert 429 in retries.status_forcelist


def test_build_web3_uses_settings() -> None:
    settings = AppSettings(rpc_url="http://rpc.example.com:8545", rpc_timeout_seconds=2.5)

    w3 = build_web3(settings)

    assert isinstance(w3.provider, HTTPProvider)
    assert w3.provider.endpoint_uri == "http://rpc.example.com:8545"


def test_build_web3_rpc_url_override() -> None:
    w3 = build_web3(AppSettings(), rpc_url="http://override.example.com:8545")

    assert w3.provider.endpoint_uri == "http://override.example.com:8545"  # type: ignore[attr-defined]


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAINED_ORACLE_RPC_URL", "https://mainnet.example.com")
    monkeypatch.setenv("CHAINED_ORACLE_RPC_RETRY_ATTEMPTS", "2")

    settings = AppSettings()

    assert settings.rpc_url == "https://mainnet.example.com"
    assert settings.rpc_retry_attempts == 2
    assert settings.log_level == "INFO"
