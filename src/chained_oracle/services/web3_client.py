from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry
from web3 import Web3

from chained_oracle.config import AppSettings, config


def build_session(retry_attempts: int = 0, retry_backoff_seconds: float = 1) -> requests.Session:
    session = requests.Session()
    retries = Retry(
        total=retry_attempts,
        backoff_factor=retry_backoff_seconds,
        status_forcelist=[429],
        allowed_methods=frozenset({"POST"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def build_web3(settings: AppSettings | None = None, *, rpc_url: str | None = None) -> Web3:
    resolved = settings or config()
    session = build_session(retry_attempts=resolved.rpc_retry_attempts)
    provider = Web3.HTTPProvider(
        rpc_url or resolved.rpc_url,
        request_kwargs={"timeout": resolved.rpc_timeout_seconds},
        session=session,
    )
    return Web3(provider)


__all__ = ["build_session", "build_web3"]
