from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    rpc_url: str = "http://127.0.0.1:8545"
    rpc_timeout_seconds: float = 10.0
    # Transport-level retries on HTTP 429 only; queries themselves never retry.
    rpc_retry_attempts: int = 0
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CHAINED_ORACLE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@cache
def config() -> AppSettings:
    return AppSettings()
