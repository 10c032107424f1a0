"""Configuration objects for the SkinVend Python SDK."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://skinvend.io"
DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT_MS = 10_000
# CS (730), Dota 2 (570), Rust (252490), TF2 (440)
DEFAULT_GAME_ID = 730


@dataclass(frozen=True, slots=True)
class ClientConfig:
    api_key: str
    secret_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    default_game_id: int | str = DEFAULT_GAME_ID
    result_url: str = ""
    fail_url: str = ""
    success_url: str = ""
    user_agent: str = "python-skinvend-sdk/0.1"

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError.missing_credential_error("api_key")
        try:
            str(self.api_key).encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ConfigurationError.invalid_value_error(
                "api_key", self.api_key, "must only contain latin-1 characters to be sent as a header"
            ) from exc
        if not self.secret_key:
            raise ConfigurationError.missing_credential_error("secret_key")
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int) or self.timeout_ms <= 0:
            raise ConfigurationError.invalid_value_error(
                "timeout_ms", self.timeout_ms, "must be a positive integer"
            )

    @property
    def api_root(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}/api"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a config from ``SKINVEND_*`` environment variables."""

        env = os.environ if environ is None else environ
        timeout_raw = env.get("SKINVEND_TIMEOUT_MS")
        try:
            timeout_ms = int(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_MS
        except ValueError as exc:
            raise ConfigurationError.invalid_value_error(
                "SKINVEND_TIMEOUT_MS", timeout_raw, "must be an integer"
            ) from exc

        return cls(
            api_key=env.get("SKINVEND_API_KEY", ""),
            secret_key=env.get("SKINVEND_SECRET_KEY", ""),
            base_url=env.get("SKINVEND_BASE_URL") or DEFAULT_BASE_URL,
            api_version=env.get("SKINVEND_API_VERSION") or DEFAULT_API_VERSION,
            timeout_ms=timeout_ms,
            default_game_id=env.get("SKINVEND_GAME_ID") or DEFAULT_GAME_ID,
            result_url=env.get("SKINVEND_RESULT_URL", ""),
            fail_url=env.get("SKINVEND_FAIL_URL", ""),
            success_url=env.get("SKINVEND_SUCCESS_URL", ""),
        )
