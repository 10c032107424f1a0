"""Custom exceptions for the SkinVend Python SDK."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(eq=False)
class SkinVendSDKError(Exception):
    """Base exception raised by the SkinVend SDK."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def with_details(self, **extra: Any) -> "SkinVendSDKError":
        self.details = {**(self.details or {}), **extra}
        return self

    @classmethod
    def invalid_response_error(cls, reason: str, payload: Any) -> "SkinVendSDKError":
        return cls(
            f"SkinVend API Error: invalid response ({reason})",
            "INVALID_RESPONSE",
            {"payload": payload},
        )


class ConfigurationError(SkinVendSDKError):
    """A credential or a required argument is missing; nothing was sent."""

    @classmethod
    def missing_credential_error(cls, name: str) -> "ConfigurationError":
        return cls(
            f"{name} is required",
            "CONFIGURATION_ERROR",
            {"type": "MISSING_CREDENTIAL", "parameter_name": name},
        )

    @classmethod
    def missing_argument_error(cls, name: str) -> "ConfigurationError":
        return cls(
            f"{name} is required",
            "CONFIGURATION_ERROR",
            {"type": "MISSING_ARGUMENT", "parameter_name": name},
        )

    @classmethod
    def invalid_value_error(cls, name: str, value: Any, reason: str) -> "ConfigurationError":
        return cls(
            f"Invalid {name}: {reason}",
            "CONFIGURATION_ERROR",
            {"type": "INVALID_VALUE", "parameter_name": name, "value": value},
        )


class ServerError(SkinVendSDKError):
    """The service answered with a non-2xx status."""

    @property
    def status(self) -> int:
        return int((self.details or {})["status"])

    @property
    def body(self) -> str:
        return str((self.details or {})["body"])

    @classmethod
    def from_http_response(cls, url: str, status: int, body: str) -> "ServerError":
        return cls(
            f"SkinVend API Error: {status} - {body}",
            "SERVER_ERROR",
            {"status": status, "body": body, "url": url},
        )


class NoResponseError(SkinVendSDKError):
    """The request went out but no response came back."""

    @classmethod
    def for_url(cls, url: str, reason: str) -> "NoResponseError":
        return cls(
            "SkinVend API Error: No response received",
            "NO_RESPONSE",
            {"url": url, "reason": reason},
        )


class TransportError(SkinVendSDKError):
    """The request could not be built or sent."""

    @classmethod
    def for_url(cls, url: str, reason: str) -> "TransportError":
        return cls(
            f"SkinVend API Error: {reason}",
            "TRANSPORT_ERROR",
            {"url": url, "reason": reason},
        )
