"""Request signers used by the SDK."""
from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol

from .canonical import RequestParams, canonicalize
from .errors import ConfigurationError
from .types.envelope import SignedEnvelope

Clock = Callable[[], int]


def current_time_ms() -> int:
    return int(time.time() * 1000)


def compute_signature(secret_key: str, canonical: str, timestamp: int) -> str:
    """HMAC-SHA512 over the lower-cased canonical string followed by the timestamp."""

    material = canonical.lower() + str(timestamp)
    return hmac.new(
        secret_key.encode("utf-8"), material.encode("utf-8"), hashlib.sha512
    ).hexdigest()


class RequestSigner(Protocol):
    def sign(self, params: Optional[RequestParams]) -> SignedEnvelope:
        ...


@dataclass
class HmacSha512Signer(RequestSigner):
    secret_key: str = field(repr=False)
    clock: Optional[Clock] = None

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ConfigurationError.missing_credential_error("secret_key")
        if self.clock is None:
            self.clock = current_time_ms

    def sign(self, params: Optional[RequestParams]) -> SignedEnvelope:
        assert self.clock is not None
        timestamp = int(self.clock())
        signature = compute_signature(self.secret_key, canonicalize(params), timestamp)
        return SignedEnvelope(timestamp=timestamp, signature=signature)
