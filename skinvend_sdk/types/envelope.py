"""Per-request authentication material."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

TIMESTAMP_HEADER = "X-Timestamp"
SIGNATURE_HEADER = "X-Signature"


@dataclass(frozen=True, slots=True)
class SignedEnvelope:
    """Timestamp and signature produced for exactly one outgoing request.

    The timestamp is part of the signed material, so the server can only
    verify the signature when it receives this very timestamp alongside it.
    """

    timestamp: int
    signature: str

    def headers(self) -> Dict[str, str]:
        return {
            TIMESTAMP_HEADER: str(self.timestamp),
            SIGNATURE_HEADER: self.signature,
        }
