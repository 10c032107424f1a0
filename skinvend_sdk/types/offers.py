"""Result types for the two-step offer workflow."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class OfferStep(str, Enum):
    DEPOSIT = "deposit"
    TRADE = "trade"


class OfferStatus(str, Enum):
    DEPOSIT_PENDING = "deposit_pending"
    DEPOSIT_FAILED = "deposit_failed"
    TRADE_PENDING = "trade_pending"
    TRADE_FAILED = "trade_failed"
    COMPLETED = "completed"


@dataclass(slots=True)
class OfferResult:
    """Progress of an offer.

    The two steps are separate exchanges with the service: once the deposit
    step has succeeded it stays in place even if the trade step fails.
    """

    deposit_id: str
    status: OfferStatus = OfferStatus.DEPOSIT_PENDING
    trade_id: Union[str, int, None] = None
    deposit: Any = None
    trade: Any = None
    failed_step: Optional[OfferStep] = None

    @property
    def deposit_succeeded(self) -> bool:
        return self.status in (
            OfferStatus.TRADE_PENDING,
            OfferStatus.TRADE_FAILED,
            OfferStatus.COMPLETED,
        )

    @property
    def completed(self) -> bool:
        return self.status is OfferStatus.COMPLETED
