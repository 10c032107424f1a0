"""Typed structures shared across the SDK."""
from .envelope import SIGNATURE_HEADER, TIMESTAMP_HEADER, SignedEnvelope
from .offers import OfferResult, OfferStatus, OfferStep
from .params import (
    BotStatusRequest,
    BuyItemRequest,
    CreateDepositRequest,
    DateRangeRequest,
    OfferDepositRequest,
    OfferTradeRequest,
    PurchaseStatusRequest,
    SearchItemsRequest,
    SetRateRequest,
    SteamInventoryRequest,
    TradeLookupRequest,
)

__all__ = [
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "SignedEnvelope",
    "OfferResult",
    "OfferStatus",
    "OfferStep",
    "BotStatusRequest",
    "BuyItemRequest",
    "CreateDepositRequest",
    "DateRangeRequest",
    "OfferDepositRequest",
    "OfferTradeRequest",
    "PurchaseStatusRequest",
    "SearchItemsRequest",
    "SetRateRequest",
    "SteamInventoryRequest",
    "TradeLookupRequest",
]
