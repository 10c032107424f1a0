"""One record per endpoint call.

``to_params`` returns the flat mapping that is both sent and signed. Optional
fields stay in the mapping as ``None``; dropping them from the signed
material is the canonical serializer's job, not the record's.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

GameId = Union[int, str]
Amount = Union[int, float, Decimal]


@dataclass(frozen=True, slots=True)
class CreateDepositRequest:
    deposit_id: str
    steam_id: Optional[str] = None
    trade_url: str = ""
    min_amount: Amount = 0.5
    result_url: str = ""
    fail_url: str = ""
    success_url: str = ""
    priority_game: GameId = 730

    def to_params(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class OfferDepositRequest:
    deposit_id: str
    steam_id: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class OfferTradeRequest:
    app_id: GameId
    trade_id: Union[str, int]
    trade_url: str = ""
    item_array: List[Any] = field(default_factory=list)

    def to_params(self) -> Dict[str, Any]:
        return {
            "app_id": self.app_id,
            "trade_id": self.trade_id,
            "trade_url": self.trade_url,
            "item_array": list(self.item_array),
        }


@dataclass(frozen=True, slots=True)
class TradeLookupRequest:
    trade_id: str

    def to_params(self) -> Dict[str, Any]:
        return {"trade_id": self.trade_id}


@dataclass(frozen=True, slots=True)
class DateRangeRequest:
    start_date: int
    end_date: int

    def to_params(self) -> Dict[str, Any]:
        return {"start_date": self.start_date, "end_date": self.end_date}


@dataclass(frozen=True, slots=True)
class SetRateRequest:
    coin_rate: Amount

    def to_params(self) -> Dict[str, Any]:
        return {"coin_rate": self.coin_rate}


@dataclass(frozen=True, slots=True)
class SteamInventoryRequest:
    steam_id: str
    refresh: bool = False
    app_id: GameId = 730

    def to_params(self) -> Dict[str, Any]:
        return {"app_id": self.app_id, "steam_id": self.steam_id, "refresh": self.refresh}


@dataclass(frozen=True, slots=True)
class SearchItemsRequest:
    app_id: GameId
    id: Union[str, List[str], None] = None
    name: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        return {"app_id": self.app_id, "id": self.id, "name": self.name}


@dataclass(frozen=True, slots=True)
class BotStatusRequest:
    trade_url: str

    def to_params(self) -> Dict[str, Any]:
        return {"tradeUrl": self.trade_url}


@dataclass(frozen=True, slots=True)
class BuyItemRequest:
    internal_id: str
    partner: str
    partner_token: str
    app_id: GameId = 730
    max_price: Amount = 1
    item_id: str = ""
    full_name: Union[str, List[str]] = ""

    def to_params(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PurchaseStatusRequest:
    internal_ids: List[str]
    trade_ids: List[str]

    def to_params(self) -> Dict[str, Any]:
        return {"internal_ids": list(self.internal_ids), "trade_ids": list(self.trade_ids)}
