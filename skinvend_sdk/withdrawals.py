"""Skin purchase and withdrawal operations."""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Union

from .config import ClientConfig
from .http import HttpClient
from .types.params import Amount, BuyItemRequest, DateRangeRequest, GameId, PurchaseStatusRequest
from .validation import DateLike, require_all, to_id_list, to_timestamp_ms


class Withdrawals:
    def __init__(self, config: ClientConfig, http_client: HttpClient) -> None:
        self._config = config
        self._http_client = http_client

    def buy_item(
        self,
        internal_id: str,
        partner: str,
        partner_token: str,
        app_id: Optional[GameId] = None,
        max_price: Amount = 1,
        item_id: str = "",
        full_name: Union[str, List[str]] = "",
    ) -> Any:
        """Buy a skin and send it to the partner's Steam account.

        ``partner`` is the SteamID3 account number taken from the trade link,
        ``partner_token`` the token from the same link.
        """

        require_all(internal_id=internal_id, partner=partner, partner_token=partner_token)
        request = BuyItemRequest(
            internal_id=internal_id,
            partner=partner,
            partner_token=partner_token,
            app_id=self._config.default_game_id if app_id is None else app_id,
            max_price=max_price,
            item_id=item_id,
            full_name=full_name,
        )
        return self._http_client.post("withdraw/buy", request.to_params())

    def get_purchase_status(
        self,
        internal_ids: Union[str, Iterable[str], None],
        trade_ids: Union[str, Iterable[str], None],
    ) -> Any:
        require_all(internal_ids=internal_ids, trade_ids=trade_ids)
        request = PurchaseStatusRequest(
            internal_ids=to_id_list(internal_ids, "internal_ids"),
            trade_ids=to_id_list(trade_ids, "trade_ids"),
        )
        return self._http_client.get("withdraw/status", request.to_params())

    def get_purchase_history(self, start_date: DateLike, end_date: DateLike) -> Any:
        require_all(start_date=start_date, end_date=end_date)
        request = DateRangeRequest(
            start_date=to_timestamp_ms(start_date, "start_date"),
            end_date=to_timestamp_ms(end_date, "end_date"),
        )
        return self._http_client.get("withdraw/history", request.to_params())
