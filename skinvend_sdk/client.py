"""Public entry point for the SkinVend Python SDK."""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Union

from .config import ClientConfig
from .deposits import Deposits
from .http import HttpClient, HttpRequestor
from .market import Market
from .project import Project
from .signers import RequestSigner
from .types.offers import OfferResult
from .types.params import Amount, GameId
from .validation import DateLike
from .withdrawals import Withdrawals


class SkinVend:
    """Main entry point for the SkinVend marketplace API.

    Full API documentation: https://skinvend.io/en/documentation
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        signer: Optional[RequestSigner] = None,
        http_requestor: Optional[HttpRequestor] = None,
    ) -> None:
        self.config = config

        self._http_client = HttpClient(config, signer=signer, requestor=http_requestor)

        self.deposits = Deposits(config, self._http_client)
        self.project = Project(self._http_client)
        self.market = Market(config, self._http_client)
        self.withdrawals = Withdrawals(config, self._http_client)

    @classmethod
    def create(cls, api_key: str, secret_key: str, **options: Any) -> "SkinVend":
        return cls(ClientConfig(api_key, secret_key, **options))

    @classmethod
    def from_env(cls) -> "SkinVend":
        return cls(ClientConfig.from_env())

    def __enter__(self) -> "SkinVend":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._http_client.close()

    @property
    def api_root(self) -> str:
        return self.config.api_root

    # Flat shortcuts mirroring the service's documentation pages.

    def create_deposit(
        self,
        deposit_id: str,
        steam_id: Optional[str] = None,
        trade_url: str = "",
        min_amount: Amount = 0.5,
    ) -> Any:
        return self.deposits.create_deposit(deposit_id, steam_id, trade_url, min_amount)

    def create_offer(
        self,
        deposit_id: str,
        steam_id: Optional[str] = None,
        app_id: Optional[GameId] = None,
        trade_url: str = "",
        item_array: Iterable[Any] = (),
    ) -> OfferResult:
        return self.deposits.create_offer(deposit_id, steam_id, app_id, trade_url, item_array)

    def get_deposit_status(self, trade_id: str) -> Any:
        return self.deposits.get_deposit_status(trade_id)

    def get_deposit_history(self, start_date: DateLike, end_date: DateLike) -> Any:
        return self.deposits.get_deposit_history(start_date, end_date)

    def get_deposit_items(self, trade_id: str) -> Any:
        return self.deposits.get_deposit_items(trade_id)

    def get_project_balance(self) -> Any:
        return self.project.get_balance()

    def set_project_rate(self, coin_rate: Amount) -> None:
        self.project.set_rate(coin_rate)

    def get_steam_inventory(
        self, steam_id: str, refresh: bool = False, app_id: Optional[GameId] = None
    ) -> Any:
        return self.market.get_steam_inventory(steam_id, refresh, app_id)

    def search_items(
        self,
        app_id: Optional[GameId] = None,
        id: Union[str, List[str], None] = None,
        name: Optional[str] = None,
    ) -> Any:
        return self.market.search_items(app_id, id, name)

    def check_bot_status(self, trade_url: str) -> Any:
        return self.market.check_bot_status(trade_url)

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
        return self.withdrawals.buy_item(
            internal_id, partner, partner_token, app_id, max_price, item_id, full_name
        )

    def get_purchase_status(self, internal_ids: Iterable[str], trade_ids: Iterable[str]) -> Any:
        return self.withdrawals.get_purchase_status(internal_ids, trade_ids)

    def get_purchase_history(self, start_date: DateLike, end_date: DateLike) -> Any:
        return self.withdrawals.get_purchase_history(start_date, end_date)
