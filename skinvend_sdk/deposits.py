"""Deposit (replenishment) operations."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .config import ClientConfig
from .errors import SkinVendSDKError
from .http import HttpClient
from .types.offers import OfferResult, OfferStatus, OfferStep
from .types.params import (
    Amount,
    CreateDepositRequest,
    DateRangeRequest,
    GameId,
    OfferDepositRequest,
    OfferTradeRequest,
    TradeLookupRequest,
)
from .validation import DateLike, require, require_all, to_timestamp_ms

logger = logging.getLogger(__name__)


class OfferWorkflow:
    """Creates an offer through two independently signed requests.

    ``open_deposit`` registers the deposit and obtains a ``trade_id``;
    ``send_trade`` then submits the items against that trade. A failure in
    the second step leaves the first one in place on the server. The raised
    error carries ``details["step"]`` and ``details["offer"]`` so callers
    can tell how far the offer got.
    """

    def __init__(
        self,
        http_client: HttpClient,
        deposit: OfferDepositRequest,
        app_id: GameId,
        trade_url: str = "",
        item_array: Iterable[Any] = (),
    ) -> None:
        self._http_client = http_client
        self._deposit = deposit
        self._app_id = app_id
        self._trade_url = trade_url
        self._item_array = list(item_array)
        self.result = OfferResult(deposit_id=deposit.deposit_id)

    def _fail(self, exc: SkinVendSDKError, step: OfferStep, status: OfferStatus) -> SkinVendSDKError:
        self.result.status = status
        self.result.failed_step = step
        logger.warning(
            "Offer %s failed at %s step: %s", self.result.deposit_id, step.value, exc.message
        )
        return exc.with_details(step=step.value, offer=self.result)

    def open_deposit(self) -> OfferResult:
        if self.result.status is not OfferStatus.DEPOSIT_PENDING:
            raise SkinVendSDKError(
                "Offer deposit step has already run",
                "OFFER_STEP_ORDER",
                {"status": self.result.status.value},
            )

        try:
            payload = self._http_client.post("deposit", self._deposit.to_params())
            trade_id = payload.get("trade_id") if isinstance(payload, dict) else None
            if trade_id in (None, ""):
                raise SkinVendSDKError.invalid_response_error("missing trade_id", payload)
        except SkinVendSDKError as exc:
            raise self._fail(exc, OfferStep.DEPOSIT, OfferStatus.DEPOSIT_FAILED)

        self.result.deposit = payload
        self.result.trade_id = trade_id
        self.result.status = OfferStatus.TRADE_PENDING
        return self.result

    def send_trade(self) -> OfferResult:
        if self.result.status is not OfferStatus.TRADE_PENDING or self.result.trade_id is None:
            raise SkinVendSDKError(
                "Offer trade step requires a successful deposit step",
                "OFFER_STEP_ORDER",
                {"status": self.result.status.value},
            )

        trade = OfferTradeRequest(
            app_id=self._app_id,
            trade_id=self.result.trade_id,
            trade_url=self._trade_url,
            item_array=self._item_array,
        )
        try:
            payload = self._http_client.post("deposit", trade.to_params())
        except SkinVendSDKError as exc:
            raise self._fail(exc, OfferStep.TRADE, OfferStatus.TRADE_FAILED)

        self.result.trade = payload
        self.result.status = OfferStatus.COMPLETED
        return self.result

    def run(self) -> OfferResult:
        self.open_deposit()
        return self.send_trade()


class Deposits:
    """Service responsible for deposits and offers."""

    def __init__(self, config: ClientConfig, http_client: HttpClient) -> None:
        self._config = config
        self._http_client = http_client

    def create_deposit(
        self,
        deposit_id: str,
        steam_id: Optional[str] = None,
        trade_url: str = "",
        min_amount: Amount = 0.5,
    ) -> Any:
        """Create a replenishment; the response holds ``url`` and ``trade_id``."""

        require(deposit_id, "deposit_id")
        request = CreateDepositRequest(
            deposit_id=deposit_id,
            steam_id=steam_id,
            trade_url=trade_url,
            min_amount=min_amount,
            result_url=self._config.result_url,
            fail_url=self._config.fail_url,
            success_url=self._config.success_url,
            priority_game=self._config.default_game_id,
        )
        return self._http_client.post("deposit", request.to_params())

    def offer_workflow(
        self,
        deposit_id: str,
        steam_id: Optional[str] = None,
        app_id: Optional[GameId] = None,
        trade_url: str = "",
        item_array: Iterable[Any] = (),
    ) -> OfferWorkflow:
        require(deposit_id, "deposit_id")
        return OfferWorkflow(
            self._http_client,
            OfferDepositRequest(deposit_id=deposit_id, steam_id=steam_id),
            app_id if app_id is not None else self._config.default_game_id,
            trade_url=trade_url,
            item_array=item_array,
        )

    def create_offer(
        self,
        deposit_id: str,
        steam_id: Optional[str] = None,
        app_id: Optional[GameId] = None,
        trade_url: str = "",
        item_array: Iterable[Any] = (),
    ) -> OfferResult:
        return self.offer_workflow(deposit_id, steam_id, app_id, trade_url, item_array).run()

    def get_deposit_status(self, trade_id: str) -> Any:
        require(trade_id, "trade_id")
        return self._http_client.get("deposit/status", TradeLookupRequest(trade_id).to_params())

    def get_deposit_history(self, start_date: DateLike, end_date: DateLike) -> Any:
        require_all(start_date=start_date, end_date=end_date)
        request = DateRangeRequest(
            start_date=to_timestamp_ms(start_date, "start_date"),
            end_date=to_timestamp_ms(end_date, "end_date"),
        )
        return self._http_client.get("deposit/history", request.to_params())

    def get_deposit_items(self, trade_id: str) -> Any:
        """Skins received with a deposit: ``{"game", "items": [...]}``."""

        require(trade_id, "trade_id")
        return self._http_client.get("inventory", TradeLookupRequest(trade_id).to_params())
