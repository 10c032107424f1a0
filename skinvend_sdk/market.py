"""Steam inventory and item catalogue queries."""
from __future__ import annotations

from typing import Any, List, Optional, Union

from .config import ClientConfig
from .http import HttpClient
from .types.params import BotStatusRequest, GameId, SearchItemsRequest, SteamInventoryRequest
from .validation import require


class Market:
    def __init__(self, config: ClientConfig, http_client: HttpClient) -> None:
        self._config = config
        self._http_client = http_client

    def _game(self, app_id: Optional[GameId]) -> GameId:
        return self._config.default_game_id if app_id is None else app_id

    def get_steam_inventory(
        self, steam_id: str, refresh: bool = False, app_id: Optional[GameId] = None
    ) -> Any:
        require(steam_id, "steam_id")
        request = SteamInventoryRequest(steam_id=steam_id, refresh=refresh, app_id=self._game(app_id))
        return self._http_client.get("inventory", request.to_params())

    def search_items(
        self,
        app_id: Optional[GameId] = None,
        id: Union[str, List[str], None] = None,
        name: Optional[str] = None,
    ) -> Any:
        game = require(self._game(app_id), "app_id")
        request = SearchItemsRequest(app_id=game, id=id, name=name)
        return self._http_client.get("items/search", request.to_params())

    def check_bot_status(self, trade_url: str) -> Any:
        """Whether the service's bots can trade with the given trade link."""

        require(trade_url, "trade_url")
        return self._http_client.get("check-user-ability", BotStatusRequest(trade_url).to_params())
