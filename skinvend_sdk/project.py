"""Project account operations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .http import HttpClient
from .types.params import Amount, SetRateRequest
from .validation import require


@dataclass(slots=True)
class Project:
    http_client: HttpClient

    def get_balance(self) -> Any:
        return self.http_client.get("project/balance")

    def set_rate(self, coin_rate: Amount) -> None:
        """Change the project exchange rate (the service accepts 0.6 to 1)."""

        require(coin_rate, "coin_rate")
        self.http_client.patch("project/balance", SetRateRequest(coin_rate).to_params())
