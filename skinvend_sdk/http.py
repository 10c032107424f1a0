"""HTTP client helpers used by the SkinVend SDK."""
from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any, Callable, List, Mapping, MutableMapping, Optional, Tuple
from urllib.parse import quote, urlencode

import requests

from .canonical import RequestParams, format_scalar
from .config import ClientConfig
from .errors import ConfigurationError, NoResponseError, ServerError, TransportError
from .signers import HmacSha512Signer, RequestSigner

logger = logging.getLogger(__name__)

HttpRequestor = Callable[[str, Mapping[str, Any]], requests.Response]

API_KEY_HEADER = "apiKey"
ALLOWED_METHODS = ("GET", "POST", "PATCH")

# Raised once the request is on the wire but before a full response arrived.
_NO_RESPONSE_ERRORS = (
    requests.exceptions.Timeout,
    requests.exceptions.ConnectionError,
    requests.exceptions.ChunkedEncodingError,
)


def _flatten_query(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten_query(f"{prefix}[{key}]", item, pairs)
        return
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)
    if isinstance(value, (list, tuple)):
        for item in value:
            _flatten_query(f"{prefix}[]", item, pairs)
        return
    text = format_scalar(value)
    pairs.append((prefix, text if text is not None else str(value)))


def encode_query(params: Optional[RequestParams]) -> str:
    """Encode query parameters: bracket arrays, skipped nulls, escaped values."""

    pairs: List[Tuple[str, str]] = []
    for key, value in (params or {}).items():
        _flatten_query(str(key), value, pairs)
    return urlencode(pairs, quote_via=quote)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _body_text(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=_json_default)


class HttpClient:
    """Signs and sends requests against the SkinVend API.

    Every call gets its own header dict, built from the static headers plus a
    freshly signed timestamp/signature pair, so one client can be shared by
    concurrent callers.
    """

    def __init__(
        self,
        config: ClientConfig,
        signer: Optional[RequestSigner] = None,
        requestor: Optional[HttpRequestor] = None,
    ) -> None:
        self.config = config
        self.signer: RequestSigner = signer or HmacSha512Signer(config.secret_key)
        self._session: Optional[requests.Session] = None

        if requestor is None:
            session = requests.Session()

            def _requestor(url: str, kwargs: Mapping[str, Any]) -> requests.Response:
                return session.request(url=url, **dict(kwargs))

            self._session = session
            requestor = _requestor
        self.requestor: HttpRequestor = requestor

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()

    def static_headers(self) -> MutableMapping[str, str]:
        return {
            API_KEY_HEADER: self.config.api_key,
            "User-Agent": self.config.user_agent,
        }

    def build_url(self, endpoint: str) -> str:
        return f"{self.config.api_root}/{endpoint.lstrip('/')}"

    def send_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[RequestParams] = None,
    ) -> Any:
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ConfigurationError.invalid_value_error(
                "method", method, f"must be one of {', '.join(ALLOWED_METHODS)}"
            )

        url = self.build_url(endpoint)
        outgoing = dict(params or {})
        envelope = self.signer.sign(outgoing)

        headers = self.static_headers()
        headers.update(envelope.headers())

        kwargs: MutableMapping[str, Any] = {
            "method": method,
            "headers": headers,
            "timeout": self.config.timeout_seconds,
        }
        try:
            if method == "GET":
                query = encode_query(outgoing)
                if query:
                    url = f"{url}?{query}"
            else:
                kwargs["data"] = _body_text(outgoing).encode("utf-8")
                headers["Content-Type"] = "application/json"
        except (TypeError, ValueError) as exc:
            logger.warning("Could not encode %s %s: %s", method, endpoint, exc)
            raise TransportError.for_url(url, str(exc)) from exc

        logger.debug("%s %s (timestamp=%s)", method, url, envelope.timestamp)

        try:
            response = self.requestor(url, kwargs)
        except _NO_RESPONSE_ERRORS as exc:
            logger.warning("No response for %s %s: %s", method, endpoint, exc)
            raise NoResponseError.for_url(url, str(exc)) from exc
        except requests.RequestException as exc:
            logger.warning("Request %s %s could not be sent: %s", method, endpoint, exc)
            raise TransportError.for_url(url, str(exc)) from exc
        except ValueError as exc:
            # http.client raises UnicodeEncodeError for non-latin-1 header values.
            logger.warning("Request %s %s could not be sent: %s", method, endpoint, exc)
            raise TransportError.for_url(url, str(exc)) from exc

        return self._handle_response(url, response)

    def _handle_response(self, url: str, response: requests.Response) -> Any:
        is_json = True
        try:
            payload = response.json()
        except ValueError:
            is_json = False
            payload = response.text

        if not 200 <= response.status_code < 300:
            body = _body_text(payload) if is_json else payload
            logger.warning("SkinVend responded %s for %s", response.status_code, url)
            raise ServerError.from_http_response(url, response.status_code, body)

        if payload == "":
            return None
        return payload

    def get(self, endpoint: str, params: Optional[RequestParams] = None) -> Any:
        return self.send_request("GET", endpoint, params)

    def post(self, endpoint: str, body: Optional[RequestParams] = None) -> Any:
        return self.send_request("POST", endpoint, body)

    def patch(self, endpoint: str, body: Optional[RequestParams] = None) -> Any:
        return self.send_request("PATCH", endpoint, body)
