from __future__ import annotations

import json
from itertools import count

import requests

SECRET = "s3cr3t"


def make_response(status=200, payload=None, text=None):
    response = requests.Response()
    response.status_code = status
    if payload is not None:
        body = json.dumps(payload, separators=(",", ":"))
    else:
        body = text or ""
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


class RecordingRequestor:
    """Stands in for the requests session; replays queued responses in order."""

    def __init__(self, *responses) -> None:
        self.calls = []
        self._responses = list(responses)

    def __call__(self, url, kwargs):
        self.calls.append((url, dict(kwargs)))
        if not self._responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(url, kwargs)
        return response

    def body(self, index=0):
        return json.loads(self.calls[index][1]["data"].decode("utf-8"))

    def headers(self, index=0):
        return self.calls[index][1]["headers"]

    def urls(self):
        return [url for url, _ in self.calls]


def stepping_clock(start=1_700_000_000_000):
    ticks = count(start)
    return lambda: next(ticks)
