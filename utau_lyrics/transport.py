from __future__ import annotations

from typing import Any, Mapping, Protocol

import requests


class TransportResponse(Protocol):
    status_code: int

    def json(self) -> Any: ...


class Transport(Protocol):
    """
    Performs one GET request. `requests.get` and `requests.Session.get`
    already have a compatible shape.
    """

    def __call__(
        self, url: str, *, headers: Mapping[str, str], timeout: float | None
    ) -> TransportResponse: ...


class RequestsTransport:
    def __init__(self, session: requests.Session | None = None):
        self.session = session

    def __call__(
        self, url: str, *, headers: Mapping[str, str], timeout: float | None = None
    ) -> requests.Response:
        get = self.session.get if self.session is not None else requests.get
        # Connection errors and timeouts are the caller's to handle.
        return get(url, headers=dict(headers), timeout=timeout)
