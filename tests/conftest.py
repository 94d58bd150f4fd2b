from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

import pytest


@dataclass
class Call:
    url: str
    headers: dict[str, str]
    timeout: float | None


class FakeResponse:
    """Stands in for requests.Response: a status code and a JSON body."""

    def __init__(self, status_code: int, payload: Any = None, *, json_error: Exception | None = None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return copy.deepcopy(self._payload)


class FakeTransport:
    """Records every request and answers with a canned response (or raises `error`)."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[Call] = []

    def __call__(self, url, *, headers, timeout=None):
        self.calls.append(Call(url=url, headers=dict(headers), timeout=timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_transport():
    def _make(
        status_code: int = 200, payload: Any = None, *, error: Exception | None = None, **kwargs
    ) -> FakeTransport:
        return FakeTransport(FakeResponse(status_code, payload, **kwargs), error=error)

    return _make


@pytest.fixture
def track_payload() -> dict[str, Any]:
    return {
        "id": "4iV5W9uYEdYUVa79Axb7Rh",
        "title": "flashlights",
        "artists": ["by the forest", "powfu"],
        "genres": ["lo-fi"],
        "length": 142.5,
        "explicit": False,
        "album_id": None,
        "album_name": "flashlights",
    }


@pytest.fixture
def success_payload(track_payload) -> dict[str, Any]:
    return {
        "success": True,
        "data": {
            "lyrics": [
                {
                    "type": "wbw",
                    "lyrics": [
                        {
                            "text": "hello",
                            "start": 0,
                            "end": 1.2,
                            "syllables": [
                                {"text": "hel", "start": 0, "end": 0.5},
                                {"text": "lo", "start": 0.5, "end": 1.2},
                            ],
                        }
                    ],
                    "copyright": "© Utau",
                },
                {
                    "type": "lbl",
                    "lyrics": [{"text": "hello world", "start": 0, "end": 2.0}],
                    "copyright": "© Utau",
                },
                {"type": "raw", "text": "hello world", "copyright": "© Utau"},
            ],
            "track": track_payload,
        },
    }


@pytest.fixture
def failure_payload():
    def _make(message: str = "rate limited") -> dict[str, Any]:
        return {"success": False, "data": {"message": message}}

    return _make
