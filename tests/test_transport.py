from __future__ import annotations

from unittest.mock import Mock

import requests

import utau_lyrics.transport as transport_module
from utau_lyrics.transport import RequestsTransport


def test_uses_requests_get_without_session(monkeypatch):
    get = Mock(return_value="response")
    monkeypatch.setattr(transport_module.requests, "get", get)

    res = RequestsTransport()("https://utau.keia.one/v1/lyrics?query=q", headers={"User-Agent": "ua"}, timeout=5)

    assert res == "response"
    get.assert_called_once_with(
        "https://utau.keia.one/v1/lyrics?query=q", headers={"User-Agent": "ua"}, timeout=5
    )


def test_uses_session_when_given():
    session = Mock(spec=requests.Session)
    RequestsTransport(session)("http://x/v1/lyrics", headers={"A": "b"}, timeout=None)
    session.get.assert_called_once_with("http://x/v1/lyrics", headers={"A": "b"}, timeout=None)
