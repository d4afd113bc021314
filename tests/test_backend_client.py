"""
Tests for the backend client, with requests stubbed out.
"""

import pytest
import requests

from outliner import backend_client
from outliner.backend_client import BackendError, create_presentation, update_presentation
from outliner.session import OutlineSession


class FakeResponse:
    def __init__(self, status_code=200, data=None, text=""):
        self.status_code = status_code
        self._data = data
        self.text = text

    def json(self):
        if self._data is None:
            raise ValueError("no json")
        return self._data


@pytest.fixture
def payload():
    return OutlineSession("Renewable energy in cities", 8).to_payload()


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake(method):
        def send(url, headers=None, json=None, timeout=None):
            recorded.append({"method": method, "url": url, "headers": headers, "json": json, "timeout": timeout})
            return FakeResponse(201, {"id": "p-1"})
        return send

    monkeypatch.setattr(requests, "post", fake("POST"))
    monkeypatch.setattr(requests, "put", fake("PUT"))
    return recorded


def test_create_posts_wire_payload(calls, payload):
    result = create_presentation(payload, token="secret", base_url="http://backend/api/")
    assert result == {"id": "p-1"}
    [call] = calls
    assert call["method"] == "POST"
    assert call["url"] == "http://backend/api/presentaciones"
    assert call["headers"]["Authorization"] == "Bearer secret"
    assert call["json"] == payload.to_wire()
    assert call["timeout"] == backend_client.BACKEND_TIMEOUT


def test_update_puts_to_presentation(calls, payload):
    update_presentation("abc", payload, base_url="http://backend/api")
    [call] = calls
    assert call["method"] == "PUT"
    assert call["url"] == "http://backend/api/presentaciones/abc"
    assert "Authorization" not in call["headers"]


def test_update_requires_id(payload):
    with pytest.raises(ValueError):
        update_presentation("", payload)


def test_http_error_raises_backend_error(monkeypatch, payload):
    monkeypatch.setattr(requests, "post", lambda *a, **kw: FakeResponse(500, text="boom"))
    with pytest.raises(BackendError) as e:
        create_presentation(payload)
    assert e.value.status_code == 500
    assert "boom" in str(e.value)


def test_network_error_raises_backend_error(monkeypatch, payload):
    def refuse(*a, **kw):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "post", refuse)
    with pytest.raises(BackendError) as e:
        create_presentation(payload)
    assert e.value.status_code is None


def test_non_json_body_returns_empty_dict(monkeypatch, payload):
    monkeypatch.setattr(requests, "post", lambda *a, **kw: FakeResponse(204))
    assert create_presentation(payload) == {}
