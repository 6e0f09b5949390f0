# tests/test_http.py
from unittest.mock import MagicMock

import pytest
import requests

import src.api.http as http


def test_http_get_json_success(monkeypatch):
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.json.return_value = {"value": 123}
    mock_resp.raise_for_status.return_value = None

    called = {}

    def fake_get(url, params=None, timeout=None, headers=None):
        called["url"] = url
        called["params"] = params
        called["timeout"] = timeout
        called["headers"] = headers
        return mock_resp

    monkeypatch.setattr("requests.get", fake_get)

    out = http.http_get_json("https://api.test", params={"a": 1})
    assert out == {"value": 123}
    assert called["url"] == "https://api.test"
    assert called["params"] == {"a": 1}
    assert called["timeout"] == http.HTTP_TIMEOUT_S
    assert "User-Agent" in called["headers"]


def test_http_get_json_raises_on_http_error_without_retry(monkeypatch):
    calls = {"n": 0}

    def fake_get(*a, **kw):
        calls["n"] += 1
        mock_resp = MagicMock()
        mock_resp.status_code = 500
        mock_resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        return mock_resp

    monkeypatch.setattr("requests.get", fake_get)
    monkeypatch.setattr(http, "report_error", lambda ctx, e: None)

    with pytest.raises(requests.HTTPError):
        http.http_get_json("https://api.test")

    assert calls["n"] == 1


def test_http_get_json_raises_and_reports(monkeypatch):
    captured = {}

    def fake_report_error(ctx, e):
        captured["ctx"] = ctx
        captured["err"] = str(e)

    def boom(*a, **kw):
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(http, "report_error", fake_report_error)
    monkeypatch.setattr("requests.get", boom)

    with pytest.raises(requests.ConnectionError):
        http.http_get_json("https://badurl")

    assert "http_get_json:" in captured["ctx"]
    assert "boom" in captured["err"]
