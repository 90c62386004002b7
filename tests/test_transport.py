from __future__ import annotations

import http.client
import logging

import pytest

from osfclient.core.context import describe, RequestDescriptor
from osfclient.core.transport import dispatch

from tests.helpers import FakeResponse


def test_get_sends_query_params_and_headers(ctx, http):
    request = RequestDescriptor(method="GET", path="/ws/dataset/read/", params={"uri": "all"}, mime="application/json")
    raw = dispatch(ctx, request, [("uri", "all")], "SIG", 1000)

    call = http.last
    assert call["method"] == "GET"
    assert call["url"] == "http://osf.test/ws/dataset/read/"
    assert call["params"] == [("uri", "all")]
    assert call["headers"] == {
        "OSF-TS": "1000",
        "OSF-APP-ID": "administer",
        "OSF-USER-URI": "http://osf.test/wsf/users/admin",
        "Authorization": "SIG",
        "Accept": "application/json",
    }
    assert call["timeout"] is None
    assert raw.ok and raw.body == "{}"


def test_post_sends_form_body(ctx, http):
    request = describe("/ws/crud/read/", {"->method": "POST", "uri": "u"})
    dispatch(ctx, request, [("uri", "u")], "SIG", 1000)
    assert http.last["method"] == "POST"
    assert http.last["data"] == [("uri", "u")]
    assert "Accept" not in http.last["headers"]


def test_non_2xx_is_returned_not_raised(ctx, http):
    http.response = FakeResponse(403, "No access")
    request = describe("/ws/crud/read/", {})
    raw = dispatch(ctx, request, [], "SIG", 1000)
    assert raw.status_code == 403
    assert raw.body == "No access"
    assert not raw.ok


def test_timeout_is_forwarded(ctx, http):
    from dataclasses import replace

    dispatch(replace(ctx, timeout=5.0), describe("/ws/x/", {}), [], "SIG", 1)
    assert http.last["timeout"] == 5.0


def test_debug_prints_parameters_and_response(ctx, http, capsys):
    request = describe("/ws/crud/read/", {"->debug": True, "uri": "u"})
    dispatch(ctx, request, [("uri", "u")], "SECRET-SIG", 1000)
    out = capsys.readouterr().out
    assert "Parameters:" in out
    assert "Response:" in out
    assert '"uri": "u"' in out
    assert "SECRET-SIG" not in out


def test_debug_enables_wire_diagnostics_for_the_call_only(ctx, monkeypatch, capsys):
    urllib3_logger = logging.getLogger("urllib3")
    monkeypatch.setattr(http.client.HTTPConnection, "debuglevel", 0)
    monkeypatch.setattr(urllib3_logger, "level", logging.WARNING)
    seen = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        seen["debuglevel"] = http.client.HTTPConnection.debuglevel
        seen["urllib3_level"] = urllib3_logger.level
        return FakeResponse(200, "{}")

    monkeypatch.setattr("osfclient.core.transport.requests.get", fake_get)
    dispatch(ctx, describe("/ws/x/", {"->debug": True}), [("a", "1")], "SIG", 1000)

    assert seen == {"debuglevel": 1, "urllib3_level": logging.DEBUG}
    assert http.client.HTTPConnection.debuglevel == 0
    assert urllib3_logger.level == logging.WARNING


def test_diagnostics_are_restored_when_the_request_fails(ctx, monkeypatch, capsys):
    monkeypatch.setattr(http.client.HTTPConnection, "debuglevel", 0)

    def failing_post(url, data=None, headers=None, timeout=None):
        assert http.client.HTTPConnection.debuglevel == 1
        raise ConnectionError("refused")

    monkeypatch.setattr("osfclient.core.transport.requests.post", failing_post)
    request = describe("/ws/x/", {"->debug": True, "->method": "POST"})
    with pytest.raises(ConnectionError):
        dispatch(ctx, request, [], "SIG", 1000)
    assert http.client.HTTPConnection.debuglevel == 0


def test_no_diagnostics_without_debug(ctx, monkeypatch):
    monkeypatch.setattr(http.client.HTTPConnection, "debuglevel", 0)
    seen = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        seen["debuglevel"] = http.client.HTTPConnection.debuglevel
        return FakeResponse(200, "{}")

    monkeypatch.setattr("osfclient.core.transport.requests.get", fake_get)
    dispatch(ctx, describe("/ws/x/", {}), [], "SIG", 1000)
    assert seen["debuglevel"] == 0
