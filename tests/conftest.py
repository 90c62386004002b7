from __future__ import annotations

import pytest

from osfclient.core.context import Endpoint, OsfContext, User

from tests.helpers import FakeResponse


class RecordingHTTP:
    """Stands in for `requests.get` / `requests.post` and records each call."""

    def __init__(self, response: FakeResponse):
        self.response = response
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"method": "GET", "url": url, "params": params, "headers": headers, "timeout": timeout})
        return self.response

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"method": "POST", "url": url, "data": data, "headers": headers, "timeout": timeout})
        return self.response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def ctx():
    return OsfContext(
        endpoint=Endpoint(protocol="http", domain="osf.test", api_key="K", app_id="administer"),
        user=User(uri="http://osf.test/wsf/users/admin"),
    )


@pytest.fixture
def http(monkeypatch):
    """Patch the transport's HTTP calls; set `http.response` to change replies."""

    recorder = RecordingHTTP(FakeResponse(200, "{}"))
    monkeypatch.setattr("osfclient.core.transport.requests.get", recorder.get)
    monkeypatch.setattr("osfclient.core.transport.requests.post", recorder.post)
    return recorder
