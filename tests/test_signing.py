from __future__ import annotations

import pytest

from osfclient.core.canonical import serialize
from osfclient.core.signing import payload_digest, security_hash, signing_input, timestamp

PARAMS = serialize({"dataset": "D", "action": "create"})
PATH = "/ws/dataset/create/"


def test_fixed_signing_vector():
    assert PARAMS == "action=create&dataset=D"
    assert payload_digest(PARAMS) == "s4qkiZyvAVPfs9YzNnTNPw=="
    assert signing_input(PARAMS, "POST", PATH, 1000) == "POSTs4qkiZyvAVPfs9YzNnTNPw==/ws/dataset/create/1000"
    assert security_hash(PARAMS, "POST", PATH, "K", 1000) == "vBkndsEvnW+cvW14J51+SXB3VgY="


def test_signature_is_deterministic():
    assert security_hash(PARAMS, "GET", PATH, "K", 1000) == security_hash(PARAMS, "GET", PATH, "K", 1000)


@pytest.mark.parametrize(
    "params, method, path, key, ts",
    [
        ("action=create&dataset=E", "GET", PATH, "K", 1000),
        (PARAMS, "POST", PATH, "K", 1000),
        (PARAMS, "GET", "/ws/dataset/read/", "K", 1000),
        (PARAMS, "GET", PATH, "K2", 1000),
        (PARAMS, "GET", PATH, "K", 1001),
    ],
)
def test_any_input_change_changes_signature(params, method, path, key, ts):
    baseline = security_hash(PARAMS, "GET", PATH, "K", 1000)
    assert security_hash(params, method, path, key, ts) != baseline


@pytest.mark.parametrize("key", ["", None])
def test_missing_api_key_fails_fast(key):
    with pytest.raises(RuntimeError):
        security_hash(PARAMS, "GET", PATH, key, 1000)


def test_timestamp_is_milliseconds(monkeypatch):
    monkeypatch.setattr("osfclient.core.signing.time.time", lambda: 1700000000.123)
    assert timestamp() == 1700000000123
