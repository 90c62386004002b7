"""Request authentication.

Signing scheme:
    1. `payload_digest`: base64(MD5(serialized parameters)).
    2. `signing_input`: VERB + payload digest + service path + timestamp.
    3. `security_hash`: base64(HMAC-SHA1(signing input, API key)).

A signature is bound to the millisecond timestamp it was computed with; the
same timestamp travels in the `OSF-TS` header so the server can recompute it.
"""

import base64
import hashlib
import hmac
import time

from osfclient.core.context import POST


def timestamp() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def payload_digest(serialized_params: str) -> str:
    return _b64(hashlib.md5(serialized_params.encode("utf-8")).digest())


def signing_input(serialized_params: str, method: str, path: str, ts: int) -> str:
    verb = "POST" if method == POST else "GET"
    return f"{verb}{payload_digest(serialized_params)}{path}{ts}"


def security_hash(
    serialized_params: str,
    method: str,
    path: str,
    api_key: str,
    ts: int,
) -> str:
    """Compute the `Authorization` header value for one request.

    Args:
        serialized_params: Output of `osfclient.core.canonical.serialize`.
        method: `GET` or `POST`.
        path: Service path, e.g. `/ws/crud/read/`.
        api_key: Endpoint API key.
        ts: Millisecond timestamp also sent as `OSF-TS`.

    Raises:
        RuntimeError: when no API key is available.
    """
    if not api_key:
        raise RuntimeError("cannot sign request: API key is not set")

    data = signing_input(serialized_params, method, path, ts)
    digest = hmac.new(api_key.encode("utf-8"), data.encode("utf-8"), hashlib.sha1).digest()
    return _b64(digest)
