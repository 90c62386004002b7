"""Shared request pipeline for all OSF web service endpoints.

Call flow:
    option map -> `describe` (strip control keys) -> `canonical_params` ->
    `security_hash` -> `dispatch` -> `decode` (2xx only) -> `QueryResult`.

Invariants:
    - The canonical parameter sequence that is signed is the exact sequence
      transmitted.
    - The timestamp is captured once per call and used both in the signature
      and in the `OSF-TS` header.

Failure handling model:
    - Configuration problems (missing endpoint, user or API key) raise
      `RuntimeError` before any network activity.
    - Non-2xx responses are returned as a `QueryResult` with `ok == False`
      and an undecoded body.
    - Decode failures and connection errors propagate.
"""

import logging
from dataclasses import dataclass

import requests

from osfclient.core import canonical, decoding, signing, transport
from osfclient.core.context import OsfContext, describe

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    """Outcome of one endpoint call.

    Attributes:
        status_code: HTTP status returned by the endpoint.
        body: Raw response body.
        value: Decoded body for 2xx responses, `None` otherwise.
        kind: Decoding strategy selected from the negotiated mime.
    """

    status_code: int
    body: str
    value: object = None
    kind: decoding.ResponseKind = decoding.ResponseKind.RAW

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def raise_for_status(self) -> "QueryResult":
        if not self.ok:
            raise requests.HTTPError(
                f"OSF endpoint returned HTTP {self.status_code}: {self.body[:200]}"
            )
        return self


def _check_context(ctx) -> None:
    if ctx is None:
        raise RuntimeError("no OSF context: endpoint and user must be configured")
    if ctx.endpoint is None:
        raise RuntimeError("no OSF endpoint configured")
    if not ctx.endpoint.domain:
        raise RuntimeError("OSF endpoint has no domain")
    if ctx.user is None or not ctx.user.uri:
        raise RuntimeError("no OSF user configured")


def osf_query(ctx: OsfContext, path: str, options: dict, ts: int | None = None) -> QueryResult:
    """Sign, send and decode one query.

    Args:
        ctx: Endpoint credentials and user identity.
        path: Service path such as `/ws/crud/read/`.
        options: Parameter map merged with control options
            (`mime`, `get`/`post`, `debug` from `osfclient.core.context`).
        ts: Millisecond timestamp; defaults to the current time.

    Returns:
        `QueryResult` for any HTTP status.
    """
    _check_context(ctx)

    request = describe(path, options)
    params = canonical.canonical_params(request.params)
    ts = signing.timestamp() if ts is None else ts
    signature = signing.security_hash(
        canonical.serialize(params),
        request.method,
        request.path,
        ctx.endpoint.api_key,
        ts,
    )

    raw = transport.dispatch(ctx, request, params, signature, ts)

    kind = decoding.kind_for_mime(request.mime)
    if not raw.ok:
        return QueryResult(status_code=raw.status_code, body=raw.body, kind=kind)

    return QueryResult(
        status_code=raw.status_code,
        body=raw.body,
        value=decoding.decode(kind, raw.body),
        kind=kind,
    )
