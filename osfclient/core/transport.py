"""Single-request HTTP transport.

Architectural role:
    Issues exactly one GET or POST against `{protocol}://{domain}{path}` with
    the authentication headers the web services expect.

Retry behavior:
    No retry loop is implemented. Each call performs one round trip; the
    optional timeout comes from `OsfContext.timeout` (`None` blocks).

Failure handling model:
    Non-2xx responses are not raised. Status, headers and body are returned in
    a `RawResponse` so later stages can decide what to extract. Connection
    errors (`requests.RequestException`) propagate to the caller.

Debug mode:
    Prints request parameters and the raw response, and enables `http.client`
    wire tracing plus `urllib3` DEBUG logging for the duration of the call.

Security considerations:
    The API key and signature are never printed or logged.
"""

import http.client
import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field

import requests

from osfclient.core.context import GET, OsfContext, RequestDescriptor

logger = logging.getLogger(__name__)
urllib3_logger = logging.getLogger("urllib3")

HEADER_TIMESTAMP = "OSF-TS"
HEADER_APP_ID = "OSF-APP-ID"
HEADER_USER_URI = "OSF-USER-URI"


@dataclass
class RawResponse:
    """HTTP response as received, before any decoding."""

    status_code: int
    body: str
    headers: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def build_headers(ctx: OsfContext, signature: str, ts: int, mime: str | None) -> dict:
    headers = {
        HEADER_TIMESTAMP: str(ts),
        HEADER_APP_ID: ctx.endpoint.app_id,
        HEADER_USER_URI: ctx.user.uri,
        "Authorization": signature,
    }
    if mime:
        headers["Accept"] = mime
    return headers


def _print_debug(title: str, value) -> None:
    print("\n---------------")
    print(f"{title}:")
    if isinstance(value, (dict, list)):
        print(json.dumps(value, indent=2, ensure_ascii=False))
    else:
        print(value)
    print("---------------")


@contextmanager
def transport_diagnostics(enabled: bool):
    """Turn on `http.client` wire tracing and `urllib3` DEBUG logging.

    Both settings are process-wide; previous values are restored on exit.
    """
    if not enabled:
        yield
        return

    previous_debuglevel = http.client.HTTPConnection.debuglevel
    previous_level = urllib3_logger.level
    http.client.HTTPConnection.debuglevel = 1
    urllib3_logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        http.client.HTTPConnection.debuglevel = previous_debuglevel
        urllib3_logger.setLevel(previous_level)


def dispatch(
    ctx: OsfContext,
    request: RequestDescriptor,
    params: list[tuple[str, str]],
    signature: str,
    ts: int,
) -> RawResponse:
    """Send one request and return the unmodified response.

    Args:
        ctx: Endpoint and user the request is issued against.
        request: Method, path, mime and debug flag.
        params: Canonical parameter pairs, the same sequence that was signed.
        signature: `Authorization` header value.
        ts: Timestamp the signature was computed with.

    Returns:
        `RawResponse` for any HTTP status.
    """
    url = ctx.endpoint.base_url + request.path
    headers = build_headers(ctx, signature, ts, request.mime)
    show_debug = request.debug or ctx.debug

    if show_debug:
        _print_debug("Parameters", dict(params))

    with transport_diagnostics(show_debug):
        if request.method == GET:
            response = requests.get(url, params=params, headers=headers, timeout=ctx.timeout)
        else:
            response = requests.post(url, data=params, headers=headers, timeout=ctx.timeout)

    response.encoding = response.encoding or "utf-8"
    raw = RawResponse(
        status_code=response.status_code,
        body=response.text,
        headers=dict(response.headers),
    )

    logger.info("%s %s -> %s", request.method, url, raw.status_code)
    if not raw.ok:
        logger.warning("OSF endpoint %s returned HTTP %s", request.path, raw.status_code)

    if show_debug:
        _print_debug(
            "Response",
            {"status": raw.status_code, "headers": raw.headers, "body": raw.body},
        )

    return raw
