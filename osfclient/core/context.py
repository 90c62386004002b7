"""Call context and request option contracts.

Architectural role:
    Defines the immutable values every call is issued against (endpoint
    credentials and user identity) and the option helpers endpoint builders
    merge into their parameter maps.

Concurrency:
    All types are frozen dataclasses. A context is built once and shared by
    reference across concurrent calls; switching user or endpoint produces a
    new context instead of mutating a shared one.
"""

from dataclasses import dataclass, replace


# Control keys carried inside option maps. They select how a request is
# issued and are never signed or transmitted.
MIME_KEY = "->mime"
METHOD_KEY = "->method"
DEBUG_KEY = "->debug"

CONTROL_KEYS = (MIME_KEY, METHOD_KEY, DEBUG_KEY)

GET = "GET"
POST = "POST"
METHODS = (GET, POST)


@dataclass(frozen=True)
class Endpoint:
    """Credentials of one OSF web services instance.

    Attributes:
        protocol: Transport scheme, `http` or `https`.
        domain: Host name, optionally with a port.
        api_key: Shared secret used to sign requests.
        app_id: Application id sent with every request.
    """

    protocol: str
    domain: str
    api_key: str
    app_id: str

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.domain}"

    def __repr__(self) -> str:
        return (
            f"Endpoint(protocol={self.protocol!r}, domain={self.domain!r}, "
            f"app_id={self.app_id!r})"
        )


@dataclass(frozen=True)
class User:
    """Identity the requests are issued on behalf of."""

    uri: str


@dataclass(frozen=True)
class OsfContext:
    """Endpoint + user pair passed explicitly into every call.

    Attributes:
        endpoint: Target instance credentials.
        user: Requesting user.
        timeout: Optional `requests` timeout in seconds. `None` blocks.
        debug: Forces debug output for every call issued with this context.
    """

    endpoint: Endpoint
    user: User
    timeout: float | None = None
    debug: bool = False

    def with_user(self, user: User) -> "OsfContext":
        return replace(self, user=user)

    def with_endpoint(self, endpoint: Endpoint) -> "OsfContext":
        return replace(self, endpoint=endpoint)


@dataclass(frozen=True)
class RequestDescriptor:
    """One request, fixed before signing begins.

    `params` holds only transmitted parameters; control keys have already
    been split off into `method`, `mime` and `debug`.
    """

    method: str
    path: str
    params: dict
    mime: str | None = None
    debug: bool = False

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"unsupported HTTP method: {self.method!r}")
        if not self.path:
            raise ValueError("path must be provided")


def mime(m: str) -> dict:
    """Mime type placed in the `Accept` header of the query."""
    return {MIME_KEY: m}


def get() -> dict:
    """Issue the query as an HTTP GET."""
    return {METHOD_KEY: GET}


def post() -> dict:
    """Issue the query as an HTTP POST."""
    return {METHOD_KEY: POST}


def debug() -> dict:
    """Print the outgoing parameters and raw response of the query."""
    return {DEBUG_KEY: True}


def merge_options(*options: dict) -> dict:
    """Merge option maps left to right; later maps win."""
    merged = {}
    for option in options:
        if option:
            merged.update(option)
    return merged


def describe(path: str, options: dict) -> RequestDescriptor:
    """Split a merged option map into a `RequestDescriptor`.

    Missing method defaults to GET. Control keys are removed from the
    parameter map.
    """
    params = {k: v for k, v in options.items() if k not in CONTROL_KEYS}
    method = str(options.get(METHOD_KEY) or GET).upper()
    return RequestDescriptor(
        method=method,
        path=path,
        params=params,
        mime=options.get(MIME_KEY),
        debug=bool(options.get(DEBUG_KEY, False)),
    )
