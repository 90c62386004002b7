"""Environment-driven endpoint configuration.

Architectural role:
    Centralizes endpoint/user selection and credential lookup for
    `osfclient.core.query` and the endpoint builders.

Resolution flow:
    `load_dotenv()` at import -> `os.getenv` lookups in `context_from_env` ->
    frozen `OsfContext` passed explicitly into every call.

Determinism:
    Deterministic for a fixed process environment and key file. Values are
    read when `context_from_env` is called, not cached at import time.

Failure behavior:
    Missing domain, application id, user URI or API key raises `RuntimeError`
    immediately. Nothing is deferred to request time.
"""

import os
from dotenv import load_dotenv

from osfclient.core.context import Endpoint, OsfContext, User

load_dotenv()

DEFAULT_PROTOCOL = "http"
DEFAULT_KEY_FILE = "config/osf.key"


def load_key(path):
    """Load the API key from environment override or key file.

    Resolution order:
        1. `OSF_API_KEY` environment variable.
        2. Raw file contents at `path`.

    Returns:
        Key string or `None` when not available.
    """
    env_value = os.getenv("OSF_API_KEY")
    if env_value:
        return env_value.strip()
    if not path or not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


def _timeout_from_env() -> float | None:
    raw = os.getenv("OSF_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return None
    return float(raw)


def _require(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(f"{name} is not set")
    return value


def context_from_env() -> OsfContext:
    """Build an `OsfContext` from `OSF_*` environment variables.

    Raises:
        RuntimeError: when a required setting or the API key is missing.
    """
    api_key = load_key(os.getenv("OSF_API_KEY_FILE", DEFAULT_KEY_FILE))
    if not api_key:
        raise RuntimeError("OSF API key not found (OSF_API_KEY / OSF_API_KEY_FILE)")

    endpoint = Endpoint(
        protocol=os.getenv("OSF_PROTOCOL", DEFAULT_PROTOCOL).strip().lower(),
        domain=_require("OSF_DOMAIN"),
        api_key=api_key,
        app_id=_require("OSF_APP_ID"),
    )
    user = User(uri=_require("OSF_USER_URI"))

    return OsfContext(
        endpoint=endpoint,
        user=user,
        timeout=_timeout_from_env(),
        debug=os.getenv("OSF_DEBUG") == "true",
    )
