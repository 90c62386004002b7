"""Parameter canonicalization.

Architectural role:
    Produces the single ordered parameter sequence that is both signed
    (`serialize`) and transmitted (`osfclient.core.transport`).

Determinism:
    Parameters are sorted by key. Input order of the parameter map never
    affects the serialized string, so the server-side recomputation of the
    payload digest always agrees with what was sent.

Value handling:
    Values are inserted verbatim; no percent-encoding happens here. Lists are
    pre-joined with `params_list` and scalars are stringified the way the web
    services expect (`true` / `false` for booleans).
"""

import logging

logger = logging.getLogger(__name__)


def params_list(v):
    """Serialize a list of values as a `;`-separated parameter value.

    Non-list values are returned as-is. Semicolons inside list elements are
    encoded as `%3B`.
    """
    if not isinstance(v, (list, tuple)):
        return v
    return ";".join(str(item).replace(";", "%3B") for item in v)


def _stringify(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return params_list(value)
    return str(value)


def canonical_params(params: dict) -> list[tuple[str, str]]:
    """Return `(key, value)` pairs sorted by key with stringified values.

    `None` values are dropped.
    """
    pairs = [
        (str(key), _stringify(value))
        for key, value in params.items()
        if value is not None
    ]
    pairs.sort(key=lambda pair: pair[0])
    return pairs


def serialize(params) -> str:
    """Serialize parameters as `k1=v1&k2=v2` with no leading separator.

    Accepts either a parameter map or the output of `canonical_params`.
    """
    pairs = params if isinstance(params, list) else canonical_params(params)
    serialized = "&".join(f"{key}={value}" for key, value in pairs)
    logger.debug("Serialized %d parameters (%d chars)", len(pairs), len(serialized))
    return serialized
