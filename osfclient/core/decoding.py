"""Response decoding strategies.

Architectural role:
    Turns a response body into a caller-facing value. The strategy is chosen
    from the mime type negotiated for the request (the `Accept` header), never
    from the response content itself.

Strategy table:
    - CANONICAL_JSON (`application/json`): escape repair, JSON parse, reshape.
    - IRON_JSON (`application/iron+json`): escape repair, JSON parse.
    - NATIVE (`application/edn`, `application/clojure`): structEDN parse.
    - SPARQL_JSON (`application/sparql-results+json`): escape-repaired text.
    - RAW (anything else): body unchanged.

Failure handling:
    Parse errors propagate. There is no fallback to the raw body.
"""

import json
import logging
from enum import Enum

import edn_format

from osfclient.core import records

logger = logging.getLogger(__name__)


class ResponseKind(Enum):
    CANONICAL_JSON = "canonical_json"
    IRON_JSON = "iron_json"
    NATIVE = "native"
    SPARQL_JSON = "sparql_json"
    RAW = "raw"


MIME_KINDS = {
    "application/json": ResponseKind.CANONICAL_JSON,
    "application/iron+json": ResponseKind.IRON_JSON,
    "application/edn": ResponseKind.NATIVE,
    "application/clojure": ResponseKind.NATIVE,
    "application/sparql-results+json": ResponseKind.SPARQL_JSON,
}


def kind_for_mime(mime: str | None) -> ResponseKind:
    if not mime:
        return ResponseKind.RAW
    return MIME_KINDS.get(mime.strip().lower(), ResponseKind.RAW)


def _decode_canonical_json(body: str):
    return records.internalize(json.loads(records.fix_json_utf32(body)))


def _decode_iron_json(body: str):
    return json.loads(records.fix_json_utf32(body))


def _decode_native(body: str):
    return edn_format.loads(body)


def _decode_sparql_json(body: str):
    return records.fix_json_utf32(body)


def _decode_raw(body: str):
    return body


DECODERS = {
    ResponseKind.CANONICAL_JSON: _decode_canonical_json,
    ResponseKind.IRON_JSON: _decode_iron_json,
    ResponseKind.NATIVE: _decode_native,
    ResponseKind.SPARQL_JSON: _decode_sparql_json,
    ResponseKind.RAW: _decode_raw,
}


def decode(kind: ResponseKind, body: str):
    """Decode `body` with the strategy registered for `kind`."""
    logger.debug("Decoding %d chars as %s", len(body), kind.value)
    try:
        return DECODERS[kind](body)
    except Exception:
        logger.exception("Failed to decode response as %s", kind.value)
        raise


def decode_for_mime(mime: str | None, body: str):
    return decode(kind_for_mime(mime), body)
