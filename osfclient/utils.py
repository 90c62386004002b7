"""Helpers built on top of the endpoint builders."""

from osfclient.endpoints import auth


def _iter_refs(values):
    for item in values:
        if isinstance(item, list):
            yield from _iter_refs(item)
        elif isinstance(item, dict) and "uri" in item:
            yield item["uri"]


def get_ws_endpoints_uris(ctx) -> list[str]:
    """Return the URIs of every web service endpoint registered to the instance.

    Raises:
        requests.HTTPError: when the lister call does not succeed.
    """
    result = auth.lister(ctx, mode=auth.WS).raise_for_status()
    uris = []
    for subject in (result.value.get("resultset") or {}).get("subject") or []:
        predicates = subject.get("predicate") or {}
        uris.extend(_iter_refs(predicates.get("rdf:li", [])))
    return uris
