"""Shared plumbing for endpoint builders."""

from osfclient.core import context
from osfclient.core.query import QueryResult, osf_query


def run(
    ctx: context.OsfContext,
    path: str,
    defaults: dict,
    params: dict,
    method: str | None = None,
    mime: str | None = None,
    debug: bool = False,
) -> QueryResult:
    """Merge defaults, caller parameters and overrides, then query `path`.

    `None` parameter values are left out so the endpoint default applies.
    """
    overrides = {}
    if method:
        overrides[context.METHOD_KEY] = method.upper()
    if mime:
        overrides[context.MIME_KEY] = mime
    if debug:
        overrides[context.DEBUG_KEY] = True

    options = context.merge_options(
        defaults,
        {k: v for k, v in params.items() if v is not None},
        overrides,
    )
    return osf_query(ctx, path, options)
