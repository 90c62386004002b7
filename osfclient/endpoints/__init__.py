"""Endpoint builders.

Each function builds the parameter map of one web service endpoint, applies
that endpoint's defaults (HTTP method, mime, default parameters) and hands the
result to `osfclient.core.query.osf_query`.

Callers may override `method`, `mime` and `debug` on every builder.
"""
