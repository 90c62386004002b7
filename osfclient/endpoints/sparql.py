"""SPARQL endpoint: send custom queries against the OSF data structure."""

from osfclient.core import context
from osfclient.endpoints.base import run

SPARQL_JSON = "application/sparql-results+json"


def sparql(ctx, query, dataset="", default_graph_uri="", named_graph_uri="", **overrides):
    """Run a SPARQL query.

    Only pass `dataset` when the query has no FROM NAMED clauses. The default
    mime returns the (escape-repaired) SPARQL results JSON text unparsed.
    """
    params = {
        "query": query,
        "dataset": dataset,
        "default-graph-uri": default_graph_uri,
        "named-graph-uri": named_graph_uri,
    }
    defaults = context.merge_options(context.mime(SPARQL_JSON), context.post())
    return run(ctx, "/ws/sparql/", defaults, params, **overrides)
