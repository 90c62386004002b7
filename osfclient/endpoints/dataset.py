"""Dataset endpoints: create, read, update and delete datasets.

A dataset groups records and controls which web service endpoints may access
them. `target_web_services` is usually fed from
`osfclient.utils.get_ws_endpoints_uris`.
"""

from osfclient.core import context
from osfclient.core.canonical import params_list
from osfclient.endpoints.base import run

JSON = "application/json"


def create(ctx, uri, title, description, target_web_services, creator=None, **overrides):
    """Create and register a new dataset.

    Args:
        uri: URI of the new dataset.
        title: Dataset title.
        description: Dataset description.
        target_web_services: Web service endpoint URIs allowed to access it.
        creator: Optional URI of the dataset creator.
    """
    params = {
        "uri": uri,
        "title": title,
        "description": description,
        "include_attributes_list": params_list(target_web_services),
        "creator": creator,
    }
    defaults = context.merge_options(context.post(), context.mime(JSON))
    return run(ctx, "/ws/dataset/create/", defaults, params, **overrides)


def read(ctx, uri="all", **overrides):
    """Read the description of one dataset, or of all of them (`"all"`)."""
    defaults = context.merge_options(context.get(), context.mime(JSON))
    return run(ctx, "/ws/dataset/read/", defaults, {"uri": uri}, **overrides)


def update(ctx, uri, title=None, description=None, modified=None, contributors=None, **overrides):
    params = {
        "uri": uri,
        "title": title,
        "description": description,
        "modified": modified,
        "contributors": params_list(contributors),
    }
    defaults = context.merge_options(context.post(), context.mime(JSON))
    return run(ctx, "/ws/dataset/update/", defaults, params, **overrides)


def delete(ctx, uri, **overrides):
    defaults = context.merge_options(context.get(), context.mime(JSON))
    return run(ctx, "/ws/dataset/delete/", defaults, {"uri": uri}, **overrides)
