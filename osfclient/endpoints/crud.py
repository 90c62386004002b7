"""CRUD endpoints for instance records."""

from osfclient.core import context
from osfclient.core.canonical import params_list
from osfclient.endpoints.base import run

JSON = "application/json"

SOFT = "soft"
HARD = "hard"

# Indexation modes of `create`.
FULL = "full"
SEARCH_INDEX = "searchindex"
TRIPLESTORE = "triplestore"

RDF_XML = "application/rdf+xml"
RDF_N3 = "application/rdf+n3"

LIFECYCLES = (
    "archive",
    "experimental",
    "harvesting",
    "pre_release",
    "published",
    "staging",
    "unspecified",
)


def read(
    ctx,
    uri,
    dataset=None,
    include_linksback=False,
    include_reification=False,
    include_attributes=None,
    lang=None,
    **overrides,
):
    """Get the description of one or more records.

    Args:
        uri: A record URI or a list of record URIs.
        dataset: Dataset URI(s) where the records are indexed, listed in the
            same order as `uri`. Omit to search every readable dataset.
        include_linksback: Add references from records pointing to the target.
        include_reification: Add reification statements of the values.
        include_attributes: Only return these attribute URIs.
        lang: Language of the textual values; `""` returns all languages.
    """
    params = {
        "uri": params_list(uri),
        "dataset": params_list(dataset),
        "include_linksback": include_linksback,
        "include_reification": include_reification,
        "include_attributes_list": params_list(include_attributes),
        "lang": lang,
    }
    defaults = context.merge_options(context.post(), context.mime(JSON))
    return run(ctx, "/ws/crud/read/", defaults, params, **overrides)


def delete(ctx, uri, dataset, mode=SOFT, **overrides):
    """Delete a record. `soft` keeps its revisions, `hard` removes them too."""
    if mode not in (SOFT, HARD):
        raise ValueError(f"unknown delete mode: {mode!r}")
    params = {"uri": uri, "dataset": dataset, "mode": mode}
    defaults = context.merge_options(context.get(), context.mime(JSON))
    return run(ctx, "/ws/crud/delete/", defaults, params, **overrides)


def create(ctx, dataset, document, document_mime=RDF_XML, mode=FULL, **overrides):
    """Index new records into a dataset.

    Args:
        dataset: URI of the dataset the records are added to.
        document: RDF serialization of the records.
        document_mime: `application/rdf+xml` or `application/rdf+n3`.
        mode: `full`, `searchindex` or `triplestore` indexation.
    """
    if document_mime not in (RDF_XML, RDF_N3):
        raise ValueError(f"unsupported document mime: {document_mime!r}")
    if mode not in (FULL, SEARCH_INDEX, TRIPLESTORE):
        raise ValueError(f"unknown indexation mode: {mode!r}")
    params = {
        "dataset": dataset,
        "document": document.strip(),
        "mime": document_mime,
        "mode": mode,
    }
    defaults = context.merge_options(context.post(), context.mime(JSON))
    return run(ctx, "/ws/crud/create/", defaults, params, **overrides)


def update(
    ctx,
    dataset,
    document,
    document_mime=RDF_XML,
    revision=None,
    lifecycle=None,
    **overrides,
):
    """Replace the description of existing records.

    `revision=False` skips creating a revision of the previous description;
    `None` leaves the endpoint default.
    `lifecycle` is one of `LIFECYCLES`.
    """
    if document_mime not in (RDF_XML, RDF_N3):
        raise ValueError(f"unsupported document mime: {document_mime!r}")
    if lifecycle is not None and lifecycle not in LIFECYCLES:
        raise ValueError(f"unknown lifecycle status: {lifecycle!r}")
    params = {
        "dataset": dataset,
        "document": document,
        "mime": document_mime,
        "revision": revision,
        "lifecycle": lifecycle,
    }
    defaults = context.merge_options(context.post(), context.mime(JSON))
    return run(ctx, "/ws/crud/update/", defaults, params, **overrides)
